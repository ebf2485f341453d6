"""Heart rate recording export to GPX, TCX and tabular FIT."""

from .config import Config, load_config
from .encoders import ENCODERS, encode_fit, encode_gpx, encode_tcx
from .errors import ExportError, NoDataError, ProcessingError, UnsupportedFormatError
from .exporter import export, save_document, suggested_file_name
from .log import setup_logging
from .models import ExerciseRecording, ExportedDocument, ExportFormat
from .source import load_recording, parse_samples
from .timestamps import (
    format_epoch,
    format_iso8601,
    iter_epochs,
    iter_timestamps,
    last_timestamp,
    sample_epoch,
    sample_timestamp,
)

__all__ = [
    "export",
    "suggested_file_name",
    "save_document",
    "ExerciseRecording",
    "ExportedDocument",
    "ExportFormat",
    "ExportError",
    "NoDataError",
    "UnsupportedFormatError",
    "ProcessingError",
    "ENCODERS",
    "encode_gpx",
    "encode_tcx",
    "encode_fit",
    "sample_timestamp",
    "iter_timestamps",
    "sample_epoch",
    "iter_epochs",
    "last_timestamp",
    "format_iso8601",
    "format_epoch",
    "parse_samples",
    "load_recording",
    "Config",
    "load_config",
    "setup_logging",
]
