"""Export orchestration: validate, encode, name and save documents."""

import logging
from datetime import datetime
from pathlib import Path

from lxml import etree

from .encoders import ENCODERS
from .errors import NoDataError, ProcessingError, UnsupportedFormatError
from .models import ExerciseRecording, ExportedDocument, ExportFormat
from .timestamps import format_epoch, last_timestamp

logger = logging.getLogger(__name__)

FILE_PREFIX = "PolarH10"


def suggested_file_name(
    start_time: datetime,
    export_format: ExportFormat | str,
    prefix: str = FILE_PREFIX,
) -> str:
    """Build the file name for an export, e.g. ``PolarH10_1704067200.0.gpx``.

    Depends only on the start time and format, so exporting the same
    recording twice gives the same name.
    """
    fmt = ExportFormat.parse(export_format)
    return f"{prefix}_{format_epoch(start_time)}.{fmt.extension}"


def export(
    recording: ExerciseRecording,
    export_format: ExportFormat | str,
    prefix: str = FILE_PREFIX,
) -> ExportedDocument:
    """Encode a recording into the requested format.

    Args:
        recording: Samples, interval and start time to export
        export_format: Target format, an ExportFormat or its name
        prefix: File name prefix for the suggested name

    Returns:
        ExportedDocument with the full encoded content and its file name

    Raises:
        UnsupportedFormatError: If the format is not GPX, TCX or FIT; checked
            before the samples, so it wins over NoDataError
        NoDataError: If the recording has no samples
        ProcessingError: If encoding fails, including sample times past
            the datetime range
    """
    fmt = ExportFormat.parse(export_format)
    encoder = ENCODERS.get(fmt)
    if encoder is None:
        raise UnsupportedFormatError(export_format)

    if not recording.samples:
        raise NoDataError()

    try:
        # Every format must be able to date its final sample
        last_timestamp(recording)
        content = encoder(recording)
    except (ValueError, OverflowError, etree.LxmlError) as e:
        raise ProcessingError(str(e)) from e

    name = suggested_file_name(recording.start_time, fmt, prefix)
    logger.info("Exported %d samples as %s (%s)", len(recording.samples), fmt.value, name)
    return ExportedDocument(content=content, suggested_file_name=name)


def save_document(document: ExportedDocument, directory: str | Path) -> Path:
    """Write a document into a directory under its suggested name.

    An existing file with the same name is overwritten.

    Raises:
        ProcessingError: If the directory or file cannot be written
    """
    path = Path(directory) / document.suggested_file_name
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            f.write(document.content)
    except OSError as e:
        raise ProcessingError(f"Failed to write '{path}': {e}") from e

    logger.debug("Wrote %d bytes to %s", len(document.content), path)
    return path
