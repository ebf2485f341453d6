"""Entry point for pulse-export."""

import argparse
import logging
from datetime import datetime

from .config import load_config
from .errors import ExportError
from .exporter import export, save_document
from .log import setup_logging
from .models import ExportFormat
from .source import load_recording

logger = logging.getLogger(__name__)


def _parse_start(value: str) -> datetime:
    """Parse an ISO-8601 start time for argparse."""
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid ISO-8601 time: {value!r}") from None


def run(
    samples_path: str,
    start_time: datetime,
    interval: float,
    export_format: str,
    output_dir: str,
    prefix: str,
) -> int:
    """Export one samples file, returning the process exit status."""
    try:
        recording = load_recording(samples_path, start_time, interval)
        document = export(recording, export_format, prefix=prefix)
        path = save_document(document, output_dir)
    except (ExportError, ValueError, OSError) as e:
        logger.error("Export failed: %s", e)
        return 1

    print(path)
    return 0


def main() -> None:
    """CLI entry point."""
    config = load_config()

    parser = argparse.ArgumentParser(description="Export heart rate recordings to GPX, TCX or FIT")
    parser.add_argument("samples", help="Samples file, one heart rate value per line")
    parser.add_argument("-s", "--start", type=_parse_start, required=True, help="Recording start time (ISO-8601)")
    parser.add_argument(
        "-i",
        "--interval",
        type=float,
        default=config.recording.interval,
        help="Seconds between samples",
    )
    parser.add_argument(
        "-f",
        "--format",
        default=config.export.format,
        type=str.upper,
        choices=[fmt.value for fmt in ExportFormat],
        help="Export format",
    )
    parser.add_argument("-o", "--output-dir", default=config.export.output_dir, help="Output directory")
    parser.add_argument("--prefix", default=config.export.file_prefix, help="File name prefix")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    setup_logging(config.export.log_level, verbose=args.verbose)

    raise SystemExit(run(args.samples, args.start, args.interval, args.format, args.output_dir, args.prefix))


if __name__ == "__main__":
    main()
