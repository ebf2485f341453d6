"""Per-sample timestamp generation and rendering."""

from collections.abc import Iterator
from datetime import UTC, datetime, timedelta

from .models import ExerciseRecording


def sample_timestamp(start_time: datetime, interval: float, index: int) -> datetime:
    """Return the absolute time of sample ``index``.

    Computed as a single ``index * interval`` offset from the start so that
    long recordings do not drift the way a running sum would.

    Raises:
        ValueError: If index is negative
        OverflowError: If the time falls outside the datetime range
    """
    if index < 0:
        raise ValueError(f"Sample index must be non-negative, got {index}")
    return start_time + timedelta(seconds=index * interval)


def sample_epoch(start_epoch: float, interval: float, index: int) -> float:
    """Return the time of sample ``index`` as seconds since the epoch.

    Plain float arithmetic, not rounded to microseconds like ``timedelta``.
    """
    if index < 0:
        raise ValueError(f"Sample index must be non-negative, got {index}")
    return start_epoch + index * interval


def iter_timestamps(recording: ExerciseRecording) -> Iterator[tuple[datetime, int]]:
    """Yield ``(timestamp, bpm)`` for each sample in recording order."""
    for index, bpm in enumerate(recording.samples):
        yield sample_timestamp(recording.start_time, recording.interval, index), bpm


def iter_epochs(recording: ExerciseRecording) -> Iterator[tuple[float, int]]:
    """Yield ``(epoch seconds, bpm)`` for each sample in recording order."""
    start_epoch = recording.start_epoch
    for index, bpm in enumerate(recording.samples):
        yield sample_epoch(start_epoch, recording.interval, index), bpm


def last_timestamp(recording: ExerciseRecording) -> datetime:
    """Return the time of the final sample, or the start for an empty recording."""
    return sample_timestamp(recording.start_time, recording.interval, max(len(recording.samples) - 1, 0))


def format_iso8601(ts: datetime) -> str:
    """Render a timestamp as ISO-8601 UTC with a ``Z`` suffix.

    Whole seconds render without a fraction, otherwise milliseconds are kept.
    """
    ts = ts.astimezone(UTC)
    if ts.microsecond == 0:
        return ts.strftime("%Y-%m-%dT%H:%M:%SZ")
    return ts.replace(tzinfo=None).isoformat(timespec="milliseconds") + "Z"


def format_epoch(ts: datetime) -> str:
    """Render a timestamp as seconds since the epoch, e.g. ``1704067200.0``."""
    return format_epoch_seconds(ts.timestamp())


def format_epoch_seconds(seconds: float) -> str:
    """Render epoch seconds as float text, e.g. ``1704067200.0``."""
    return str(float(seconds))
