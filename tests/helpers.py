"""Shared test helper functions for pulse_export tests."""

from __future__ import annotations

from datetime import UTC, datetime

from pulse_export.models import ExerciseRecording

NEW_YEAR_2024 = datetime(2024, 1, 1, tzinfo=UTC)


def make_recording(
    samples: list[int] | None = None,
    *,
    interval: float = 1.0,
    start_time: datetime = NEW_YEAR_2024,
) -> ExerciseRecording:
    """Build an ExerciseRecording.

    Args:
        samples: Heart rate values, defaults to [70, 72, 75]
        interval: Seconds between samples
        start_time: Recording start

    Returns:
        ExerciseRecording with the given values
    """
    if samples is None:
        samples = [70, 72, 75]
    return ExerciseRecording(samples=samples, interval=interval, start_time=start_time)
