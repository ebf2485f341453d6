"""Exercise recording and export document types."""

import math
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from enum import Enum

from .errors import UnsupportedFormatError


class ExportFormat(str, Enum):
    """Supported export formats."""

    GPX = "GPX"
    TCX = "TCX"
    FIT = "FIT"

    @property
    def extension(self) -> str:
        """File extension for this format, lower case."""
        return self.value.lower()

    @classmethod
    def parse(cls, value: "ExportFormat | str") -> "ExportFormat":
        """Resolve a format selector, case-insensitive for strings.

        Raises:
            UnsupportedFormatError: If the selector names no known format
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise UnsupportedFormatError(value)


def _check_sample(value: object) -> int:
    # bool is an int subclass but never a heart rate
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Heart rate sample must be an integer, got {value!r}")
    if value < 0:
        raise ValueError(f"Heart rate sample must be non-negative, got {value}")
    return value


@dataclass(frozen=True)
class ExerciseRecording:
    """Heart rate samples taken at a fixed interval from a start time.

    Samples carry no timestamps of their own; sample ``i`` was taken at
    ``start_time + i * interval``. Naive start times are taken as UTC.
    """

    samples: Sequence[int]
    interval: float  # seconds between samples
    start_time: datetime

    def __post_init__(self) -> None:
        interval = self.interval
        if isinstance(interval, bool) or not isinstance(interval, int | float):
            raise ValueError(f"Interval must be a number, got {interval!r}")
        if not math.isfinite(interval) or interval <= 0:
            raise ValueError(f"Interval must be positive, got {interval}")

        start_time = self.start_time
        if start_time.tzinfo is None:
            start_time = start_time.replace(tzinfo=UTC)

        # Frozen dataclass, normalize through object.__setattr__
        object.__setattr__(self, "samples", tuple(_check_sample(s) for s in self.samples))
        object.__setattr__(self, "start_time", start_time.astimezone(UTC))

    @property
    def duration(self) -> float:
        """Total recording time in seconds."""
        return float(self.interval) * len(self.samples)

    @property
    def start_epoch(self) -> float:
        """Start time as seconds since the Unix epoch."""
        return self.start_time.timestamp()


@dataclass(frozen=True)
class ExportedDocument:
    """Encoded document ready to be written by the caller."""

    content: bytes
    suggested_file_name: str
