"""Reading heart rate samples from text dumps."""

import logging
import re
from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from .models import ExerciseRecording

logger = logging.getLogger(__name__)

_SPLIT = re.compile(r"[\s,]+")


def parse_samples(lines: Iterable[str]) -> list[int]:
    """Parse heart rate values from text lines.

    The first token of each row (split on whitespace or commas) is the bpm
    value, so both a plain one-value-per-line file and the Polar SDK
    ``HR CONTACT_SUPPORTED ...`` dump are accepted. Blank lines and a header
    row before the first value are skipped.

    Raises:
        ValueError: If a row after the first value does not start with an integer
    """
    samples: list[int] = []
    for lineno, line in enumerate(lines, 1):
        stripped = line.strip()
        if not stripped:
            continue
        token = _SPLIT.split(stripped, maxsplit=1)[0]
        try:
            samples.append(int(token))
        except ValueError:
            if samples:
                raise ValueError(f"Line {lineno}: invalid heart rate value {token!r}") from None
            logger.debug("Skipping header line %d: %s", lineno, stripped)
    return samples


def load_recording(path: str | Path, start_time: datetime, interval: float) -> ExerciseRecording:
    """Load a recording from a samples file."""
    with open(path, encoding="utf-8") as f:
        samples = parse_samples(f)
    logger.debug("Loaded %d samples from %s", len(samples), path)
    return ExerciseRecording(samples=samples, interval=interval, start_time=start_time)
