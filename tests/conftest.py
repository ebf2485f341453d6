"""Shared test fixtures for pulse_export tests."""

from __future__ import annotations

import pytest

from pulse_export.models import ExerciseRecording
from tests.helpers import make_recording


@pytest.fixture
def make_recording_fixture():
    """Fixture providing make_recording helper for tests."""
    return make_recording


@pytest.fixture
def recording() -> ExerciseRecording:
    """Three samples, one second apart, starting 2024-01-01T00:00:00Z."""
    return make_recording()


@pytest.fixture
def empty_recording() -> ExerciseRecording:
    """Recording with no samples."""
    return make_recording([])


@pytest.fixture
def half_second_recording() -> ExerciseRecording:
    """Samples every 0.5 seconds."""
    return make_recording([60, 61, 62, 63], interval=0.5)


@pytest.fixture
def samples_file(tmp_path):
    """Polar SDK style HR dump with a header row."""
    path = tmp_path / "samples.txt"
    path.write_text(
        "HR CONTACT_SUPPORTED CONTACT_STATUS RR_AVAILABLE RR(ms)\n"
        "70 true true true 857\n"
        "72 true true true 833\n"
        "75 true true false\n"
    )
    return path


# Config fixtures
@pytest.fixture
def sample_config_dict() -> dict:
    """Sample config dict as would be parsed from TOML."""
    return {
        "export": {
            "format": "TCX",
            "output_dir": "/tmp/exports",
            "file_prefix": "H10",
            "log_level": "DEBUG",
        },
        "recording": {
            "interval": 2.0,
        },
    }


@pytest.fixture
def partial_config_dict() -> dict:
    """Partial config dict with some values missing."""
    return {
        "export": {"format": "FIT"},
    }
