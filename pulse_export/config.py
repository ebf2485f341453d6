"""Configuration file loading and defaults."""

import logging
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class ExportConfig:
    format: str = "GPX"
    output_dir: str = "."
    file_prefix: str = "PolarH10"
    log_level: str = "INFO"


@dataclass
class RecordingConfig:
    interval: float = 1.0


@dataclass
class Config:
    export: ExportConfig = field(default_factory=ExportConfig)
    recording: RecordingConfig = field(default_factory=RecordingConfig)


def load_config() -> Config:
    """Load config from file, with defaults for missing values."""
    paths = [
        Path("./config.toml"),
        Path.home() / ".config" / "pulse-export" / "config.toml",
    ]

    for path in paths:
        if path.exists():
            try:
                with open(path, "rb") as f:
                    data = tomllib.load(f)
                return _parse_config(data)
            except tomllib.TOMLDecodeError as e:
                logger.warning("Failed to parse config '%s': %s. Using defaults.", path, e)
                return Config()

    return Config()


def _parse_config(data: dict) -> Config:
    """Parse TOML dict into Config dataclass.

    Uses dataclass defaults for missing values.
    """
    return Config(
        export=ExportConfig(**data.get("export", {})),
        recording=RecordingConfig(**data.get("recording", {})),
    )
