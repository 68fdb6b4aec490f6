"""Configuration for word-tracker.

Defines the tunable parameters and loads them from TOML.
"""

from __future__ import annotations

import tomllib  # Python 3.11+
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from .errors import ConfigError
from .types import ReportMode

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class TrackerConfig:
    """Configuration parameters for the word tracker.

    Attributes:
        repository_path: Where the whole-tree snapshot is loaded from and saved to
        encoding: Text encoding of the indexed input files
        default_mode: Report layout used when none is given
        persist: Whether the command line loads and saves the repository
        log_level: Logging level name passed to logging.basicConfig
    """

    repository_path: str = "repository.ser"
    encoding: str = "utf-8"
    default_mode: ReportMode = ReportMode.FILES
    persist: bool = True
    log_level: str = "WARNING"

    @staticmethod
    def from_dict(d: dict[str, Any]) -> TrackerConfig:
        known = {f.name for f in fields(TrackerConfig)}
        unknown = sorted(set(d) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        values = dict(d)
        if "default_mode" in values:
            try:
                values["default_mode"] = ReportMode.parse(str(values["default_mode"]))
            except ValueError as e:
                raise ConfigError(str(e)) from e
        if "persist" in values and not isinstance(values["persist"], bool):
            raise ConfigError("persist must be a boolean")
        for key in ("repository_path", "encoding", "log_level"):
            if key in values and not isinstance(values[key], str):
                raise ConfigError(f"{key} must be a string")
        if "log_level" in values:
            level = values["log_level"].upper()
            if level not in LOG_LEVELS:
                raise ConfigError(f"Unknown log level {values['log_level']!r}")
            values["log_level"] = level

        return TrackerConfig(**values)


def load_config(path: Path) -> TrackerConfig:
    """Load a TrackerConfig from a TOML file.

    Settings may live at the top level or under a ``[word_tracker]`` table.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    raw = path.read_text(encoding="utf-8")
    try:
        data = tomllib.loads(raw)
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    section = data.get("word_tracker", data)
    if not isinstance(section, dict):
        raise ConfigError("[word_tracker] must be a table")
    return TrackerConfig.from_dict(section)
