"""word-tracker core package."""

from .config import TrackerConfig, load_config

__all__ = ["TrackerConfig", "load_config"]
