"""Common type definitions for word-tracker.

Defines fundamental types used across all components.
"""

from __future__ import annotations

from enum import Enum
from typing import TypedDict

# Core primitive types
Filename = str
LineNumber = int
Occurrences = dict[Filename, list[LineNumber]]


class WordRecord(TypedDict):
    """Serialized form of a single word inside a repository snapshot."""
    text: str
    occurrences: Occurrences
    frequency: int


class ReportMode(Enum):
    """Report layouts, keyed by their command line switch."""

    FILES = "-pf"
    LINES = "-pl"
    FREQUENCY = "-po"

    @property
    def template_name(self) -> str:
        return f"{self.name.lower()}.txt.j2"

    @classmethod
    def parse(cls, raw: str) -> ReportMode:
        """Accept either the switch (``-pf``) or the member name (``files``)."""
        for mode in cls:
            if raw == mode.value or raw.lower() == mode.name.lower():
                return mode
        choices = ", ".join(m.value for m in cls)
        raise ValueError(f"Unknown report mode {raw!r} (expected one of {choices})")
