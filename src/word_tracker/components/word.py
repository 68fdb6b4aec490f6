"""Word entity stored in the tree.

A Word is keyed by its lower-cased text and records every (file, line)
location it was seen at, together with a running total.
"""

from __future__ import annotations

from typing import Any

from ..core.types import Filename, LineNumber, Occurrences, WordRecord


class Word:
    """A normalized word and its occurrences across files.

    Invariants:
        - frequency equals the total number of recorded line entries
        - files are kept in the order they were first seen
        - ordering and equality use the normalized text only
    """

    __slots__ = ("_text", "_occurrences", "_frequency")

    # Mutable and compared by text alone, so not hashable
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, text: str) -> None:
        self._text = text.lower()
        self._occurrences: Occurrences = {}
        self._frequency = 0

    def __repr__(self) -> str:
        return f"Word({self._text!r}, frequency={self._frequency})"

    def __str__(self) -> str:
        return self._text

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self._text == other._text

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self._text < other._text

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self._text > other._text

    def add_occurrence(self, filename: Filename, line_number: LineNumber) -> None:
        """Record one more sighting; repeated lines are kept, not merged."""
        self._occurrences.setdefault(filename, []).append(line_number)
        self._frequency += 1

    def get_text(self) -> str:
        return self._text

    def get_occurrences(self) -> Occurrences:
        """Copy of the file to line mapping; add_occurrence is the only writer."""
        return {f: list(lines) for f, lines in self._occurrences.items()}

    def get_files(self) -> list[Filename]:
        return list(self._occurrences)

    def get_frequency(self) -> int:
        return self._frequency

    def lines_in(self, filename: Filename) -> list[LineNumber]:
        """Line numbers for one file, empty if the word never appeared there."""
        return list(self._occurrences.get(filename, []))

    # Read-only views used by the report templates
    text = property(get_text)
    occurrences = property(get_occurrences)
    files = property(get_files)
    frequency = property(get_frequency)

    def to_dict(self) -> WordRecord:
        return {
            "text": self._text,
            "occurrences": {f: list(lines) for f, lines in self._occurrences.items()},
            "frequency": self._frequency,
        }

    @staticmethod
    def from_dict(d: dict[str, Any]) -> Word:
        """Rebuild a Word from to_dict() output.

        The occurrences are replayed through add_occurrence, so the
        frequency is recomputed; a stored frequency that disagrees is
        rejected.
        """
        text = d.get("text")
        if not isinstance(text, str) or not text:
            raise ValueError("Missing required field: text")

        occurrences = d.get("occurrences", {})
        if not isinstance(occurrences, dict):
            raise ValueError(f"Occurrences of {text!r} must be a mapping")

        word = Word(text)
        for filename, lines in occurrences.items():
            if not isinstance(lines, list):
                raise ValueError(f"Lines of {text!r} in {filename!r} must be a list")
            for line in lines:
                if not isinstance(line, int) or isinstance(line, bool):
                    raise ValueError(f"Bad line number {line!r} for {text!r}")
                word.add_occurrence(filename, line)

        stored = d.get("frequency", word.get_frequency())
        if stored != word.get_frequency():
            raise ValueError(
                f"Frequency mismatch for {text!r}: stored {stored}, counted {word.get_frequency()}"
            )
        return word
