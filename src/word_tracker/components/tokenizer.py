"""Split raw text lines into lower-cased word tokens."""

from __future__ import annotations


def tokenize(line: str) -> list[str]:
    """
    Returns the words of a line, lower-cased. Any character that is neither
    a letter nor whitespace separates words, so "don't" yields "don" and "t".
    Lower-casing happens first, since it can produce non-letters
    ("İ" becomes "i" plus a combining dot).
    """
    lowered = line.lower()
    cleaned = "".join(ch if ch.isalpha() or ch.isspace() else " " for ch in lowered)
    return cleaned.split()
