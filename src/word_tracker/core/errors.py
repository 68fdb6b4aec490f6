"""Exception hierarchy for word-tracker.

Defines all custom exceptions used throughout the implementation.
"""

from __future__ import annotations


class WordTrackerError(Exception):
    """Base exception for all word-tracker errors."""
    pass


class InvalidArgumentError(WordTrackerError, ValueError):
    """Raised when a tree operation receives a None element."""
    pass


class EmptyTreeError(WordTrackerError, LookupError):
    """Raised when the root of an empty tree is requested."""
    pass


class IteratorExhaustedError(WordTrackerError, LookupError):
    """Raised when a traversal iterator is advanced past its last element."""
    pass


class RepositoryError(WordTrackerError):
    """Raised when a repository snapshot cannot be written or decoded."""
    pass


class ConfigError(WordTrackerError):
    """Raised when a configuration file holds unknown keys or bad values."""
    pass
