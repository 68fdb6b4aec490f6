"""word-tracker - index words across text files in a binary search tree."""

from .components.bstree import BSTree
from .components.iterator import SnapshotIterator
from .components.node import BSTreeNode
from .components.repository import load_repository, save_repository
from .components.tokenizer import tokenize
from .components.word import Word
from .core.config import TrackerConfig, load_config
from .core.errors import (
    ConfigError,
    EmptyTreeError,
    InvalidArgumentError,
    IteratorExhaustedError,
    RepositoryError,
    WordTrackerError,
)
from .core.indexer import index_file, index_lines, record_token
from .core.types import Filename, LineNumber, Occurrences, ReportMode, WordRecord
from .render.report import render_report, render_tree

__all__ = [
    "BSTree",
    "BSTreeNode",
    "SnapshotIterator",
    "Word",
    "tokenize",
    "load_repository",
    "save_repository",
    "TrackerConfig",
    "load_config",
    "WordTrackerError",
    "InvalidArgumentError",
    "EmptyTreeError",
    "IteratorExhaustedError",
    "RepositoryError",
    "ConfigError",
    "record_token",
    "index_lines",
    "index_file",
    "Filename",
    "LineNumber",
    "Occurrences",
    "ReportMode",
    "WordRecord",
    "render_report",
    "render_tree",
]
