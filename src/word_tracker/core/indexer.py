"""Indexing pipeline: feeds tokens into a BSTree of Words.

Every token goes through search-then-mutate-or-insert. The sequence is
not atomic, so a tree must only be indexed from one thread at a time.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from ..components.bstree import BSTree
from ..components.tokenizer import tokenize
from ..components.word import Word
from .types import Filename, LineNumber

logger = logging.getLogger(__name__)


def record_token(
    tree: BSTree[Word], token: str, filename: Filename, line_number: LineNumber
) -> Word:
    """Record one (token, file, line) sighting and return the stored Word."""
    lookup = Word(token)
    node = tree.search(lookup)
    if node is not None:
        stored = node.get_element()
        stored.add_occurrence(filename, line_number)
        return stored

    # A new word carries its first occurrence before it is inserted
    lookup.add_occurrence(filename, line_number)
    tree.add(lookup)
    return lookup


def index_lines(tree: BSTree[Word], lines: Iterable[str], filename: Filename) -> int:
    """Index lines numbered from 1; returns how many tokens were recorded."""
    count = 0
    for line_number, line in enumerate(lines, start=1):
        for token in tokenize(line):
            record_token(tree, token, filename, line_number)
            count += 1
    return count


def index_file(tree: BSTree[Word], path: str | Path, encoding: str = "utf-8") -> int:
    """Index a text file under the name it was given.

    Read errors propagate to the caller.
    """
    path = Path(path)
    logger.debug(f"Indexing {path}")
    with open(path, encoding=encoding) as f:
        count = index_lines(tree, f, str(path))
    logger.info(f"Indexed {count} tokens from {path} ({tree.size()} distinct words)")
    return count
