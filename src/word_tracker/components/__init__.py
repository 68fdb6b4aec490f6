"""Tree, entity and persistence components."""

from .bstree import BSTree
from .iterator import SnapshotIterator
from .node import BSTreeNode
from .repository import load_repository, save_repository
from .tokenizer import tokenize
from .word import Word

__all__ = [
    "BSTree",
    "BSTreeNode",
    "SnapshotIterator",
    "Word",
    "tokenize",
    "load_repository",
    "save_repository",
]
