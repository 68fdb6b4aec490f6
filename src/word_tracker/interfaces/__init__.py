"""Protocol definitions."""

from .tree import BSTreeADT, Comparable, TreeIterator

__all__ = ["BSTreeADT", "Comparable", "TreeIterator"]
