"""Snapshot traversal iterator.

The whole traversal is copied into a list when the iterator is built,
so later changes to the tree never show up in an iteration in progress.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Generic, TypeVar

from ..core.errors import IteratorExhaustedError

T = TypeVar("T")


class SnapshotIterator(Generic[T]):
    """Forward-only, non-restartable cursor over a materialized traversal.

    Supports both the explicit has_next()/next() protocol and the
    Python iterator protocol, so it can drive a ``for`` loop.
    """

    __slots__ = ("_elements", "_index")

    def __init__(self, elements: Iterable[T]) -> None:
        self._elements: list[T] = list(elements)
        self._index = 0

    def __repr__(self) -> str:
        return f"SnapshotIterator(remaining={self.remaining()})"

    def has_next(self) -> bool:
        return self._index < len(self._elements)

    def next(self) -> T:
        if not self.has_next():
            raise IteratorExhaustedError("No more elements in traversal")
        element = self._elements[self._index]
        self._index += 1
        return element

    def remaining(self) -> int:
        return len(self._elements) - self._index

    def __iter__(self) -> SnapshotIterator[T]:
        return self

    def __next__(self) -> T:
        if not self.has_next():
            raise StopIteration
        return self.next()
