"""Protocol definitions for the ordered tree and its traversal iterators."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

if TYPE_CHECKING:
    from ..components.node import BSTreeNode

T = TypeVar("T", covariant=True)


class Comparable(Protocol):
    """A type with a total order usable for tree placement."""

    def __lt__(self, other: Any) -> bool: ...
    def __gt__(self, other: Any) -> bool: ...
    def __eq__(self, other: Any) -> bool: ...


E = TypeVar("E", bound=Comparable)


@runtime_checkable
class TreeIterator(Protocol[T]):
    """Forward-only, non-restartable cursor over a traversal."""

    def has_next(self) -> bool:
        """Return True if next() will return another element."""
        ...

    def next(self) -> T:
        """Return the next element; raise IteratorExhaustedError when consumed."""
        ...


@runtime_checkable
class BSTreeADT(Protocol[E]):
    """Public API of an ordered binary search tree."""

    def get_root(self) -> BSTreeNode[E]:
        """Return the root node; raise EmptyTreeError if the tree is empty."""
        ...

    def get_height(self) -> int:
        """Return the height; an empty tree is 0 and a single node is 1."""
        ...

    def size(self) -> int:
        """Return the number of elements."""
        ...

    def is_empty(self) -> bool:
        """Return True if the tree holds no elements."""
        ...

    def clear(self) -> None:
        """Remove every element."""
        ...

    def contains(self, entry: E) -> bool:
        """Return True if an equal element is stored."""
        ...

    def search(self, entry: E) -> BSTreeNode[E] | None:
        """Return the node holding an equal element, or None."""
        ...

    def add(self, new_entry: E) -> bool:
        """Insert an element; return False if an equal one is already stored."""
        ...

    def remove_min(self) -> BSTreeNode[E] | None:
        """Detach and return the smallest node, or None when empty."""
        ...

    def remove_max(self) -> BSTreeNode[E] | None:
        """Detach and return the largest node, or None when empty."""
        ...

    def inorder_iterator(self) -> TreeIterator[E]:
        """Snapshot of the elements in ascending order."""
        ...

    def preorder_iterator(self) -> TreeIterator[E]:
        """Snapshot of the elements in node, left, right order."""
        ...

    def postorder_iterator(self) -> TreeIterator[E]:
        """Snapshot of the elements in left, right, node order."""
        ...
