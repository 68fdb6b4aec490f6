"""
An unbalanced binary search tree over comparable elements.

Time Complexity:
Search/Insert/Remove min or max: O(h) where h is the current height.
No rebalancing is performed, so sorted input degrades the tree into a
chain and every operation becomes O(n).

Traversals and height walk the tree with an explicit stack or queue,
since a degenerate chain can be deeper than the recursion limit.
"""

from __future__ import annotations  # allows forward-referencing without quotes

from collections import deque
from collections.abc import Iterator
from typing import Generic, Optional, TypeVar

from ..core.errors import EmptyTreeError, InvalidArgumentError
from ..interfaces.tree import Comparable
from .iterator import SnapshotIterator
from .node import BSTreeNode

E = TypeVar("E", bound=Comparable)


class BSTree(Generic[E]):
    """
    BSTree implements the binary search tree ADT using BSTreeNode
    containers with element type, E.

    Invariants:
        - Every element in a node's left subtree compares less than the
          node's element, every element in its right subtree greater
        - No two nodes hold equal elements; add() rejects duplicates
        - size() equals the number of live nodes
    """

    __slots__ = ("_root", "_size")

    def __init__(self, element: Optional[E] = None) -> None:
        self._root: Optional[BSTreeNode[E]] = None
        self._size = 0
        if element is not None:
            self._root = BSTreeNode(element)
            self._size = 1

    def __repr__(self) -> str:
        return f"BSTree({self._inorder()})"

    def __len__(self) -> int:
        return self._size

    def __contains__(self, entry: object) -> bool:
        return self.contains(entry)  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[E]:
        return self.inorder_iterator()

    # -------------------------------
    # Queries
    # -------------------------------
    def get_root(self) -> BSTreeNode[E]:
        if self._root is None:
            raise EmptyTreeError("Tree is empty.")
        return self._root

    def get_height(self) -> int:
        """
        Returns the number of levels in the tree: 0 when empty,
        1 for a lone root, otherwise 1 + max(height(left), height(right)).
        Time Complexity: O(n) since every node is visited (level order)
        """
        if self._root is None:
            return 0

        height = 0
        level: deque[BSTreeNode[E]] = deque([self._root])
        while level:
            height += 1
            for _ in range(len(level)):
                node = level.popleft()
                if node.left is not None:
                    level.append(node.left)
                if node.right is not None:
                    level.append(node.right)
        return height

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def contains(self, entry: E) -> bool:
        if entry is None:
            raise InvalidArgumentError("Entry cannot be None.")
        return self.search(entry) is not None

    def search(self, entry: E) -> Optional[BSTreeNode[E]]:
        """
        Returns the node holding an element equal to entry, or None.
        O(h), one comparison per level on the way down.
        """
        if entry is None:
            raise InvalidArgumentError("Cannot search a None entry.")

        current = self._root
        while current is not None:
            if entry < current.element:
                current = current.left
            elif current.element < entry:
                current = current.right
            else:
                return current
        return None

    # -------------------------------
    # Mutation
    # -------------------------------
    def add(self, new_entry: E) -> bool:
        """
        Inserts new_entry as a leaf. Returns False without touching the
        tree if an equal element is already stored; merging is the
        caller's job (search, then mutate the stored element).
        """
        if new_entry is None:
            raise InvalidArgumentError("Cannot add a None entry.")

        if self._root is None:
            self._root = BSTreeNode(new_entry)
            self._size += 1
            return True

        parent = self._root
        current: Optional[BSTreeNode[E]] = self._root
        went_left = False
        while current is not None:
            parent = current
            if new_entry < current.element:
                current = current.left
                went_left = True
            elif current.element < new_entry:
                current = current.right
                went_left = False
            else:
                return False

        new_node = BSTreeNode(new_entry)
        if went_left:
            parent.set_left(new_node)
        else:
            parent.set_right(new_node)
        self._size += 1
        return True

    def remove_min(self) -> Optional[BSTreeNode[E]]:
        """
        Detaches the leftmost node. Its right subtree takes its place under
        the parent (or becomes the root). Returns None on an empty tree.
        """
        if self._root is None:
            return None

        parent: Optional[BSTreeNode[E]] = None
        current = self._root
        while current.left is not None:
            parent = current
            current = current.left

        if parent is None:
            self._root = current.right
        else:
            parent.set_left(current.right)

        return self._detach(current)

    def remove_max(self) -> Optional[BSTreeNode[E]]:
        """
        Detaches the rightmost node. Its left subtree takes its place under
        the parent (or becomes the root). Returns None on an empty tree.
        """
        if self._root is None:
            return None

        parent: Optional[BSTreeNode[E]] = None
        current = self._root
        while current.right is not None:
            parent = current
            current = current.right

        if parent is None:
            self._root = current.left
        else:
            parent.set_right(current.left)

        return self._detach(current)

    def _detach(self, node: BSTreeNode[E]) -> BSTreeNode[E]:
        # The removed node must not keep references into the live tree
        node.set_left(None)
        node.set_right(None)
        self._size -= 1
        return node

    # -------------------------------
    # Traversals
    # -------------------------------
    def inorder_iterator(self) -> SnapshotIterator[E]:
        return SnapshotIterator(self._inorder())

    def preorder_iterator(self) -> SnapshotIterator[E]:
        return SnapshotIterator(self._preorder())

    def postorder_iterator(self) -> SnapshotIterator[E]:
        return SnapshotIterator(self._postorder())

    def _inorder(self) -> list[E]:
        values: list[E] = []
        stack: list[BSTreeNode[E]] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            node = stack.pop()
            values.append(node.element)
            current = node.right
        return values

    def _preorder(self) -> list[E]:
        values: list[E] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            values.append(node.element)
            # right is pushed first so the left subtree is visited first
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return values

    def _postorder(self) -> list[E]:
        # node, right, left reversed gives left, right, node
        values: list[E] = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            values.append(node.element)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        values.reverse()
        return values
