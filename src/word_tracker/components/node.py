"""Binary search tree node."""

from __future__ import annotations

from typing import Generic, Optional, TypeVar

E = TypeVar("E")


class BSTreeNode(Generic[E]):
    """
    A node holds one element and exclusively owns its left and
    right child subtrees. There are no parent links.
    """

    __slots__ = ("element", "left", "right")

    def __init__(
        self,
        element: E,
        left: Optional[BSTreeNode[E]] = None,
        right: Optional[BSTreeNode[E]] = None,
    ) -> None:
        self.element: E = element
        self.left = left
        self.right = right

    def __repr__(self) -> str:
        return f"BSTreeNode({self.element!r})"

    def get_element(self) -> E:
        return self.element

    def set_element(self, element: E) -> None:
        self.element = element

    def get_left(self) -> Optional[BSTreeNode[E]]:
        return self.left

    def set_left(self, node: Optional[BSTreeNode[E]]) -> None:
        self.left = node

    def get_right(self) -> Optional[BSTreeNode[E]]:
        return self.right

    def set_right(self, node: Optional[BSTreeNode[E]]) -> None:
        self.right = node

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def children_count(self) -> int:
        return (self.left is not None) + (self.right is not None)
