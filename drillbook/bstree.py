"""Binary search trees of integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional, Sequence


@dataclass(eq=False)
class TreeNode:
    """One node of a binary tree."""

    val: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def build_balanced(values: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced tree from already sorted ``values``.

    The root of each subtree is the element at index ``len // 2``.
    """
    if not values:
        return None
    mid = len(values) // 2
    return TreeNode(
        values[mid],
        build_balanced(values[:mid]),
        build_balanced(values[mid + 1:]),
    )


def inorder_values(node: Optional[TreeNode]) -> Iterator[int]:
    """Yield the values below ``node`` in in-order."""
    stack: list[TreeNode] = []
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


class Tree:
    """A binary search tree; inserting a value already present does nothing."""

    def __init__(self, values: Optional[Iterable[int]] = None) -> None:
        self.root: Optional[TreeNode] = None
        if values is not None:
            self.root = build_balanced(sorted(values))

    def insert(self, value: int) -> None:
        """Insert ``value`` unless it is already in the tree."""
        if self.root is None:
            self.root = TreeNode(value)
            return
        node = self.root
        while True:
            if value > node.val:
                if node.right is None:
                    node.right = TreeNode(value)
                    return
                node = node.right
            elif value < node.val:
                if node.left is None:
                    node.left = TreeNode(value)
                    return
                node = node.left
            else:
                return

    def push(self, values: Iterable[int]) -> None:
        """Insert every value in turn."""
        for value in values:
            self.insert(value)

    def is_empty(self) -> bool:
        return self.root is None

    def inorder(self) -> Iterator[int]:
        """Yield the tree's values in ascending order."""
        return inorder_values(self.root)

    def format(self) -> str:
        """Render the in-order values separated by spaces."""
        return " ".join(str(value) for value in self.inorder())