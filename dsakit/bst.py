"""A binary search tree of integers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from dsakit.binary_tree import BinaryTreeNode, count_nodes, format_tree, inorder


def _insert(node: BinaryTreeNode | None, data: int) -> BinaryTreeNode:
    if node is None:
        return BinaryTreeNode(data)
    if data < node.data:
        node.left = _insert(node.left, data)
    else:
        node.right = _insert(node.right, data)
    return node


def _delete(node: BinaryTreeNode | None, data: int) -> BinaryTreeNode | None:
    if node is None:
        return None
    if data > node.data:
        node.right = _delete(node.right, data)
        return node
    if data < node.data:
        node.left = _delete(node.left, data)
        return node
    if node.left is None:
        return node.right
    if node.right is None:
        return node.left
    successor = node.right
    while successor.left is not None:
        successor = successor.left
    node.data = successor.data
    node.right = _delete(node.right, successor.data)
    return node


class BinarySearchTree:
    """Smaller values go left; equal and larger values go right."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.root: BinaryTreeNode | None = None
        for value in values:
            self.insert(value)

    def insert(self, data: int) -> None:
        """Add ``data``; duplicates are kept."""
        self.root = _insert(self.root, data)

    def delete(self, data: int) -> None:
        """Remove one occurrence of ``data``; absent values are ignored."""
        self.root = _delete(self.root, data)

    def __contains__(self, data: object) -> bool:
        node = self.root
        while node is not None:
            if node.data == data:
                return True
            node = node.left if data < node.data else node.right  # type: ignore[operator]
        return False

    def __iter__(self) -> Iterator[int]:
        return iter(inorder(self.root))

    def __len__(self) -> int:
        return count_nodes(self.root)

    def format(self) -> str:
        """One line per node in preorder, such as ``5:L3R7``."""
        return format_tree(self.root)