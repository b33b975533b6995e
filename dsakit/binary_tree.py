"""Binary tree nodes and the classic recursive algorithms over them."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass

NULL_MARKER = -1
"""Value that stands for a missing child in serialized input."""


@dataclass
class BinaryTreeNode:
    """A node holding an integer and up to two children."""

    data: int
    left: BinaryTreeNode | None = None
    right: BinaryTreeNode | None = None


def _take(values: Iterator[int]) -> int:
    try:
        return next(values)
    except StopIteration:
        raise ValueError("input ended before the tree was complete") from None


def _read_node(values: Iterator[int]) -> BinaryTreeNode | None:
    data = _take(values)
    return None if data == NULL_MARKER else BinaryTreeNode(data)


def read_level_order(values: Iterable[int]) -> BinaryTreeNode | None:
    """Build a tree from values given level by level, where each node is
    followed (in queue order) by its left and right child, -1 meaning none."""
    stream = iter(values)
    root = _read_node(stream)
    if root is None:
        return None
    pending = deque([root])
    while pending:
        node = pending.popleft()
        node.left = _read_node(stream)
        if node.left is not None:
            pending.append(node.left)
        node.right = _read_node(stream)
        if node.right is not None:
            pending.append(node.right)
    return root


def read_preorder(values: Iterable[int]) -> BinaryTreeNode | None:
    """Build a tree from values given in preorder, -1 marking an empty subtree."""
    stream = iter(values)

    def build() -> BinaryTreeNode | None:
        node = _read_node(stream)
        if node is not None:
            node.left = build()
            node.right = build()
        return node

    return build()


def _format_lines(node: BinaryTreeNode | None) -> Iterator[str]:
    if node is None:
        return
    line = f"{node.data}:"
    if node.left is not None:
        line += f"L{node.left.data}"
    if node.right is not None:
        line += f"R{node.right.data}"
    yield line
    yield from _format_lines(node.left)
    yield from _format_lines(node.right)


def format_tree(root: BinaryTreeNode | None) -> str:
    """One line per node in preorder, such as ``5:L3R7``."""
    return "".join(f"{line}\n" for line in _format_lines(root))


def count_nodes(root: BinaryTreeNode | None) -> int:
    """Number of nodes in the tree."""
    if root is None:
        return 0
    return 1 + count_nodes(root.left) + count_nodes(root.right)


def inorder(root: BinaryTreeNode | None) -> list[int]:
    """Values in left-root-right order."""
    if root is None:
        return []
    return [*inorder(root.left), root.data, *inorder(root.right)]


def build_tree(
    inorder_values: Sequence[int], preorder_values: Sequence[int]
) -> BinaryTreeNode | None:
    """Rebuild a tree from its inorder and preorder traversals."""
    if len(inorder_values) != len(preorder_values):
        raise ValueError("traversals must have the same length")

    def build(ins: list[int], pres: list[int]) -> BinaryTreeNode | None:
        if not ins:
            return None
        root_data = pres[0]
        try:
            split = ins.index(root_data)
        except ValueError:
            raise ValueError(
                f"value {root_data} of the preorder is missing from the inorder"
            ) from None
        return BinaryTreeNode(
            root_data,
            build(ins[:split], pres[1:split + 1]),
            build(ins[split + 1:], pres[split + 1:]),
        )

    return build(list(inorder_values), list(preorder_values))


def height(root: BinaryTreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def diameter(root: BinaryTreeNode | None) -> int:
    """Number of edges on the longest path between two nodes."""
    if root is None:
        return 0
    return max(
        height(root.left) + height(root.right),
        diameter(root.left),
        diameter(root.right),
    )


def height_and_diameter(root: BinaryTreeNode | None) -> tuple[int, int]:
    """Height and diameter computed together in a single pass."""
    if root is None:
        return 0, 0
    left_height, left_diameter = height_and_diameter(root.left)
    right_height, right_diameter = height_and_diameter(root.right)
    return (
        1 + max(left_height, right_height),
        max(left_height + right_height, left_diameter, right_diameter),
    )


def find_node(root: BinaryTreeNode | None, data: int) -> BinaryTreeNode | None:
    """Search a binary search tree for ``data``."""
    node = root
    while node is not None:
        if node.data == data:
            return node
        node = node.left if data < node.data else node.right
    return None


def values_between(root: BinaryTreeNode | None, low: int, high: int) -> list[int]:
    """Values of a binary search tree within ``low..high``, in preorder."""
    if root is None:
        return []
    found = [root.data] if low <= root.data <= high else []
    if root.data > low:
        found.extend(values_between(root.left, low, high))
    if root.data <= high:
        found.extend(values_between(root.right, low, high))
    return found


def _maximum(node: BinaryTreeNode | None) -> float:
    if node is None:
        return -math.inf
    return max(node.data, _maximum(node.left), _maximum(node.right))


def _minimum(node: BinaryTreeNode | None) -> float:
    if node is None:
        return math.inf
    return min(node.data, _minimum(node.left), _minimum(node.right))


def maximum(root: BinaryTreeNode | None) -> int:
    """Largest value anywhere in the tree."""
    if root is None:
        raise ValueError("maximum() of an empty tree")
    return int(_maximum(root))


def minimum(root: BinaryTreeNode | None) -> int:
    """Smallest value anywhere in the tree."""
    if root is None:
        raise ValueError("minimum() of an empty tree")
    return int(_minimum(root))


def _bst_summary(node: BinaryTreeNode | None) -> tuple[bool, float, float]:
    if node is None:
        return True, math.inf, -math.inf
    left_ok, left_min, left_max = _bst_summary(node.left)
    right_ok, right_min, right_max = _bst_summary(node.right)
    ok = left_ok and right_ok and left_max < node.data <= right_min
    return (
        ok,
        min(node.data, left_min, right_min),
        max(node.data, left_max, right_max),
    )


def is_bst(root: BinaryTreeNode | None) -> bool:
    """True when every left subtree holds smaller values and every right
    subtree holds values at least as large as its root."""
    return _bst_summary(root)[0]


def is_bst_bounded(
    root: BinaryTreeNode | None, low: int | None = None, high: int | None = None
) -> bool:
    """The same check as :func:`is_bst`, narrowing the allowed range on the
    way down; ``None`` leaves a side unbounded."""
    if root is None:
        return True
    if (low is not None and root.data < low) or (high is not None and root.data > high):
        return False
    return is_bst_bounded(root.left, low, root.data - 1) and is_bst_bounded(
        root.right, root.data, high
    )


def root_to_node_path(root: BinaryTreeNode | None, data: int) -> list[int] | None:
    """Values from the node holding ``data`` up to the root, or None when
    no node holds it."""
    if root is None:
        return None
    if root.data == data:
        return [root.data]
    for child in (root.left, root.right):
        path = root_to_node_path(child, data)
        if path is not None:
            path.append(root.data)
            return path
    return None