"""Trees whose nodes have any number of children."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass
class TreeNode:
    """A node holding a value and an ordered list of children."""

    data: int
    children: list[TreeNode] = field(default_factory=list)


def _take(values: Iterator[int]) -> int:
    try:
        return next(values)
    except StopIteration:
        raise ValueError("input ended before the tree was complete") from None


def _take_count(values: Iterator[int]) -> int:
    count = _take(values)
    if count < 0:
        raise ValueError(f"child count must not be negative, got {count}")
    return count


def read_level_order(values: Iterable[int]) -> TreeNode:
    """Build a tree from the root value followed, for each node in queue
    order, by its number of children and then their values."""
    stream = iter(values)
    root = TreeNode(_take(stream))
    pending = deque([root])
    while pending:
        node = pending.popleft()
        for _ in range(_take_count(stream)):
            child = TreeNode(_take(stream))
            node.children.append(child)
            pending.append(child)
    return root


def read_preorder(values: Iterable[int]) -> TreeNode:
    """Build a tree from values given as node value, child count, then each
    child's subtree in the same form."""
    stream = iter(values)

    def build() -> TreeNode:
        node = TreeNode(_take(stream))
        node.children.extend(build() for _ in range(_take_count(stream)))
        return node

    return build()


def _format_lines(node: TreeNode) -> Iterator[str]:
    yield f"{node.data} : " + "".join(f"{child.data}," for child in node.children)
    for child in node.children:
        yield from _format_lines(child)


def format_tree(root: TreeNode) -> str:
    """One line per node in preorder, such as ``1 : 2,3,``."""
    return "".join(f"{line}\n" for line in _format_lines(root))