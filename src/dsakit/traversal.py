"""Binary tree nodes and breadth-first traversal."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence


@dataclass
class TreeNode:
    """A binary tree node owning up to two children."""

    val: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


def level_order(root: Optional[TreeNode]) -> Iterator[List[int]]:
    """Yield the values of each depth of the tree, root first, left to right."""

    if root is None:
        return

    seen = {id(root)}
    queue = deque([root])
    while queue:
        layer: List[int] = []
        for _ in range(len(queue)):
            node = queue.popleft()
            layer.append(node.val)
            for child in (node.left, node.right):
                if child is None:
                    continue
                if id(child) in seen:
                    raise ValueError(f"Node with value {child.val!r} is reachable more than once")
                seen.add(id(child))
                queue.append(child)
        yield layer


def tree_height(root: Optional[TreeNode]) -> int:
    """Return the number of edges on the longest root-to-leaf path, -1 when empty."""

    return sum(1 for _ in level_order(root)) - 1


def tree_from_level_order(values: Sequence[Optional[int]]) -> Optional[TreeNode]:
    """Build a tree from level-order ``values`` where ``None`` marks a missing child.

    ``[1, 2, 3, None, 4]`` gives root 1 with children 2 and 3, and 4 as the
    right child of 2. Children are listed only for nodes that exist.
    """

    if not values or values[0] is None:
        return None

    root = TreeNode(values[0])
    parents = deque([root])
    position = 1
    while parents and position < len(values):
        node = parents.popleft()
        if values[position] is not None:
            node.left = TreeNode(values[position])
            parents.append(node.left)
        position += 1
        if position < len(values) and values[position] is not None:
            node.right = TreeNode(values[position])
            parents.append(node.right)
        position += 1
    return root
