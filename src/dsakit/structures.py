"""Basic data structures."""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Dict, List

from .errors import check_index

logger = logging.getLogger(__name__)

UNION_STRATEGIES = ("rank", "size", "balanced")


@dataclass
class DisjointSet:
    """Union-find over the elements ``0..n`` inclusive.

    Every element starts as its own singleton set. Sets are merged with one
    of the union methods and never split again. ``find`` compresses paths
    on every call regardless of the union strategy in use.
    """

    n: int
    union_strategy: str = "rank"
    parent: List[int] = field(init=False, repr=False)
    rank: List[int] = field(init=False, repr=False)
    size: List[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.n < 0:
            raise ValueError("n must be non-negative")
        if self.union_strategy not in UNION_STRATEGIES:
            raise ValueError(
                f"Unknown union strategy '{self.union_strategy}', expected one of {UNION_STRATEGIES}"
            )
        count = self.n + 1
        self.parent = list(range(count))
        self.rank = [0] * count
        self.size = [1] * count

    def __len__(self) -> int:
        return len(self.parent)

    def _check(self, index: int) -> int:
        return check_index(index, self.n + 1, "element")

    def find(self, index: int) -> int:
        index = self._check(index)
        parent = self.parent
        root = index
        while parent[root] != root:
            root = parent[root]
        while parent[index] != root:
            parent[index], index = root, parent[index]
        return root

    def _roots(self, left: int, right: int) -> tuple[int, int]:
        # Check both before compressing either so a bad index leaves no trace.
        self._check(left)
        self._check(right)
        return self.find(left), self.find(right)

    def _attach(self, child: int, root: int) -> int:
        self.parent[child] = root
        self.size[root] += self.size[child]
        logger.debug("Attached root %d under %d (size %d)", child, root, self.size[root])
        return root

    def union_by_rank(self, left: int, right: int) -> int:
        """Merge by rank; on a tie ``left``'s root goes under ``right``'s root."""

        root_left, root_right = self._roots(left, right)
        if root_left == root_right:
            return root_left
        if self.rank[root_left] < self.rank[root_right]:
            return self._attach(root_left, root_right)
        if self.rank[root_left] > self.rank[root_right]:
            return self._attach(root_right, root_left)
        self.rank[root_right] += 1
        return self._attach(root_left, root_right)

    def union_by_size(self, left: int, right: int) -> int:
        """Merge by root index: the smaller-indexed root goes under the larger.

        Sizes are accumulated on the surviving root but play no part in
        choosing it. See :meth:`union_by_size_balanced` for the variant that
        attaches the smaller set under the larger one.
        """

        root_left, root_right = self._roots(left, right)
        if root_left == root_right:
            return root_left
        if root_left < root_right:
            return self._attach(root_left, root_right)
        return self._attach(root_right, root_left)

    def union_by_size_balanced(self, left: int, right: int) -> int:
        """Merge the smaller set under the larger; ties go under ``right``'s root."""

        root_left, root_right = self._roots(left, right)
        if root_left == root_right:
            return root_left
        if self.size[root_left] > self.size[root_right]:
            return self._attach(root_right, root_left)
        return self._attach(root_left, root_right)

    def union(self, left: int, right: int) -> int:
        if self.union_strategy == "size":
            return self.union_by_size(left, right)
        if self.union_strategy == "balanced":
            return self.union_by_size_balanced(left, right)
        return self.union_by_rank(left, right)

    def is_component(self, left: int, right: int) -> bool:
        root_left, root_right = self._roots(left, right)
        return root_left == root_right

    def component_size(self, index: int) -> int:
        return self.size[self.find(index)]

    @property
    def component_count(self) -> int:
        return sum(1 for index, parent in enumerate(self.parent) if index == parent)

    def groups(self) -> Dict[int, List[int]]:
        """Return ``{root: members}`` with members in ascending order."""

        final_map: Dict[int, List[int]] = defaultdict(list)
        for index in range(len(self.parent)):
            final_map[self.find(index)].append(index)
        return dict(final_map)
