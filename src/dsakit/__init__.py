"""dsakit library initialization."""

from .errors import DsakitError, InvalidIndexError, InvalidWeightError
from .frames import EdgeFrameConfig, adjacency_from_frame, components_frame, disjoint_set_from_frame
from .shortest_path import UNREACHABLE, ShortestPathResult, dijkstra, shortest_path
from .structures import DisjointSet
from .traversal import TreeNode, level_order, tree_from_level_order, tree_height

__all__ = [
    "DisjointSet",
    "DsakitError",
    "EdgeFrameConfig",
    "InvalidIndexError",
    "InvalidWeightError",
    "ShortestPathResult",
    "TreeNode",
    "UNREACHABLE",
    "adjacency_from_frame",
    "components_frame",
    "dijkstra",
    "disjoint_set_from_frame",
    "level_order",
    "shortest_path",
    "tree_from_level_order",
    "tree_height",
]
