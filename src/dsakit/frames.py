"""Convenience helpers for building graphs and partitions from edge tables."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from .errors import InvalidIndexError, InvalidWeightError
from .shortest_path import Edge
from .structures import DisjointSet

logger = logging.getLogger(__name__)


@dataclass
class EdgeFrameConfig:
    """Column names and direction used to read an edge table."""

    source_column: str = "source"
    target_column: str = "target"
    weight_column: str = "weight"
    directed: bool = True


def _require_columns(frame: pd.DataFrame, columns: Sequence[str]) -> None:
    for column in columns:
        if column not in frame.columns:
            raise KeyError(f"Column '{column}' not found in dataframe")


def _node_column(frame: pd.DataFrame, column: str) -> np.ndarray:
    values = frame[column].to_numpy()
    if values.dtype.kind in "iu":
        return values.astype(np.int64)
    if values.dtype.kind == "b":
        raise TypeError(f"Column '{column}' holds booleans, expected integer node indices")

    numeric = values.astype(np.float64)
    fractional = np.flatnonzero(~np.isfinite(numeric) | (numeric != np.floor(numeric)))
    if fractional.size:
        raise TypeError(
            f"Column '{column}' holds non-integer node index {values[fractional[0]]!r}"
        )
    return numeric.astype(np.int64)


def _endpoints(
    frame: pd.DataFrame,
    config: EdgeFrameConfig,
    upper: Optional[int],
) -> Tuple[np.ndarray, np.ndarray, int]:
    sources = _node_column(frame, config.source_column)
    targets = _node_column(frame, config.target_column)
    if upper is None:
        upper = int(max(sources.max(), targets.max())) + 1 if len(frame) else 0

    for values in (sources, targets):
        bad = np.flatnonzero((values < 0) | (values >= upper))
        if bad.size:
            raise InvalidIndexError(int(values[bad[0]]), upper, "node")
    return sources, targets, upper


def adjacency_from_frame(
    frame: pd.DataFrame,
    node_count: Optional[int] = None,
    config: Optional[EdgeFrameConfig] = None,
) -> List[List[Edge]]:
    """Return an adjacency list of ``(neighbor, weight)`` pairs for ``frame``.

    ``node_count`` defaults to one more than the largest endpoint.
    """

    config = config or EdgeFrameConfig()
    _require_columns(frame, (config.source_column, config.target_column, config.weight_column))
    sources, targets, node_count = _endpoints(frame, config, node_count)

    weights = frame[config.weight_column].to_numpy()
    invalid = np.flatnonzero(~(weights >= 0))
    if invalid.size:
        row = invalid[0]
        raise InvalidWeightError(int(sources[row]), int(targets[row]), weights.tolist()[row])

    adjacency: List[List[Edge]] = [[] for _ in range(node_count)]
    for source, target, weight in zip(sources.tolist(), targets.tolist(), weights.tolist()):
        adjacency[source].append((target, weight))
        if not config.directed:
            adjacency[target].append((source, weight))
    logger.debug("Built adjacency with %d nodes from %d rows", node_count, len(frame))
    return adjacency


def disjoint_set_from_frame(
    frame: pd.DataFrame,
    n: Optional[int] = None,
    config: Optional[EdgeFrameConfig] = None,
    union_strategy: str = "rank",
) -> DisjointSet:
    """Union the endpoints of every row of ``frame``.

    ``n`` is the largest element index and defaults to the largest endpoint.
    """

    config = config or EdgeFrameConfig()
    _require_columns(frame, (config.source_column, config.target_column))
    sources, targets, upper = _endpoints(frame, config, None if n is None else n + 1)
    if n is None:
        # An empty frame still gives the single element 0.
        n = max(upper - 1, 0)

    dset = DisjointSet(n, union_strategy=union_strategy)
    for source, target in zip(sources.tolist(), targets.tolist()):
        dset.union(source, target)
    logger.debug("Merged %d rows into %d components", len(frame), dset.component_count)
    return dset


def components_frame(dset: DisjointSet) -> pd.DataFrame:
    """Return one row per element with its component root and component size."""

    elements = np.arange(len(dset))
    roots = np.fromiter((dset.find(index) for index in elements), dtype=np.int64, count=len(dset))
    sizes = np.asarray(dset.size, dtype=np.int64)[roots]
    return pd.DataFrame({"element": elements, "component": roots, "component_size": sizes})
