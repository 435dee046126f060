"""Graph algorithms built on :class:`DisjointSet`."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from .structures import DisjointSet, ElementNotFoundError

Edge = Tuple[int, int]
WeightedEdge = Tuple[int, int, float]


def grow_to(clusters: DisjointSet, element: int) -> None:
    """Add fresh elements until `element` is a valid id of `clusters`."""

    if element < 0:
        raise ElementNotFoundError(element, len(clusters))
    while len(clusters) <= element:
        clusters.fresh()


def component_labels(node_count: int, edges: Iterable[Edge]) -> np.ndarray:
    """Return the representative id of every node once all `edges` are merged.

    Endpoints at or beyond `node_count` extend the node range.
    """

    clusters = DisjointSet(node_count)
    for left, right in edges:
        grow_to(clusters, max(left, right))
        clusters.union(left, right)
    return np.fromiter((clusters.find(i) for i in range(len(clusters))), dtype=np.int64, count=len(clusters))


def spanning_forest(node_count: int, weighted_edges: Sequence[WeightedEdge]) -> List[WeightedEdge]:
    """Return a minimum spanning forest using Kruskal's algorithm.

    Edges of equal weight are considered in input order.
    """

    clusters = DisjointSet(node_count)
    if len(weighted_edges) == 0:
        return []
    weights = np.asarray([weight for _, _, weight in weighted_edges], dtype=float)
    forest: List[WeightedEdge] = []
    for index in np.argsort(weights, kind="stable"):
        left, right, weight = weighted_edges[int(index)]
        # Rows of a float array carry their endpoints as floats.
        left, right, weight = int(left), int(right), float(weight)
        grow_to(clusters, max(left, right))
        if clusters.connected(left, right):
            continue
        clusters.union(left, right)
        forest.append((left, right, weight))
    return forest


def find_cycle_edge(node_count: int, edges: Iterable[Edge]) -> Optional[Edge]:
    """Return the first edge that closes a cycle, or None if `edges` form a forest."""

    clusters = DisjointSet(node_count)
    for left, right in edges:
        grow_to(clusters, max(left, right))
        if clusters.connected(left, right):
            return left, right
        clusters.union(left, right)
    return None


__all__ = [
    "Edge",
    "WeightedEdge",
    "component_labels",
    "find_cycle_edge",
    "grow_to",
    "spanning_forest",
]
