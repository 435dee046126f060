"""Disjoint-set forest with path compression and union by rank."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


class ElementNotFoundError(IndexError):
    """Raised when an element id is outside the current store."""

    def __init__(self, element: int, size: int) -> None:
        super().__init__(f"element {element} not in store of size {size}")
        self.element = element
        self.size = size


@dataclass
class DisjointSet:
    """Union-find structure over the dense ids ``0..size``.

    Each id owns a slot in the parallel ``parent`` and ``rank`` lists. An
    id is a root when it is its own parent; rank is only read at roots.
    The store is not thread-safe: guard the whole object with one lock if
    it is shared.
    """

    size: int
    parent: List[int] = field(init=False, repr=False)
    rank: List[int] = field(init=False, repr=False)
    set_count: int = field(init=False)

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("size must be non-negative")
        self.parent = list(range(self.size))
        self.rank = [0] * self.size
        self.set_count = self.size

    def __len__(self) -> int:
        return len(self.parent)

    def fresh(self) -> int:
        """Append a new singleton element and return its id."""

        element = len(self.parent)
        self.parent.append(element)
        self.rank.append(0)
        self.size = element + 1
        self.set_count += 1
        return element

    def find(self, element: int) -> int:
        """Return the representative of the set containing `element`."""

        self._check(element)
        rep = element
        while self.parent[rep] != rep:
            rep = self.parent[rep]

        current = element
        while current != rep:
            following = self.parent[current]
            self.parent[current] = rep
            current = following
        return rep

    def union(self, left: int, right: int) -> int:
        """Merge the sets of `left` and `right` and return the surviving root."""

        self._check(left)
        self._check(right)
        root_left = self.find(left)
        root_right = self.find(right)
        if root_left == root_right:
            return root_left

        rank_left = self.rank[root_left]
        rank_right = self.rank[root_right]
        self.set_count -= 1
        if rank_left > rank_right:
            self.parent[root_right] = root_left
            return root_left
        # Ties attach the left root under the right one.
        self.parent[root_left] = root_right
        if rank_left == rank_right:
            self.rank[root_right] += 1
        return root_right

    def connected(self, left: int, right: int) -> bool:
        self._check(left)
        self._check(right)
        return self.find(left) == self.find(right)

    def is_root(self, element: int) -> bool:
        self._check(element)
        return self.parent[element] == element

    def _check(self, element: int) -> None:
        if not 0 <= element < len(self.parent):
            raise ElementNotFoundError(element, len(self.parent))
