"""Disjoint sets with union by rank and path compression."""

from __future__ import annotations

import threading


class DisjointSet:
    """A partition of the integers 0 .. size-1 into disjoint sets."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must not be negative: {size}")
        self._parent = list(range(size))
        self._rank = [0] * size
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, x: int) -> int:
        """Return the representative of x's set, compressing the path to it."""
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element out of range: {x}")
        parent = self._parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of x and y; return whether they were separate.

        The root of lower rank is attached below the other; on equal ranks
        y's root goes below x's root.
        """
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False
        rank = self._rank
        if rank[root_x] < rank[root_y]:
            self._parent[root_x] = root_y
        elif rank[root_x] > rank[root_y]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            rank[root_x] += 1
        return True

    def union_locked(self, x: int, y: int) -> bool:
        """Like union, but safe to call from several threads at once."""
        with self._lock:
            return self.union(x, y)

    def groups(self) -> list[list[int]]:
        """Return the sets ordered by representative, members ascending."""
        buckets: dict[int, list[int]] = {}
        for element in range(len(self._parent)):
            buckets.setdefault(self.find(element), []).append(element)
        return [buckets[root] for root in sorted(buckets)]