"""Weighted quick-union with path halving."""

from __future__ import annotations

from typing import Dict, List


class QuickUnion:
    """Union-find structure over the fixed universe ``0..n-1``.

    Each element points at a parent; an element pointing at itself is the
    root of its component. ``size[r]`` holds the number of elements under
    root ``r`` and is only meaningful while ``r`` is a root.

    Queries (:meth:`find`, :meth:`connected`, :meth:`component_size`,
    :meth:`components`) rewrite parent pointers while walking, so a shared
    instance needs every call serialised, not just :meth:`union`.

    Equality is identity: two instances are only equal when they are the
    same object.
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must be non-negative")
        self._n = n
        self.parent = list(range(n))
        self.size = [1] * n
        self._count = n

    def __repr__(self) -> str:
        return f"QuickUnion(n={self._n}, components={self._count})"

    def __len__(self) -> int:
        return self._n

    @property
    def n(self) -> int:
        """Size of the universe, fixed at construction."""

        return self._n

    def _check(self, index: int) -> None:
        if not 0 <= index < self.n:
            raise IndexError(f"index {index} out of range for {self.n} elements")

    def find(self, p: int) -> int:
        """Return the root of `p`, halving the path on the way up."""

        self._check(p)
        parent = self.parent
        while parent[p] != p:
            parent[p] = parent[parent[p]]
            p = parent[p]
        return p

    def union(self, p: int, q: int) -> int:
        """Merge the components of `p` and `q` and return the surviving root.

        The root of the smaller tree goes under the root of the larger one.
        On a tie the root of `q` goes under the root of `p`.
        """

        p_root = self.find(p)
        q_root = self.find(q)
        if p_root == q_root:
            return p_root

        size = self.size
        if size[q_root] > size[p_root]:
            p_root, q_root = q_root, p_root
        self.parent[q_root] = p_root
        size[p_root] += size[q_root]
        self._count -= 1
        return p_root

    def connected(self, p: int, q: int) -> bool:
        return self.find(p) == self.find(q)

    def component_count(self) -> int:
        return self._count

    def component_size(self, p: int) -> int:
        return self.size[self.find(p)]

    def components(self) -> Dict[int, List[int]]:
        """Return every component as ``root -> members`` in ascending order."""

        members: Dict[int, List[int]] = {}
        for index in range(self.n):
            members.setdefault(self.find(index), []).append(index)
        return members
