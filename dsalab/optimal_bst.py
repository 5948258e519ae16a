"""Optimal binary search tree from key and gap access probabilities."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any


def weight(i: int, j: int, p: Sequence[float], q: Sequence[float]) -> float:
    """Total probability of keys ``i+1..j`` and gaps ``i..j``."""
    if j < i:
        raise ValueError(f"empty range: j={j} is less than i={i}")
    return q[i] + sum(p[k] + q[k] for k in range(i + 1, j + 1))


@dataclass
class OptimalBST:
    """Result of the optimal BST computation.

    ``roots[(i, j)]`` is the 1-based position of the key chosen as the root
    of the subtree holding keys ``i+1..j``.
    """

    keys: tuple[Any, ...]
    cost: float
    roots: dict[tuple[int, int], int] = field(default_factory=dict)

    def root_key(self) -> Any:
        """Key at the root of the whole tree."""
        if not self.keys:
            raise ValueError("the tree has no keys")
        return self.keys[self.roots[(0, len(self.keys))] - 1]

    def _describe(self, i: int, j: int) -> Iterator[str]:
        if i == j:
            return
        root = self.roots[(i, j)]
        parent = self.keys[root - 1]
        if i != root - 1:
            yield f"Left child of {parent}: {self.keys[self.roots[(i, root - 1)] - 1]}"
        else:
            yield f"Left child of {parent}: Null"
        if root != j:
            yield f"right child of {parent}: {self.keys[self.roots[(root, j)] - 1]}"
        else:
            yield f"right child of {parent}: Null"
        yield ""
        yield from self._describe(i, root - 1)
        yield from self._describe(root, j)

    def describe_tree(self) -> str:
        """Left and right child of every node, in pre-order."""
        return "".join(line + "\n" for line in self._describe(0, len(self.keys)))


def optimal_bst(
    keys: Sequence[Any], p: Sequence[float], q: Sequence[float]
) -> OptimalBST:
    """Build the minimum expected-cost search tree for ``keys``.

    ``p[k]`` (for ``k`` in ``1..n``) is the probability of searching key
    ``k``; ``q[k]`` (for ``k`` in ``0..n``) that of a search falling in the
    gap after key ``k``. ``p[0]`` is unused.
    """
    keys = tuple(keys)
    n = len(keys)
    if len(p) != n + 1 or len(q) != n + 1:
        raise ValueError(f"p and q must each hold {n + 1} probabilities")

    cost: dict[tuple[int, int], float] = {(i, i): 0.0 for i in range(n + 1)}
    roots: dict[tuple[int, int], int] = {}
    for length in range(1, n + 1):
        for i in range(n - length + 1):
            j = i + length
            best = math.inf
            best_root = j
            for r in range(j, i, -1):
                candidate = cost[(i, r - 1)] + cost[(r, j)]
                if candidate < best:
                    best, best_root = candidate, r
            cost[(i, j)] = best + weight(i, j, p, q)
            roots[(i, j)] = best_root
    return OptimalBST(keys, cost[(0, n)], roots)