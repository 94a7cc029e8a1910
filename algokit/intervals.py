"""Interval dynamic programming: balloons and leaf-value trees."""

from __future__ import annotations

from collections.abc import Iterable


def max_coins(nums: Iterable[int]) -> int:
    """Most coins collected by bursting every balloon in the best order."""
    values = [1, *nums, 1]
    n = len(values) - 2
    best = [[0] * (n + 2) for _ in range(n + 2)]
    for start in range(n, 0, -1):
        for end in range(start, n + 1):
            outer = values[start - 1] * values[end + 1]
            best[start][end] = max(
                outer * values[last] + best[start][last - 1] + best[last + 1][end]
                for last in range(start, end + 1)
            )
    return best[1][n] if n >= 1 else 0


def mct_from_leaf_values(arr: Iterable[int]) -> int:
    """Smallest sum of non-leaf nodes over trees whose in-order leaves are ``arr``.

    Each non-leaf node holds the product of the largest leaf in each subtree.
    """
    leaves = list(arr)
    n = len(leaves)
    if n == 0:
        raise ValueError("arr must not be empty")
    largest = [[0] * n for _ in range(n)]
    for i in range(n):
        largest[i][i] = leaves[i]
        for j in range(i + 1, n):
            largest[i][j] = max(largest[i][j - 1], leaves[j])
    cost = [[0] * n for _ in range(n)]
    for s in reversed(range(n)):
        for e in range(s + 1, n):
            cost[s][e] = min(
                largest[s][i] * largest[i + 1][e] + cost[s][i] + cost[i + 1][e]
                for i in range(s, e)
            )
    return cost[0][n - 1]