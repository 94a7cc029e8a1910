"""Knapsack-style counting and optimisation problems."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable


def coin_change(coins: Iterable[int], amount: int) -> int:
    """Fewest coins that make up ``amount``, or -1 if it cannot be made."""
    if amount < 0:
        raise ValueError("amount must not be negative")
    denominations = list(coins)
    if any(coin <= 0 for coin in denominations):
        raise ValueError("every coin must be positive")
    fewest: list[float] = [0] + [math.inf] * amount
    for amt in range(1, amount + 1):
        fewest[amt] = min(
            (fewest[amt - coin] + 1 for coin in denominations if coin <= amt),
            default=math.inf,
        )
    result = fewest[amount]
    return -1 if result == math.inf else int(result)


def find_max_form(strs: Iterable[str], m: int, n: int) -> int:
    """Size of the largest subset of ``strs`` with at most ``m`` zeros and ``n`` ones.

    Every character other than ``"0"`` counts as a one.
    """
    if m < 0 or n < 0:
        raise ValueError("m and n must not be negative")
    best = [[0] * (n + 1) for _ in range(m + 1)]
    for text in strs:
        zeros = text.count("0")
        ones = len(text) - zeros
        for i in range(m, zeros - 1, -1):
            row, source = best[i], best[i - zeros]
            for j in range(n, ones - 1, -1):
                row[j] = max(row[j], source[j - ones] + 1)
    return best[m][n]


def can_partition(nums: Iterable[int]) -> bool:
    """Whether the values split into two groups of equal sum."""
    values = list(nums)
    if any(value < 0 for value in values):
        raise ValueError("values must not be negative")
    total = sum(values)
    if total % 2:
        return False
    target = total // 2
    # Bit s of ``reachable`` is set when some subset sums to s.
    reachable = 1
    for value in values:
        reachable |= reachable << value
    return bool((reachable >> target) & 1)


def find_target_sum_ways(nums: Iterable[int], target: int) -> int:
    """Number of ways to sign each value with + or - so they sum to ``target``."""
    ways: Counter[int] = Counter({0: 1})
    for value in nums:
        following: Counter[int] = Counter()
        for total, count in ways.items():
            following[total + value] += count
            following[total - value] += count
        ways = following
    return ways[target]


def num_squares(n: int) -> int:
    """Least number of perfect squares that sum to ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    fewest = [0] * (n + 1)
    for i in range(1, n + 1):
        fewest[i] = 1 + min(fewest[i - root * root] for root in range(1, math.isqrt(i) + 1))
    return fewest[n]