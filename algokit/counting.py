"""Counting ways and minimal costs over sequences of choices."""

from __future__ import annotations

from collections.abc import Sequence

MOD = 1_000_000_007


def num_rolls_to_target(n: int, k: int, target: int) -> int:
    """Ways ``n`` dice with faces 1..k sum to ``target``, modulo 1e9+7."""
    if n < 0 or k < 0:
        raise ValueError("n and k must not be negative")
    if target < 0:
        return 0
    ways = [1] + [0] * target
    for _ in range(n):
        following = [0] * (target + 1)
        for total in range(1, target + 1):
            following[total] = (
                sum(ways[total - face] for face in range(1, min(k, total) + 1)) % MOD
            )
        ways = following
    return ways[target]


def count_ways(n: int, k: int) -> int:
    """Ways to paint ``n`` fence posts in ``k`` colours with no three alike in a row."""
    if n < 1:
        raise ValueError("n must be at least 1")
    if n == 1:
        return k
    before, last = k, k + k * (k - 1)
    for _ in range(3, n + 1):
        before, last = last, (k - 1) * (last + before)
    return last


def mincost_tickets(days: Sequence[int], costs: Sequence[int]) -> int:
    """Cheapest way to cover all travel ``days`` with 1-, 7- and 30-day passes.

    ``days`` must be in increasing order; ``costs`` gives the three pass prices.
    """
    if len(costs) != 3:
        raise ValueError("costs must give exactly three pass prices")
    day_list = list(days)
    n = len(day_list)
    cheapest = [0] * (n + 1)
    for i in reversed(range(n)):
        options = []
        for duration, price in zip((1, 7, 30), costs):
            last_day = day_list[i] + duration - 1
            j = i + 1
            while j < n and day_list[j] <= last_day:
                j += 1
            options.append(price + cheapest[j])
        cheapest[i] = min(options)
    return cheapest[0]