"""Two-player optimal-play games and the guessing game cost."""

from __future__ import annotations

import math
from collections.abc import Sequence


def predict_the_winner(nums: Sequence[int]) -> bool:
    """Whether the first player, taking from either end, scores at least as much."""
    values = list(nums)
    if not values:
        raise ValueError("nums must not be empty")
    n = len(values)
    diff = values[:]
    for length in range(2, n + 1):
        diff = [
            max(values[start] - diff[start + 1], values[start + length - 1] - diff[start])
            for start in range(n - length + 1)
        ]
    return diff[0] >= 0


def stone_game_ii(piles: Sequence[int]) -> int:
    """Most stones Alice can get when each turn takes 1..2M leading piles."""
    values = list(piles)
    n = len(values)
    if n == 0:
        return 0
    # best[i][m] = (result when Bob moves, result when Alice moves)
    best = [[(0, 0)] * (n + 1) for _ in range(n + 1)]
    for i in reversed(range(n)):
        for m in range(1, n + 1):
            alice = -math.inf
            bob = math.inf
            total = 0
            for x in range(1, min(2 * m, n - i) + 1):
                total += values[i + x - 1]
                after = best[i + x][max(x, m)]
                alice = max(alice, total + after[0])
                bob = min(bob, after[1])
            best[i][m] = (bob, alice)
    return best[0][1][1]


def stone_game_iii(stone_value: Sequence[int]) -> str:
    """Winner of the take-one-to-three game: "Alice", "Bob" or "Tie"."""
    values = list(stone_value)
    n = len(values)
    lead = [0] * (n + 1)
    for i in reversed(range(n)):
        best = -math.inf
        total = 0
        for x in range(1, min(3, n - i) + 1):
            total += values[i + x - 1]
            best = max(best, total - lead[i + x])
        lead[i] = best
    if lead[0] > 0:
        return "Alice"
    if lead[0] < 0:
        return "Bob"
    return "Tie"


def get_money_amount(n: int) -> int:
    """Least money that guarantees a win when guessing a number in 1..n."""
    if n < 0:
        raise ValueError("n must not be negative")
    cost = [[0] * (n + 2) for _ in range(n + 2)]
    for length in range(1, n):
        for start in range(1, n - length + 1):
            end = start + length
            cost[start][end] = min(
                guess + max(cost[guess + 1][end], cost[start][guess - 1])
                for guess in range(start, end)
            )
    return cost[1][n] if n >= 1 else 0