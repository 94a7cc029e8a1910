"""Array optimisation problems solved by dynamic programming."""

from __future__ import annotations

import math
from bisect import bisect_right
from collections.abc import Iterable, Sequence


def make_array_increasing(arr1: Iterable[int], arr2: Iterable[int]) -> int:
    """Fewest replacements from ``arr2`` that make ``arr1`` strictly increasing.

    Returns -1 when it cannot be done.
    """
    choices = sorted(arr2)
    # Maps the last value so far to the fewest replacements reaching it.
    states: dict[int, int] = {-1: 0}
    for value in arr1:
        following: dict[int, int] = {}
        for prev, ops in states.items():
            if prev < value:
                following[value] = min(following.get(value, ops), ops)
            index = bisect_right(choices, prev)
            if index < len(choices):
                replacement = choices[index]
                following[replacement] = min(
                    following.get(replacement, ops + 1), ops + 1
                )
        if not following:
            return -1
        states = following
    return min(states.values())


def min_swap(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Fewest same-index swaps that make both sequences strictly increasing."""
    if len(nums1) != len(nums2):
        raise ValueError("the sequences must have the same length")
    if not nums1:
        return 0
    keep, swap = 0, 1
    for (a0, b0), (a1, b1) in zip(zip(nums1, nums2), zip(nums1[1:], nums2[1:])):
        next_keep = next_swap = math.inf
        if a0 < a1 and b0 < b1:
            next_keep = keep
            next_swap = swap + 1
        if a0 < b1 and b0 < a1:
            next_keep = min(next_keep, swap)
            next_swap = min(next_swap, keep + 1)
        keep, swap = next_keep, next_swap
    best = min(keep, swap)
    if best == math.inf:
        raise ValueError("the sequences cannot be made strictly increasing")
    return int(best)


def rob(nums: Iterable[int]) -> int:
    """Largest sum of values with no two adjacent ones taken."""
    take_next = skip_next = 0
    for value in reversed(list(nums)):
        take_next, skip_next = max(value + skip_next, take_next), take_next
    return take_next


def max_satisfaction(satisfaction: Iterable[int]) -> int:
    """Largest like-time coefficient sum from cooking some of the dishes."""
    total = running = 0
    for value in sorted(satisfaction, reverse=True):
        running += value
        if running <= 0:
            break
        total += running
    return total