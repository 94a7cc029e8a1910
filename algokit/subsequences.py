"""Longest-subsequence problems over numbers, boxes and envelopes."""

from __future__ import annotations

from bisect import bisect_left
from collections.abc import Iterable, Iterator, Sequence


def _lis_lengths(values: Sequence[int]) -> list[int]:
    """For each position, the length of the longest strictly increasing
    subsequence that ends there, found by patience sorting."""
    tails: list[int] = []
    lengths = []
    for value in values:
        index = bisect_left(tails, value)
        if index == len(tails):
            tails.append(value)
        else:
            tails[index] = value
        lengths.append(index + 1)
    return lengths


def length_of_lis(nums: Iterable[int]) -> int:
    """Length of the longest strictly increasing subsequence."""
    values = list(nums)
    if not values:
        raise ValueError("nums must not be empty")
    return max(_lis_lengths(values))


def increasing_subsequences(nums: Iterable[int]) -> Iterator[list[int]]:
    """Yield every strictly increasing subsequence of two or more elements.

    Subsequences come in depth-first order: each one is followed by its
    extensions before the next element is tried.
    """
    values = list(nums)

    def extend(prefix: list[int], start: int) -> Iterator[list[int]]:
        if len(prefix) > 1:
            yield list(prefix)
        for index in range(start, len(values)):
            value = values[index]
            if not prefix or value > prefix[-1]:
                yield from extend(prefix + [value], index + 1)

    yield from extend([], 0)


def minimum_mountain_removals(nums: Iterable[int]) -> int:
    """Fewest removals that leave a mountain array, or 0 if none can be formed."""
    values = list(nums)
    rising = _lis_lengths(values)
    falling = _lis_lengths(values[::-1])[::-1]
    mountains = [
        up + down - 1 for up, down in zip(rising, falling) if up > 1 and down > 1
    ]
    if not mountains:
        return 0
    return len(values) - max(mountains)


def max_envelopes(envelopes: Iterable[Sequence[int]]) -> int:
    """Most envelopes that fit one inside another (both sides strictly smaller)."""
    ordered = sorted(((w, h) for w, h in envelopes), key=lambda e: (e[0], -e[1]))
    if not ordered:
        return 0
    return max(_lis_lengths([height for _, height in ordered]))


def max_height(cuboids: Iterable[Sequence[int]]) -> int:
    """Tallest stack of cuboids, each rotatable, none larger than the one below."""
    boxes = []
    for cuboid in cuboids:
        if len(cuboid) != 3:
            raise ValueError("every cuboid needs exactly three dimensions")
        boxes.append(sorted(cuboid))
    boxes.sort()
    best: list[int] = []
    for box in boxes:
        below = max(
            (
                height
                for other, height in zip(boxes, best)
                if all(a <= b for a, b in zip(other, box))
            ),
            default=0,
        )
        best.append(box[2] + below)
    return max(best, default=0)


def len_longest_fib_subseq(arr: Sequence[int]) -> int:
    """Length of the longest Fibonacci-like subsequence, or 0 if none has 3 terms."""
    values = list(arr)
    position = {value: index for index, value in enumerate(values)}
    length: dict[tuple[int, int], int] = {}
    longest = 0
    for k, last in enumerate(values):
        for j in range(k):
            i = position.get(last - values[j])
            if i is not None and i < j:
                run = length[(i, j)] + 1
            else:
                run = 2
            length[(j, k)] = run
            if j >= 1 and run >= 3:
                longest = max(longest, run)
    return longest