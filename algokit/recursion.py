"""Small recursive classics: factorials, sums, powers, searches and enumerations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence


def factorial(n: int) -> int:
    """n! for a non-negative ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def fib(n: int) -> int:
    """The n-th Fibonacci number, with fib(0) = 0 and fib(1) = 1."""
    if n < 0:
        raise ValueError("n must not be negative")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def get_sum(n: int) -> int:
    """Sum of the integers 1..n, for ``n`` at least 1."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return sum(range(1, n + 1))


def pow2(n: int) -> int:
    """Two raised to a non-negative power ``n``."""
    if n < 0:
        raise ValueError("n must not be negative")
    return 1 << n


def search(arr: Iterable[int], target: int) -> bool:
    """Whether ``target`` occurs in ``arr``."""
    return any(value == target for value in arr)


def last_occurrence(s: str, ch: str) -> int:
    """Index of the last ``ch`` in ``s``, or -1 if absent."""
    if len(ch) != 1:
        raise ValueError("ch must be a single character")
    return s.rfind(ch)


def is_palindrome(s: str) -> bool:
    """Whether ``s`` reads the same backwards."""
    i, j = 0, len(s) - 1
    while i < j:
        if s[i] != s[j]:
            return False
        i += 1
        j -= 1
    return True


def subsequences(s: str) -> Iterator[str]:
    """Yield every subsequence of ``s``, choosing to include each character first.

    The whole string comes first and the empty string last.
    """

    def choose(i: int, chosen: str) -> Iterator[str]:
        if i == len(s):
            yield chosen
            return
        yield from choose(i + 1, chosen + s[i])
        yield from choose(i + 1, chosen)

    yield from choose(0, "")


def subarrays(nums: Sequence[int]) -> Iterator[list[int]]:
    """Yield every non-empty contiguous slice, by start then by end."""
    values = list(nums)
    for start in range(len(values)):
        for end in range(start + 1, len(values) + 1):
            yield values[start:end]