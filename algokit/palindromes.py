"""Palindromic substrings."""

from __future__ import annotations

from collections.abc import Iterator


def _centred(s: str) -> Iterator[tuple[int, int]]:
    """Yield (start, end) of the widest palindrome around each centre, in order."""
    n = len(s)
    for centre in range(n):
        for left, right in ((centre, centre), (centre, centre + 1)):
            while left >= 0 and right < n and s[left] == s[right]:
                left -= 1
                right += 1
            yield left + 1, right


def longest_palindrome(s: str) -> str:
    """The leftmost longest palindromic substring of ``s``."""
    if not s:
        return ""
    start, end = max(_centred(s), key=lambda span: span[1] - span[0])
    return s[start:end]