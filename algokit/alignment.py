"""Dynamic-programming problems that compare two or three strings."""

from __future__ import annotations


def longest_common_subsequence(text1: str, text2: str) -> int:
    """Length of the longest subsequence common to both strings."""
    width = len(text2)
    below = [0] * (width + 1)
    for a in reversed(text1):
        row = [0] * (width + 1)
        for j in reversed(range(width)):
            if a == text2[j]:
                row[j] = below[j + 1] + 1
            else:
                row[j] = max(below[j], row[j + 1])
        below = row
    return below[0]


def num_distinct(s: str, t: str) -> int:
    """Number of distinct subsequences of ``s`` that equal ``t``."""
    # ways[j] counts the ways the current suffix of s produces t[j:].
    ways = [0] * len(t) + [1]
    for ch in reversed(s):
        for j, target in enumerate(t):
            if ch == target:
                ways[j] += ways[j + 1]
    return ways[0]


def is_interleave(s1: str, s2: str, s3: str) -> bool:
    """Whether ``s3`` is an interleaving of ``s1`` and ``s2``."""
    n1, n2 = len(s1), len(s2)
    if n1 + n2 != len(s3):
        return False
    # below[j]: s1[i+1:] and s2[j:] interleave into s3[i+1+j:].
    below = [False] * (n2 + 1)
    for i in reversed(range(n1 + 1)):
        row = [False] * (n2 + 1)
        for j in reversed(range(n2 + 1)):
            if i == n1 and j == n2:
                row[j] = True
                continue
            k = i + j
            from_first = i < n1 and s1[i] == s3[k] and below[j]
            from_second = j < n2 and s2[j] == s3[k] and row[j + 1]
            row[j] = from_first or from_second
        below = row
    return below[0]


def minimum_delete_sum(s1: str, s2: str) -> int:
    """Lowest sum of character codes deleted to make the strings equal."""
    width = len(s2)
    below = [0] * (width + 1)
    for j in reversed(range(width)):
        below[j] = ord(s2[j]) + below[j + 1]
    for a in reversed(s1):
        row = [0] * (width + 1)
        row[width] = ord(a) + below[width]
        for j in reversed(range(width)):
            if a == s2[j]:
                row[j] = below[j + 1]
            else:
                row[j] = min(ord(a) + below[j], ord(s2[j]) + row[j + 1])
        below = row
    return below[0]


def min_insertions(s: str) -> int:
    """Fewest character insertions that turn ``s`` into a palindrome."""
    return len(s) - longest_common_subsequence(s, s[::-1])