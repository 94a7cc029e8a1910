"""Pattern matching and dictionary segmentation of strings."""

from __future__ import annotations

from collections.abc import Iterable


def regex_match(s: str, p: str) -> bool:
    """Whether pattern ``p`` (with ``.`` and ``*``) matches all of ``s``."""
    m, n = len(s), len(p)
    below: list[bool] = [False] * (n + 2)
    for i in reversed(range(m + 1)):
        row = [False] * (n + 2)
        row[n] = i == m
        for j in reversed(range(n)):
            here = i < m and p[j] in (".", s[i])
            if j + 1 < n and p[j + 1] == "*":
                row[j] = row[j + 2] or (here and below[j])
            else:
                row[j] = here and below[j + 1]
        below = row
    return below[0]


def wildcard_match(s: str, p: str) -> bool:
    """Whether pattern ``p`` (with ``?`` and ``*``) matches all of ``s``."""
    m, n = len(s), len(p)
    # Row for the exhausted string: only a run of stars matches it.
    below = [False] * (n + 1)
    below[n] = True
    for j in reversed(range(n)):
        below[j] = p[j] == "*" and below[j + 1]
    for i in reversed(range(m)):
        row = [False] * (n + 1)
        for j in reversed(range(n)):
            if p[j] == "?" or p[j] == s[i]:
                row[j] = below[j + 1]
            elif p[j] == "*":
                row[j] = below[j] or row[j + 1]
        below = row
    return below[0]


def word_break(s: str, word_dict: Iterable[str]) -> bool:
    """Whether ``s`` splits into a sequence of dictionary words."""
    words = set(word_dict)
    n = len(s)
    breakable = [False] * n + [True]
    for start in reversed(range(n)):
        breakable[start] = any(
            breakable[end] for end in range(start + 1, n + 1) if s[start:end] in words
        )
    return breakable[0]


def word_break_all(s: str, word_dict: Iterable[str]) -> list[str]:
    """Every way to split ``s`` into dictionary words, as space-joined sentences.

    An empty ``s`` gives a single empty sentence.
    """
    words = set(word_dict)
    n = len(s)
    sentences: list[list[str]] = [[] for _ in range(n)] + [[""]]
    for start in reversed(range(n)):
        found = []
        for end in range(start + 1, n + 1):
            word = s[start:end]
            if word not in words:
                continue
            for rest in sentences[end]:
                found.append(f"{word} {rest}" if rest else word)
        sentences[start] = found
    return sentences[0]