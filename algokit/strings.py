"""String manipulation problems: sorting, decoding, cleaning and counting."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import accumulate
from string import ascii_lowercase


def custom_sort_string(order: str, s: str) -> str:
    """Rearrange ``s`` so its characters follow their order in ``order``.

    Characters missing from ``order`` go last, keeping their relative order.
    """
    rank: dict[str, int] = {}
    for index, ch in enumerate(order):
        rank.setdefault(ch, index)
    unknown = len(order)
    return "".join(sorted(s, key=lambda ch: rank.get(ch, unknown)))


def num_decodings(s: str) -> int:
    """Number of ways to decode a digit string where 'A'..'Z' are 1..26."""
    n = len(s)
    ways = [0] * n + [1, 0]
    for i in reversed(range(n)):
        if s[i] == "0":
            ways[i] = 0
            continue
        total = ways[i + 1]
        if i + 1 < n and (s[i] == "1" or (s[i] == "2" and s[i + 1] <= "6")):
            total += ways[i + 2]
        ways[i] = total
    return ways[0]


def decode_message(key: str, message: str) -> str:
    """Decode ``message`` with the substitution table given by ``key``.

    The first appearance of each character in ``key`` is mapped to the next
    letter of the alphabet; spaces stay spaces.  Characters the table does
    not cover decode to ``"\\0"``.
    """
    mapping = {" ": " "}
    letters = iter(ascii_lowercase)
    for ch in key:
        if ch in mapping:
            continue
        letter = next(letters, None)
        if letter is None:
            break
        mapping[ch] = letter
    return "".join(mapping.get(ch, "\0") for ch in message)


def _shape(word: str) -> tuple[int, ...]:
    """Canonical form of a word: each position labelled by its character's last index."""
    last = {ch: index for index, ch in enumerate(word)}
    return tuple(last[ch] for ch in word)


def find_and_replace_pattern(words: Iterable[str], pattern: str) -> list[str]:
    """Words that match ``pattern`` under a one-to-one letter substitution."""
    target = _shape(pattern)
    return [word for word in words if _shape(word) == target]


def garbage_collection(garbage: Sequence[str], travel: Sequence[int]) -> int:
    """Minutes the three trucks (P, M, G) need to collect all the garbage.

    Each unit takes a minute to pick up; ``travel[i]`` is the time from house
    ``i`` to house ``i + 1``.  Anything other than 'P' or 'M' counts as 'G'.
    """
    last_house = {"P": 0, "M": 0, "G": 0}
    picks = 0
    for house, load in enumerate(garbage):
        picks += len(load)
        for ch in load:
            last_house[ch if ch in ("P", "M") else "G"] = house
    prefix = list(accumulate(travel, initial=0))
    if max(last_house.values()) >= len(prefix):
        raise ValueError("travel does not reach every house with garbage")
    return picks + sum(prefix[house] for house in last_house.values())


def _expand(s: str, left: int, right: int) -> int:
    """Count palindromes found by growing outwards from one centre."""
    count = 0
    while left >= 0 and right < len(s) and s[left] == s[right]:
        count += 1
        left -= 1
        right += 1
    return count


def count_substrings(s: str) -> int:
    """Number of palindromic substrings of ``s``, counted by position."""
    return sum(_expand(s, k, k) + _expand(s, k, k + 1) for k in range(len(s)))


def remove_duplicates(s: str) -> str:
    """Repeatedly remove pairs of equal adjacent characters."""
    stack: list[str] = []
    for ch in s:
        if stack and stack[-1] == ch:
            stack.pop()
        else:
            stack.append(ch)
    return "".join(stack)


def remove_k_duplicates(s: str, k: int) -> str:
    """Repeatedly remove runs of ``k`` equal adjacent characters."""
    if k < 1:
        raise ValueError("k must be at least 1")
    kept: list[str] = []
    for ch in s:
        if len(kept) < k - 1:
            kept.append(ch)
            continue
        cut = len(kept) - (k - 1)
        if all(c == ch for c in kept[cut:]):
            del kept[cut:]
        else:
            kept.append(ch)
    return "".join(kept)


def remove_occurrences(s: str, part: str) -> str:
    """Remove the leftmost occurrence of ``part`` until none is left."""
    if not part:
        raise ValueError("part must not be empty")
    while part in s:
        s = s.replace(part, "", 1)
    return s


def reverse_words(s: str) -> str:
    """The space-separated words of ``s`` in reverse order, single-spaced."""
    words = [word for word in s.split(" ") if word]
    if not words:
        raise ValueError("s must contain at least one word")
    return " ".join(reversed(words))


def beauty_sum(s: str) -> int:
    """Sum over all substrings of the gap between the most and least frequent letter.

    Only the letters 'a' to 'z' are counted.
    """
    total = 0
    for i in range(len(s)):
        counts: Counter[str] = Counter()
        for ch in s[i:]:
            if "a" <= ch <= "z":
                counts[ch] += 1
            if counts:
                frequencies = counts.values()
                total += max(frequencies) - min(frequencies)
    return total


def _is_palindrome(s: str, i: int, j: int) -> bool:
    part = s[i : j + 1]
    return part == part[::-1]


def valid_palindrome(s: str) -> bool:
    """Whether ``s`` becomes a palindrome after deleting at most one character."""
    i, j = 0, len(s) - 1
    while i <= j:
        if s[i] != s[j]:
            return _is_palindrome(s, i + 1, j) or _is_palindrome(s, i, j - 1)
        i += 1
        j -= 1
    return True