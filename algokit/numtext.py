"""Numbers as text: digit-string addition, English words, substring removal."""

from __future__ import annotations

from itertools import zip_longest

from algokit.strings import remove_occurrences

_WORDS = [
    (1_000_000_000, "Billion"),
    (1_000_000, "Million"),
    (1000, "Thousand"),
    (100, "Hundred"),
    (90, "Ninety"),
    (80, "Eighty"),
    (70, "Seventy"),
    (60, "Sixty"),
    (50, "Fifty"),
    (40, "Forty"),
    (30, "Thirty"),
    (20, "Twenty"),
    (19, "Nineteen"),
    (18, "Eighteen"),
    (17, "Seventeen"),
    (16, "Sixteen"),
    (15, "Fifteen"),
    (14, "Fourteen"),
    (13, "Thirteen"),
    (12, "Twelve"),
    (11, "Eleven"),
    (10, "Ten"),
    (9, "Nine"),
    (8, "Eight"),
    (7, "Seven"),
    (6, "Six"),
    (5, "Five"),
    (4, "Four"),
    (3, "Three"),
    (2, "Two"),
    (1, "One"),
]

_DIGITS = frozenset("0123456789")


def add_strings(num1: str, num2: str) -> str:
    """Sum of two non-negative decimal digit strings, as a digit string."""
    if not set(num1) <= _DIGITS or not set(num2) <= _DIGITS:
        raise ValueError("numbers must contain only decimal digits")
    digits = []
    carry = 0
    for a, b in zip_longest(reversed(num1), reversed(num2), fillvalue="0"):
        carry, digit = divmod(int(a) + int(b) + carry, 10)
        digits.append(str(digit))
    if carry:
        digits.append(str(carry))
    return "".join(reversed(digits))


def number_to_words(num: int) -> str:
    """English words for a non-negative integer, e.g. "One Hundred Five"."""
    if num < 0:
        raise ValueError("num must not be negative")
    if num == 0:
        return "Zero"
    for value, word in _WORDS:
        if num >= value:
            head = f"{number_to_words(num // value)} " if num >= 100 else ""
            rest = num % value
            tail = f" {number_to_words(rest)}" if rest else ""
            return head + word + tail
    return ""


def remove_all(s: str, part: str) -> str:
    """Remove the leftmost occurrence of ``part`` from ``s`` until none is left."""
    return remove_occurrences(s, part)