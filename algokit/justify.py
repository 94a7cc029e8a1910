"""Full text justification."""

from __future__ import annotations

from collections.abc import Iterable


def _justify(line: list[str], extra: int) -> str:
    """Spread ``extra`` spaces between the words, leftmost gaps first."""
    gaps = len(line) - 1
    if gaps == 0:
        return line[0] + " " * extra
    even, remainder = divmod(extra, gaps)
    padded = [
        word + " " * (even + (1 if index < remainder else 0))
        for index, word in enumerate(line[:-1])
    ]
    return "".join(padded) + line[-1]


def full_justify(words: Iterable[str], max_width: int) -> list[str]:
    """Lay out ``words`` in lines exactly ``max_width`` wide.

    Lines are packed greedily; all but the last are fully justified, with
    single-word lines and the last line left-justified.
    """
    items = list(words)
    if not items:
        raise ValueError("words must not be empty")
    if max_width < 0:
        raise ValueError("max_width must not be negative")
    if any(len(word) > max_width for word in items):
        raise ValueError("every word must fit within max_width")

    lines: list[str] = []
    line: list[str] = []
    chars = 0
    for word in items:
        if line and chars + len(line) + len(word) > max_width:
            lines.append(_justify(line, max_width - chars))
            line, chars = [], 0
        line.append(word)
        chars += len(word)
    lines.append(" ".join(line).ljust(max_width))
    return lines