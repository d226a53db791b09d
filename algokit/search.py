"""Brute-force substring search."""

from __future__ import annotations

__all__ = ["bf_match"]


def bf_match(text: str, pattern: str) -> int:
    """Return the index of the first occurrence of ``pattern`` in ``text``.

    Every starting position is tried in turn, comparing character by
    character. Returns -1 when there is no match; an empty pattern
    matches at 0.
    """
    width = len(pattern)
    for start in range(len(text) - width + 1):
        if all(t == p for t, p in zip(text[start:start + width], pattern)):
            return start
    return -1