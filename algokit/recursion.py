"""Fibonacci numbers and the Towers of Hanoi."""

from __future__ import annotations

from collections.abc import Iterator

__all__ = ["fibonacci", "hanoi_moves", "hanoi_move_count"]

_PEGS = (1, 2, 3)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number; every ``n <= 2`` gives 1."""
    if n <= 2:
        return 1
    previous, current = 1, 1
    for _ in range(n - 2):
        previous, current = current, previous + current
    return current


def _moves(disks: int, source: int, target: int) -> Iterator[tuple[int, int]]:
    if disks == 0:
        return
    spare = 6 - source - target
    yield from _moves(disks - 1, source, spare)
    yield (source, target)
    yield from _moves(disks - 1, spare, target)


def hanoi_moves(
    disks: int, source: int = 1, target: int = 3
) -> Iterator[tuple[int, int]]:
    """Yield the ``(from_peg, to_peg)`` moves that carry ``disks`` disks
    from peg ``source`` to peg ``target``.

    Pegs are numbered 1, 2 and 3.
    """
    if disks < 0:
        raise ValueError(f"number of disks must not be negative: {disks}")
    if source not in _PEGS or target not in _PEGS:
        raise ValueError(f"pegs must be one of {_PEGS}: {source}, {target}")
    if source == target:
        raise ValueError("source and target pegs must differ")
    return _moves(disks, source, target)


def hanoi_move_count(disks: int) -> int:
    """Return the number of moves needed for ``disks`` disks."""
    if disks < 0:
        raise ValueError(f"number of disks must not be negative: {disks}")
    return (1 << disks) - 1