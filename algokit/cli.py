"""Command-line front end reading its input from standard input."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from algokit.merging import count_inversions
from algokit.recursion import hanoi_move_count, hanoi_moves
from algokit.search import bf_match
from algokit.simple_sorts import quick_sort
from algokit.stack import BoundedStack

__all__ = ["main"]


def _counted_integers(tokens: list[str]) -> list[int]:
    """Read a count followed by that many integers."""
    if not tokens:
        raise ValueError("expected a count")
    count = int(tokens[0])
    if count < 0:
        raise ValueError(f"count must not be negative: {count}")
    values = [int(token) for token in tokens[1:1 + count]]
    if len(values) < count:
        raise ValueError(f"expected {count} values, got {len(values)}")
    return values


def _run_sort(tokens: list[str]) -> None:
    print(" ".join(str(value) for value in quick_sort(_counted_integers(tokens))))


def _run_inversions(tokens: list[str]) -> None:
    print(count_inversions(_counted_integers(tokens)))


def _run_hanoi(tokens: list[str]) -> None:
    if not tokens:
        raise ValueError("expected the number of disks")
    disks = int(tokens[0])
    print(hanoi_move_count(disks))
    for start, end in hanoi_moves(disks, 1, 3):
        print(start, end)


def _run_match(tokens: list[str]) -> None:
    if len(tokens) < 2:
        raise ValueError("expected a text and a pattern")
    index = bf_match(tokens[0], tokens[1])
    if index == -1:
        print("pattern not found in text")
    else:
        print(f"match at character {index + 1}")


def _run_stack(tokens: list[str]) -> None:
    stack: BoundedStack[int] = BoundedStack()
    for value in (5, 4, 3, 2, 1):
        stack.push(value)
    print(stack)
    stack.pop()
    print(stack)


_COMMANDS = {
    "sort": (_run_sort, "quicksort a count and integers"),
    "inversions": (_run_inversions, "count inversions of a count and integers"),
    "hanoi": (_run_hanoi, "list the moves for N disks"),
    "match": (_run_match, "find a pattern in a text by brute force"),
    "stack": (_run_stack, "show a small stack demonstration"),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command on whitespace-separated tokens from standard input."""
    parser = argparse.ArgumentParser(prog="algokit")
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        commands.add_parser(name, help=help_text)
    args = parser.parse_args(argv)

    run, _ = _COMMANDS[args.command]
    tokens = [] if args.command == "stack" else sys.stdin.read().split()
    try:
        run(tokens)
    except ValueError as error:
        parser.error(str(error))
    return 0


if __name__ == "__main__":
    sys.exit(main())