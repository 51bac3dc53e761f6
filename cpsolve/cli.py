"""Command line front end reading puzzle input from standard input."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence

from cpsolve.grids import find_path
from cpsolve.numbers import collatz
from cpsolve.queries import traffic_lights


def _take_ints(tokens: list[str], count: int) -> list[int]:
    if len(tokens) < count:
        raise ValueError(f"expected {count} numbers, got {len(tokens)}")
    return [int(token) for token in tokens[:count]]


def _weird(tokens: list[str]) -> list[str]:
    (n,) = _take_ints(tokens, 1)
    return [" ".join(map(str, collatz(n)))]


def _labyrinth(tokens: list[str]) -> list[str]:
    height, width = _take_ints(tokens, 2)
    if height < 1 or width < 1:
        raise ValueError("grid dimensions must be positive")
    cells = "".join(tokens[2:])
    if len(cells) != height * width:
        raise ValueError(f"expected {height * width} grid cells, got {len(cells)}")
    rows = [cells[start : start + width] for start in range(0, len(cells), width)]
    path = find_path(rows)
    if path is None:
        return ["NO"]
    return ["YES", str(len(path)), path]


def _traffic(tokens: list[str]) -> list[str]:
    length, count = _take_ints(tokens, 2)
    positions = _take_ints(tokens[2:], count)
    return [" ".join(map(str, traffic_lights(length, positions)))]


_COMMANDS: dict[str, tuple[Callable[[list[str]], list[str]], str]] = {
    "weird": (_weird, "print the 3n+1 sequence starting at n"),
    "labyrinth": (_labyrinth, "find a shortest path from A to B in a grid"),
    "traffic": (_traffic, "longest unlit stretch after each traffic light"),
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run one puzzle on standard input and print its answer."""
    parser = argparse.ArgumentParser(
        prog="cpsolve", description="Solve a puzzle read from standard input."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, (_, help_text) in _COMMANDS.items():
        commands.add_parser(name, help=help_text)
    args = parser.parse_args(argv)

    handler, _ = _COMMANDS[args.command]
    try:
        lines = handler(sys.stdin.read().split())
    except ValueError as exc:
        print(f"cpsolve: {exc}", file=sys.stderr)
        return 1
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())