"""Command line: print a matrix read from input, or a table of marks."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Mapping, Sequence

from algokit.backtracking import format_grid

SAMPLE_MARKS = {
    "Hassan": 88,
    "David": 66,
    "Rohan": 45,
    "Kusume": 121,
    "Kuroo": 231,
}


def read_matrix(lines: Iterable[str], rows: int, cols: int) -> list[list[int]]:
    """Read ``rows`` x ``cols`` whitespace-separated integers, row by row."""
    if rows < 0 or cols < 0:
        raise ValueError("matrix dimensions must not be negative")
    tokens = [token for line in lines for token in line.split()]
    needed = rows * cols
    if len(tokens) < needed:
        raise ValueError(f"expected {needed} numbers, got {len(tokens)}")
    try:
        numbers = [int(token) for token in tokens[:needed]]
    except ValueError as exc:
        raise ValueError(f"not an integer: {exc}") from None
    return [numbers[row * cols : (row + 1) * cols] for row in range(rows)]


def format_marks(marks: Mapping[str, int]) -> str:
    """Render one ``name  mark`` line per entry."""
    return "".join(f"{name}  {mark}\n" for name, mark in marks.items())


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="algokit")
    commands = parser.add_subparsers(dest="command", required=True)
    matrix = commands.add_parser("matrix", help="read a matrix from standard input")
    matrix.add_argument("rows", type=int)
    matrix.add_argument("cols", type=int)
    commands.add_parser("marks", help="print the sample table of marks")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line and return the exit status."""
    args = _parser().parse_args(argv)
    if args.command == "marks":
        sys.stdout.write(format_marks(SAMPLE_MARKS))
        return 0
    try:
        matrix = read_matrix(sys.stdin, args.rows, args.cols)
    except ValueError as exc:
        print(f"algokit: {exc}", file=sys.stderr)
        return 1
    if matrix:
        print(format_grid(matrix))
    return 0


if __name__ == "__main__":
    sys.exit(main())