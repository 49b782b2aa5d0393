"""Backtracking searches over boards, mazes and letter sets."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from string import ascii_uppercase

_MAZE_MOVES = (
    ("D", 1, 0),
    ("L", 0, -1),
    ("R", 0, 1),
    ("U", -1, 0),
    ("X", 1, 1),
)

_WORD_MOVES = ((1, 0), (0, -1), (0, 1), (-1, 0))

# A knight placed in row-major order can only be attacked by knights
# already placed in the two rows above it.
_KNIGHT_THREATS = ((-2, 1), (-2, -1), (-1, 2), (-1, -2))


def format_grid(grid: Sequence[Sequence[object]]) -> str:
    """Render a grid as lines of space-separated cells."""
    return "\n".join(" ".join(str(cell) for cell in row) for row in grid)


def chess_squares(board: Sequence[Sequence[str]]) -> list[str]:
    """Return the chess names of the squares marked with ``*``.

    Files are lettered from ``A`` at the left and ranks count down from the
    board size at the top row, so an 8x8 board runs from ``A8`` to ``H1``.
    """
    size = len(board)
    if size > len(ascii_uppercase):
        raise ValueError(f"board of size {size} has too many files to letter")
    return [
        f"{ascii_uppercase[col]}{size - row}"
        for row, line in enumerate(board)
        for col, cell in enumerate(line)
        if cell == "*"
    ]


def maze_paths(maze: Sequence[Sequence[int]]) -> Iterator[tuple[str, list[list[int]]]]:
    """Yield every path from the top-left to the bottom-right of a square maze.

    Open cells hold 1. Moves are tried in the order down (``D``), left
    (``L``), right (``R``), up (``U``) and diagonally down-right (``X``).
    Each result is the move string and a grid marking the visited cells.
    """
    size = len(maze)
    if size == 0:
        return
    visited = [[0] * size for _ in range(size)]
    goal = (size - 1, size - 1)

    def walk(x: int, y: int, path: str) -> Iterator[tuple[str, list[list[int]]]]:
        visited[x][y] = 1
        if (x, y) == goal:
            yield path, [row[:] for row in visited]
        else:
            for step, dx, dy in _MAZE_MOVES:
                nx, ny = x + dx, y + dy
                if (
                    0 <= nx < size
                    and 0 <= ny < size
                    and maze[nx][ny] == 1
                    and not visited[nx][ny]
                ):
                    yield from walk(nx, ny, path + step)
        visited[x][y] = 0

    yield from walk(0, 0, "")


def word_exists(book: Sequence[Sequence[str]], word: str) -> bool:
    """Tell whether ``word`` can be traced through adjacent cells of ``book``.

    Steps go up, down, left or right; a cell may be used more than once.
    """
    if not word:
        return False
    rows = len(book)
    last = len(word) - 1

    def matches(x: int, y: int, index: int) -> bool:
        return 0 <= x < rows and 0 <= y < len(book[x]) and book[x][y] == word[index]

    def extend(x: int, y: int, index: int) -> bool:
        if index == last:
            return True
        return any(
            matches(x + dx, y + dy, index + 1) and extend(x + dx, y + dy, index + 1)
            for dx, dy in _WORD_MOVES
        )

    return any(
        extend(x, y, 0)
        for x, row in enumerate(book)
        for y, cell in enumerate(row)
        if cell == word[0]
    )


def place_knights(n: int) -> list[list[int]] | None:
    """Place ceil(n*n/2) mutually safe knights on an n x n board.

    Returns the board with 1 marking a knight, or None when no placement
    is found.
    """
    if n < 0:
        raise ValueError("board size must not be negative")
    board = [[0] * n for _ in range(n)]

    def safe(row: int, col: int) -> bool:
        return not any(
            0 <= row + dr < n and 0 <= col + dc < n and board[row + dr][col + dc]
            for dr, dc in _KNIGHT_THREATS
        )

    def solve(start: int, remaining: int) -> bool:
        if remaining == 0:
            return True
        for cell in range(start, n * n):
            row, col = divmod(cell, n)
            if safe(row, col):
                board[row][col] = 1
                if solve(cell + 1, remaining - 1):
                    return True
                board[row][col] = 0
        return False

    return board if solve(0, (n * n + 1) // 2) else None


def letter_permutations(letters: Sequence[str]) -> Iterator[str]:
    """Yield every ordering of ``letters`` in which no letter repeats."""
    pool = list(letters)
    chosen: list[str] = []

    def extend() -> Iterator[str]:
        if len(chosen) == len(pool):
            yield "".join(chosen)
            return
        for letter in pool:
            if letter not in chosen:
                chosen.append(letter)
                yield from extend()
                chosen.pop()

    yield from extend()


def queen_solutions(n: int) -> Iterator[list[list[int]]]:
    """Yield every placement of n non-attacking queens on an n x n board."""
    if n < 0:
        raise ValueError("board size must not be negative")
    columns: list[int] = []

    def safe(col: int) -> bool:
        row = len(columns)
        return all(
            placed != col and abs(placed - col) != row - placed_row
            for placed_row, placed in enumerate(columns)
        )

    def place() -> Iterator[list[list[int]]]:
        if len(columns) == n:
            yield [[1 if c == col else 0 for c in range(n)] for col in columns]
            return
        for col in range(n):
            if safe(col):
                columns.append(col)
                yield from place()
                columns.pop()

    yield from place()