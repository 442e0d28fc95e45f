import re
from typing import Iterator, Sequence

from clarity.errors import BadBoard

CELL_RE = re.compile(r"[a-z]+")

SAMPLE_BOARD = [
    ["z", "w", "p", "u", "m", "o", "s"],
    ["p", "w", "w", "n", "z", "r", "w"],
    ["c", "d", "h", "q", "d", "p", "e"],
    ["w", "c", "u", "x", "d", "n", "q"],
    ["r", "c", "s", "d", "k", "w", "q"],
    ["i", "c", "m", "p", "r", "x", "x"],
    ["o", "y", "g", "u", "i", "x", "m"],
]


def validate(board: Sequence[Sequence[str]]) -> None:
    """Raise BadBoard unless the board is non-empty, rectangular and all lowercase."""
    if len(board) == 0:
        raise BadBoard("board has no rows")

    width = len(board[0])
    if width == 0:
        raise BadBoard("board has empty rows")

    for r, row in enumerate(board):
        if len(row) != width:
            raise BadBoard(f"row {r} has {len(row)} cells, expected {width}")
        for c, cell in enumerate(row):
            if not isinstance(cell, str) or not CELL_RE.fullmatch(cell):
                raise BadBoard(f"cell ({r},{c}) is {cell!r}")


def neighbours(row: int, col: int, n_rows: int, n_cols: int) -> Iterator[tuple[int, int]]:
    """Yield the cells of the 3x3 block around (row, col), clipped to the grid.

    The centre cell is included; callers skip it through their visited set.
    """
    for r in range(max(row - 1, 0), min(row + 2, n_rows)):
        for c in range(max(col - 1, 0), min(col + 2, n_cols)):
            yield r, c


def parse_board(text: str) -> list[list[str]]:
    """Parse a textual board.

    Rows are separated by newlines or "/". A row containing whitespace is split
    into whitespace-separated tiles (so "qu" can be a single tile), otherwise
    every character is a tile. Blank rows are ignored.
    """
    board = []
    for line in re.split(r"[/\n]", text):
        line = line.strip()
        if not line:
            continue
        if any(ch.isspace() for ch in line):
            board.append(line.split())
        else:
            board.append(list(line))
    return board
