from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Sequence

from clarity.board import neighbours, validate
from clarity.dictionary import Dictionary
from clarity.dictionary import dictionary as default_dictionary
from clarity.metrics import StageTimer
from clarity.scoring import SortOrder, assemble
from clarity.settings import settings

logger = logging.getLogger("clarity")

Board = Sequence[Sequence[str]]

# Set in each worker process by _init_worker
_worker_dictionary: Dictionary | None = None


def search_from(
    board: Board,
    row: int,
    col: int,
    dictionary: Dictionary,
    sofar: str = "",
    visited: set[tuple[int, int]] | None = None,
) -> set[str]:
    """Find every word that extends sofar through (row, col) and its unvisited neighbours.

    Uses the sorted dictionary for prefix pruning: the first word not less than
    the current prefix either starts with it, or nothing does. visited holds the
    cells already on the current path and is restored before returning.
    """
    n_rows, n_cols = len(board), len(board[0])
    if not (0 <= row < n_rows and 0 <= col < n_cols):
        raise IndexError(f"cell ({row},{col}) outside {n_rows}x{n_cols} board")
    if visited is None:
        visited = set()

    found: set[str] = set()
    sofar += board[row][col]

    candidate = dictionary.lower_bound(sofar)
    if candidate is None or not candidate.startswith(sofar):
        return found
    if candidate == sofar:
        found.add(sofar)

    visited.add((row, col))
    try:
        for r, c in neighbours(row, col, n_rows, n_cols):
            if (r, c) not in visited:
                found |= search_from(board, r, c, dictionary, sofar, visited)
    finally:
        visited.discard((row, col))
    return found


def _search_cell(board: Board, row: int, col: int, dictionary: Dictionary | None = None) -> set[str]:
    if dictionary is None:
        dictionary = _worker_dictionary
    try:
        return search_from(board, row, col, dictionary)
    except IndexError:
        # Logic error, not bad input; skip this start cell
        logger.debug("Search from (%d,%d) went out of range", row, col, exc_info=True)
        return set()


def _init_worker(words: list[str]):
    global _worker_dictionary
    _worker_dictionary = Dictionary.from_words(words)


def _search_parallel(board: Board, cells: list[tuple[int, int]], dictionary: Dictionary, workers: int) -> set[str]:
    found: set[str] = set()
    with ProcessPoolExecutor(max_workers=workers, initializer=_init_worker, initargs=(list(dictionary),)) as executor:
        futures = [executor.submit(_search_cell, board, r, c) for r, c in cells]
        for future in as_completed(futures):
            found |= future.result()
    return found


def solve(
    board: Board,
    dictionary: Dictionary | None = None,
    *,
    dictionary_path: str | Path | None = None,
    order: SortOrder | str | None = None,
    max_results: int | None = None,
    workers: int | None = None,
) -> list[str]:
    """Solve a Boggle board.

    The board must be non-empty, rectangular and hold only lowercase letters,
    otherwise BadBoard is raised before anything else happens. The dictionary
    (the process-wide store unless one is injected) is loaded on first use from
    dictionary_path; NoDictionaryFound is raised if that fails.

    Returns the distinct words found, ordered alphabetically or by score.
    Unset options fall back to settings. An unknown order raises ValueError
    before the board is looked at.
    """
    if dictionary is None:
        dictionary = default_dictionary
    if dictionary_path is None:
        dictionary_path = settings.DICTIONARY_PATH
    if order is None:
        order = settings.SORT_ORDER
    if max_results is None:
        max_results = settings.MAX_RESULTS
    if workers is None:
        workers = settings.WORKERS
    order = SortOrder(order)

    timer = StageTimer()

    with timer.stage("validate"):
        validate(board)

    with timer.stage("dictionary"):
        dictionary.ensure_loaded(dictionary_path, settings.MIN_WORD_LENGTH)

    cells = [(r, c) for r in range(len(board)) for c in range(len(board[0]))]

    with timer.stage("search"):
        if workers > 1 and len(cells) > 1:
            found = _search_parallel(board, cells, dictionary, workers)
        else:
            found = set()
            for r, c in cells:
                found |= _search_cell(board, r, c, dictionary)

    with timer.stage("assemble"):
        result = assemble(found, order, max_results)

    logger.info(
        "Board %dx%d: found %d words (returning %d) %s",
        len(board), len(board[0]), len(found), len(result), timer.describe(),
    )
    return result


def find_path(board: Board, word: str) -> list[tuple[int, int]] | None:
    """Return one path of adjacent, distinct cells spelling word, or None.

    Works independently of the dictionary; used to show where a word lies.
    """
    n_rows, n_cols = len(board), len(board[0])

    def walk(r: int, c: int, rest: str, path: list[tuple[int, int]]) -> list[tuple[int, int]] | None:
        tile = board[r][c]
        if (r, c) in path or not rest.startswith(tile):
            return None
        path = path + [(r, c)]
        rest = rest[len(tile):]
        if not rest:
            return path
        for nr, nc in neighbours(r, c, n_rows, n_cols):
            hit = walk(nr, nc, rest, path)
            if hit:
                return hit
        return None

    for r in range(n_rows):
        for c in range(n_cols):
            hit = walk(r, c, word, [])
            if hit:
                return hit
    return None

