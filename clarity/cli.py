"""
Command-line Boggle solver.

Usage:
    python -m clarity [BOARD] [--dictionary PATH] [--order alpha|score]

Examples:
    python -m clarity
    python -m clarity "cats/dogs/rate/mien" --order score --scores
    python -m clarity @board.txt --dictionary /usr/share/dict/words --workers 4

BOARD is a textual board (rows separated by "/" or newlines, tiles separated by
spaces or one per character) or @FILE to read it from a file. Without BOARD the
7x7 sample board is solved.
"""
import argparse
import logging
import sys
from pathlib import Path

from clarity.board import SAMPLE_BOARD, parse_board
from clarity.errors import ClarityError
from clarity.scoring import SortOrder, score, total_score
from clarity.settings import get_editable_settings, settings, update_settings
from clarity.solver import find_path, solve

logger = logging.getLogger("clarity")


def _read_board(arg: str | None) -> list[list[str]]:
    if arg is None:
        return SAMPLE_BOARD
    if arg.startswith("@"):
        return parse_board(Path(arg[1:]).read_text(encoding="utf-8"))
    return parse_board(arg)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="clarity", description="Find every word in a Boggle board")
    parser.add_argument("board", nargs="?", default=None,
                        help="Board text or @FILE (default: built-in 7x7 sample)")
    parser.add_argument("--dictionary", type=str, default=None,
                        help=f"Word list, one word per line (default: {settings.DICTIONARY_PATH})")
    parser.add_argument("--order", choices=[o.value for o in SortOrder], default=None,
                        help=f"Result order (default: {settings.SORT_ORDER})")
    parser.add_argument("--max-results", type=int, default=None,
                        help="Print at most this many words (0 = all)")
    parser.add_argument("--min-length", type=int, default=None,
                        help="Ignore dictionary words shorter than this")
    parser.add_argument("--workers", type=int, default=None,
                        help="Worker processes for the search (default: 1)")
    parser.add_argument("--scores", action="store_true",
                        help="Print each word's score and a total")
    parser.add_argument("--paths", action="store_true",
                        help="Print the cells spelling each word")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    overrides = {
        "DICTIONARY_PATH": args.dictionary,
        "SORT_ORDER": args.order,
        "MAX_RESULTS": args.max_results,
        "MIN_WORD_LENGTH": args.min_length,
        "WORKERS": args.workers,
    }
    if args.debug:
        overrides["DEBUG"] = True
    errors = update_settings(settings, **{k: v for k, v in overrides.items() if v is not None})
    if errors:
        for name, msg in errors.items():
            print(f"{name}: {msg}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=logging.INFO if settings.DEBUG else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    logger.info("Settings: %s", get_editable_settings(settings))

    try:
        board = _read_board(args.board)
        words = solve(board)
    except ClarityError as e:
        print(e, file=sys.stderr)
        return 1
    except OSError as e:
        print(f"cannot read board: {e}", file=sys.stderr)
        return 1

    for word in words:
        line = word
        if args.scores:
            line = f"{score(word):2d} {line}"
        if args.paths:
            path = find_path(board, word)
            line += "  " + " ".join(f"({r},{c})" for r, c in path)
        print(line)

    if args.scores:
        print(f"total {total_score(words)} points in {len(words)} words")
    return 0
