"""
Benchmark helper for the Boggle solver.

Usage:
    python -m scripts.benchmark <dictionary_path> [--size N] [--boards K] [--workers W]

Examples:
    python -m scripts.benchmark /usr/share/dict/words
    python -m scripts.benchmark wordlist.txt --size 7 --boards 20 --workers 4

This will:
  1. Load the dictionary once
  2. Generate K random NxN boards (fixed seed)
  3. Solve each board serially, then with W worker processes
  4. Print per-board word counts and the timing of both runs
"""
import argparse
import random
import string
import sys
import time
from pathlib import Path

# Ensure project root is on path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from clarity.dictionary import Dictionary
from clarity.errors import NoDictionaryFound
from clarity.solver import solve


def random_board(rng: random.Random, size: int) -> list[list[str]]:
    return [[rng.choice(string.ascii_lowercase) for _ in range(size)] for _ in range(size)]


def main():
    parser = argparse.ArgumentParser(description="Boggle Solver Benchmark")
    parser.add_argument("dictionary", help="Path to a word list, one word per line")
    parser.add_argument("--size", type=int, default=5, help="Board edge length (default: 5)")
    parser.add_argument("--boards", type=int, default=10, help="Number of boards (default: 10)")
    parser.add_argument("--workers", type=int, default=4,
                        help="Worker processes for the parallel run (default: 4)")
    parser.add_argument("--seed", type=int, default=2015, help="Random seed (default: 2015)")
    args = parser.parse_args()

    store = Dictionary()
    try:
        store.ensure_loaded(args.dictionary)
    except NoDictionaryFound as e:
        print(f"Error: {e}")
        sys.exit(1)
    print(f"Dictionary: {args.dictionary} ({len(store)} words)")

    rng = random.Random(args.seed)
    boards = [random_board(rng, args.size) for _ in range(args.boards)]

    print(f"\n--- Serial ({args.boards} boards, {args.size}x{args.size}) ---")
    t0 = time.perf_counter()
    serial = [solve(b, store, workers=1) for b in boards]
    serial_s = time.perf_counter() - t0
    for i, words in enumerate(serial):
        print(f"  board {i:2d}: {len(words)} words")
    print(f"Serial: {serial_s:.3f}s")

    print(f"\n--- Parallel ({args.workers} workers) ---")
    t0 = time.perf_counter()
    parallel = [solve(b, store, workers=args.workers) for b in boards]
    parallel_s = time.perf_counter() - t0
    print(f"Parallel: {parallel_s:.3f}s")

    if parallel != serial:
        print("Error: parallel results differ from serial results")
        sys.exit(1)
    print(f"\nSpeed-up: {serial_s / parallel_s:.2f}x")


if __name__ == "__main__":
    main()
