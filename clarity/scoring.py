from __future__ import annotations

from enum import Enum
from typing import Iterable


class SortOrder(str, Enum):
    ALPHA = "alpha"
    SCORE = "score"


def score(word: str) -> int:
    """Boggle points for a word of this length."""
    n = len(word)
    if n < 3:
        return 0
    if n == 3:
        return 1
    if n <= 6:
        return n - 3
    if n == 7:
        return 5
    return 11


def total_score(words: Iterable[str]) -> int:
    return sum(score(w) for w in set(words))


def assemble(words: Iterable[str], order: SortOrder | str = SortOrder.ALPHA, max_results: int = 0) -> list[str]:
    """Deduplicate and order found words.

    ALPHA sorts ascending. SCORE sorts by score descending, then alphabetically.
    max_results > 0 keeps only that many words from the front.
    """
    order = SortOrder(order)
    unique = set(words)
    if order is SortOrder.SCORE:
        result = sorted(unique, key=lambda w: (-score(w), w))
    else:
        result = sorted(unique)
    return result[:max_results] if max_results > 0 else result
