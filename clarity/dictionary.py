from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Iterable, Iterator

from sortedcontainers import SortedSet

from clarity.board import CELL_RE
from clarity.errors import NoDictionaryFound

logger = logging.getLogger("clarity")


class Dictionary:
    """Sorted set of valid words, loaded at most once.

    Once loaded the word set is never replaced, so it can be read from any number
    of threads without locking. Only the load itself is guarded.
    """

    def __init__(self):
        self._words: SortedSet = SortedSet()
        self._loaded = False
        self._lock = threading.Lock()

    @classmethod
    def from_words(cls, words: Iterable[str]) -> Dictionary:
        store = cls()
        store._words = SortedSet(words)
        store._loaded = True
        return store

    @property
    def loaded(self) -> bool:
        return self._loaded

    def ensure_loaded(self, path: str | Path, min_length: int = 1) -> None:
        """Load the word list at path unless a word list is already loaded.

        Later calls are no-ops whatever path they pass.
        """
        if self._loaded:
            return
        with self._lock:
            if self._loaded:
                return
            self._words = load_words(path, min_length)
            self._loaded = True

    def lower_bound(self, prefix: str) -> str | None:
        """Return the first word not less than prefix, or None past the last word."""
        idx = self._words.bisect_left(prefix)
        if idx == len(self._words):
            return None
        return self._words[idx]

    @property
    def shortest(self) -> int:
        return min((len(w) for w in self._words), default=0)

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)


def load_words(path: str | Path, min_length: int = 1) -> SortedSet:
    words = SortedSet()
    skipped = 0
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line in f:
                word = line.strip()
                if not word:
                    continue
                if len(word) < min_length or not CELL_RE.fullmatch(word):
                    skipped += 1
                    continue
                words.add(word)
    except (OSError, UnicodeDecodeError) as e:
        raise NoDictionaryFound(str(path)) from e

    logger.info("Loaded %d words from %s (%d skipped)", len(words), path, skipped)
    return words


# Process-wide store used when solve() is not given one
dictionary = Dictionary()
