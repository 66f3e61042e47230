"""
Single-substitution adjacency between words, and two neighbour indexes.

Two words are adjacent when they have the same length and differ in
exactly one position (Hamming distance 1).

- ``ScanIndex`` compares the query against every same-length word with a
  vectorised numpy Hamming computation. No precomputation beyond encoding.
- ``BucketIndex`` groups words by single-wildcard pattern (the word with one
  position blanked out), so neighbours are read off ``L`` buckets.

Both indexes return neighbours in sorted order and never include the query.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Sequence, Set, Tuple

import numpy as np

logger = logging.getLogger(__name__)


# =========================================================================
# Pairwise helpers
# =========================================================================


def hamming_distance(a: str, b: str) -> int:
    """Number of positions at which equal-length *a* and *b* differ.

    Raises:
        ValueError: if the words have different lengths.
    """
    if len(a) != len(b):
        raise ValueError(
            f"Hamming distance undefined for lengths {len(a)} and {len(b)}"
        )
    return sum(1 for x, y in zip(a, b) if x != y)


def is_adjacent(a: str, b: str) -> bool:
    """``True`` iff *a* and *b* have equal length and ``hamming_distance`` 1."""
    if len(a) != len(b):
        return False
    return hamming_distance(a, b) == 1


def _encode(words: Sequence[str], length: int) -> np.ndarray:
    """Encode equal-length words as an ``(N, length)`` uint32 code-point matrix."""
    if not words:
        return np.empty((0, length), dtype=np.uint32)
    codes = np.array([[ord(c) for c in w] for w in words], dtype=np.uint32)
    return codes.reshape(len(words), length)


# =========================================================================
# Vectorised scan
# =========================================================================


class ScanIndex:
    """Linear neighbour scan, one numpy matrix per word length.

    Args:
        words: Dictionary words, already sorted. Order is preserved in
               the results of ``neighbors``.
    """

    def __init__(self, words: Iterable[str]) -> None:
        by_length: Dict[int, List[str]] = defaultdict(list)
        for w in words:
            by_length[len(w)].append(w)

        self._words: Dict[int, List[str]] = dict(by_length)
        self._codes: Dict[int, np.ndarray] = {
            length: _encode(ws, length) for length, ws in by_length.items()
        }
        logger.debug(
            "ScanIndex built: %d length group(s), %d word(s).",
            len(self._words), sum(len(ws) for ws in self._words.values()),
        )

    def neighbors(self, word: str) -> List[str]:
        """Return every indexed word at Hamming distance 1 from *word*."""
        length = len(word)
        codes = self._codes.get(length)
        if codes is None or codes.shape[0] == 0:
            return []

        query = _encode([word], length)[0]
        distances = (codes != query).sum(axis=1)
        candidates = self._words[length]
        return [candidates[i] for i in np.flatnonzero(distances == 1)]


# =========================================================================
# Wildcard buckets
# =========================================================================


def _patterns(word: str) -> List[Tuple[int, str]]:
    """Single-wildcard patterns of *word* as ``(position, rest)`` keys."""
    return [(i, word[:i] + word[i + 1:]) for i in range(len(word))]


class BucketIndex:
    """Neighbour index keyed by single-wildcard pattern.

    ``DOG`` lands in the buckets ``_OG``, ``D_G`` and ``DO_``; every other
    word sharing a bucket differs from it in exactly that position. Keys are
    stored as ``(position, rest)`` tuples so no wildcard character can clash
    with a character in the dictionary.
    """

    def __init__(self, words: Iterable[str]) -> None:
        buckets: Dict[Tuple[int, str], List[str]] = defaultdict(list)
        for w in words:
            for key in _patterns(w):
                buckets[key].append(w)
        self._buckets = dict(buckets)
        logger.debug("BucketIndex built: %d bucket(s).", len(self._buckets))

    def neighbors(self, word: str) -> List[str]:
        """Return every indexed word at Hamming distance 1 from *word*."""
        found: Set[str] = set()
        for key in _patterns(word):
            found.update(self._buckets.get(key, ()))
        found.discard(word)
        return sorted(found)
