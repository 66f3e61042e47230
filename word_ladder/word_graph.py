"""
WordGraph: the dictionary and its parent links.

Every word maps to a parent word. A freshly inserted word is its own
parent, which marks it as unvisited; a search that records discovery in
the graph overwrites the parent the first time the word is reached.

Adjacency is implicit: ``neighbors`` computes it on demand through a
lazily built index (see ``word_ladder.adjacency``).
"""

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Union

from word_ladder.adjacency import BucketIndex, ScanIndex
from word_ladder.models import IndexKind

logger = logging.getLogger(__name__)

_INDEXES = {"scan": ScanIndex, "bucket": BucketIndex}


class UnknownWordError(KeyError):
    """Raised when a parent link is set on a word that is not in the graph."""

    def __init__(self, word: str) -> None:
        self.word = word
        super().__init__(word)

    def __str__(self) -> str:
        return f"word not in graph: {self.word!r}"


class WordGraph:
    """Mapping of dictionary words to parent words.

    Args:
        index: Neighbour lookup strategy, ``"scan"`` or ``"bucket"``.
    """

    def __init__(self, index: IndexKind = "scan") -> None:
        if index not in _INDEXES:
            raise ValueError(f"Unknown index kind {index!r}")
        self.index_kind = index
        self._parents: Dict[str, str] = {}
        self._sorted: Optional[List[str]] = None
        self._index: Optional[Union[ScanIndex, BucketIndex]] = None

    @classmethod
    def from_words(cls, words: Iterable[str], index: IndexKind = "scan") -> "WordGraph":
        """Build a graph by inserting every word of *words*."""
        graph = cls(index=index)
        for w in words:
            graph.insert(w)
        logger.info("WordGraph built: %d word(s), index=%s.", len(graph), index)
        return graph

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------

    def __contains__(self, word: object) -> bool:
        return word in self._parents

    def __len__(self) -> int:
        return len(self._parents)

    def __iter__(self) -> Iterator[str]:
        return iter(self.words())

    def contains(self, word: str) -> bool:
        return word in self._parents

    def words(self) -> List[str]:
        """All words in sorted order."""
        if self._sorted is None:
            self._sorted = sorted(self._parents)
        return list(self._sorted)

    def insert(self, word: str) -> None:
        """Add *word* as its own parent. Re-inserting resets its parent."""
        if word not in self._parents:
            self._invalidate()
        self._parents[word] = word

    def remove(self, word: str) -> None:
        """Delete *word* if present."""
        if self._parents.pop(word, None) is not None:
            self._invalidate()

    def _invalidate(self) -> None:
        self._sorted = None
        self._index = None

    # ------------------------------------------------------------------
    # Parent links
    # ------------------------------------------------------------------

    def parent_of(self, word: str) -> Optional[str]:
        return self._parents.get(word)

    def set_parent(self, word: str, parent: str) -> None:
        """Overwrite the parent of *word*.

        Raises:
            UnknownWordError: if *word* is not in the graph.
        """
        if word not in self._parents:
            raise UnknownWordError(word)
        self._parents[word] = parent

    def reset_parents(self) -> None:
        """Make every word its own parent again."""
        for w in self._parents:
            self._parents[w] = w

    def path_to(self, word: str) -> Optional[List[str]]:
        """Follow parent links from *word* back to a self-parented word.

        Returns:
            The words from that root to *word*, or ``None`` if *word* (or a
            word on the way) is absent.

        Raises:
            RuntimeError: if the links loop without reaching a root.
        """
        path: List[str] = []
        current = word
        for _ in range(len(self._parents) + 1):
            path.append(current)
            parent = self._parents.get(current)
            if parent is None:
                return None
            if parent == current:
                path.reverse()
                return path
            current = parent
        raise RuntimeError(f"parent links from {word!r} form a cycle")

    # ------------------------------------------------------------------
    # Adjacency
    # ------------------------------------------------------------------

    def neighbors(self, word: str) -> List[str]:
        """Words in the graph adjacent to *word*, in sorted order.

        *word* itself is never included, and need not be in the graph.
        """
        if self._index is None:
            self._index = _INDEXES[self.index_kind](self.words())
        return self._index.neighbors(word)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def ladder(self, origin: str, target: str) -> Optional[List[str]]:
        """Shortest ladder from *origin* to *target*, or ``None``."""
        from word_ladder.ladder import LadderSearch

        return LadderSearch(self).ladder(origin, target)
