"""
Breadth-first ladder search over a ``WordGraph``.

Each query allocates its own visit map ``word -> Origin | Reached(parent)``;
a word missing from the map is unvisited. The graph's dictionary is only
read (apart from inserting an unknown origin), so one graph can answer any
number of sequential queries.

The ladder is rebuilt from parent links once the target is dequeued,
instead of carrying a partial path with every queue entry.
"""

import logging
import time
from collections import deque
from dataclasses import dataclass
from typing import Deque, Dict, Iterable, List, Optional, Tuple, Union

from word_ladder.models import IndexKind, LadderResult
from word_ladder.word_graph import WordGraph

logger = logging.getLogger(__name__)


# =========================================================================
# Visit states
# =========================================================================


@dataclass(frozen=True)
class Origin:
    """The word the search started from."""


@dataclass(frozen=True)
class Reached:
    """A word discovered from *parent*."""

    parent: str


Visit = Union[Origin, Reached]


def _reconstruct(visits: Dict[str, Visit], target: str) -> List[str]:
    """Walk parent links from *target* back to the origin, origin first."""
    path = [target]
    state = visits[target]
    while isinstance(state, Reached):
        path.append(state.parent)
        state = visits[state.parent]
    path.reverse()
    return path


# =========================================================================
# Search
# =========================================================================


class LadderSearch:
    """Shortest-ladder search over *graph*."""

    def __init__(self, graph: WordGraph) -> None:
        self.graph = graph

    def ladder(self, origin: str, target: str) -> Optional[List[str]]:
        """Return a shortest ladder from *origin* to *target*, or ``None``."""
        path, _ = self._bfs(origin, target)
        return path

    def search(self, origin: str, target: str) -> LadderResult:
        """Run ``ladder`` and report path, step count and effort."""
        t0 = time.monotonic()
        path, expanded = self._bfs(origin, target)
        elapsed_ms = (time.monotonic() - t0) * 1000.0

        if path is None:
            logger.info(
                "No ladder %s → %s (%d word(s) expanded).",
                origin, target, expanded,
            )
        else:
            logger.info(
                "Ladder %s → %s: %d step(s), %d word(s) expanded.",
                origin, target, len(path) - 1, expanded,
            )

        return LadderResult(
            origin=origin,
            target=target,
            path=path,
            found=path is not None,
            steps=len(path) - 1 if path is not None else None,
            expanded=expanded,
            elapsed_ms=round(elapsed_ms, 3),
        )

    def _bfs(self, origin: str, target: str) -> Tuple[Optional[List[str]], int]:
        """Breadth-first search; returns ``(path or None, words expanded)``."""
        if origin not in self.graph:
            logger.debug("Origin %s not in dictionary, inserting it.", origin)
            self.graph.insert(origin)

        if origin == target:
            return [origin], 0

        visits: Dict[str, Visit] = {origin: Origin()}
        queue: Deque[str] = deque([origin])
        expanded = 0

        while queue:
            word = queue.popleft()
            if word == target:
                return _reconstruct(visits, target), expanded

            expanded += 1
            for n in self.graph.neighbors(word):
                if n in visits:
                    continue
                visits[n] = Reached(word)
                queue.append(n)
            logger.debug("Expanded %s, frontier=%d.", word, len(queue))

        return None, expanded


def find_ladder(
    words: Iterable[str],
    origin: str,
    target: str,
    index: IndexKind = "scan",
) -> Optional[List[str]]:
    """Build a ``WordGraph`` from *words* and return the ladder, if any."""
    graph = WordGraph.from_words(words, index=index)
    return LadderSearch(graph).ladder(origin, target)
