"""
Word Ladder
Shortest single-letter substitution ladders between dictionary words,
found by breadth-first search over the word-adjacency graph.
"""

from word_ladder.ladder import LadderSearch, find_ladder
from word_ladder.word_graph import UnknownWordError, WordGraph

__version__ = "0.1.0"

__all__ = [
    "LadderSearch",
    "UnknownWordError",
    "WordGraph",
    "find_ladder",
]
