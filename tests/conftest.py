"""Shared fixtures for the word ladder test suite."""

import os
import sys
from typing import List

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from word_ladder.word_graph import WordGraph

SAMPLE_WORDS_PATH = os.path.join(os.path.dirname(__file__), "sample_words.txt")


@pytest.fixture()
def sample_words() -> List[str]:
    """The 13 three-letter words shipped in ``sample_words.txt``."""
    with open(SAMPLE_WORDS_PATH, "r", encoding="utf-8") as fh:
        return [line.strip() for line in fh if line.strip()]


@pytest.fixture(params=["scan", "bucket"])
def sample_graph(request, sample_words) -> WordGraph:
    """Sample dictionary graph, once per neighbour index."""
    return WordGraph.from_words(sample_words, index=request.param)
