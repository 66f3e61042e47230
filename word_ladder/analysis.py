"""
Graph analysis: a ``networkx`` view of the word-adjacency graph and
summary metrics (components, degrees, isolated words).
"""

import logging

import networkx as nx

from word_ladder.models import GraphMetrics
from word_ladder.word_graph import WordGraph

logger = logging.getLogger(__name__)


def to_networkx(graph: WordGraph) -> nx.Graph:
    """Materialise the implicit adjacency of *graph* as an undirected graph."""
    G = nx.Graph(name="words")
    words = graph.words()
    G.add_nodes_from(words)
    for w in words:
        for n in graph.neighbors(w):
            if w < n:
                G.add_edge(w, n)
    return G


def compute_metrics(graph: WordGraph) -> GraphMetrics:
    """Compute graph summary metrics.

    Returns a ``GraphMetrics`` with: total_words, total_edges, components,
    largest_component, isolated_words, avg_degree.
    """
    G = to_networkx(graph)
    n_words = G.number_of_nodes()
    n_edges = G.number_of_edges()

    if n_words == 0:
        return GraphMetrics()

    components = list(nx.connected_components(G))
    metrics = GraphMetrics(
        total_words=n_words,
        total_edges=n_edges,
        components=len(components),
        largest_component=max(len(c) for c in components),
        isolated_words=nx.number_of_isolates(G),
        avg_degree=round(2 * n_edges / n_words, 4),
    )
    logger.info(
        "Graph metrics: words=%d, edges=%d, components=%d, isolated=%d.",
        metrics.total_words, metrics.total_edges,
        metrics.components, metrics.isolated_words,
    )
    return metrics


def are_connected(graph: WordGraph, a: str, b: str) -> bool:
    """``True`` iff *a* and *b* are both in *graph* and linked by a ladder."""
    if a not in graph or b not in graph:
        return False
    return nx.has_path(to_networkx(graph), a, b)
