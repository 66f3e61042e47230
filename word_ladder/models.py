"""
Pydantic models for the word ladder solver.

Configuration, search results, graph metrics and the run summary that
the CLI serialises to JSON.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

IndexKind = Literal["scan", "bucket"]


class LadderConfig(BaseModel):
    """Settings that shape dictionary loading and neighbour lookup."""

    upper: bool = False
    same_length: bool = False
    index: IndexKind = "scan"


class LadderResult(BaseModel):
    """Outcome of a single ladder query."""

    origin: str
    target: str
    path: Optional[List[str]] = None
    found: bool = False
    steps: Optional[int] = None
    expanded: int = 0
    elapsed_ms: float = 0.0


class GraphMetrics(BaseModel):
    """Summary statistics of the word-adjacency graph."""

    total_words: int = 0
    total_edges: int = 0
    components: int = 0
    largest_component: int = 0
    isolated_words: int = 0
    avg_degree: float = 0.0


class LadderSummary(BaseModel):
    """Summary written by ``--summary``."""

    dictionary_path: str
    dictionary_size: int = 0
    config: LadderConfig = Field(default_factory=LadderConfig)
    result: LadderResult
    metrics: Optional[GraphMetrics] = None
