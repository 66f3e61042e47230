"""
Word ladder CLI.

Usage::

    python -m word_ladder.cli /usr/share/dict/words DOG COG \\
        --upper --same-length --index bucket \\
        --summary ./data/ladder_summary.json

Prints the ladder as ``DOG -> COG``, or ``No ladder found.``.
Exit code 0 when a ladder is found, 1 when none exists, 2 on bad input.
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from pydantic import ValidationError

from word_ladder.analysis import compute_metrics
from word_ladder.dictionary import DictionaryError, read_words
from word_ladder.ladder import LadderSearch
from word_ladder.models import LadderConfig, LadderSummary
from word_ladder.utils import setup_logging, timed
from word_ladder.word_graph import WordGraph

logger = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_NOT_FOUND = 1
EXIT_BAD_INPUT = 2


# =========================================================================
# Config
# =========================================================================


def load_config(path: str) -> LadderConfig:
    """Load a ``LadderConfig`` from a JSON file."""
    with open(path, "r", encoding="utf-8") as fh:
        return LadderConfig.model_validate_json(fh.read())


def save_config(config: LadderConfig, path: str) -> None:
    """Write *config* to *path* as JSON."""
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(config.model_dump_json(indent=2))
    logger.info("Config saved → %s", path)


# =========================================================================
# Pipeline
# =========================================================================


def run(
    words_path: str,
    origin: str,
    target: str,
    config: LadderConfig,
    with_metrics: bool = False,
) -> LadderSummary:
    """Load the dictionary, build the graph and search for a ladder.

    Raises:
        DictionaryError: if the word list cannot be read.
    """
    if config.upper:
        origin, target = origin.upper(), target.upper()
    length = len(origin) if config.same_length else None

    with timed("Load dictionary"):
        words = read_words(words_path, upper=config.upper, length=length)

    with timed("Graph build"):
        graph = WordGraph.from_words(words, index=config.index)
    dictionary_size = len(graph)

    if target not in graph:
        logger.warning("Target %s is not in the dictionary.", target)

    # before the search: an unknown origin gets inserted into the graph
    metrics = None
    if with_metrics:
        with timed("Graph metrics"):
            metrics = compute_metrics(graph)

    with timed("Ladder search"):
        result = LadderSearch(graph).search(origin, target)

    return LadderSummary(
        dictionary_path=words_path,
        dictionary_size=dictionary_size,
        config=config,
        result=result,
        metrics=metrics,
    )


def format_ladder(path: Optional[List[str]]) -> str:
    if path is None:
        return "No ladder found."
    return " -> ".join(path)


# =========================================================================
# CLI
# =========================================================================


def _parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        prog="python -m word_ladder.cli",
        description="Find a shortest word ladder between two words.",
    )
    parser.add_argument("words", nargs="?", help="Path to the word list, one word per line.")
    parser.add_argument("origin", nargs="?", help="First word of the ladder.")
    parser.add_argument("target", nargs="?", help="Last word of the ladder.")
    parser.add_argument(
        "--upper", action="store_true",
        help="Upper-case the dictionary and both query words.",
    )
    parser.add_argument(
        "--same-length", action="store_true",
        help="Only load dictionary words as long as the origin.",
    )
    parser.add_argument("--index", choices=["scan", "bucket"], default="scan")
    parser.add_argument(
        "--summary", type=str, default=None,
        help="Write a JSON run summary to this path.",
    )
    parser.add_argument(
        "--stats", action="store_true",
        help="Compute graph metrics (components, degrees).",
    )
    parser.add_argument(
        "--save-config", type=str, default=None,
        help="Save current settings to a config JSON and exit.",
    )
    parser.add_argument(
        "--apply-config", type=str, default=None,
        help="Load settings from a config JSON (overrides flags).",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
    )

    args = parser.parse_args(argv)
    if args.save_config is None and args.target is None:
        parser.error("WORDS, ORIGIN and TARGET are required")
    return args


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entry-point."""
    args = _parse_args(argv)
    setup_logging(level=getattr(logging, args.log_level))

    config = LadderConfig(
        upper=args.upper, same_length=args.same_length, index=args.index,
    )

    if args.save_config:
        save_config(config, args.save_config)
        return

    if args.apply_config:
        try:
            config = load_config(args.apply_config)
        except (OSError, ValidationError) as exc:
            logger.error("Invalid config %s: %s", args.apply_config, exc)
            sys.exit(EXIT_BAD_INPUT)
        logger.info("Applied config from %s: %s", args.apply_config, config)

    try:
        summary = run(
            args.words, args.origin, args.target, config,
            with_metrics=args.stats,
        )
    except DictionaryError as exc:
        logger.error("%s", exc)
        sys.exit(EXIT_BAD_INPUT)

    print(format_ladder(summary.result.path))
    if summary.metrics is not None:
        m = summary.metrics
        print(
            f"words={m.total_words} edges={m.total_edges} "
            f"components={m.components} largest={m.largest_component} "
            f"isolated={m.isolated_words} avg_degree={m.avg_degree}"
        )

    if args.summary:
        os.makedirs(os.path.dirname(os.path.abspath(args.summary)), exist_ok=True)
        with open(args.summary, "w", encoding="utf-8") as fh:
            fh.write(summary.model_dump_json(indent=2))
        logger.info("📄 Summary → %s", args.summary)

    sys.exit(EXIT_FOUND if summary.result.found else EXIT_NOT_FOUND)


if __name__ == "__main__":
    main()
