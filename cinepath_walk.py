"""Command line walk-through of the CinePath question tree.

Without arguments the script replays a set of built-in answer sequences (one per
mood the questionnaire is meant to reach) and prints the resulting genres next
to the tree statistics.  ``--answers`` walks a single custom sequence instead,
written as ``y``/``n`` (or ``1``/``0``) characters, e.g. ``--answers nyyynn``.

The heavy lifting lives in :mod:`cinepath.decision_tree`; this module only
parses arguments and formats results with Rich.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
import json
import logging
import sys
from typing import Iterator, List, Optional, Sequence, Tuple

from rich.console import Console
from rich.table import Table

from cinepath.catalog.genre_query import genre_names
from cinepath.config import LOG_LEVELS, ConfigError, Settings, load_settings
from cinepath.decision_tree import DecisionTree, TraversalResult, compare_walk

logger = logging.getLogger(__name__)

_TRUE_CHARS = frozenset("yt1")
_FALSE_CHARS = frozenset("nf0")


@dataclass(frozen=True)
class DemoWalk:
    """A named answer sequence replayed by the demo."""

    name: str
    answers: Tuple[bool, ...]


def _iter_demo_walks() -> Iterator[DemoWalk]:
    yield DemoWalk("Pure comedy", _parse_bits("nyyynn"))
    yield DemoWalk("Action sci-fi", _parse_bits("yyyyyyyyyy"))
    yield DemoWalk("Musical drama", _parse_bits("yynnnyyyyy"))
    yield DemoWalk("Supernatural horror", _parse_bits("nnnnyyy"))
    yield DemoWalk("Character comedy", _parse_bits("nyyyyy"))
    yield DemoWalk("Romantic comedy", _parse_bits("yynyyyyyyy"))
    yield DemoWalk("Fantasy adventure", _parse_bits("yynnyyyyyy"))
    yield DemoWalk("Political drama", _parse_bits("nnyyyyyy"))
    yield DemoWalk("Family animation", _parse_bits("yynynyyyyy"))
    yield DemoWalk("Witty crime", _parse_bits("nnnynn"))


def _parse_bits(text: str) -> Tuple[bool, ...]:
    answers: List[bool] = []
    for char in text.lower():
        if char in _TRUE_CHARS:
            answers.append(True)
        elif char in _FALSE_CHARS:
            answers.append(False)
        elif char in ", ":
            continue
        else:
            raise ValueError(f"Unexpected answer character {char!r}")
    return tuple(answers)


def _answer_sequence(value: str) -> Tuple[bool, ...]:
    try:
        return _parse_bits(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"{exc}; use y/n or 1/0 for each answer"
        ) from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Walk the CinePath question tree and report the recommended genres.",
    )
    parser.add_argument(
        "--answers",
        type=_answer_sequence,
        default=None,
        help="Answer sequence such as 'nyyynn'. Replays the demo walks when omitted.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON instead of tables.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Optional JSON or YAML settings file.",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=LOG_LEVELS,
        help="Override the logging verbosity from the settings file.",
    )
    return parser


def _configure_logging(settings: Settings, override: Optional[str]) -> None:
    level = override or settings.log_level
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING))


def _walk_payload(
    name: str, result: TraversalResult, engine: DecisionTree
) -> dict[str, object]:
    payload = result.to_dict()
    payload["name"] = name
    payload["genres"] = genre_names(result.tags)
    payload["comparison"] = compare_walk(result, engine.metrics()).to_dict()
    return payload


def _render_tables(
    console: Console, walks: Sequence[Tuple[str, TraversalResult]], engine: DecisionTree
) -> None:
    results = Table(title="Recommended genres")
    results.add_column("Walk")
    results.add_column("Depth", justify="right")
    results.add_column("Tags")
    results.add_column("Genres")
    for name, result in walks:
        results.add_row(
            name,
            str(result.depth),
            ", ".join(str(tag) for tag in result.tags) or "-",
            ", ".join(genre_names(result.tags)) or "-",
        )
    console.print(results)

    metrics = engine.metrics()
    stats = Table(title="Tree statistics")
    stats.add_column("Metric")
    stats.add_column("Value", justify="right")
    stats.add_row("Total nodes", str(metrics.total_nodes))
    stats.add_row("Questions", str(metrics.question_count))
    stats.add_row("Leaves", str(metrics.leaf_count))
    stats.add_row("Height", str(metrics.height))
    stats.add_row("Balanced depth", str(metrics.theoretical_depth))
    console.print(stats)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings(args.config)
    except ConfigError as error:
        parser.error(str(error))
    _configure_logging(settings, args.log_level)

    engine = DecisionTree()
    if args.answers is not None:
        walks = [("Custom", engine.traverse(args.answers))]
    else:
        walks = [(walk.name, engine.traverse(walk.answers)) for walk in _iter_demo_walks()]
    logger.info("Completed %s walks", len(walks))

    if args.json:
        print(json.dumps([_walk_payload(name, result, engine) for name, result in walks]))
    else:
        _render_tables(Console(), walks, engine)
    return 0


if __name__ == "__main__":  # pragma: no cover - exercised via CLI
    sys.exit(main())
