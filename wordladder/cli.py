"""Command-line interface for wordladder."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import List, Optional, Set

from wordladder.config import LADDER_CONFIG
from wordladder.errors import LexiconError
from wordladder.ladder import LadderGraph
from wordladder.lexicon import read_lexicon
from wordladder.logging import get_logger, set_global_log_level
from wordladder.types import LadderSet

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    if n == 1:
        return singular
    return plural or (singular + "s")


def _fail(message: str) -> None:
    logger.error(message)
    print(f"❌ ERROR: {message}")
    sys.exit(1)


def _validate_query(start: str, target: str, lexicon: Set[str]) -> Optional[str]:
    """Return a description of the first violated query precondition, if any."""
    if len(start) != len(target):
        return (
            f"Start '{start}' and target '{target}' must have the same length "
            f"({len(start)} != {len(target)})"
        )
    for word in (start, target):
        if word not in lexicon:
            return f"Word '{word}' is not in the lexicon"
    return None


def _print_ladders(
    start: str,
    target: str,
    ladders: LadderSet,
    as_json: bool,
    limit: Optional[int],
) -> None:
    shown = ladders if limit is None else ladders[:limit]

    if as_json:
        payload = {"start": start, "target": target, "ladders": shown}
        print(json.dumps(payload, indent=2))
        return

    for ladder in shown:
        print(LADDER_CONFIG.joiner.join(ladder))

    if not ladders:
        print(f"No ladder found from '{start}' to '{target}'")
        return

    count = len(ladders)
    print(
        f"Found {count:,} {_plural(count, 'ladder')} of length {len(ladders[0])}"
    )
    if len(shown) < count:
        print(f"  ... and {count - len(shown):,} more")


def _run_query(
    lexicon_path: Path,
    start: str,
    target: str,
    as_json: bool = False,
    limit: Optional[int] = None,
) -> None:
    """Load a lexicon, search for ladders and print them.

    Args:
        lexicon_path: Word list file.
        start: First word of every ladder.
        target: Last word of every ladder.
        as_json: Print a JSON document instead of one line per ladder.
        limit: Print at most this many ladders.
    """
    logger.info(f"Loading lexicon from: {lexicon_path}")
    _start_time = perf_counter()

    try:
        lexicon = read_lexicon(lexicon_path)
    except LexiconError as e:
        _fail(f"{e} ({type(e.__cause__).__name__}: {e.__cause__})")

    problem = _validate_query(start, target, lexicon)
    if problem:
        _fail(problem)

    logger.info(f"Searching ladders from '{start}' to '{target}'")
    ladders = LadderGraph(start, lexicon).path_search(target)
    _print_ladders(start, target, ladders, as_json, limit)

    _elapsed = perf_counter() - _start_time
    logger.info(f"Search completed in {_format_duration(_elapsed)}")


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return number


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``wordladder`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="wordladder",
        description="Find all shortest word ladders between two words.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument("lexicon", type=Path, help="Path to a word list file")
    parser.add_argument("start", help="Word to start from")
    parser.add_argument("target", help="Word to reach")
    parser.add_argument(
        "--json", action="store_true", help="Print ladders as a JSON document"
    )
    parser.add_argument(
        "--limit",
        "-n",
        type=_non_negative_int,
        default=None,
        help="Print at most this many ladders",
    )

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)

    _run_query(
        lexicon_path=args.lexicon,
        start=args.start,
        target=args.target,
        as_json=args.json,
        limit=args.limit,
    )


if __name__ == "__main__":
    main()
