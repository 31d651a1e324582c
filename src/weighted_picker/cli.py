"""Command-line entry point: pick one name at random, optionally weighted.

Pipeline:
    words -> tokens -> entries -> weighted draw -> print the chosen name.

Options belonging to the tool itself are long (``--seed``, ``--source``,
...). Every other word, including ``-q`` weights, is handed to the
tokenizer in its original order.
"""

from __future__ import annotations

import argparse
import logging
import time
from typing import TYPE_CHECKING

from weighted_picker import __version__
from weighted_picker.config import LOG_LEVELS, load_config, resolve_config
from weighted_picker.exceptions import PickerError
from weighted_picker.logging.logger import DrawLogger
from weighted_picker.logging.types import DrawRecord
from weighted_picker.parsing.entries import parse_entries
from weighted_picker.random.factory import build_random_source
from weighted_picker.random.registry import available_sources
from weighted_picker.selection.selector import WeightedSelector

if TYPE_CHECKING:
    from collections.abc import Sequence

    from weighted_picker.selection.types import SelectionResult

logger = logging.getLogger("weighted_picker")

_EPILOG = """\
Names:
  Each bare word is a candidate with weight 1. Prefix a name with -q and a
  nonnegative number to set its weight, either as a separate word or
  appended directly:

    %(prog)s Alice Bob Carol          equal chances
    %(prog)s -q3 Alice Bob            Alice is three times as likely as Bob
    %(prog)s -q 0.5 Alice -q2 Bob     Bob is four times as likely as Alice

  A weight of 0 keeps a name in the list but it is never picked.

Environment:
  PICKER_RANDOM_SOURCE_TYPE, PICKER_SEED and PICKER_LOG_LEVEL provide
  defaults for --source, --seed and --log-level.
"""


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the tool's own options."""
    parser = argparse.ArgumentParser(
        prog="weighted-picker",
        usage="%(prog)s [options] [-q WEIGHT] NAME [[-q WEIGHT] NAME ...]",
        description="Pick one name at random, optionally weighted.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=_EPILOG,
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "--help", action="help",
        help="Show this help message and exit.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--source", dest="random_source_type", choices=available_sources(), default=None,
        help="Random source to draw from (default: system).",
    )
    parser.add_argument(
        "--seed", type=int, default=None,
        help="Seed for the 'seeded' source; makes the pick reproducible.",
    )
    parser.add_argument(
        "--log-level", choices=LOG_LEVELS, default=None,
        help="Draw diagnostics written to stderr (default: none).",
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Enable debug logging.",
    )
    return parser


def _record(result: SelectionResult, source_name: str, num_entries: int) -> DrawRecord:
    return DrawRecord(
        timestamp_ns=time.time_ns(),
        source=source_name,
        num_entries=num_entries,
        total_quality=result.total,
        value=result.value,
        chosen_name=result.name,
        chosen_index=result.index,
        chosen_quality=result.quality,
        fallback=result.fallback,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, draw one name, and print it.

    Args:
        argv: Arguments without the program name. Defaults to ``sys.argv[1:]``.

    Returns:
        Process exit status (0 on success). Input errors exit through
        ``argparse`` with status 2.
    """
    parser = build_parser()
    args, words = parser.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        config = resolve_config(
            load_config(),
            {
                "random_source_type": args.random_source_type,
                "seed": args.seed,
                "log_level": args.log_level,
            },
        )
        entries = parse_entries(words)
        logger.debug("Parsed %d entries: %s", len(entries), entries)

        source = build_random_source(config)
        try:
            result = WeightedSelector(source).select(entries)
        finally:
            source.close()
    except PickerError as exc:
        parser.error(str(exc))

    DrawLogger(config).log_draw(_record(result, source.name, len(entries)))
    print(result.name)
    return 0
