"""compoundfinder CLI - Compound word discovery.

Usage:
    python -m compoundfinder.main --input words.txt --target 6
    python -m compoundfinder.main -i words.txt -t 6 --output results.json --format json
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import config as cfg
from .errors import CompoundFinderError
from .finder import search_results
from .ingest import READERS, get_reader
from .output import ResultWriter, save_results


def build_parser(defaults: dict) -> argparse.ArgumentParser:
    """Create the argument parser, seeded with config defaults."""
    parser = argparse.ArgumentParser(
        description="compoundfinder - Find words built from other words"
    )
    parser.add_argument(
        "--input",
        "-i",
        type=Path,
        required=True,
        help="Input file to be processed (one word per line)",
    )
    parser.add_argument(
        "--target",
        "-t",
        type=int,
        required=True,
        help="Word length target",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Write results to this file instead of stdout",
    )
    parser.add_argument(
        "--format",
        choices=cfg.OUTPUT_FORMATS,
        default=defaults.get("output_format", "text"),
        help=f"Output format (default: {defaults.get('output_format', 'text')})",
    )
    parser.add_argument(
        "--reader",
        choices=sorted(READERS),
        default="plain_text",
        help="Input file reader (default: plain_text)",
    )
    parser.add_argument(
        "--comment-char",
        type=str,
        default=defaults.get("comment_char"),
        help="Treat text after this character as a comment",
    )
    parser.add_argument(
        "--workers",
        "-w",
        type=int,
        default=defaults.get("workers", 0),
        help=f"Parallel workers, 0 = all cores (default: {defaults.get('workers', 0)})",
    )
    parser.add_argument(
        "--executor",
        choices=cfg.EXECUTORS,
        default=defaults.get("executor", "process"),
        help=f"Worker pool type (default: {defaults.get('executor', 'process')})",
    )
    parser.add_argument(
        "--serial",
        action="store_true",
        default=not defaults.get("parallel", True),
        help="Validate in a single thread",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Hide the progress bar",
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        default=defaults.get("quiet", False),
        help="Only print results",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        default=defaults.get("verbose", False),
        help="Log search details",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    # Load defaults from config.json
    defaults = cfg.load().get("defaults", cfg.FALLBACK_DEFAULTS)
    args = build_parser(defaults).parse_args(argv)

    if args.quiet:
        level = logging.ERROR
    elif args.verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    def say(text: str = "") -> None:
        # Banner goes to stderr when results go to stdout
        if not args.quiet:
            print(text, file=sys.stderr if args.output is None else sys.stdout)

    say("=" * 60)
    say("compoundfinder - Compound Word Discovery")
    say("=" * 60)
    say(f"Input: {args.input}")
    say(f"Target length: {args.target}")
    say()

    separator = cfg.default_separator()
    equals = cfg.default_equals()

    try:
        say("[1/2] Reading vocabulary...")
        reader = get_reader(args.reader)(comment_char=args.comment_char)
        read_result = reader.read(args.input)
        say(f"  {read_result.total_valid:,} words ({read_result.total_duplicates:,} dupes)")

        say("\n[2/2] Searching combinations...")
        results, stats = search_results(
            read_result.words,
            args.target,
            workers=args.workers,
            executor=args.executor,
            parallel=not args.serial,
            show_progress=not (args.quiet or args.no_progress),
        )
    except (CompoundFinderError, OSError) as e:
        print(f"ERROR - {e}", file=sys.stderr)
        return 1

    say(f"  Length multisets: {stats.multisets:,}")
    say(f"  Results: {stats.results:,}")
    say(f"  Time: {stats.elapsed:.2f}s")
    say()

    if args.output is not None:
        count = save_results(results, args.output, args.format, args.target, separator, equals)
        say(f"Wrote {count:,} results to {args.output}")
    else:
        writer = ResultWriter(sys.stdout, args.format, separator, equals)
        writer.write_all(results)
        writer.close(args.target)

    say("=" * 60)
    say("Done!")
    say("=" * 60)

    return 0


if __name__ == "__main__":
    sys.exit(main())
