#!/usr/bin/env python3
"""
Bigram Histogram

Command line entry point. Reads one text file and prints the frequency of
every pair of adjacent words in it.

Usage:
    bigram-histogram book.txt                     # map order + total line
    bigram-histogram book.txt --ordered           # first-seen order
    bigram-histogram book.txt --csv counts.csv    # also export to CSV

Exit status:
    0  success
    2  no input file given / bad arguments
    9  the file could not be opened or read
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import HistogramConfig
from .errors import (
    EXIT_INVALID_ARGUMENTS,
    EXIT_IO_ERROR,
    EXIT_OK,
    HistogramIOError,
    InvalidArgumentsError,
)
from .histogram import build_histogram
from .output import render, save_histogram_csv

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """Raises instead of exiting so `main` decides the exit status."""

    def error(self, message):
        raise InvalidArgumentsError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="bigram-histogram",
        description="Histogram of adjacent word pairs in a UTF-8 text file"
    )

    parser.add_argument(
        "path",
        help="Text file to read"
    )

    parser.add_argument(
        "--ordered",
        action="store_true",
        help="Print bigrams in first-seen order as 'word1 word2:count'"
    )

    parser.add_argument(
        "--reset-per-line",
        action="store_true",
        help="Do not pair the last word of a line with the first word of the next"
    )

    parser.add_argument(
        "--csv",
        type=str,
        help="Also write the histogram to this CSV file"
    )

    parser.add_argument(
        "--encoding",
        type=str,
        help="Input encoding (default: utf-8)"
    )

    parser.add_argument(
        "--config", "-c",
        type=str,
        help="Path to configuration JSON file"
    )

    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (logs go to stderr)"
    )

    return parser


def load_config(args: argparse.Namespace) -> HistogramConfig:
    """Merge the optional JSON config file with command line flags."""
    settings = {}
    if args.config:
        settings = HistogramConfig.from_json(args.config).to_dict()

    if args.ordered:
        settings["track_order"] = True
        settings["output_format"] = "ordered"
    if args.reset_per_line:
        settings["reset_per_line"] = True
    if args.encoding:
        settings["encoding"] = args.encoding

    return HistogramConfig.from_dict(settings)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()

    try:
        args = parser.parse_args(argv)
    except InvalidArgumentsError as exc:
        print(f"Error parsing: {exc}", file=sys.stderr)
        print(parser.format_usage(), end="", file=sys.stderr)
        return EXIT_INVALID_ARGUMENTS

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )

    try:
        config = load_config(args)
    except OSError as exc:
        print(f"Cannot read the config file: {exc}", file=sys.stderr)
        return EXIT_IO_ERROR
    except (ValueError, LookupError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return EXIT_INVALID_ARGUMENTS

    print(f"Generating bigram histogram for {args.path}")

    try:
        acc = build_histogram(args.path, config)
    except HistogramIOError as exc:
        if exc.line_no is not None:
            print(f"Could not read line no {exc.line_no} of {exc.path}: {exc.args[0]}", file=sys.stderr)
        else:
            print(f"Cannot read the file: {exc}", file=sys.stderr)
        return EXIT_IO_ERROR

    output = render(acc, config)
    if output:
        print(output)

    if args.csv:
        try:
            path = save_histogram_csv(acc, args.csv)
        except OSError as exc:
            print(f"Cannot write the CSV file: {exc}", file=sys.stderr)
            return EXIT_IO_ERROR
        logger.info("Histogram saved to: %s", path)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
