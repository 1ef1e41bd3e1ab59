"""
Command-line entry point.

Accepts a newline separated list of URLs and emits a CSV of their parts.

Reads from standard input when no input is given (or it is '-'), and writes
to standard output unless --output is given. The columns are:

    url           The full input URL
    scheme        e.g. 'https'
    netloc        user[:pass]@host[:port]
    path          e.g. '/path/to/resource'
    query         e.g. 'foo=bar'
    fragment      e.g. 'some-heading'
    username      Username from the userinfo
    password      Password from the userinfo
    hostname      The host as written, e.g. 'my.example.com'
    port          The port as written, e.g. '8080'
    domain        Name part before the suffix, e.g. 'example'
    subdomain     Unregistered part of the name, e.g. 'my'
    suffix        Public suffix, e.g. 'com' or 'co.uk'
    registration  Domain and suffix combined, e.g. 'example.com'
    error         Error encountered while splitting the URL, if any

domain, subdomain, suffix and registration come from the public suffix list.
"""

from __future__ import annotations

import argparse
import csv
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from urlsplit.batch import (
    BatchEngine,
    DelimiterError,
    RowSink,
    open_input,
    open_output,
    parse_delimiter,
    row_reader,
)
from urlsplit.config import get_config
from urlsplit.records import RecordAssembler
from urlsplit.suffix import SuffixListError, SuffixResolver, SuffixRuleSet

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_SETUP_ERROR = 1

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"


def delimiter_arg(value: str) -> str:
    try:
        return parse_delimiter(value)
    except DelimiterError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser, with defaults from config."""
    config = get_config()
    parser = argparse.ArgumentParser(
        prog="urlsplit",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="Input file of URLs ('-' or omitted for stdin).",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Write output to this file instead of stdout.",
    )
    parser.add_argument(
        "-n",
        "--no-headers",
        dest="headers",
        action="store_false",
        default=config.output.headers,
        help="Do not emit a header row, and assume the input has none.",
    )
    parser.add_argument(
        "-d",
        "--delimiter",
        type=delimiter_arg,
        default=config.output.delimiter,
        help=r"Field delimiter for reading and writing; one character or '\t' (default: ,).",
    )
    parser.add_argument(
        "-q",
        "--quote",
        action="store_true",
        default=config.output.quote,
        help="Enable CSV quoting when reading URLs and quote every output field.",
    )
    parser.add_argument(
        "--suffix-list",
        type=Path,
        default=config.suffix.list_path,
        help="Public suffix list file (defaults to the bundled snapshot).",
    )
    parser.add_argument(
        "--include-private",
        action="store_true",
        default=config.suffix.include_private,
        help="Also use the private domains section of the suffix list.",
    )
    parser.add_argument(
        "--log-level",
        default=config.log_level,
        help="Logging level (default from config).",
    )
    return parser


def run(args: argparse.Namespace) -> int:
    """Run one batch; returns the process exit code."""
    try:
        rules = SuffixRuleSet.load(args.suffix_list, include_private=args.include_private)
    except SuffixListError as e:
        logger.error("%s", e)
        return EXIT_SETUP_ERROR

    engine = BatchEngine(RecordAssembler(SuffixResolver(rules)))

    try:
        source = open_input(args.input)
    except OSError as e:
        logger.error("failed to open %s: %s", args.input, e)
        return EXIT_SETUP_ERROR

    try:
        try:
            destination = open_output(args.output)
        except OSError as e:
            logger.error("failed to create %s: %s", args.output, e)
            return EXIT_SETUP_ERROR

        try:
            sink = RowSink(destination, delimiter=args.delimiter, quote=args.quote)
            rows = row_reader(source, delimiter=args.delimiter, quote=args.quote)
            engine.run(rows, sink, header=args.headers)
        except (OSError, csv.Error, UnicodeDecodeError) as e:
            logger.error("error parsing URLs: %s", e)
            return EXIT_SETUP_ERROR
        finally:
            if destination is not sys.stdout:
                destination.close()
    finally:
        if source is not sys.stdin:
            source.close()

    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        parser = build_parser()
    except ValidationError as e:
        logging.basicConfig(format=LOG_FORMAT, stream=sys.stderr)
        logger.error("invalid configuration: %s", e)
        return EXIT_SETUP_ERROR

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format=LOG_FORMAT,
        stream=sys.stderr,
    )

    return run(args)


if __name__ == "__main__":
    sys.exit(main())
