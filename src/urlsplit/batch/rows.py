"""
Row sources and sinks.

Input rows are read with the csv module; only their first field is used.
Output rows are written either fully quoted or verbatim.
"""

import csv
import sys
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, TextIO, Union

PathArg = Optional[Union[str, Path]]

STDIO_PATH = "-"
LINE_TERMINATOR = "\n"


class DelimiterError(ValueError):
    """Raised for a delimiter which is not a single ASCII character."""


def parse_delimiter(value: str) -> str:
    r"""
    Validate a field delimiter.

    The two-character escape '\t' stands for a tab.

    Raises:
        DelimiterError: If the value is not exactly one ASCII character
    """
    if value == r"\t":
        return "\t"
    if len(value) != 1:
        raise DelimiterError(
            f"Could not convert '{value}' to a single ASCII character."
        )
    if not value.isascii():
        raise DelimiterError(f"Could not convert '{value}' to ASCII delimiter.")
    return value


def _is_stdio(path: PathArg) -> bool:
    return path is None or str(path) == STDIO_PATH


def open_input(path: PathArg) -> TextIO:
    """Open an input file, or standard input for None / '-'."""
    if _is_stdio(path):
        return sys.stdin
    return open(path, "r", encoding="utf-8", newline="")


def open_output(path: PathArg) -> TextIO:
    """Open an output file, or standard output for None / '-'."""
    if _is_stdio(path):
        return sys.stdout
    return open(path, "w", encoding="utf-8", newline="")


def raise_field_size_limit() -> int:
    """
    Lift the csv module's per-field size limit as far as the platform allows.

    Returns:
        The limit now in effect
    """
    limit = sys.maxsize
    while True:
        try:
            csv.field_size_limit(limit)
            return limit
        except OverflowError:
            limit //= 2


def row_reader(
    stream: TextIO, delimiter: str = ",", quote: bool = False
) -> Iterator[List[str]]:
    """
    Read delimited rows from a text stream.

    Without quoting, quote characters are ordinary field content.
    """
    raise_field_size_limit()
    quoting = csv.QUOTE_MINIMAL if quote else csv.QUOTE_NONE
    return csv.reader(stream, delimiter=delimiter, quoting=quoting)


class RowSink:
    """
    Write rows of string fields to a text stream.

    With quote=True every field is quoted; otherwise fields are written
    as-is, separated by the delimiter.
    """

    def __init__(self, stream: TextIO, delimiter: str = ",", quote: bool = False):
        self.stream = stream
        self.delimiter = delimiter
        self.quote = quote
        self._writer = None
        if quote:
            self._writer = csv.writer(
                stream,
                delimiter=delimiter,
                quoting=csv.QUOTE_ALL,
                lineterminator=LINE_TERMINATOR,
            )

    def write(self, fields: Sequence[str]) -> None:
        if self._writer is not None:
            self._writer.writerow(fields)
        else:
            self.stream.write(self.delimiter.join(fields) + LINE_TERMINATOR)

    def flush(self) -> None:
        self.stream.flush()
