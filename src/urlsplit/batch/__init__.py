"""
Batch processing of URL rows.
"""

from .engine import BatchEngine, BatchStats
from .rows import (
    DelimiterError,
    RowSink,
    open_input,
    open_output,
    parse_delimiter,
    row_reader,
)

__all__ = [
    "BatchEngine",
    "BatchStats",
    "RowSink",
    "row_reader",
    "open_input",
    "open_output",
    "parse_delimiter",
    "DelimiterError",
]
