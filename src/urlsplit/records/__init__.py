"""
URL record assembly.

Combines URL parsing and suffix resolution into fixed-width records.
"""

from .assembler import (
    URL_RECORD_FIELDS,
    RecordAssembler,
    default_empty,
    error_record,
    header_record,
)
from .outcome import Failure, Outcome, Success

__all__ = [
    "RecordAssembler",
    "URL_RECORD_FIELDS",
    "header_record",
    "error_record",
    "default_empty",
    "Success",
    "Failure",
    "Outcome",
]
