"""
urlsplit: split URLs into a fixed-width tabular record.

Each URL is parsed into its syntactic parts and its hostname is resolved
against the public suffix list into domain, subdomain, suffix and
registration.
"""

from .parsing import ParsedURL, ParseError, RelativeURLWithoutBase, URLParser
from .records import URL_RECORD_FIELDS, RecordAssembler, header_record
from .suffix import SuffixError, SuffixOutcome, SuffixResolver, SuffixRuleSet

__version__ = "0.1.0"

__all__ = [
    "URLParser",
    "ParsedURL",
    "ParseError",
    "RelativeURLWithoutBase",
    "SuffixRuleSet",
    "SuffixResolver",
    "SuffixOutcome",
    "SuffixError",
    "RecordAssembler",
    "URL_RECORD_FIELDS",
    "header_record",
]
