"""
URL syntax parsing.

Splits a URL string into scheme, authority, path, query and fragment
without decoding or canonicalizing any component.
"""

from .url_parser import (
    ParsedURL,
    ParseError,
    RelativeURLWithoutBase,
    URLParser,
    is_ip_literal,
)

__all__ = [
    "URLParser",
    "ParsedURL",
    "ParseError",
    "RelativeURLWithoutBase",
    "is_ip_literal",
]
