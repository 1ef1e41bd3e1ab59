"""
Record assembly.

A URL record always has the 15 fields of URL_RECORD_FIELDS, in order.
Parsing runs first; suffix resolution only runs when parsing succeeded.
Whichever stage fails writes its message to the trailing 'error' field and
leaves the fields it would have filled empty.
"""

import logging
from typing import Optional, Tuple

from urlsplit.parsing import ParsedURL, ParseError, URLParser
from urlsplit.suffix import SuffixError, SuffixOutcome, SuffixResolver, non_name_message

from .outcome import Failure, Outcome, Success

logger = logging.getLogger(__name__)

URL_RECORD_FIELDS: Tuple[str, ...] = (
    "url",
    "scheme",
    "netloc",
    "path",
    "query",
    "fragment",
    "username",
    "password",
    "hostname",
    "port",
    "domain",
    "subdomain",
    "suffix",
    "registration",
    "error",
)

RECORD_WIDTH = len(URL_RECORD_FIELDS)

# Fields filled by suffix resolution
SUFFIX_WIDTH = 4

URLRecord = Tuple[str, ...]


def default_empty(value: Optional[str]) -> str:
    """Map a missing value to the empty string."""
    return "" if value is None else value


def header_record() -> URLRecord:
    return URL_RECORD_FIELDS


def error_record(url: str, message: str) -> URLRecord:
    """Record for a URL which could not be parsed at all."""
    return (url,) + ("",) * (RECORD_WIDTH - 2) + (message,)


def parsed_fields(parts: ParsedURL) -> Tuple[str, ...]:
    return (
        parts.scheme,
        parts.netloc,
        parts.path,
        default_empty(parts.query),
        default_empty(parts.fragment),
        parts.username,
        default_empty(parts.password),
        parts.hostname,
        default_empty(parts.port),
    )


def suffix_fields(outcome: SuffixOutcome) -> Tuple[str, ...]:
    return (
        outcome.domain,
        outcome.subdomain,
        outcome.suffix,
        outcome.registration,
    )


class RecordAssembler:
    """
    Turn URL strings into URL records.

    Never raises for bad input: parse and resolution errors are reported in
    the record's error field.
    """

    def __init__(self, resolver: SuffixResolver, parser: Optional[URLParser] = None):
        """
        Initialize the assembler.

        Args:
            resolver: Shared suffix resolver
            parser: URL parser (creates new if None)
        """
        self.resolver = resolver
        self.parser = parser or URLParser()

    def parse_stage(self, url: str) -> Outcome[ParsedURL]:
        try:
            return Success(self.parser.parse(url))
        except ParseError as e:
            return Failure(str(e))

    def resolve_stage(self, parts: ParsedURL) -> Outcome[SuffixOutcome]:
        if parts.domain is None:
            # IP literals and empty hosts are not names
            return Failure(non_name_message(parts.hostname))
        try:
            return Success(self.resolver.resolve(parts.domain))
        except SuffixError as e:
            return Failure(str(e))

    def assemble(self, url: str) -> URLRecord:
        """
        Build the record for one URL.

        Args:
            url: Raw URL string, copied as-is into the 'url' field

        Returns:
            Tuple of exactly 15 strings
        """
        parsed = self.parse_stage(url)

        if isinstance(parsed, Failure):
            logger.debug("Failed to parse URL %r: %s", url, parsed.message)
            return error_record(url, parsed.message)

        resolved = self.resolve_stage(parsed.value)

        if isinstance(resolved, Failure):
            logger.debug("Failed to resolve host of %r: %s", url, resolved.message)
            tail = ("",) * SUFFIX_WIDTH + (resolved.message,)
        else:
            tail = suffix_fields(resolved.value) + ("",)

        return (url,) + parsed_fields(parsed.value) + tail
