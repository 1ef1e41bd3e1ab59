"""
Generic URI syntax parser.

Decomposes a URL following the grammar

    scheme ":" "//" [ userinfo "@" ] host [ ":" port ] path [ "?" query ] [ "#" fragment ]

Components are returned as the raw substrings of the input: nothing is
percent-decoded, lower-cased (except the scheme), or filled in with defaults
(ports stay as written, omitted ports stay omitted).
"""

import ipaddress
import re
from dataclasses import dataclass
from typing import Optional, Tuple

# Schemes that must carry an authority with a host
SPECIAL_SCHEMES = frozenset({"ftp", "http", "https", "ws", "wss"})

# Schemes that may carry an authority with an empty host
FILE_SCHEMES = frozenset({"file"})

_SCHEME_PREFIX_RE = re.compile(r"^([^:/?#]*):")
_SCHEME_RE = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*$")
_PORT_RE = re.compile(r"^[0-9]+$")
_BAD_PERCENT_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")

# Leading/trailing C0 controls and space are not part of the URL
_STRIP_CHARS = "".join(chr(c) for c in range(0x21))

# Code points which may never appear in a host
_FORBIDDEN_HOST_CHARS = frozenset("\x00\t\n\r #/:<>?@[\\]^|\x7f")

MAX_PORT = 65535


class ParseError(ValueError):
    """Raised when a string cannot be parsed as a URL."""


class RelativeURLWithoutBase(ParseError):
    """Raised for relative references, which have no base to resolve against."""

    def __init__(self, message: str = "relative URL without a base"):
        super().__init__(message)


def is_ip_literal(host: str) -> bool:
    """
    Check whether a host is an IP address rather than a registered name.

    Accepts dotted-quad IPv4 addresses and bracketed IPv6 literals.
    """
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    try:
        ipaddress.ip_address(host)
    except ValueError:
        return False
    return True


@dataclass(frozen=True)
class ParsedURL:
    """
    Syntactic parts of a URL.

    Attributes:
        scheme: Lower-cased scheme (e.g. 'https')
        username: Username from the userinfo, '' when absent
        password: Password from the userinfo, None when absent
        host: Host exactly as written ('' when the URL has no host)
        port: Port exactly as written, None when absent
        path: Path ('/' for an empty path under a special scheme)
        query: Query without the leading '?', None when absent
        fragment: Fragment without the leading '#', None when absent
    """

    scheme: str
    username: str
    password: Optional[str]
    host: str
    port: Optional[str]
    path: str
    query: Optional[str]
    fragment: Optional[str]

    @property
    def hostname(self) -> str:
        """Literal host text, IP literals included."""
        return self.host

    @property
    def domain(self) -> Optional[str]:
        """Host as a registered name, or None for IP literals and empty hosts."""
        if not self.host or is_ip_literal(self.host):
            return None
        return self.host

    @property
    def netloc(self) -> str:
        """
        Reconstruct the authority as user[:pass]@host[:port].

        Separators are only included alongside the component they introduce.
        """
        netloc = self.host
        if self.port is not None:
            netloc = f"{netloc}:{self.port}"
        if self.username or self.password is not None:
            userinfo = self.username
            if self.password is not None:
                userinfo = f"{userinfo}:{self.password}"
            netloc = f"{userinfo}@{netloc}"
        return netloc


class URLParser:
    """
    Parser for absolute URLs.

    Usage:
        parser = URLParser()
        parts = parser.parse("https://user@my.example.com:8080/a?b=c#d")
        print(parts.netloc)  # user@my.example.com:8080
    """

    def parse(self, raw: str) -> ParsedURL:
        """
        Parse a URL string into its parts.

        Args:
            raw: URL string

        Returns:
            ParsedURL with the raw components

        Raises:
            RelativeURLWithoutBase: If the string has no scheme
            ParseError: If any component is malformed
        """
        text = raw.strip(_STRIP_CHARS)

        if _BAD_PERCENT_RE.search(text):
            raise ParseError("invalid percent-encoding")

        text, fragment = _split_once(text, "#")
        text, query = _split_once(text, "?")

        scheme, rest = self._split_scheme(text)

        if rest.startswith("//"):
            authority, slash, path = rest[2:].partition("/")
            path = slash + path
            username, password, host, port = self._parse_authority(authority)

            if not host and scheme in SPECIAL_SCHEMES:
                raise ParseError("empty host")
            if not path and (scheme in SPECIAL_SCHEMES or scheme in FILE_SCHEMES):
                path = "/"
        else:
            if scheme in SPECIAL_SCHEMES:
                raise ParseError(f"missing authority for {scheme} URL")
            username, password, host, port = "", None, "", None
            path = rest

        return ParsedURL(
            scheme=scheme,
            username=username,
            password=password,
            host=host,
            port=port,
            path=path,
            query=query,
            fragment=fragment,
        )

    def _split_scheme(self, text: str) -> Tuple[str, str]:
        """Split 'scheme:rest', rejecting relative references."""
        match = _SCHEME_PREFIX_RE.match(text)
        if match is None or not match.group(1):
            raise RelativeURLWithoutBase()

        scheme = match.group(1)
        if not _SCHEME_RE.match(scheme):
            if not scheme[0].isalpha():
                raise RelativeURLWithoutBase()
            raise ParseError(f"invalid scheme '{scheme}'")

        return scheme.lower(), text[match.end():]

    def _parse_authority(
        self, authority: str
    ) -> Tuple[str, Optional[str], str, Optional[str]]:
        """
        Parse '[userinfo@]host[:port]'.

        Returns:
            (username, password, host, port)
        """
        userinfo, at, hostport = authority.rpartition("@")
        username, password = "", None
        if at:
            # An empty password is the same as no password
            username, _, pw = userinfo.partition(":")
            password = pw or None

        if hostport.startswith("["):
            end = hostport.find("]")
            if end < 0:
                raise ParseError("invalid IPv6 address")
            host = hostport[: end + 1]
            try:
                ipaddress.IPv6Address(host[1:-1])
            except ValueError:
                raise ParseError("invalid IPv6 address") from None

            remainder = hostport[end + 1 :]
            if remainder and not remainder.startswith(":"):
                raise ParseError("invalid IPv6 address")
            port_text = remainder[1:] if remainder else None
        else:
            host, colon, port_text = hostport.partition(":")
            if not colon:
                port_text = None
            if any(char in _FORBIDDEN_HOST_CHARS for char in host):
                raise ParseError("invalid domain character")

        return username, password, host, self._parse_port(port_text)

    def _parse_port(self, port_text: Optional[str]) -> Optional[str]:
        """Validate a port, treating an empty port as absent."""
        if not port_text:
            return None
        if not _PORT_RE.match(port_text) or int(port_text) > MAX_PORT:
            raise ParseError("invalid port number")
        return port_text


def _split_once(text: str, separator: str) -> Tuple[str, Optional[str]]:
    """Split at the first separator; the tail is None when it is missing."""
    head, found, tail = text.partition(separator)
    return head, (tail if found else None)
