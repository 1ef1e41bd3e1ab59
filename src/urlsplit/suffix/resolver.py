"""
Hostname to public suffix resolution.
"""

from dataclasses import dataclass

from urlsplit.parsing import is_ip_literal

from .rules import SuffixRuleSet


class SuffixError(ValueError):
    """Raised when a hostname cannot be split into domain parts."""


def non_name_message(hostname: str) -> str:
    """Error message for a host which is not a registered name."""
    if not hostname:
        return "empty host"
    return f"host '{hostname}' is an IP address, not a domain name"


@dataclass(frozen=True)
class SuffixOutcome:
    """
    Domain parts of a hostname.

    Attributes:
        domain: Label immediately left of the suffix (e.g. 'example')
        subdomain: Labels left of the domain (e.g. 'my' or 'a.b')
        suffix: Public suffix (e.g. 'co.uk'), '' when no rule matched
        registration: domain + '.' + suffix, or just domain without a suffix
    """

    domain: str
    subdomain: str
    suffix: str
    registration: str


class SuffixResolver:
    """
    Split hostnames using a loaded SuffixRuleSet.

    Usage:
        resolver = SuffixResolver(SuffixRuleSet.load())
        outcome = resolver.resolve("my.example.co.uk")
        print(outcome.registration)  # example.co.uk
    """

    def __init__(self, rules: SuffixRuleSet):
        self.rules = rules

    def resolve(self, hostname: str) -> SuffixOutcome:
        """
        Resolve a hostname against the public suffix rules.

        Matching is case-insensitive; returned labels keep their original
        spelling. A trailing root dot is ignored.

        Args:
            hostname: Registered name (not an IP literal)

        Returns:
            SuffixOutcome for the hostname

        Raises:
            SuffixError: If the host is empty, an IP address, or has empty labels
        """
        if not hostname or is_ip_literal(hostname):
            raise SuffixError(non_name_message(hostname))

        name = hostname[:-1] if hostname.endswith(".") else hostname
        labels = tuple(name.split("."))
        if any(not label for label in labels):
            raise SuffixError(f"empty label in host '{hostname}'")

        size = self.rules.match_length(tuple(label.lower() for label in labels))

        suffix_labels = labels[len(labels) - size:] if size else ()
        rest = labels[: len(labels) - size]
        domain = rest[-1] if rest else ""
        subdomain = ".".join(rest[:-1])
        suffix = ".".join(suffix_labels)

        if suffix:
            registration = f"{domain}.{suffix}"
        else:
            # No public suffix recognized: the domain stands alone
            registration = domain

        return SuffixOutcome(
            domain=domain,
            subdomain=subdomain,
            suffix=suffix,
            registration=registration,
        )
