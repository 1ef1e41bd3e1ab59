"""
Public suffix resolution.

Loads public suffix list rules once and splits hostnames into domain,
subdomain, suffix and registration.
"""

from .resolver import SuffixError, SuffixOutcome, SuffixResolver, non_name_message
from .rules import SuffixListError, SuffixRuleSet, default_list_path

__all__ = [
    "SuffixRuleSet",
    "SuffixListError",
    "default_list_path",
    "SuffixResolver",
    "SuffixOutcome",
    "SuffixError",
    "non_name_message",
]
