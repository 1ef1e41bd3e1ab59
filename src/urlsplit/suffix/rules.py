"""
Public suffix rule set.

Rules come from a cached copy of the public suffix list
(https://publicsuffix.org/list/) and are matched by publicsuffixlist, which
handles normal, wildcard ('*.ck') and exception ('!www.ck') rules as well as
punycode spellings of IDN rules.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

import publicsuffixlist
from publicsuffixlist import PublicSuffixList

logger = logging.getLogger(__name__)


class SuffixListError(RuntimeError):
    """Raised when the suffix list cache cannot be loaded."""


def default_list_path() -> Path:
    """Path of the suffix list snapshot shipped with publicsuffixlist."""
    return Path(publicsuffixlist.PSLFILE)


def count_rules(text: str) -> int:
    """Count rule lines (non-blank, non-comment) in suffix list text."""
    return sum(
        1
        for line in text.splitlines()
        if line.strip() and not line.lstrip().startswith("//")
    )


class SuffixRuleSet:
    """
    Loaded public suffix rules.

    Build it once with SuffixRuleSet.load() and share it; lookups never
    modify it.
    """

    def __init__(self, psl: PublicSuffixList, rule_count: int = 0):
        """
        Wrap a loaded PublicSuffixList.

        Args:
            psl: List built with accept_unknown=False, so unlisted TLDs have
                no suffix
            rule_count: Number of rules in the source, for reporting
        """
        self._psl = psl
        self.rule_count = rule_count

    @classmethod
    def load(
        cls,
        path: Optional[Union[str, Path]] = None,
        include_private: bool = False,
    ) -> "SuffixRuleSet":
        """
        Load rules from a public suffix list file.

        Args:
            path: Suffix list file (defaults to the bundled snapshot)
            include_private: Also use the PRIVATE DOMAINS section

        Returns:
            Loaded SuffixRuleSet

        Raises:
            SuffixListError: If the file is missing, unreadable or has no rules
        """
        list_path = Path(path) if path is not None else default_list_path()

        try:
            text = list_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise SuffixListError(
                f"Failed to load suffix list {list_path}: {e}"
            ) from e

        rule_count = count_rules(text)
        if not rule_count:
            raise SuffixListError(f"No suffix rules found in {list_path}")

        psl = PublicSuffixList(
            source=text,
            accept_unknown=False,
            only_icann=not include_private,
        )

        logger.info(
            "Loaded %d suffix rules from %s (private=%s)",
            rule_count,
            list_path,
            include_private,
        )
        return cls(psl, rule_count)

    def match_length(self, labels: Tuple[str, ...]) -> int:
        """
        Number of trailing labels which form the public suffix.

        Labels must already be lower-cased and non-empty.

        Returns:
            Suffix length in labels, 0 when no rule matches
        """
        suffix = self._psl.publicsuffix(".".join(labels))
        if not suffix:
            return 0
        return suffix.count(".") + 1
