"""Shared fixtures for urlsplit tests."""

import pytest

from urlsplit.config import reset_config
from urlsplit.suffix import SuffixResolver, SuffixRuleSet

SAMPLE_SUFFIX_LIST = """\
// Sample of the public suffix list format.

// ===BEGIN ICANN DOMAINS===

com
io
jp
uk
co.uk

// ck : https://en.wikipedia.org/wiki/.ck
*.ck
!www.ck

// kawasaki.jp
*.kawasaki.jp
!city.kawasaki.jp

cn
公司.cn

// ===END ICANN DOMAINS===
// ===BEGIN PRIVATE DOMAINS===

github.io

// ===END PRIVATE DOMAINS===
"""


@pytest.fixture(autouse=True)
def fresh_config():
    """Drop the cached global config around every test."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def suffix_list_path(tmp_path):
    """Write the sample suffix list to a file."""
    path = tmp_path / "public_suffix_list.dat"
    path.write_text(SAMPLE_SUFFIX_LIST, encoding="utf-8")
    return path


@pytest.fixture
def sample_rules(suffix_list_path):
    return SuffixRuleSet.load(suffix_list_path)


@pytest.fixture
def sample_resolver(sample_rules):
    return SuffixResolver(sample_rules)
