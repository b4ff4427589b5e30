"""Shared fixtures for trie tests."""

from __future__ import annotations

import pytest

from squidroll.trie import DomainTrie

SCENARIO_PATTERNS = [
    "bar.com",
    ".cc.bar.com",
    "a.bar.com",
    "aa.bar.com",
    "b.bar.com",
    "b.bar.com",
    "c.bar.com",
]


def make_trie(*patterns: str) -> DomainTrie:
    """Build a trie by inserting patterns in the given order."""
    trie = DomainTrie()
    for pattern in patterns:
        trie.insert(pattern)
    return trie


@pytest.fixture
def scenario_trie() -> DomainTrie:
    return make_trie(*SCENARIO_PATTERNS)
