"""Domain suffix trie and its node types."""

from squidroll.trie.domain_trie import SEPARATOR, DomainTrie
from squidroll.trie.node import Marker, TrieNode

__all__ = [
    "DomainTrie",
    "Marker",
    "SEPARATOR",
    "TrieNode",
]
