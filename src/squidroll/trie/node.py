"""Node type for the character-level domain suffix trie."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto


class Marker(Enum):
    """What, if anything, terminates at a trie node."""

    CONTINUE = auto()
    ABSOLUTE = auto()
    WILDCARD = auto()

    def is_terminal(self) -> bool:
        """Returns True when a pattern ends at this node."""
        return self is not Marker.CONTINUE


@dataclass
class TrieNode:
    """One character position along a reversed domain path.

    children maps a single character to the next node. A node owns its
    children exclusively; nodes are never shared between parents.
    """
    marker: Marker = Marker.CONTINUE
    children: dict[str, TrieNode] = field(default_factory=dict)
