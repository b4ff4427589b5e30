"""Character-level suffix trie for Squid-style domain patterns.

Patterns come in two kinds:
    "example.com"      -- absolute, matches exactly "example.com"
    ".example.com"     -- wildcard, matches "example.com" and every
                          subdomain of it ("a.example.com", ...)

Each pattern is walked back to front, one character per edge, so the
TLD sits nearest the root and domains that share a suffix share nodes.
The terminal marker of a wildcard pattern lives on the node reached by
its leading ".", one level deeper than the node for the domain it names.

Insertion merges as it goes. A wildcard prunes everything below it,
demotes an absolute entry for the domain it names, and swallows any
later pattern that falls underneath it. The stored set is therefore the
minimal list Squid needs: it refuses to load a dstdomain ACL in which a
domain is listed both exactly and as a wildcard.

Merging is order-sensitive. Inserting ".cc.bar.com" before or after
"c.bar.com" can change which entries survive, and callers that care
about a particular result must insert in a particular order.
"""

from __future__ import annotations

from collections.abc import Iterator

from squidroll.trie.node import Marker, TrieNode

SEPARATOR = "."


class DomainTrie:
    """Insert-only trie over reversed domain characters.

    Usage:
        trie = DomainTrie()
        trie.insert("bar.com")
        trie.insert(".cc.bar.com")

        trie.matches("x.cc.bar.com")   # True
        trie.matches("cc.bar.com")     # True
        trie.matches("d.bar.com")      # False

        print(trie, end="")            # one pattern per line
    """

    def __init__(self) -> None:
        self._root = TrieNode()

    def insert(self, pattern: str) -> None:
        """Insert a pattern, merging it with what is already stored.

        A leading "." makes the pattern a wildcard. Empty patterns are
        ignored.
        """
        if not pattern:
            return

        if pattern[0] == SEPARATOR:
            kind = Marker.WILDCARD
        else:
            kind = Marker.ABSOLUTE

        node = self._root
        parent = node
        for ch in reversed(pattern):
            parent = node
            if ch not in node.children:
                node.children[ch] = TrieNode()
            node = node.children[ch]

            # Already covered by a wildcard on a parent domain.
            if ch == SEPARATOR and node.marker is Marker.WILDCARD:
                return

        if kind is Marker.ABSOLUTE and self._has_wildcard_child(node):
            return

        if kind is Marker.WILDCARD:
            if parent.marker is Marker.ABSOLUTE:
                parent.marker = Marker.CONTINUE
            node.children = {}

        node.marker = kind

    def matches(self, query: str) -> bool:
        """Return True if any stored pattern covers the query domain."""
        node = self._root
        for ch in reversed(query):
            node = node.children.get(ch)
            if node is None:
                return False
            if node.marker is Marker.WILDCARD:
                return True

        # The domain named by a wildcard pattern carries no marker of its
        # own; the marker sits on its "." child.
        if self._has_wildcard_child(node):
            return True

        return node.marker.is_terminal()

    def __contains__(self, query: str) -> bool:
        return self.matches(query)

    def serialize(self) -> Iterator[str]:
        """Yield every stored pattern in forward domain order.

        Children are visited in sorted character order, so the output is
        stable from run to run and grouped by shared suffix.
        """
        yield from self._walk()

    def _walk(self) -> Iterator[str]:
        """Iterative DFS, each path holding the reversed characters so far.

        Children are pushed in reverse sorted order so they pop in sorted
        order.
        """
        stack: list[tuple[TrieNode, str]] = [(self._root, "")]
        while stack:
            node, path = stack.pop()
            if node.marker.is_terminal():
                yield path[::-1]
            for ch in sorted(node.children, reverse=True):
                stack.append((node.children[ch], path + ch))

    @staticmethod
    def _has_wildcard_child(node: TrieNode) -> bool:
        child = node.children.get(SEPARATOR)
        return child is not None and child.marker is Marker.WILDCARD

    def node_count(self) -> int:
        """Count total nodes in the trie, root included."""
        count = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            count += 1
            stack.extend(node.children.values())
        return count

    def __len__(self) -> int:
        return sum(1 for _ in self.serialize())

    def __str__(self) -> str:
        return "".join(f"{line}\n" for line in self.serialize())
