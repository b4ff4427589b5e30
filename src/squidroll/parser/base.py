"""Abstract base for blocklist pattern sources.

A source turns the raw text of one blocklist format into the ordered
list of pattern strings fed to DomainTrie.insert(). Lines a source does
not understand are dropped, never reported as errors.
"""
from __future__ import annotations

from abc import ABC, abstractmethod


class PatternSource(ABC):
    """Interface that every input format implements."""

    @abstractmethod
    def parse(self, text: str) -> list[str]:
        """Return the patterns found in text, in file order."""
        ...


def split_lines(text: str) -> list[str]:
    """Split on "\\n" only, dropping one trailing "\\r" from each line.

    A final newline does not produce an empty last line. Other characters
    that str.splitlines() treats as breaks (form feed, U+2028, ...) stay
    inside their line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]
