"""Blocklist conversion pipeline: read -> parse -> merge -> render -> write.

The whole input is read into memory, every pattern is inserted into a
single DomainTrie in file order, and the merged list is rendered to one
string before anything is written. A failure at either end aborts the
run with nothing written.
"""
from __future__ import annotations

import logging
import sys
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from squidroll.parser import Format, get_parser
from squidroll.trie import SEPARATOR, DomainTrie

log = logging.getLogger(__name__)


class SquidrollError(Exception):
    """Base class for fatal conversion errors."""


class InputReadError(SquidrollError):
    """Raised when the input blocklist cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Cannot read {path}: {reason}")


class OutputWriteError(SquidrollError):
    """Raised when the converted list cannot be written.

    path is None when the destination was standard output.
    """

    def __init__(self, path: Path | None, reason: str) -> None:
        self.path = path
        target = path if path is not None else "<stdout>"
        super().__init__(f"Cannot write {target}: {reason}")


@dataclass(frozen=True)
class ConversionStats:
    """Counts reported at the end of a run."""
    patterns_read: int
    patterns_stored: int
    node_count: int


def build_trie(patterns: Iterable[str], wildcard_mark: bool = False) -> DomainTrie:
    """Insert patterns in order, optionally forcing wildcard form.

    With wildcard_mark, a "." is prepended to every non-empty pattern
    that does not already start with one.
    """
    trie = DomainTrie()
    for pattern in patterns:
        if wildcard_mark and pattern and not pattern.startswith(SEPARATOR):
            pattern = SEPARATOR + pattern
        trie.insert(pattern)
    return trie


def read_input(path: Path) -> str:
    """Read the whole input file as UTF-8 text."""
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputReadError(path, str(exc)) from exc


def write_output(text: str, path: Path | None = None) -> None:
    """Write text to path, or to standard output when path is None."""
    try:
        if path is None:
            sys.stdout.write(text)
            sys.stdout.flush()
        else:
            with open(path, "w", encoding="utf-8") as f:
                f.write(text)
    except OSError as exc:
        raise OutputWriteError(path, str(exc)) from exc


def convert(
    input_path: Path,
    output_path: Path | None = None,
    fmt: Format = Format.DOMAIN_LIST,
    wildcard_mark: bool = False,
) -> ConversionStats:
    """Convert one blocklist file into a merged Squid domain list."""
    text = read_input(input_path)
    patterns = get_parser(fmt).parse(text)
    log.info("Read %d pattern(s) from %s (%s)", len(patterns), input_path, fmt)

    trie = build_trie(patterns, wildcard_mark=wildcard_mark)
    rendered = str(trie)
    stats = ConversionStats(
        patterns_read=len(patterns),
        patterns_stored=rendered.count("\n"),
        node_count=trie.node_count(),
    )

    write_output(rendered, output_path)
    log.info(
        "Wrote %d pattern(s) (%d trie nodes) to %s",
        stats.patterns_stored,
        stats.node_count,
        output_path if output_path is not None else "<stdout>",
    )
    return stats
