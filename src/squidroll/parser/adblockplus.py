"""Adblock Plus filter lists, domain-blocking subset only.

Only rules of the form "||example.com^" are understood. Each becomes
the wildcard pattern ".example.com", since such a rule blocks the
domain and all of its subdomains. Element hiding, exceptions, options,
regex rules and everything else are skipped without complaint.

The first line of a filter list is its "[Adblock Plus x.y]" header and
is always skipped, whatever it contains.

See https://adblockplus.org/filter-cheatsheet
"""
from __future__ import annotations

import logging

from squidroll.parser.base import PatternSource, split_lines

log = logging.getLogger(__name__)

RULE_PREFIX = "||"
RULE_SUFFIX = "^"


class AdblockPlus(PatternSource):
    """Extract "||domain^" rules as wildcard patterns."""

    def parse(self, text: str) -> list[str]:
        patterns: list[str] = []
        skipped = 0
        for line in split_lines(text)[1:]:
            if line.startswith(RULE_PREFIX) and line.endswith(RULE_SUFFIX):
                body = line[len(RULE_PREFIX):-len(RULE_SUFFIX)]
                patterns.append(f".{body}")
            else:
                skipped += 1
        log.debug(
            "adblock plus: %d rule(s) accepted, %d line(s) skipped",
            len(patterns), skipped,
        )
        return patterns
