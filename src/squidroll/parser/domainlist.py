"""Plain domain lists: one pattern per line, "#" starts a comment line."""
from __future__ import annotations

import logging

from squidroll.parser.base import PatternSource, split_lines

log = logging.getLogger(__name__)

COMMENT_PREFIX = "#"


class DomainList(PatternSource):
    """Pass every non-comment line through verbatim.

    Lines keep their leading "." (wildcard) or lack of one (absolute).
    Blank lines are kept too; inserting an empty pattern is a no-op.
    """

    def parse(self, text: str) -> list[str]:
        patterns = [
            line for line in split_lines(text)
            if not line.startswith(COMMENT_PREFIX)
        ]
        log.debug("domain list: %d pattern line(s)", len(patterns))
        return patterns
