"""Blocklist input formats and the registry that picks one by name."""
from __future__ import annotations

from enum import Enum

from squidroll.parser.adblockplus import AdblockPlus
from squidroll.parser.base import PatternSource
from squidroll.parser.domainlist import DomainList


class Format(Enum):
    """Supported input formats, valued by their command-line names."""

    DOMAIN_LIST = "domain-list"
    ADBLOCK_PLUS = "adblock-plus"

    def __str__(self) -> str:
        return self.value


_PARSERS: dict[Format, type[PatternSource]] = {
    Format.DOMAIN_LIST: DomainList,
    Format.ADBLOCK_PLUS: AdblockPlus,
}


def get_parser(fmt: Format) -> PatternSource:
    """Return a fresh pattern source for the given format."""
    return _PARSERS[fmt]()


__all__ = [
    "AdblockPlus",
    "DomainList",
    "Format",
    "PatternSource",
    "get_parser",
]
