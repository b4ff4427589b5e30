"""Tests for the Adblock Plus source."""

import logging

from squidroll.parser import AdblockPlus

HEADER = "[Adblock Plus 2.0]"


class TestAdblockPlus:

    def test_extracts_domain_rules_as_wildcards(self):
        text = f"{HEADER}\n||ads.example.com^\n||tracker.net^\n"
        assert AdblockPlus().parse(text) == [".ads.example.com", ".tracker.net"]

    def test_header_always_skipped(self):
        text = "||first.com^\n||second.com^\n"
        assert AdblockPlus().parse(text) == [".second.com"]

    def test_ignores_other_rules(self):
        text = "\n".join([
            HEADER,
            "! comment",
            "||example.com^$third-party",
            "@@||allowed.com^",
            "example.org##.banner",
            "/banner/*/img^",
            "|http://example.net",
            "||kept.com^",
            "",
        ])
        assert AdblockPlus().parse(text) == [".kept.com"]

    def test_header_only(self):
        assert AdblockPlus().parse(HEADER) == []
        assert AdblockPlus().parse("") == []

    def test_logs_skipped_count(self, caplog):
        text = f"{HEADER}\n! comment\n||a.com^\n"
        with caplog.at_level(logging.DEBUG, logger="squidroll.parser"):
            AdblockPlus().parse(text)
        assert "1 rule(s) accepted, 1 line(s) skipped" in caplog.text

    def test_only_newline_breaks_lines(self):
        text = f"{HEADER}\n||a.com^\x0c||b.com^\r\n||c.com^\n"
        assert AdblockPlus().parse(text) == [".a.com^\x0c||b.com", ".c.com"]
