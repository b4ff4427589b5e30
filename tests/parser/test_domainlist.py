"""Tests for the plain domain-list source."""

from squidroll.parser import DomainList


class TestDomainList:

    def test_passes_lines_through(self):
        text = "example.com\n.ads.example.net\n"
        assert DomainList().parse(text) == ["example.com", ".ads.example.net"]

    def test_drops_comment_lines(self):
        text = "# header\nexample.com\n#example.org\n"
        assert DomainList().parse(text) == ["example.com"]

    def test_hash_only_comments_at_line_start(self):
        text = " # not a comment\nexample.com#frag\n"
        assert DomainList().parse(text) == [" # not a comment", "example.com#frag"]

    def test_keeps_blank_lines(self):
        text = "a.com\n\nb.com\n"
        assert DomainList().parse(text) == ["a.com", "", "b.com"]

    def test_crlf_line_endings(self):
        text = "a.com\r\nb.com\r\n"
        assert DomainList().parse(text) == ["a.com", "b.com"]

    def test_empty_input(self):
        assert DomainList().parse("") == []

    def test_only_newline_breaks_lines(self):
        text = "a.com\x0cb.com\nc.com\u2028d.com\n"
        assert DomainList().parse(text) == ["a.com\x0cb.com", "c.com\u2028d.com"]

    def test_no_trailing_newline(self):
        assert DomainList().parse("a.com\nb.com") == ["a.com", "b.com"]
