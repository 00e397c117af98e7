#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for text and code escaping."""

import pytest

from textiler.utils.escape import escape_code, escape_text


@pytest.mark.unit
class TestEscapeText:
    """Test escaping of ordinary text."""

    def test_apostrophe(self):
        """Apostrophes become right single quotation marks."""
        assert escape_text("it's Bob's") == "it&#8217;s Bob&#8217;s"

    def test_html_characters_untouched(self):
        """Ordinary text keeps its angle brackets and ampersands."""
        assert escape_text('a < b & "c"') == 'a < b & "c"'

    def test_empty(self):
        """Empty text stays empty."""
        assert escape_text("") == ""


@pytest.mark.unit
class TestEscapeCode:
    """Test escaping of code and preformatted text."""

    def test_reserved_characters(self):
        """``&``, ``<`` and ``>`` become entities."""
        assert escape_code("a < b && c > d") == "a &lt; b &amp;&amp; c &gt; d"

    def test_quotes_untouched(self):
        """Quotes are not escaped in code."""
        assert escape_code("it's \"x\"") == "it's \"x\""

    @pytest.mark.parametrize("entity", ["&amp;", "&lt;", "&copy;", "&#169;", "&#xA9;", "&#X2f;"])
    def test_existing_entities_are_kept(self, entity):
        """Entity references are not escaped twice."""
        assert escape_code(entity) == entity

    @pytest.mark.parametrize("text,expected", [("&", "&amp;"), ("& b;", "&amp; b;"), ("&#;", "&amp;#;"), ("&1;", "&amp;1;")])
    def test_bare_ampersands(self, text, expected):
        """Ampersands that do not start an entity are escaped."""
        assert escape_code(text) == expected
