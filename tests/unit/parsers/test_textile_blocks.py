#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for line-level construct recognisers."""

import pytest

from textiler.parsers.attributes import AttributesOpt
from textiler.parsers.blocks import (
    ListItemLine,
    parse_blockquote,
    parse_heading,
    parse_list_item,
    parse_notextile,
    parse_paragraph,
)


@pytest.mark.unit
class TestHeadings:
    """Test heading recognition."""

    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_levels(self, level):
        """h1 through h6 are headings."""
        heading = parse_heading(f"h{level}. Title")

        assert heading.level == level
        assert heading.content == "Title"
        assert heading.attributes.is_empty()

    @pytest.mark.parametrize("line", ["h0. bar", "h7. bar", "h9. bar", "h1.bar", "h1 bar", "hx. bar", "h1.", "h¹. x"])
    def test_not_headings(self, line):
        """Out-of-range levels and a missing ``. `` are rejected."""
        assert parse_heading(line) is None

    def test_minimal_heading(self):
        """``h1. `` is a heading with empty content."""
        assert parse_heading("h1. ").content == ""

    def test_attributes(self):
        """Attributes sit between the level and the dot."""
        heading = parse_heading("h2(big#top){color:red}. Hi")

        assert heading.attributes == AttributesOpt(css_class="big#top", style="color:red;")
        assert heading.content == "Hi"


@pytest.mark.unit
class TestParagraphs:
    """Test explicit paragraph recognition."""

    def test_plain(self):
        """``p. `` starts an explicit paragraph."""
        assert parse_paragraph("p. text").content == "text"

    def test_with_alignment(self):
        """Alignment shorthands become style."""
        paragraph = parse_paragraph("p>. right")

        assert paragraph.attributes.style == "text-align:right;"

    @pytest.mark.parametrize("line", ["pizza", "p.text", "p", "p(c)text"])
    def test_not_paragraphs(self, line):
        """Words starting with p are ordinary text."""
        assert parse_paragraph(line) is None


@pytest.mark.unit
class TestPrefixedBlocks:
    """Test ``notextile.`` and ``bq.`` prefixes."""

    def test_notextile(self):
        """The text after the prefix is returned untouched."""
        assert parse_notextile("notextile. <b>*x*</b>") == "<b>*x*</b>"
        assert parse_notextile("notextile.x") is None

    def test_blockquote(self):
        """``bq. `` needs the trailing space."""
        assert parse_blockquote("bq. quoted") == "quoted"
        assert parse_blockquote("bq.quoted") is None
        assert parse_blockquote("bqx") is None


@pytest.mark.unit
class TestListItems:
    """Test list item recognition."""

    def test_ordered_levels(self):
        """The number of markers is the nesting level."""
        assert parse_list_item("## two", "#") == ListItemLine(marker="#", level=2, content="two")

    def test_unordered(self):
        """Unordered items use ``*``."""
        assert parse_list_item("* one", "*") == ListItemLine(marker="*", level=1, content="one")

    def test_empty_item(self):
        """A marker and space alone form an empty item."""
        assert parse_list_item("# ", "#") == ListItemLine(marker="#", level=1, content="")

    @pytest.mark.parametrize("line", ["#two", "##", "*bold*", "**bold**", "x # y", ""])
    def test_not_list_items(self, line):
        """A marker run must be followed by a space."""
        marker = "*" if "*" in line else "#"
        assert parse_list_item(line, marker) is None
