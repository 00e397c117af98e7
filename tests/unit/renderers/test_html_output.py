#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the HTML output buffer and attribute serialization."""

import pytest

from textiler.parsers.attributes import AttributesOpt
from textiler.renderers.html import HtmlOutput, format_attributes, format_class_and_id, normalize_style


@pytest.mark.unit
class TestAttributeSerialization:
    """Test serialization of class, id, style and lang."""

    @pytest.mark.parametrize(
        "style,expected",
        [
            ("color:red", "color:red;"),
            ("color:red;", "color:red;"),
            ("color:red;foo:bar", "color:red; foo:bar;"),
            ("color:red;   foo:bar;", "color:red; foo:bar;"),
        ],
    )
    def test_normalize_style(self, style, expected):
        """Inner semicolons get one space and the last one is guaranteed."""
        assert normalize_style(style) == expected

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("big", ' class="big"'),
            ("big#top", ' class="big" id="top"'),
            ("#top", ' id="top"'),
            (None, ""),
        ],
    )
    def test_class_and_id(self, value, expected):
        """``class#id`` is split into two attributes."""
        assert format_class_and_id(value) == expected

    def test_attribute_order(self):
        """Attributes are written as class/id, style, lang."""
        attributes = AttributesOpt(css_class="c#i", style="color:red;", lang="en")

        assert format_attributes(attributes) == ' class="c" id="i" style="color:red;" lang="en"'

    def test_no_attributes(self):
        """Missing attributes serialize to nothing."""
        assert format_attributes(None) == ""
        assert format_attributes(AttributesOpt()) == ""


@pytest.mark.unit
class TestHtmlOutput:
    """Test the output buffer."""

    @pytest.mark.parametrize("flavor,expected", [("html", "<br>\n"), ("xhtml", "<br />\n")])
    def test_line_break_per_flavor(self, flavor, expected):
        """Only the line break differs between flavors."""
        output = HtmlOutput(flavor)
        output.line_break()

        assert output.getvalue() == expected

    def test_text_escaping(self):
        """Text is escaped for its context."""
        output = HtmlOutput()
        output.write_text("it's <b>")
        output.write_text(" it's <b>", code=True)

        assert output.getvalue() == "it&#8217;s <b> it's &lt;b&gt;"

    def test_tags(self):
        """Start tags carry attributes, end tags never do."""
        output = HtmlOutput()
        output.start_tag("span", AttributesOpt(lang="fr"))
        output.end_tag("span")

        assert output.getvalue() == '<span lang="fr"></span>'

    def test_image_with_alt(self):
        """Alt text is also written as the title."""
        output = HtmlOutput()
        output.image("a.gif", "A cat")

        assert output.getvalue() == '<img src="a.gif" title="A cat" alt="A cat">'

    def test_floated_linked_image(self):
        """Float style follows src and a link wraps the image."""
        output = HtmlOutput()
        output.image("a.gif", "", float_right=True, href="http://x.com/")

        assert output.getvalue() == (
            '<a href="http://x.com/" class="img"><img src="a.gif" style="float: right;" alt=""></a>'
        )

    def test_result_trims_trailing_newlines(self):
        """The final result has no trailing newlines."""
        output = HtmlOutput()
        output.write("\t<p>x</p>\n\n")

        assert output.result() == "\t<p>x</p>"
        assert output.getvalue().endswith("\n\n")
