#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/test_textile_conversion.py
"""Integration tests for the public conversion API.

Tests cover:
- The byte entry points ``to_html`` and ``to_xhtml``
- Reference resolution across a document
- Text conversion from paths, streams, bytes and strings with ``convert``
- Mixed real-world documents

"""

import io

import pytest

from textiler import (
    FileNotFoundError,
    InvalidOptionsError,
    TextileOptions,
    ValidationError,
    convert,
    to_html,
    to_xhtml,
)


@pytest.mark.integration
class TestByteEntryPoints:
    """Tests for to_html and to_xhtml."""

    def test_link(self):
        """A quoted link inside its paragraph."""
        assert to_html(b'"Hobix":http://hobix.com/') == b'\t<p><a href="http://hobix.com/">Hobix</a></p>'

    def test_image(self):
        """An image with alt text."""
        assert to_html(b"!openwindow1.gif(Bunny.)!") == (
            b'\t<p><img src="openwindow1.gif" title="Bunny." alt="Bunny."></p>'
        )

    def test_code(self):
        """A code span."""
        assert to_html(b"@p@") == b"\t<p><code>p</code></p>"

    def test_reference_resolution(self):
        """A reference defined anywhere resolves link targets."""
        assert to_html(b'"Hobix":hobix\n\n[hobix]http://hobix.com') == (
            b'\t<p><a href="http://hobix.com">Hobix</a></p>'
        )

    def test_redefined_reference_uses_last_url(self):
        """A name defined twice resolves to its last definition."""
        assert to_html(b'[x]http://a.com\n[x]http://b.com\n"X":x') == b'\t<p><a href="http://b.com">X</a></p>'

    def test_unresolved_reference(self):
        """An unknown reference name is used as the href."""
        assert to_html(b'"Hobix":hobix') == b'\t<p><a href="hobix">Hobix</a></p>'

    def test_style_semicolon_idempotent(self):
        """Style serializes with one trailing semicolon either way."""
        assert to_html(b"%{color:red}x%") == to_html(b"%{color:red;}x%")
        assert b'style="color:red;"' in to_html(b"%{color:red}x%")

    def test_xhtml_differs_only_in_breaks(self):
        """XHTML output equals HTML output with self-closing breaks."""
        markup = b"h1. T\n\nsome *text*\nmore _text_\n\n# a\n## b"

        assert to_xhtml(markup) == to_html(markup).replace(b"<br>", b"<br />")

    def test_trailing_newlines_trimmed(self):
        """Output never ends in a newline."""
        assert not to_html(b"a\n\n\n").endswith(b"\n")

    def test_bytearray_accepted(self):
        """Bytes-like input is accepted."""
        assert to_html(bytearray(b"x")) == b"\t<p>x</p>"

    def test_text_rejected(self):
        """Passing text is API misuse."""
        with pytest.raises(ValidationError) as exc_info:
            to_html("x")

        assert exc_info.value.parameter_name == "data"

    def test_dump_flags_do_not_change_output(self, capsys):
        """Debug flags never alter the result."""
        assert to_html(b"a\nb", dump_lines=True, dump_paragraphs=True) == to_html(b"a\nb")
        assert capsys.readouterr().err.startswith("----------\n")

    def test_invalid_utf8_preserved(self):
        """Bytes outside UTF-8 pass through unchanged."""
        assert to_html(b"\xa9 2025 *Caf\xe9*") == b"\t<p>\xa9 2025 <strong>Caf\xe9</strong></p>"


@pytest.mark.integration
class TestConvert:
    """Tests for the text entry point."""

    def test_markup_string(self):
        """A string that is not a file name is markup."""
        assert convert("h1. Hi") == "\t<h1>Hi</h1>"

    def test_path(self, temp_dir):
        """A Path is read from disk."""
        source = temp_dir / "doc.textile"
        source.write_text("# one\n# two", encoding="utf-8")

        assert convert(source) == "\t<ol>\n\t\t<li>one</li>\n\t\t<li>two</li>\n\t</ol>"

    def test_path_string(self, temp_dir):
        """A string naming an existing file is read from disk."""
        source = temp_dir / "doc.textile"
        source.write_text("a\nb", encoding="utf-8")

        assert convert(str(source), TextileOptions(flavor="xhtml")) == "\t<p>a<br />\nb</p>"

    def test_missing_path(self, temp_dir):
        """A missing Path raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            convert(temp_dir / "missing.textile")

    def test_missing_path_string_is_markup(self):
        """A string that names no file is converted as markup."""
        assert convert("nosuchfile.textile") == "\t<p>nosuchfile.textile</p>"

    def test_binary_stream(self):
        """Binary streams are decoded."""
        assert convert(io.BytesIO(b"_x_")) == "\t<p><em>x</em></p>"

    def test_text_stream(self):
        """Text streams are read directly."""
        assert convert(io.StringIO("*x*")) == "\t<p><strong>x</strong></p>"

    def test_bytes_with_encoding(self):
        """``input_encoding`` decodes bytes."""
        assert convert("café".encode("latin-1"), TextileOptions(input_encoding="latin-1")) == "\t<p>café</p>"

    def test_bad_encoding(self):
        """An unknown encoding is a validation error."""
        with pytest.raises(ValidationError) as exc_info:
            convert(b"x", TextileOptions(input_encoding="no-such-codec"))

        assert exc_info.value.parameter_name == "input_encoding"

    def test_wrong_options(self):
        """Options of the wrong type are rejected."""
        with pytest.raises(InvalidOptionsError):
            convert("x", options={"flavor": "html"})

    def test_unsupported_input(self):
        """Objects that are neither text, bytes, paths nor streams are rejected."""
        with pytest.raises(ValidationError):
            convert(42)


@pytest.mark.integration
class TestMixedDocuments:
    """Tests with realistic documents."""

    def test_article(self):
        """Headings, paragraphs, lists, links and code in one document."""
        markup = "\n".join(
            [
                "h1(title). Release notes",
                "",
                "[tracker]https://example.org/issues",
                "",
                "This release fixes *three* bugs reported on \"the tracker\":tracker today.",
                "See @CHANGES@ for details.",
                "",
                "* Faster _parsing_",
                "* Fewer -bugs- +features+",
                "",
                "bq. It's done.",
                "",
                "<pre>",
                "if a < b:",
                "</pre>",
            ]
        )

        assert convert(markup) == (
            '\t<h1 class="title">Release notes</h1>\n\n'
            "\t<p>This release fixes <strong>three</strong> bugs reported on "
            '<a href="https://example.org/issues">the tracker</a> today.<br>\n'
            "See <code>CHANGES</code> for details.</p>\n\n"
            "\t<ul>\n\t\t<li>Faster <em>parsing</em></li>\n"
            "\t\t<li>Fewer <del>bugs</del> <ins>features</ins>\n\n</li>\n\t</ul>"
            "\t<blockquote>\n\t\t<p>It&#8217;s done.</p>\n\t</blockquote>\n\n"
            "<pre>\nif a &lt; b:\n</pre>"
        )

    def test_plain_prose(self):
        """Prose without markup is paragraph-wrapped and otherwise unchanged."""
        text = "Plain words, numbers 1 2 3, and punctuation; nothing more."

        assert convert(text) == f"\t<p>{text}</p>"
