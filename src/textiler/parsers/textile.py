#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textiler/parsers/textile.py
"""Textile to HTML converter.

:class:`TextileParser` owns the state of one conversion and drives it line by
line. Every logical line goes through the block dispatcher, which recognises
headings, explicit paragraphs, block quotes, list items, raw HTML tag lines and
``notextile.`` passthrough lines. Anything else is paragraph text and is handed
to :class:`textiler.parsers.inline.InlineScanner`.

The parser keeps track of:

- whether a paragraph is open, so consecutive lines are joined with manual
  line breaks and a blank line closes the paragraph;
- the nesting depth of ordered and unordered lists;
- the open ``<pre>`` / ``<code>`` raw HTML blocks, which switch text to code
  escaping and suppress block markup;
- the number of lines in the current block, which decides whether a newline
  separates lines inside a raw HTML block.

"""

from __future__ import annotations

import logging
import re
import sys
from typing import Optional, TextIO

from textiler.constants import DUMP_SEPARATOR, ORDERED_LIST_MARKER, UNORDERED_LIST_MARKER
from textiler.exceptions import InvalidOptionsError, ValidationError
from textiler.options.textile import TextileOptions
from textiler.parsers.blocks import (
    HeadingLine,
    ListItemLine,
    ParagraphLine,
    parse_blockquote,
    parse_heading,
    parse_list_item,
    parse_notextile,
    parse_paragraph,
)
from textiler.parsers.html_tags import RawBlockStack, parse_html_tag
from textiler.parsers.inline import InlineScanner
from textiler.parsers.lines import split_lines
from textiler.parsers.references import Reference, extract_references
from textiler.renderers.html import HtmlOutput
from textiler.utils.encoding import bytes_to_markup, markup_to_bytes

logger = logging.getLogger(__name__)

_LIST_TAGS = {ORDERED_LIST_MARKER: "ol", UNORDERED_LIST_MARKER: "ul"}
_CODE_END_PATTERN = re.compile(r"</code>", re.IGNORECASE)


class TextileParser:
    """Convert one Textile document to HTML or XHTML.

    A parser instance holds the state of exactly one conversion. Create a new
    instance for every document.

    Parameters
    ----------
    options : TextileOptions or None, default None
        Conversion options. Default options are used when None.
    diagnostic_stream : TextIO or None, default None
        Stream receiving the ``dump_lines`` output. Defaults to ``sys.stderr``
        at the time of the dump.

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not a :class:`TextileOptions` instance

    Examples
    --------
        >>> TextileParser().parse_text("*hello* world")
        '\\t<p><strong>hello</strong> world</p>'

    """

    def __init__(self, options: Optional[TextileOptions] = None, diagnostic_stream: Optional[TextIO] = None):
        if options is not None and not isinstance(options, TextileOptions):
            raise InvalidOptionsError(
                converter_name=type(self).__name__,
                expected_type=TextileOptions,
                received_type=type(options),
            )
        self.options: TextileOptions = options or TextileOptions()
        self.diagnostic_stream = diagnostic_stream

        self.references: dict[str, Reference] = {}
        self.output = HtmlOutput(self.options.flavor)
        self.raw_blocks = RawBlockStack()
        self.inline = InlineScanner(self.output, self.references, self.raw_blocks)
        self.in_paragraph = False
        self.list_depths: dict[str, int] = {"ol": 0, "ul": 0}
        self.block_line_no = 0
        self._consumed = False

    def parse_bytes(self, data: bytes) -> bytes:
        """Convert raw markup bytes, preserving bytes that are not valid UTF-8."""
        return markup_to_bytes(self.parse_text(bytes_to_markup(data)))

    def parse_text(self, text: str) -> str:
        """Convert markup text and return the HTML with trailing newlines removed.

        Raises
        ------
        ValidationError
            If this parser has already converted a document

        """
        if self._consumed:
            raise ValidationError(
                "TextileParser instances convert a single document; create a new parser",
                parameter_name="parser",
            )
        self._consumed = True

        lines = split_lines(text)
        logger.debug("Split input into %d line(s)", len(lines))
        if self.options.dump_lines:
            self._dump_lines(lines)

        lines, references = extract_references(lines)
        self.references.update(references)

        for line in lines:
            self._dispatch(line)

        self._close_all_lists()
        self._close_paragraph()
        return self.output.result()

    def _dump_lines(self, lines: list[str]) -> None:
        stream = self.diagnostic_stream or sys.stderr
        stream.write(DUMP_SEPARATOR + "\n")
        for line in lines:
            stream.write(f"'{line}'\n")

    # ------------------------------------------------------------------
    # Block dispatch
    # ------------------------------------------------------------------

    def _dispatch(self, line: str) -> None:
        if not line:
            self._blank_line()
            return
        self.block_line_no += 1

        if self.raw_blocks:
            # Block markup is not recognised inside <pre> and <code>
            if line[0] == "<" and self._html_tag_line(line):
                return
            self._text_line(line)
            return

        first = line[0]
        if first == "h":
            heading = parse_heading(line)
            if heading is not None:
                self._heading(heading)
                return
        elif first == "<":
            if self._html_tag_line(line):
                return
        elif first == "n":
            passthrough = parse_notextile(line)
            if passthrough is not None:
                self.output.write(passthrough)
                return
        elif first == "p":
            paragraph = parse_paragraph(line)
            if paragraph is not None:
                self._explicit_paragraph(paragraph)
                return
        elif first == "b":
            quote = parse_blockquote(line)
            if quote is not None:
                self._blockquote(quote)
                return
        elif first in _LIST_TAGS:
            item = parse_list_item(line, first)
            if item is not None:
                self._list_item(item)
                return

        self._text_line(line)

    def _blank_line(self) -> None:
        self._close_paragraph()
        self.block_line_no = 0

    def _heading(self, heading: HeadingLine) -> None:
        self._close_block_context()
        self.output.write("\t")
        self.output.start_tag(f"h{heading.level}", heading.attributes)
        self.output.write_text(heading.content)
        self.output.end_tag(f"h{heading.level}")

    def _explicit_paragraph(self, paragraph: ParagraphLine) -> None:
        self._close_block_context()
        self.output.write("\t")
        self.output.start_tag("p", paragraph.attributes)
        self.inline.scan(paragraph.content)
        self.output.end_tag("p")

    def _blockquote(self, content: str) -> None:
        self._close_block_context()
        self.output.write("\t<blockquote>\n\t\t<p>")
        self.inline.scan(content)
        self.output.write("</p>\n\t</blockquote>")

    def _html_tag_line(self, line: str) -> bool:
        tag = parse_html_tag(line)
        if tag is None:
            return False
        was_raw = bool(self.raw_blocks)
        opened = tag.is_start and self.raw_blocks.push(tag.name)
        closes = not tag.is_start and tag.name == self.raw_blocks.top
        self._start_line()
        # Inside a raw block only tags that open or close a tracked block stay markup
        if was_raw and not (opened or closes):
            self.output.write_text(tag.markup, code=True)
        else:
            self.output.write(tag.markup)
        if closes:
            self.raw_blocks.pop(tag.name)
        self.inline.scan(tag.rest)
        return True

    def _text_line(self, line: str) -> None:
        self._close_all_lists()
        self._start_line()
        if not self.raw_blocks.in_code:
            self.inline.scan(line)
            return

        match = _CODE_END_PATTERN.search(line)
        if match is None:
            self.output.write_text(line, code=True)
            return
        self.output.write_text(line[: match.start()], code=True)
        self.output.write(match.group(0))
        self.raw_blocks.pop("code")
        self.inline.scan(line[match.end() :])

    def _start_line(self) -> None:
        if self.raw_blocks:
            if self.block_line_no > 1:
                self.output.write("\n")
            return
        if not self.in_paragraph:
            self.output.write("\t<p>")
            self.in_paragraph = True
        else:
            self.output.line_break()

    def _close_paragraph(self) -> None:
        if self.in_paragraph:
            self.output.end_tag("p")
            self.in_paragraph = False
        self.output.write("\n\n")

    def _close_block_context(self) -> None:
        """Close lists and any open paragraph before a self-contained block."""
        self._close_all_lists()
        if self.in_paragraph:
            self._close_paragraph()

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def _list_item(self, item: ListItemLine) -> None:
        tag = _LIST_TAGS[item.marker]
        for other in self.list_depths:
            if other != tag:
                self._close_list(other)
        if self.in_paragraph:
            self._close_paragraph()

        depth = self.list_depths[tag]
        if item.level > depth:
            while depth < item.level:
                if depth:
                    self.output.write("\n")
                self.output.write(f"\t<{tag}>\n\t\t<li>")
                depth += 1
        else:
            while depth > item.level:
                self.output.write(f"</li>\n\t</{tag}>")
                depth -= 1
            self.output.write("</li>\n\t\t<li>")
        self.list_depths[tag] = depth
        self.inline.scan(item.content)

    def _close_list(self, tag: str) -> None:
        while self.list_depths[tag] > 0:
            self.output.write(f"</li>\n\t</{tag}>")
            self.list_depths[tag] -= 1

    def _close_all_lists(self) -> None:
        for tag in self.list_depths:
            self._close_list(tag)
