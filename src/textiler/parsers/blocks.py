#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textiler/parsers/blocks.py
"""Recognisers for line-level Textile constructs.

Each function inspects one logical line and returns a small record describing
the construct, or None when the line is something else. They keep no state;
:class:`textiler.parsers.textile.TextileParser` decides what to emit.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from textiler.constants import (
    BLOCK_SIGNATURE_END,
    BLOCKQUOTE_PREFIX,
    HEADING_LEVELS,
    NOTEXTILE_PREFIX,
)
from textiler.parsers.attributes import AttributesOpt, parse_attributes


@dataclass(frozen=True)
class HeadingLine:
    """``hN(attrs). content``"""

    level: int
    attributes: AttributesOpt
    content: str


@dataclass(frozen=True)
class ParagraphLine:
    """``p(attrs). content``"""

    attributes: AttributesOpt
    content: str


@dataclass(frozen=True)
class ListItemLine:
    """A list item; ``level`` is the number of repeated markers."""

    marker: str
    level: int
    content: str


def _after_signature(text: str) -> Optional[str]:
    if not text.startswith(BLOCK_SIGNATURE_END):
        return None
    return text[len(BLOCK_SIGNATURE_END) :]


def parse_heading(line: str) -> Optional[HeadingLine]:
    """Recognise ``h1.`` through ``h6.`` headings with optional attributes.

    Examples
    --------
        >>> parse_heading("h3. rest")
        HeadingLine(level=3, attributes=AttributesOpt(css_class=None, style=None, lang=None), content='rest')
        >>> parse_heading("h3.rest") is None
        True
        >>> parse_heading("h0. bar") is None
        True

    """
    if len(line) < 4 or line[0] != "h" or line[1] not in "0123456789":
        return None
    level = int(line[1])
    if level not in HEADING_LEVELS:
        return None
    rest, attributes = parse_attributes(line[2:])
    content = _after_signature(rest)
    if content is None:
        return None
    return HeadingLine(level=level, attributes=attributes, content=content)


def parse_paragraph(line: str) -> Optional[ParagraphLine]:
    """Recognise an explicit ``p.`` paragraph with optional attributes."""
    if len(line) < 3 or line[0] != "p":
        return None
    rest, attributes = parse_attributes(line[1:])
    content = _after_signature(rest)
    if content is None:
        return None
    return ParagraphLine(attributes=attributes, content=content)


def parse_notextile(line: str) -> Optional[str]:
    """Return the text after ``notextile. ``, or None."""
    if not line.startswith(NOTEXTILE_PREFIX):
        return None
    return line[len(NOTEXTILE_PREFIX) :]


def parse_blockquote(line: str) -> Optional[str]:
    """Return the text after ``bq. ``, or None."""
    if not line.startswith(BLOCKQUOTE_PREFIX):
        return None
    return line[len(BLOCKQUOTE_PREFIX) :]


def parse_list_item(line: str, marker: str) -> Optional[ListItemLine]:
    """Recognise a list item made of repeated ``marker`` characters and a space.

    Examples
    --------
        >>> parse_list_item("## two", "#")
        ListItemLine(marker='#', level=2, content='two')
        >>> parse_list_item("# ", "#")
        ListItemLine(marker='#', level=1, content='')
        >>> parse_list_item("#two", "#") is None
        True

    """
    level = len(line) - len(line.lstrip(marker))
    if level == 0 or level >= len(line) or line[level] != " ":
        return None
    return ListItemLine(marker=marker, level=level, content=line[level + 1 :])
