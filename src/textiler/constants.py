#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textiler/constants.py
"""Constants shared by the Textile parser, renderer and command line."""

from __future__ import annotations

from typing import Literal

# Output flavors
OutputFlavor = Literal["html", "xhtml"]
OUTPUT_FLAVORS: tuple[OutputFlavor, ...] = ("html", "xhtml")
DEFAULT_FLAVOR: OutputFlavor = "html"

# Manual line break spelling per flavor
LINE_BREAKS: dict[str, str] = {
    "html": "<br>\n",
    "xhtml": "<br />\n",
}

# Debug defaults
DEFAULT_DUMP_LINES = False
DEFAULT_DUMP_PARAGRAPHS = False
DUMP_SEPARATOR = "----------"

# HTML tag names passed through verbatim when they appear in markup
HTML_TAGS: frozenset[str] = frozenset(
    {
        "a",
        "abbr",
        "acronym",
        "address",
        "b",
        "big",
        "blockquote",
        "br",
        "caption",
        "center",
        "cite",
        "code",
        "col",
        "colgroup",
        "dd",
        "del",
        "dfn",
        "div",
        "dl",
        "dt",
        "em",
        "font",
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        "hr",
        "i",
        "img",
        "ins",
        "kbd",
        "li",
        "ol",
        "p",
        "pre",
        "q",
        "s",
        "samp",
        "small",
        "span",
        "strike",
        "strong",
        "sub",
        "sup",
        "table",
        "tbody",
        "td",
        "tfoot",
        "th",
        "thead",
        "tr",
        "tt",
        "u",
        "ul",
        "var",
    }
)

# Raw HTML blocks whose contents are serialized with code escaping
TRACKED_BLOCK_TAGS: frozenset[str] = frozenset({"pre", "code"})

# Escaping
APOSTROPHE_ENTITY = "&#8217;"
CODE_ESCAPES: dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
}

# Attribute sublanguage character sets (ASCII only)
_ASCII_LETTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
_ASCII_DIGITS = "0123456789"
CLASS_CHARS: frozenset[str] = frozenset(_ASCII_LETTERS + _ASCII_DIGITS + "#-")
STYLE_CHARS: frozenset[str] = frozenset(_ASCII_LETTERS + _ASCII_DIGITS + "#-:;")
LANG_CHARS: frozenset[str] = frozenset(_ASCII_LETTERS + "-")

# Links, images and reference definitions
URL_TERMINATORS: frozenset[str] = frozenset(" !")
REFERENCE_URL_SCHEMES: tuple[str, ...] = ("http", "https")
IMAGE_LINK_CLASS = "img"
FLOAT_RIGHT_STYLE = "float: right;"

# Block markers
NOTEXTILE_PREFIX = "notextile. "
BLOCKQUOTE_PREFIX = "bq. "
BLOCK_SIGNATURE_END = ". "
HEADING_LEVELS = range(1, 7)
ORDERED_LIST_MARKER = "#"
UNORDERED_LIST_MARKER = "*"

# Environment variables read by the command line
ENV_FLAVOR = "TEXTILER_FLAVOR"
ENV_LOG_LEVEL = "TEXTILER_LOG_LEVEL"
