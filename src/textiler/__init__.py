"""textiler - Textile markup to HTML and XHTML.

textiler converts text written in the Textile lightweight markup language
into HTML. It understands headings, paragraphs, block quotes, nested ordered
and unordered lists, embedded raw HTML (with ``<pre>`` and ``<code>`` blocks
kept literal), ``notextile.`` passthrough lines, reference-style links and the
usual inline markup: emphasis, strong, bold, italic, citations, code, deleted
and inserted text, superscript, subscript, attributed spans, links and images.

Conversion never fails on malformed markup; anything that is not recognised
is written as escaped text.

Examples
--------
Byte level conversion:

    >>> from textiler import to_html, to_xhtml
    >>> to_html(b"h1. Title")
    b'\\t<h1>Title</h1>'
    >>> to_xhtml(b"line one\\nline two")
    b'\\t<p>line one<br />\\nline two</p>'

Text conversion with options:

    >>> from textiler import convert, TextileOptions
    >>> convert("_(note)careful_", TextileOptions(flavor="xhtml"))
    '\\t<p><em class="note">careful</em></p>'

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/textiler/__init__.py

from textiler.api import convert, to_html, to_xhtml
from textiler.exceptions import (
    FileError,
    FileNotFoundError,
    InvalidOptionsError,
    OutputWriteError,
    TextilerError,
    ValidationError,
)
from textiler.options import TextileOptions
from textiler.parsers.textile import TextileParser

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "convert",
    "to_html",
    "to_xhtml",
    "TextileOptions",
    "TextileParser",
    "TextilerError",
    "ValidationError",
    "InvalidOptionsError",
    "FileError",
    "FileNotFoundError",
    "OutputWriteError",
]
