#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textiler/utils/escape.py
"""Text escaping used while serializing Textile output.

Two escaping contexts exist. Ordinary text only has its apostrophes turned
into a typographic right single quote; everything else is written as-is.
Text inside code (code spans and tracked ``<pre>``/``<code>`` blocks) has
``&``, ``<`` and ``>`` replaced by entities instead, leaving quotes alone.

"""

from __future__ import annotations

import re

from textiler.constants import APOSTROPHE_ENTITY, CODE_ESCAPES

# An ampersand that already starts a character or entity reference is kept.
_CODE_ESCAPE_PATTERN = re.compile(r"&(?!#[0-9]+;|#[xX][0-9a-fA-F]+;|[A-Za-z][A-Za-z0-9]*;)|[<>]")


def escape_text(text: str) -> str:
    """Escape text for ordinary (non-code) output.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Text with every apostrophe replaced by ``&#8217;``

    Examples
    --------
        >>> escape_text("it's")
        'it&#8217;s'

    """
    if not text:
        return text
    return text.replace("'", APOSTROPHE_ENTITY)


def escape_code(text: str) -> str:
    """Escape text for output inside a code or preformatted region.

    ``&``, ``<`` and ``>`` become entities. An ampersand that already begins
    an entity reference such as ``&amp;`` or ``&#169;`` is left untouched, so
    pre-escaped input is never escaped twice.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_code("a < b && c")
        'a &lt; b &amp;&amp; c'
        >>> escape_code("&amp;")
        '&amp;'

    """
    if not text:
        return text
    return _CODE_ESCAPE_PATTERN.sub(lambda match: CODE_ESCAPES[match.group(0)], text)
