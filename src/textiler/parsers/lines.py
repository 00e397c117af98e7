#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textiler/parsers/lines.py
"""Splitting of raw markup into logical lines."""

from __future__ import annotations

import re

# CR LF is a single terminator; a lone CR or LF also ends a line.
_LINE_TERMINATOR = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    r"""Split markup into logical lines with their terminators removed.

    Only CR, LF and CRLF end a line; other characters that ``str.splitlines``
    would treat as line boundaries are kept as content. A trailing terminator
    does not produce an extra empty line, and empty input yields no lines.

    Parameters
    ----------
    text : str
        Markup to split

    Returns
    -------
    list of str
        Logical lines in input order

    Examples
    --------
        >>> split_lines("a\r\nb\rc\n")
        ['a', 'b', 'c']
        >>> split_lines("a\n\nb")
        ['a', '', 'b']
        >>> split_lines("")
        []

    """
    lines: list[str] = []
    pos = 0
    end = len(text)
    while pos < end:
        match = _LINE_TERMINATOR.search(text, pos)
        if match is None:
            lines.append(text[pos:])
            break
        lines.append(text[pos : match.start()])
        pos = match.end()
    return lines
