#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textiler/parsers/attributes.py
"""The attribute sublanguage shared by block and inline constructs.

Several constructs accept optional attributes written directly after their
marker, for example ``p(intro#first){color:red}[fr]. Bonjour`` or
``%{color:blue}text%``:

- ``(class)``, ``(class#id)`` or ``(#id)`` sets the class and/or id
- ``{style}`` sets inline CSS
- ``[lang]`` sets the language

Alignment and padding shorthands are recognised in the same position:
``<`` left, ``>`` right, ``=`` center and ``<>`` justify, while a run of
``(`` or ``)`` pads on the left or right by one em per character. They are
translated to CSS and appended after any explicit ``{style}``.

Every extractor returns ``(rest, value)``. When nothing is recognised the
input is returned unchanged with a value of None; an absent attribute is
never represented by an empty string.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AbstractSet, Optional

from textiler.constants import CLASS_CHARS, LANG_CHARS, STYLE_CHARS


@dataclass(frozen=True)
class AttributesOpt:
    """Optional HTML attributes attached to a construct.

    Parameters
    ----------
    css_class : str or None
        Class text, possibly carrying an id as ``class#id`` or ``#id``
    style : str or None
        CSS text, always terminated by ``;`` when present
    lang : str or None
        Language tag

    """

    css_class: Optional[str] = None
    style: Optional[str] = None
    lang: Optional[str] = None

    def is_empty(self) -> bool:
        """Return True when no attribute was specified."""
        return self.css_class is None and self.style is None and self.lang is None


@dataclass
class PaddingInfo:
    """Alignment flags and padding amounts collected from shorthand markers."""

    align_left: bool = False
    align_right: bool = False
    align_center: bool = False
    align_justify: bool = False
    padding_left: int = 0
    padding_right: int = 0

    def consume(self, text: str) -> str:
        """Record the alignment or padding token at the start of ``text``.

        Returns the text after the token, or ``text`` itself when it does not
        start with one.
        """
        if not text:
            return text
        head = text[0]
        if head == "<":
            if text.startswith("<>"):
                self.align_justify = True
                return text[2:]
            self.align_left = True
            return text[1:]
        if head == ">":
            self.align_right = True
            return text[1:]
        if head == "=":
            self.align_center = True
            return text[1:]
        if head in "()":
            count = len(text) - len(text.lstrip(head))
            if head == "(":
                self.padding_left = count
            else:
                self.padding_right = count
            return text[count:]
        return text

    def to_style(self) -> Optional[str]:
        """Render the collected flags as CSS, or None if nothing was set."""
        parts = []
        if self.padding_left > 0:
            parts.append(f"padding-left:{self.padding_left}em;")
        if self.padding_right > 0:
            parts.append(f"padding-right:{self.padding_right}em;")
        if self.align_left:
            parts.append("text-align:left;")
        if self.align_right:
            parts.append("text-align:right;")
        if self.align_justify:
            parts.append("text-align:justify;")
        if self.align_center:
            parts.append("text-align:center;")
        return "".join(parts) or None


def _extract_delimited(text: str, opener: str, closer: str, allowed: AbstractSet[str]) -> tuple[str, Optional[str]]:
    # At least one character must sit between the delimiters.
    if len(text) < 3 or text[0] != opener or text[1] == closer:
        return text, None
    for index in range(1, len(text)):
        char = text[index]
        if char in allowed:
            continue
        if char == closer:
            return text[index + 1 :], text[1:index]
        break
    return text, None


def extract_class(text: str) -> tuple[str, Optional[str]]:
    """Extract a leading ``(class)`` token.

    Examples
    --------
        >>> extract_class("(big#top)rest")
        ('rest', 'big#top')
        >>> extract_class("()rest")
        ('()rest', None)

    """
    return _extract_delimited(text, "(", ")", CLASS_CHARS)


def extract_style(text: str) -> tuple[str, Optional[str]]:
    """Extract a leading ``{style}`` token, guaranteeing a trailing ``;``.

    Examples
    --------
        >>> extract_style("{color:red}x")
        ('x', 'color:red;')
        >>> extract_style("{color:red;}x")
        ('x', 'color:red;')

    """
    rest, style = _extract_delimited(text, "{", "}", STYLE_CHARS)
    if style is not None and not style.endswith(";"):
        style += ";"
    return rest, style


def extract_lang(text: str) -> tuple[str, Optional[str]]:
    """Extract a leading ``[lang]`` token."""
    return _extract_delimited(text, "[", "]", LANG_CHARS)


def parse_attributes(text: str) -> tuple[str, AttributesOpt]:
    """Parse any number of attribute tokens, in any order.

    Parsing stops at the first character that does not start a recognised
    token. A ``(`` that does not open a valid class is read as left padding.

    Parameters
    ----------
    text : str
        Text directly following a construct marker

    Returns
    -------
    tuple of (str, AttributesOpt)
        Unconsumed text and the attributes found

    Examples
    --------
        >>> parse_attributes("(lead){color:red}>. text")
        ('. text', AttributesOpt(css_class='lead', style='color:red;text-align:right;', lang=None))

    """
    css_class: Optional[str] = None
    style: Optional[str] = None
    lang: Optional[str] = None
    padding = PaddingInfo()

    while text:
        remaining = len(text)
        head = text[0]
        if head == "(":
            text, found = extract_class(text)
            if found is not None:
                css_class = found
            else:
                text = padding.consume(text)
        elif head == "{":
            text, found = extract_style(text)
            if found is not None:
                style = found
        elif head == "[":
            text, found = extract_lang(text)
            if found is not None:
                lang = found
        else:
            text = padding.consume(text)
        if len(text) == remaining:
            break

    shorthand_style = padding.to_style()
    if shorthand_style is not None:
        style = (style or "") + shorthand_style
    return text, AttributesOpt(css_class=css_class, style=style, lang=lang)
