#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textiler/renderers/html.py
"""HTML output buffer for the Textile converter.

The converter writes markup incrementally as it recognises constructs; this
module owns the buffer, the serialization of attributes and the few places
where the HTML and XHTML flavors differ.

"""

from __future__ import annotations

from typing import Optional

from textiler.constants import DEFAULT_FLAVOR, FLOAT_RIGHT_STYLE, IMAGE_LINK_CLASS, LINE_BREAKS, OutputFlavor
from textiler.parsers.attributes import AttributesOpt
from textiler.utils.escape import escape_code, escape_text


def normalize_style(style: str) -> str:
    """Put exactly one space after each inner ``;`` and end with ``;``.

    Parameters
    ----------
    style : str
        CSS declarations

    Returns
    -------
    str
        Normalised declarations

    Examples
    --------
        >>> normalize_style("color:red;foo:bar")
        'color:red; foo:bar;'
        >>> normalize_style("color:red;   foo:bar;")
        'color:red; foo:bar;'

    """
    parts: list[str] = []
    after_semicolon = False
    for char in style:
        if after_semicolon:
            if char == " ":
                continue
            parts.append(" ")
            after_semicolon = False
        parts.append(char)
        if char == ";":
            after_semicolon = True
    result = "".join(parts)
    if not result.endswith(";"):
        result += ";"
    return result


def format_class_and_id(value: Optional[str]) -> str:
    """Serialize ``class``, ``class#id`` or ``#id`` as HTML attributes.

    Examples
    --------
        >>> format_class_and_id("big#top")
        ' class="big" id="top"'
        >>> format_class_and_id("#top")
        ' id="top"'

    """
    if not value:
        return ""
    css_class, sep, element_id = value.partition("#")
    if not sep:
        return f' class="{css_class}"'
    if not css_class:
        return f' id="{element_id}"'
    return f' class="{css_class}" id="{element_id}"'


def format_style(value: Optional[str]) -> str:
    if not value:
        return ""
    return f' style="{normalize_style(value)}"'


def format_lang(value: Optional[str]) -> str:
    if not value:
        return ""
    return f' lang="{value}"'


def format_attributes(attributes: Optional[AttributesOpt]) -> str:
    """Serialize attributes in class/id, style, lang order.

    Returns an empty string for None or when no attribute is set; otherwise
    each attribute is preceded by a single space.
    """
    if attributes is None:
        return ""
    return format_class_and_id(attributes.css_class) + format_style(attributes.style) + format_lang(attributes.lang)


class HtmlOutput:
    """Growable output buffer for one conversion.

    Parameters
    ----------
    flavor : {"html", "xhtml"}, default "html"
        Output flavor; decides how manual line breaks are spelled

    """

    def __init__(self, flavor: OutputFlavor = DEFAULT_FLAVOR):
        self.flavor: OutputFlavor = flavor
        self._line_break = LINE_BREAKS[flavor]
        self._parts: list[str] = []

    def write(self, markup: str) -> None:
        """Append markup verbatim."""
        if markup:
            self._parts.append(markup)

    def write_text(self, text: str, code: bool = False) -> None:
        """Append text, escaped for code or for ordinary content."""
        self.write(escape_code(text) if code else escape_text(text))

    def start_tag(self, tag: str, attributes: Optional[AttributesOpt] = None) -> None:
        self.write(f"<{tag}{format_attributes(attributes)}>")

    def end_tag(self, tag: str) -> None:
        self.write(f"</{tag}>")

    def line_break(self) -> None:
        """Append a manual line break followed by a newline."""
        self.write(self._line_break)

    def link_start(self, href: str, css_class: Optional[str] = None) -> None:
        class_attr = f' class="{css_class}"' if css_class else ""
        self.write(f'<a href="{href}"{class_attr}>')

    def image(self, src: str, alt: str, float_right: bool = False, href: Optional[str] = None) -> None:
        """Append an image, optionally wrapped in a link.

        Non-empty alt text is written both as ``title`` and ``alt``.
        """
        if href:
            self.link_start(href, IMAGE_LINK_CLASS)
        style = f' style="{FLOAT_RIGHT_STYLE}"' if float_right else ""
        if alt:
            self.write(f'<img src="{src}"{style} title="{alt}" alt="{alt}">')
        else:
            self.write(f'<img src="{src}"{style} alt="">')
        if href:
            self.end_tag("a")

    def getvalue(self) -> str:
        """Return everything written so far."""
        return "".join(self._parts)

    def result(self) -> str:
        """Return the final output with trailing newlines removed."""
        return self.getvalue().rstrip("\n")
