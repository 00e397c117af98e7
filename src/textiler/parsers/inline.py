#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textiler/parsers/inline.py
"""Inline Textile: emphasis, links, images, code spans and raw tags.

The module has two halves. The ``parse_*`` functions are pure recognisers:
each looks at text starting at a trigger character and returns a match record
or None. :class:`InlineScanner` walks a line, tries the recognisers registered
for each trigger character in priority order, and writes HTML for the first
one that matches.

Supported constructs, in trigger order:

===========  ===========================  ==========
Trigger      Markup                       HTML
===========  ===========================  ==========
``_``        ``__x__`` / ``_(cls)x_``     ``i`` / ``em``
``*``        ``**x**`` / ``*{css}x*``     ``b`` / ``strong``
``"``        ``"title":url-or-ref``       ``a``
``!``        ``!>src(alt)!:url-or-ref``   ``img``
``@``        ``@x@``                      ``code``
``%``        ``%(cls){css}[lang]x%``      ``span``
``<``        allowed HTML tag             passed through
``?``        ``??x??``                    ``cite``
``-``        ``-x-``                      ``del``
``+``        ``+x+``                      ``ins``
``^``        ``^x^``                      ``sup``
``~``        ``~x~``                      ``sub``
===========  ===========================  ==========

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional

from textiler.constants import URL_TERMINATORS
from textiler.parsers.attributes import AttributesOpt, extract_class, extract_style, parse_attributes
from textiler.parsers.html_tags import HtmlTag, RawBlockStack, parse_html_tag
from textiler.parsers.references import Reference
from textiler.renderers.html import HtmlOutput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InlineSpan:
    """A delimited span: its interior, the text after it and any attributes."""

    inside: str
    rest: str
    attributes: Optional[AttributesOpt] = None


@dataclass(frozen=True)
class LinkMatch:
    """``"title":target``"""

    title: str
    target: str
    rest: str


@dataclass(frozen=True)
class ImageMatch:
    """``!src(alt)!:target``"""

    src: str
    alt: str
    float_right: bool
    target: Optional[str]
    rest: str


# --------------------------------------------------------------------------
# Recognisers
# --------------------------------------------------------------------------


def parse_single_delimited(text: str, delimiter: str) -> Optional[InlineSpan]:
    """Match ``<d>inside<d>`` where the interior runs to the next delimiter.

    Examples
    --------
        >>> parse_single_delimited("@foo@bar", "@")
        InlineSpan(inside='foo', rest='bar', attributes=None)

    """
    if not text or text[0] != delimiter:
        return None
    close = text.find(delimiter, 1)
    if close == -1:
        return None
    return InlineSpan(inside=text[1:close], rest=text[close + 1 :])


def parse_double_delimited(text: str, delimiter: str) -> Optional[InlineSpan]:
    """Match ``<dd>inside<dd>``; the interior may be empty.

    Examples
    --------
        >>> parse_double_delimited("____", "_")
        InlineSpan(inside='', rest='', attributes=None)
        >>> parse_double_delimited("__a_d___lo", "_")
        InlineSpan(inside='a_d', rest='_lo', attributes=None)

    """
    if len(text) < 4 or text[0] != delimiter or text[1] != delimiter:
        return None
    for index in range(2, len(text) - 1):
        if text[index] == delimiter and text[index + 1] == delimiter:
            return InlineSpan(inside=text[2:index], rest=text[index + 2 :])
    return None


def parse_italic(text: str) -> Optional[InlineSpan]:
    return parse_double_delimited(text, "_")


def parse_bold(text: str) -> Optional[InlineSpan]:
    return parse_double_delimited(text, "*")


def parse_cite(text: str) -> Optional[InlineSpan]:
    return parse_double_delimited(text, "?")


def parse_code(text: str) -> Optional[InlineSpan]:
    return parse_single_delimited(text, "@")


def parse_delete(text: str) -> Optional[InlineSpan]:
    return parse_single_delimited(text, "-")


def parse_insert(text: str) -> Optional[InlineSpan]:
    return parse_single_delimited(text, "+")


def parse_superscript(text: str) -> Optional[InlineSpan]:
    return parse_single_delimited(text, "^")


def parse_subscript(text: str) -> Optional[InlineSpan]:
    return parse_single_delimited(text, "~")


def parse_emphasis(text: str) -> Optional[InlineSpan]:
    """Match ``_x_`` with an optional ``(class)`` straight after the opener.

    Examples
    --------
        >>> parse_emphasis("_(note)careful_ now")
        InlineSpan(inside='careful', rest=' now', attributes=AttributesOpt(css_class='note', style=None, lang=None))

    """
    if len(text) < 2 or text[0] != "_":
        return None
    body, css_class = extract_class(text[1:])
    close = body.find("_")
    if close == -1:
        return None
    attributes = AttributesOpt(css_class=css_class) if css_class is not None else None
    return InlineSpan(inside=body[:close], rest=body[close + 1 :], attributes=attributes)


def parse_strong(text: str) -> Optional[InlineSpan]:
    """Match ``*x*`` with an optional ``{style}`` straight after the opener."""
    if len(text) < 3 or text[0] != "*":
        return None
    body, style = extract_style(text[1:])
    close = body.find("*")
    if close == -1:
        return None
    attributes = AttributesOpt(style=style) if style is not None else None
    return InlineSpan(inside=body[:close], rest=body[close + 1 :], attributes=attributes)


def parse_span(text: str) -> Optional[InlineSpan]:
    """Match ``%attrs inside%``.

    Examples
    --------
        >>> parse_span("%{color:red}inside%after")
        InlineSpan(inside='inside', rest='after', attributes=AttributesOpt(css_class=None, style='color:red;', lang=None))

    """
    if len(text) < 3 or text[0] != "%":
        return None
    body, attributes = parse_attributes(text[1:])
    close = body.find("%")
    if close == -1:
        return None
    return InlineSpan(inside=body[:close], rest=body[close + 1 :], attributes=attributes)


def extract_url_or_reference(text: str) -> tuple[str, str]:
    """Split a link target off ``text``; it ends at a space or ``!``.

    Returns
    -------
    tuple of (str, str)
        ``(target, rest)``

    """
    for index, char in enumerate(text):
        if char in URL_TERMINATORS:
            return text[:index], text[index:]
    return text, ""


def parse_link(text: str) -> Optional[LinkMatch]:
    """Match ``"title":url`` or ``"title":reference-name``.

    Examples
    --------
        >>> parse_link('"Hobix":http://hobix.com/')
        LinkMatch(title='Hobix', target='http://hobix.com/', rest='')
        >>> parse_link('"foo":Bar tender')
        LinkMatch(title='foo', target='Bar', rest=' tender')

    """
    if len(text) < 4:
        return None
    title_span = parse_single_delimited(text, '"')
    if title_span is None or not title_span.rest.startswith(":"):
        return None
    target, rest = extract_url_or_reference(title_span.rest[1:])
    return LinkMatch(title=title_span.inside, target=target, rest=rest)


def parse_image(text: str) -> Optional[ImageMatch]:
    """Match ``!src!`` or ``!src(alt)!``, optionally floated and linked.

    A ``>`` right after the opening ``!`` floats the image right; a trailing
    ``:target`` turns it into a link. The source may not be empty or contain
    whitespace.

    Examples
    --------
        >>> parse_image("!openwindow1.gif(Bunny.)!")
        ImageMatch(src='openwindow1.gif', alt='Bunny.', float_right=False, target=None, rest='')
        >>> parse_image("!>a.gif!:http://x.com/ more")
        ImageMatch(src='a.gif', alt='', float_right=True, target='http://x.com/', rest=' more')

    """
    if len(text) < 3 or text[0] != "!":
        return None
    body = text[1:]
    float_right = body.startswith(">")
    if float_right:
        body = body[1:]

    bang = body.find("!")
    paren = body.find("(")
    if paren != -1 and (bang == -1 or paren < bang):
        src = body[:paren]
        body = body[paren + 1 :]
        close = body.find(")")
        if close == -1 or not body[close + 1 :].startswith("!"):
            return None
        alt = body[:close]
        body = body[close + 2 :]
    elif bang != -1:
        src = body[:bang]
        alt = ""
        body = body[bang + 1 :]
    else:
        return None

    if not src or any(char.isspace() for char in src):
        return None

    target: Optional[str] = None
    if body.startswith(":"):
        target, body = extract_url_or_reference(body[1:])
    return ImageMatch(src=src, alt=alt, float_right=float_right, target=target, rest=body)


# --------------------------------------------------------------------------
# Scanner
# --------------------------------------------------------------------------


@dataclass(frozen=True)
class InlineRule:
    """A recogniser paired with the emitter that serializes its match.

    The emitter writes the construct and returns the text that follows it.
    """

    name: str
    parse: Callable[[str], Optional[Any]]
    emit: Callable[[Any], str]


class InlineScanner:
    """Single-pass scanner that turns inline Textile into HTML.

    Parameters
    ----------
    output : HtmlOutput
        Buffer receiving the serialized HTML
    references : Mapping[str, Reference]
        Reference table used to resolve link and image targets
    raw_blocks : RawBlockStack
        Open tracked raw-HTML tags; while any is open, text is code-escaped
        and embedded tags are escaped instead of passed through

    """

    def __init__(self, output: HtmlOutput, references: Mapping[str, Reference], raw_blocks: RawBlockStack):
        self.output = output
        self.references = references
        self.raw_blocks = raw_blocks
        self._rules: dict[str, tuple[InlineRule, ...]] = {
            "_": (
                InlineRule("italic", parse_italic, self._wrap("i")),
                InlineRule("emphasis", parse_emphasis, self._wrap("em")),
            ),
            "*": (
                InlineRule("bold", parse_bold, self._wrap("b")),
                InlineRule("strong", parse_strong, self._wrap("strong")),
            ),
            '"': (InlineRule("link", parse_link, self._emit_link),),
            "!": (InlineRule("image", parse_image, self._emit_image),),
            "@": (InlineRule("code", parse_code, self._emit_code),),
            "%": (InlineRule("span", parse_span, self._wrap("span")),),
            "<": (InlineRule("html", parse_html_tag, self._emit_html_tag),),
            "?": (InlineRule("cite", parse_cite, self._wrap("cite")),),
            "-": (InlineRule("delete", parse_delete, self._wrap("del")),),
            "+": (InlineRule("insert", parse_insert, self._wrap("ins")),),
            "^": (InlineRule("superscript", parse_superscript, self._wrap("sup")),),
            "~": (InlineRule("subscript", parse_subscript, self._wrap("sub")),),
        }

    @property
    def in_raw_block(self) -> bool:
        return bool(self.raw_blocks)

    def scan(self, text: str) -> None:
        """Serialize ``text`` as inline HTML.

        Text before each recognised construct is escaped for the current
        context; a construct's interior is scanned recursively and scanning
        continues with the text after it. Text with no recognisable construct
        is escaped and written unchanged.
        """
        while text:
            found = self._find_construct(text)
            if found is None:
                self.output.write_text(text, code=self.in_raw_block)
                return
            index, rule, match = found
            self.output.write_text(text[:index], code=self.in_raw_block)
            text = rule.emit(match)

    def _find_construct(self, text: str) -> Optional[tuple[int, InlineRule, Any]]:
        for index, char in enumerate(text):
            rules = self._rules.get(char)
            if rules is None:
                continue
            candidate = text[index:]
            for rule in rules:
                match = rule.parse(candidate)
                if match is not None:
                    return index, rule, match
        return None

    def resolve_target(self, target: str) -> str:
        """Return the URL of a reference called ``target``, else ``target`` itself."""
        reference = self.references.get(target)
        return reference.url if reference is not None else target

    def _wrap(self, tag: str) -> Callable[[InlineSpan], str]:
        def emit(match: InlineSpan) -> str:
            self.output.start_tag(tag, match.attributes)
            self.scan(match.inside)
            self.output.end_tag(tag)
            return match.rest

        return emit

    def _emit_code(self, match: InlineSpan) -> str:
        self.output.start_tag("code")
        self.output.write_text(match.inside, code=True)
        self.output.end_tag("code")
        return match.rest

    def _emit_link(self, match: LinkMatch) -> str:
        self.output.link_start(self.resolve_target(match.target))
        self.scan(match.title)
        self.output.end_tag("a")
        return match.rest

    def _emit_image(self, match: ImageMatch) -> str:
        href = self.resolve_target(match.target) if match.target else None
        self.output.image(match.src, match.alt, float_right=match.float_right, href=href)
        return match.rest

    def _emit_html_tag(self, tag: HtmlTag) -> str:
        closes_raw_block = not tag.is_start and tag.name == self.raw_blocks.top
        if self.in_raw_block and not closes_raw_block:
            self.output.write_text(tag.markup, code=True)
        else:
            self.output.write(tag.markup)
            if closes_raw_block:
                self.raw_blocks.pop(tag.name)
        return tag.rest
