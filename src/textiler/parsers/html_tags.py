#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textiler/parsers/html_tags.py
"""Recognition of raw HTML tags embedded in Textile.

Only tags whose name is in :data:`textiler.constants.HTML_TAGS` are
recognised; anything else that starts with ``<`` is ordinary text. Of the
recognised tags, ``<pre>`` and ``<code>`` are tracked while open because
the text they enclose is serialized with code escaping.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from textiler.constants import HTML_TAGS, TRACKED_BLOCK_TAGS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HtmlTag:
    """A recognised start or end tag at the beginning of some text.

    Parameters
    ----------
    name : str
        Lower-cased tag name
    markup : str
        The tag exactly as written, from ``<`` to ``>``
    is_start : bool
        True for a start tag, False for an end tag
    rest : str
        Text following the tag

    """

    name: str
    markup: str
    is_start: bool
    rest: str


def is_valid_tag(name: str) -> bool:
    """Return True if ``name`` is an allowed HTML tag name."""
    return name.lower() in HTML_TAGS


def parse_start_tag(text: str) -> Optional[HtmlTag]:
    """Parse a start tag such as ``<span class="x">`` or ``<br/>``.

    Examples
    --------
        >>> parse_start_tag('<pre class="x">code').name
        'pre'
        >>> parse_start_tag("<blink>") is None
        True

    """
    if len(text) < 3 or text[0] != "<":
        return None
    close = text.find(">")
    if close == -1:
        return None
    inner = text[1:close]
    space = inner.find(" ")
    name = inner if space == -1 else inner[:space]
    name = name.rstrip("/")
    if not is_valid_tag(name):
        return None
    return HtmlTag(name=name.lower(), markup=text[: close + 1], is_start=True, rest=text[close + 1 :])


def parse_end_tag(text: str) -> Optional[HtmlTag]:
    """Parse an end tag such as ``</pre>``."""
    if len(text) < 4 or text[0] != "<" or text[1] != "/":
        return None
    close = text.find(">")
    if close == -1:
        return None
    name = text[2:close]
    if not is_valid_tag(name):
        return None
    return HtmlTag(name=name.lower(), markup=text[: close + 1], is_start=False, rest=text[close + 1 :])


def parse_html_tag(text: str) -> Optional[HtmlTag]:
    """Parse an end tag or, failing that, a start tag at the start of ``text``."""
    return parse_end_tag(text) or parse_start_tag(text)


class RawBlockStack:
    """Stack of open tracked raw-HTML tags (``pre`` and ``code``).

    Untracked tags are ignored by :meth:`push` and :meth:`pop`, so they never
    change the escaping context.
    """

    def __init__(self) -> None:
        self._tags: list[str] = []

    def __bool__(self) -> bool:
        return bool(self._tags)

    def __len__(self) -> int:
        return len(self._tags)

    @property
    def top(self) -> Optional[str]:
        """Innermost open tracked tag, or None."""
        return self._tags[-1] if self._tags else None

    @property
    def in_code(self) -> bool:
        return self.top == "code"

    @property
    def in_pre(self) -> bool:
        return self.top == "pre"

    def push(self, name: str) -> bool:
        """Open ``name`` if it is tracked. Returns True when pushed."""
        if name not in TRACKED_BLOCK_TAGS:
            return False
        self._tags.append(name)
        logger.debug("Entered raw <%s> block (depth %d)", name, len(self._tags))
        return True

    def pop(self, name: str) -> bool:
        """Close ``name`` if it is the innermost tracked tag. Returns True when popped."""
        if name not in TRACKED_BLOCK_TAGS or self.top != name:
            return False
        self._tags.pop()
        logger.debug("Left raw <%s> block (depth %d)", name, len(self._tags))
        return True
