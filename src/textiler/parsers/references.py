#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textiler/parsers/references.py
"""Link reference definitions.

A line of the form ``[name]http://example.com`` defines a named URL that
links and images elsewhere in the document may use in place of the URL.
Definitions are collected in a pass over all lines before any block
parsing happens, and the defining lines are removed from the document.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from textiler.constants import REFERENCE_URL_SCHEMES, URL_TERMINATORS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reference:
    """A named URL.

    Parameters
    ----------
    name : str
        Reference name as written between the brackets (case-sensitive)
    url : str
        Target URL

    """

    name: str
    url: str


def detect_url(text: str) -> Optional[tuple[str, str]]:
    """Find an ``http://`` or ``https://`` URL at the start of ``text``.

    The URL runs up to the first space or ``!``.

    Returns
    -------
    tuple of (str, str) or None
        ``(url, rest)`` or None when ``text`` does not start with a URL

    """
    scheme_end = text.find("://")
    if scheme_end == -1 or text[:scheme_end] not in REFERENCE_URL_SCHEMES:
        return None
    for index in range(scheme_end + 3, len(text)):
        if text[index] in URL_TERMINATORS:
            return text[:index], text[index:]
    return text, ""


def parse_reference(line: str) -> Optional[Reference]:
    """Parse a whole line as a ``[name]url`` reference definition.

    Parameters
    ----------
    line : str
        A logical line

    Returns
    -------
    Reference or None
        The definition, or None if the line is anything else (including a
        URL followed by more text)

    Examples
    --------
        >>> parse_reference("[hobix]http://hobix.com")
        Reference(name='hobix', url='http://hobix.com')
        >>> parse_reference("[hobix]http://hobix.com and more") is None
        True

    """
    if len(line) < 4 or line[0] != "[":
        return None
    name_end = line.find("]", 1)
    if name_end == -1:
        return None
    found = detect_url(line[name_end + 1 :])
    if found is None:
        return None
    url, rest = found
    if rest:
        return None
    return Reference(name=line[1:name_end], url=url)


def extract_references(lines: Iterable[str]) -> tuple[list[str], dict[str, Reference]]:
    """Remove reference definitions from ``lines`` and collapse blank runs.

    A blank line is kept only when the previously kept line is not blank, so
    runs of blank lines shrink to one and leading blank lines disappear.
    When a name is defined more than once the last definition wins.

    Parameters
    ----------
    lines : iterable of str
        Logical lines from the line splitter

    Returns
    -------
    tuple of (list of str, dict of str to Reference)
        Remaining lines and the reference table keyed by name

    """
    kept: list[str] = []
    references: dict[str, Reference] = {}
    for line in lines:
        reference = parse_reference(line)
        if reference is not None:
            if reference.name in references:
                logger.debug("Redefining reference %r", reference.name)
            references[reference.name] = reference
            continue
        if line or (kept and kept[-1]):
            kept.append(line)

    logger.debug("Collected %d reference(s), %d line(s) remain", len(references), len(kept))
    return kept, references
