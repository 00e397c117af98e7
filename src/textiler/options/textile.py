#  Copyright (c) 2025 Tom Villani, Ph.D.

# textiler/options/textile.py
"""Configuration options for Textile to HTML conversion."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from textiler.constants import (
    DEFAULT_DUMP_LINES,
    DEFAULT_DUMP_PARAGRAPHS,
    DEFAULT_FLAVOR,
    OUTPUT_FLAVORS,
    OutputFlavor,
)
from textiler.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class TextileOptions(CloneFrozenMixin):
    """Configuration options for converting Textile markup.

    Parameters
    ----------
    flavor : {"html", "xhtml"}, default "html"
        Output flavor. The flavors only differ in how a manual line break
        is spelled (``<br>`` versus ``<br />``).
    dump_lines : bool, default False
        Write the logical lines produced by the line splitter to the
        diagnostic stream before converting. Does not change the output.
    dump_paragraphs : bool, default False
        Accepted for symmetry with ``dump_lines``; currently has no effect.
    input_encoding : str or None, default None
        Encoding used by :func:`textiler.api.convert` when it has to decode
        bytes or read a file. ``None`` detects the encoding.

    Examples
    --------
    Basic usage:
        >>> options = TextileOptions()
        >>> xhtml_options = options.create_updated(flavor="xhtml")

    """

    flavor: OutputFlavor = field(
        default=DEFAULT_FLAVOR,
        metadata={"help": "Output flavor: html or xhtml", "choices": list(OUTPUT_FLAVORS)},
    )
    dump_lines: bool = field(
        default=DEFAULT_DUMP_LINES,
        metadata={"help": "Dump the split input lines to the diagnostic stream"},
    )
    dump_paragraphs: bool = field(
        default=DEFAULT_DUMP_PARAGRAPHS,
        metadata={"help": "Reserved paragraph dump flag (no effect)"},
    )
    input_encoding: Optional[str] = field(
        default=None,
        metadata={"help": "Encoding of text input read by convert(); detected when unset"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If ``flavor`` is not one of the supported output flavors.

        """
        if self.flavor not in OUTPUT_FLAVORS:
            raise ValueError(f"flavor must be one of {', '.join(OUTPUT_FLAVORS)}, got {self.flavor!r}")

    @property
    def is_xhtml(self) -> bool:
        """Return True when self-closing tags use the XHTML spelling."""
        return self.flavor == "xhtml"
