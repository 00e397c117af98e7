"""Configuration options for textiler."""

from textiler.options.base import CloneFrozenMixin
from textiler.options.textile import TextileOptions

__all__ = [
    "CloneFrozenMixin",
    "TextileOptions",
]
