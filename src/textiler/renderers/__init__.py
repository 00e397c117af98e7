"""Output serialization for textiler."""

from textiler.renderers.html import HtmlOutput, format_attributes

__all__ = ["HtmlOutput", "format_attributes"]
