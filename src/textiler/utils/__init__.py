"""Helper utilities for textiler."""
