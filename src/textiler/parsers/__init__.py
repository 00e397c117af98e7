#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textiler/parsers/__init__.py
"""Textile parsing: line splitting, references, attributes, inline and block constructs.

The stateful converter lives in :mod:`textiler.parsers.textile`; the other
modules hold small stateless recognisers that return a record on a match and
None otherwise.
"""
