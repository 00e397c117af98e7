#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textiler/utils/timing.py
"""Timing helpers for debug logging."""

from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Generator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log how long the enclosed block took, at DEBUG level.

    Nothing is measured unless ``logger`` has DEBUG enabled.

    Parameters
    ----------
    logger : logging.Logger
        Logger receiving the timing record
    operation : str
        Description used in the log message, e.g. ``"Conversion (html)"``

    Examples
    --------
        >>> with debug_timer(logger, "Conversion (html)"):
        ...     html = to_html(b"h1. Title")

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.4f}s")
    else:
        yield
