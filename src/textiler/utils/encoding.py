#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textiler/utils/encoding.py
"""Conversion between raw input bytes and markup text.

The converter works on ``str`` internally. Bytes handed to the byte-level
entry points are decoded as UTF-8 with ``surrogateescape`` so that any byte
sequence, valid UTF-8 or not, survives the round trip unchanged. Text read
through :func:`textiler.api.convert` is decoded with chardet-based detection
instead, because there the caller wants readable text back.
"""

from __future__ import annotations

import logging
from typing import IO

import chardet

logger = logging.getLogger(__name__)

MARKUP_CODEC = "utf-8"
MARKUP_ERRORS = "surrogateescape"
DEFAULT_FALLBACK_ENCODINGS = ("utf-8", "utf-8-sig", "latin-1")


def bytes_to_markup(data: bytes) -> str:
    """Decode raw bytes losslessly for parsing.

    Examples
    --------
        >>> markup_to_bytes(bytes_to_markup(b"caf\\xe9")) == b"caf\\xe9"
        True

    """
    return bytes(data).decode(MARKUP_CODEC, errors=MARKUP_ERRORS)


def markup_to_bytes(text: str) -> bytes:
    """Encode converted markup back into the bytes it was decoded from."""
    return text.encode(MARKUP_CODEC, errors=MARKUP_ERRORS)


def detect_encoding(
    data: bytes,
    sample_size: int = 8192,
    confidence_threshold: float = 0.7,
) -> str | None:
    """Detect character encoding of binary data using chardet.

    Parameters
    ----------
    data : bytes
        Binary data to analyze
    sample_size : int, default 8192
        Number of bytes to sample for detection (uses first N bytes)
    confidence_threshold : float, default 0.7
        Minimum confidence level (0.0-1.0) required to trust detection

    Returns
    -------
    str | None
        Detected encoding name, or None when detection fails or the
        confidence is below the threshold

    """
    if not data:
        return None

    result = chardet.detect(data[:sample_size])
    encoding = result.get("encoding") if result else None
    if not encoding:
        logger.debug("chardet: No encoding detected")
        return None

    confidence = result.get("confidence") or 0.0
    logger.debug("chardet detected encoding: %s (confidence: %.2f)", encoding, confidence)
    if confidence < confidence_threshold:
        return None
    return encoding


def read_text_with_encoding_detection(
    data: bytes,
    encoding: str | None = None,
    fallback_encodings: tuple[str, ...] = DEFAULT_FALLBACK_ENCODINGS,
) -> str:
    """Decode binary data as text.

    An explicit ``encoding`` is used as-is. Otherwise chardet's guess is
    tried first, then each fallback encoding in order.

    Parameters
    ----------
    data : bytes
        Binary data to decode
    encoding : str or None, default None
        Encoding to use without detection
    fallback_encodings : tuple of str
        Encodings tried in order when detection does not succeed

    Returns
    -------
    str
        Decoded text content

    Raises
    ------
    LookupError
        If an explicit ``encoding`` is unknown
    UnicodeDecodeError
        If the data is not valid in an explicit ``encoding``

    """
    if encoding:
        return data.decode(encoding)

    candidates: list[str] = []
    detected = detect_encoding(data)
    if detected:
        candidates.append(detected)
    candidates.extend(enc for enc in fallback_encodings if enc not in candidates)

    for candidate in candidates:
        try:
            text = data.decode(candidate)
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug("Failed to decode with %s: %s", candidate, e)
            continue
        logger.debug("Decoded input with encoding: %s", candidate)
        return text

    logger.warning("All encoding attempts failed, using utf-8 with error replacement")
    return data.decode("utf-8", errors="replace")


def normalize_stream_to_text(stream: IO[bytes] | IO[str], encoding: str | None = None) -> str:
    """Read a binary or text stream and return its content as text.

    Raises
    ------
    TypeError
        If ``stream.read()`` returns something other than bytes or str

    """
    content = stream.read()
    if isinstance(content, bytes):
        return read_text_with_encoding_detection(content, encoding=encoding)
    if isinstance(content, str):
        return content
    raise TypeError(f"Stream read() returned unexpected type {type(content).__name__}. Expected bytes or str.")
