"""The public conversion functions."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/textiler/api.py
import logging
from pathlib import Path
from typing import IO, Optional, Union

from textiler.constants import OutputFlavor
from textiler.exceptions import FileError, FileNotFoundError, ValidationError
from textiler.options.textile import TextileOptions
from textiler.parsers.textile import TextileParser
from textiler.utils.encoding import normalize_stream_to_text, read_text_with_encoding_detection
from textiler.utils.timing import debug_timer

logger = logging.getLogger(__name__)

# Strings longer than this, or containing a newline, are never treated as paths
_MAX_PATH_LENGTH = 260


def _ensure_bytes(data: Union[bytes, bytearray, memoryview], parameter_name: str = "data") -> bytes:
    """Return ``data`` as bytes, rejecting anything that is not a bytes-like object.

    Raises
    ------
    ValidationError
        If ``data`` is not bytes, bytearray or memoryview

    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise ValidationError(
        f"{parameter_name} must be bytes, got {type(data).__name__}",
        parameter_name=parameter_name,
        parameter_value=type(data).__name__,
    )


def _convert_bytes(data: bytes, flavor: OutputFlavor, dump_lines: bool, dump_paragraphs: bool) -> bytes:
    options = TextileOptions(flavor=flavor, dump_lines=dump_lines, dump_paragraphs=dump_paragraphs)
    with debug_timer(logger, f"Conversion ({flavor})"):
        return TextileParser(options).parse_bytes(_ensure_bytes(data))


def to_html(data: bytes, dump_lines: bool = False, dump_paragraphs: bool = False) -> bytes:
    """Convert Textile markup to HTML.

    Parameters
    ----------
    data : bytes
        Textile markup. Bytes that are not valid UTF-8 are copied to the
        output unchanged.
    dump_lines : bool, default False
        Write the split input lines to stderr before converting
    dump_paragraphs : bool, default False
        Accepted for symmetry with ``dump_lines``; has no effect

    Returns
    -------
    bytes
        HTML with trailing newlines removed

    Raises
    ------
    ValidationError
        If ``data`` is not a bytes-like object

    Examples
    --------
        >>> to_html(b'"Hobix":http://hobix.com/')
        b'\\t<p><a href="http://hobix.com/">Hobix</a></p>'

    """
    return _convert_bytes(data, "html", dump_lines, dump_paragraphs)


def to_xhtml(data: bytes, dump_lines: bool = False, dump_paragraphs: bool = False) -> bytes:
    """Convert Textile markup to XHTML.

    Identical to :func:`to_html` except that manual line breaks are written
    as ``<br />``.
    """
    return _convert_bytes(data, "xhtml", dump_lines, dump_paragraphs)


def _load_markup(input_data: Union[str, Path, IO[bytes], IO[str], bytes], encoding: Optional[str]) -> str:
    """Load markup text from a path, stream, bytes or a markup string.

    A short single-line string naming an existing file is read as a file;
    any other string is the markup itself.
    """
    if isinstance(input_data, (bytes, bytearray, memoryview)):
        return read_text_with_encoding_detection(bytes(input_data), encoding=encoding)
    if isinstance(input_data, Path):
        return _read_file(input_data, encoding)
    if isinstance(input_data, str):
        if len(input_data) <= _MAX_PATH_LENGTH and "\n" not in input_data:
            try:
                path = Path(input_data)
                if path.is_file():
                    return _read_file(path, encoding)
            except OSError:
                # Not a usable path name; treat as markup
                pass
        return input_data
    if hasattr(input_data, "read"):
        return normalize_stream_to_text(input_data, encoding=encoding)
    raise ValidationError(
        f"Unsupported input type: {type(input_data).__name__}",
        parameter_name="input_data",
        parameter_value=type(input_data).__name__,
    )


def _read_file(path: Path, encoding: Optional[str]) -> str:
    if not path.exists():
        raise FileNotFoundError(str(path))
    try:
        data = path.read_bytes()
    except OSError as e:
        raise FileError(f"Could not read input file: {path}", file_path=str(path), original_error=e) from e
    logger.debug("Read %d bytes from %s", len(data), path)
    return read_text_with_encoding_detection(data, encoding=encoding)


def convert(
    input_data: Union[str, Path, IO[bytes], IO[str], bytes],
    options: Optional[TextileOptions] = None,
) -> str:
    """Convert Textile from a file, stream, bytes or string and return text.

    Parameters
    ----------
    input_data : str, Path, IO[bytes], IO[str] or bytes
        Markup source. A ``str`` is read as a file when it names an existing
        file and is used as markup otherwise. Bytes and binary streams are
        decoded with ``options.input_encoding`` or, when unset, with
        detected encoding.
    options : TextileOptions or None, default None
        Conversion options

    Returns
    -------
    str
        Converted HTML or XHTML

    Raises
    ------
    FileNotFoundError
        If a ``Path`` does not exist
    FileError
        If the file cannot be read
    ValidationError
        If the input type is unsupported or cannot be decoded with
        ``options.input_encoding``
    InvalidOptionsError
        If ``options`` is not a :class:`TextileOptions`

    Examples
    --------
        >>> convert("# one\\n# two", TextileOptions(flavor="xhtml"))
        '\\t<ol>\\n\\t\\t<li>one</li>\\n\\t\\t<li>two</li>\\n\\t</ol>'

    """
    parser = TextileParser(options)
    logger.debug("Converting with options: %s", parser.options.to_dict())

    try:
        markup = _load_markup(input_data, parser.options.input_encoding)
    except (LookupError, UnicodeDecodeError) as e:
        raise ValidationError(
            f"Could not decode input with encoding {parser.options.input_encoding!r}",
            parameter_name="input_encoding",
            parameter_value=parser.options.input_encoding,
            original_error=e,
        ) from e

    with debug_timer(logger, f"Conversion ({parser.options.flavor})"):
        return parser.parse_text(markup)
