#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textiler/cli/__init__.py
"""Command line interface for textiler.

Reads Textile from a file or stdin and writes HTML or XHTML to a file or
stdout. Bytes are passed through unchanged wherever the markup does not
rewrite them, so input in any ASCII-compatible encoding works.

"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from textiler.cli.builder import EXIT_SUCCESS, create_parser, get_exit_code_for_exception
from textiler.exceptions import FileError, FileNotFoundError, OutputWriteError, TextilerError
from textiler.logging_utils import configure_logging
from textiler.options.textile import TextileOptions
from textiler.parsers.textile import TextileParser

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


def read_input(source: str) -> bytes:
    """Read raw markup from a file path or, for ``-``, from stdin.

    Raises
    ------
    FileNotFoundError
        If ``source`` names a file that does not exist
    FileError
        If the file cannot be read

    """
    if source == STDIN_MARKER:
        return sys.stdin.buffer.read()
    path = Path(source)
    if not path.is_file():
        raise FileNotFoundError(source)
    try:
        return path.read_bytes()
    except OSError as e:
        raise FileError(f"Could not read input file: {source}", file_path=source, original_error=e) from e


def write_output(data: bytes, destination: str | None) -> None:
    """Write converted output to ``destination``, or stdout when it is None.

    Raises
    ------
    OutputWriteError
        If the destination file cannot be written

    """
    if destination is None:
        sys.stdout.buffer.write(data)
        sys.stdout.buffer.flush()
        return
    try:
        Path(destination).write_bytes(data)
    except OSError as e:
        raise OutputWriteError(destination, original_error=e) from e
    logger.info("Wrote %d bytes to %s", len(data), destination)


def main(args: list[str] | None = None) -> int:
    """Execute the textiler command line and return the exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        options = TextileOptions(
            flavor=parsed_args.flavor,
            dump_lines=parsed_args.dump_lines,
            dump_paragraphs=parsed_args.dump_paragraphs,
        )
        data = read_input(parsed_args.input)
        logger.debug("Read %d bytes from %s", len(data), parsed_args.input)
        result = TextileParser(options).parse_bytes(data)
        write_output(result, parsed_args.output)
    except TextilerError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Unexpected error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS


__all__ = ["main", "read_input", "write_output"]
