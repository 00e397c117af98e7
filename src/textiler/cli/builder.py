#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textiler/cli/builder.py
"""Argument parser and exit codes for the textiler command line."""

from __future__ import annotations

import argparse
import os
from typing import Mapping, Optional

from textiler.constants import DEFAULT_FLAVOR, ENV_FLAVOR, ENV_LOG_LEVEL, OUTPUT_FLAVORS
from textiler.exceptions import FileError, OutputWriteError, ValidationError
from textiler.options.textile import TextileOptions

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"

_EPILOG = """\
Examples:
  # Convert a file to HTML on stdout
  textiler README.textile

  # Read stdin, write XHTML to a file
  cat notes.textile | textiler --xhtml -o notes.html

Environment:
  TEXTILER_FLAVOR      default output flavor (html or xhtml)
  TEXTILER_LOG_LEVEL   default log level
"""


def _get_version() -> str:
    """Get the version of the textiler package."""
    try:
        from importlib.metadata import PackageNotFoundError, version

        return version("textiler")
    except PackageNotFoundError:
        from textiler import __version__

        return __version__


def environment_defaults(environ: Optional[Mapping[str, str]] = None) -> dict[str, str]:
    """Read command line defaults from the environment.

    Unknown flavors and log levels are ignored so the built-in defaults apply.

    Parameters
    ----------
    environ : Mapping[str, str], optional
        Environment to read; ``os.environ`` when omitted

    Returns
    -------
    dict[str, str]
        ``flavor`` and ``log_level`` defaults

    """
    env = os.environ if environ is None else environ
    flavor = env.get(ENV_FLAVOR, "").strip().lower()
    log_level = env.get(ENV_LOG_LEVEL, "").strip().upper()
    return {
        "flavor": flavor if flavor in OUTPUT_FLAVORS else DEFAULT_FLAVOR,
        "log_level": log_level if log_level in LOG_LEVELS else DEFAULT_LOG_LEVEL,
    }


def create_parser(environ: Optional[Mapping[str, str]] = None) -> argparse.ArgumentParser:
    """Create the argument parser, with defaults taken from the environment."""
    defaults = environment_defaults(environ)
    option_help = TextileOptions.field_help()

    parser = argparse.ArgumentParser(
        prog="textiler",
        description="Convert Textile markup to HTML or XHTML.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "input",
        nargs="?",
        default="-",
        help="Textile file to convert, or '-' for stdin (default: stdin)",
    )
    parser.add_argument("--output", "-o", help="Write output to this file instead of stdout")

    flavor_group = parser.add_mutually_exclusive_group()
    flavor_group.add_argument(
        "--xhtml",
        dest="flavor",
        action="store_const",
        const="xhtml",
        help="Write XHTML (<br />) instead of HTML",
    )
    flavor_group.add_argument(
        "--html",
        dest="flavor",
        action="store_const",
        const="html",
        help="Write HTML (<br>); the default unless TEXTILER_FLAVOR says otherwise",
    )
    parser.set_defaults(flavor=defaults["flavor"])

    parser.add_argument("--dump-lines", action="store_true", help=option_help["dump_lines"])
    parser.add_argument("--dump-paragraphs", action="store_true", help=option_help["dump_paragraphs"])

    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=defaults["log_level"],
        help=f"Set logging level (default: {defaults['log_level']})",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Debug logging with timestamps and logger names",
    )
    parser.add_argument("--version", "-V", action="version", version=f"textiler {_get_version()}")
    return parser


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, (FileError, OutputWriteError, OSError)):
        return EXIT_FILE_ERROR

    return EXIT_ERROR
