#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/textcompare/cli/__init__.py
"""Command-line interface for textcompare.

Compares two plain-text files and prints a report of their differences.

Basic usage::

    $ textcompare old.txt new.txt
    $ textcompare old.txt new.txt --format html --output report.html
    $ cat new.txt | textcompare old.txt - --ignore-case --split-by-sentence

Large inputs can be compared window by window with a progress bar::

    $ textcompare big_old.txt big_new.txt --stream --chunk-size 500

Options not given on the command line are read from a configuration file
(``.textcompare.toml``, ``.textcompare.yaml``, ``.textcompare.json`` or
``[tool.textcompare]`` in ``pyproject.toml``), discovered from the current
directory upwards or named by ``--config`` or the ``TEXTCOMPARE_CONFIG``
environment variable.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import fields, replace
from pathlib import Path
from typing import Any, Optional

from textcompare import __version__
from textcompare.cli.config import discover_config_file, load_config_file, options_from_config
from textcompare.cli.progress import ProgressContext, SummaryRenderer
from textcompare.constants import DEFAULT_CHUNK_SIZE, DIFF_ID_PREFIX
from textcompare.diff.engine import DiffEngine
from textcompare.diff.renderers import render_diff, render_to_file
from textcompare.diff.stats import calculate_stats
from textcompare.diff.streaming import count_chunks, split_lines
from textcompare.exceptions import (
    FileAccessError,
    FileError,
    FileNotFoundError,
    RenderingError,
    TextCompareError,
    ValidationError,
)
from textcompare.logging_utils import configure_logging
from textcompare.models import DiffItem, DiffResult
from textcompare.options import EXPORT_FORMATS, DiffOptions, ExportOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_RENDERING_ERROR = 7

CONFIG_ENV_VAR = "TEXTCOMPARE_CONFIG"

_DIFF_FLAGS = (
    "ignore_case",
    "ignore_whitespace",
    "ignore_punctuation",
    "split_by_paragraph",
    "split_by_sentence",
)
_EXPORT_FLAGS = ("format", "include_equal", "include_stats", "include_timestamp", "title")


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
    # ConfigurationError is a ValidationError
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, RenderingError):
        return EXIT_RENDERING_ERROR

    return EXIT_ERROR


def _validate_chunk_size(value: str) -> int:
    """Validate chunk size is a positive integer.

    Raises
    ------
    argparse.ArgumentTypeError
        If value is not a positive integer

    """
    try:
        ivalue = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"chunk size must be an integer, got '{value}'") from e

    if ivalue < 1:
        raise argparse.ArgumentTypeError(f"chunk size must be positive, got {ivalue}")

    return ivalue


def _option_help(name: str) -> str:
    return {f.name: f.metadata["help"] for f in fields(DiffOptions)}[name]


def create_parser() -> argparse.ArgumentParser:
    """Create argparse parser for the textcompare command.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    parser = argparse.ArgumentParser(
        prog="textcompare",
        description="Compare two texts character by character or sentence by sentence",
    )
    parser.add_argument("--version", "-V", action="version", version=f"textcompare {__version__}")

    parser.add_argument("left", help="Original text file (use '-' for stdin)")
    parser.add_argument("right", help="Changed text file (use '-' for stdin)")

    # Comparison options; None means "not given" so config values survive
    compare_group = parser.add_argument_group("comparison options")
    compare_group.add_argument(
        "--ignore-case", "-i", action="store_true", default=None, help=_option_help("ignore_case")
    )
    compare_group.add_argument(
        "--ignore-whitespace", "-w", action="store_true", default=None, help=_option_help("ignore_whitespace")
    )
    compare_group.add_argument(
        "--ignore-punctuation", "-p", action="store_true", default=None, help=_option_help("ignore_punctuation")
    )
    compare_group.add_argument(
        "--split-by-sentence", action="store_true", default=None, help=_option_help("split_by_sentence")
    )
    compare_group.add_argument(
        "--split-by-paragraph", action="store_true", default=None, help=_option_help("split_by_paragraph")
    )

    # Report options
    report_group = parser.add_argument_group("report options")
    report_group.add_argument(
        "--format",
        "-f",
        choices=list(EXPORT_FORMATS),
        default=None,
        help="Report format: text (default), json, markdown, or html",
    )
    report_group.add_argument("--output", "-o", metavar="PATH", help="Write report to file (default: stdout)")
    report_group.add_argument("--title", default=None, help="Report title")
    report_group.add_argument(
        "--include-equal", action="store_true", default=None, help="Include unchanged items in the report"
    )
    report_group.add_argument(
        "--no-stats", dest="include_stats", action="store_false", default=None, help="Omit the statistics section"
    )
    report_group.add_argument(
        "--no-timestamp",
        dest="include_timestamp",
        action="store_false",
        default=None,
        help="Omit the generation timestamp",
    )
    report_group.add_argument(
        "--color",
        choices=["auto", "always", "never"],
        default="auto",
        help="Colorize text output: auto (default, if terminal), always, never",
    )
    report_group.add_argument(
        "--summary", action="store_true", help="Print a statistics table to stderr after comparing"
    )

    # Streaming options
    stream_group = parser.add_argument_group("streaming options")
    stream_group.add_argument("--stream", action="store_true", help="Compare the inputs window by window")
    stream_group.add_argument(
        "--chunk-size",
        type=_validate_chunk_size,
        default=DEFAULT_CHUNK_SIZE,
        metavar="N",
        help=f"Lines per window when streaming (default: {DEFAULT_CHUNK_SIZE})",
    )

    # Configuration options
    config_group = parser.add_argument_group("configuration")
    config_group.add_argument("--config", metavar="PATH", help="Load options from a JSON, TOML, or YAML file")
    config_group.add_argument(
        "--no-config", action="store_true", help="Ignore configuration files and the environment"
    )

    # Logging options
    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output with detailed logging (equivalent to --log-level DEBUG)",
    )
    logging_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level for debugging (default: WARNING). Overrides --verbose if both are specified.",
    )
    logging_group.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write log messages to specified file in addition to console output",
    )
    logging_group.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with timestamps and logger names",
    )

    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments."""
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _load_config(parsed_args: argparse.Namespace) -> dict[str, Any]:
    """Load the configuration mapping selected by the arguments.

    Raises
    ------
    argparse.ArgumentTypeError
        If an explicitly named or discovered file cannot be loaded

    """
    if parsed_args.no_config:
        return {}

    config_path: Optional[Path | str] = parsed_args.config or os.environ.get(CONFIG_ENV_VAR)
    if not config_path:
        config_path = discover_config_file()
        if config_path is None:
            return {}

    logger.debug("Loading configuration from %s", config_path)
    return load_config_file(config_path)


def resolve_options(
    parsed_args: argparse.Namespace, config: dict[str, Any]
) -> tuple[DiffOptions, ExportOptions]:
    """Merge defaults, configuration, and command-line flags.

    Flags given on the command line win over configuration values, which
    win over the option defaults.

    Raises
    ------
    ConfigurationError
        If the configuration holds unknown or malformed options

    """
    diff_options, export_options = options_from_config(config)

    diff_overrides = {
        name: getattr(parsed_args, name) for name in _DIFF_FLAGS if getattr(parsed_args, name) is not None
    }
    export_overrides = {
        name: getattr(parsed_args, name) for name in _EXPORT_FLAGS if getattr(parsed_args, name) is not None
    }
    return diff_options.create_updated(**diff_overrides), export_options.create_updated(**export_overrides)


def _read_input(source: str) -> tuple[str, str]:
    """Read one side of the comparison.

    Returns
    -------
    tuple[str, str]
        The text and a label for log messages

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    FileAccessError
        If the file cannot be read or is not valid UTF-8

    """
    if source == "-":
        return sys.stdin.read(), "stdin"

    path = Path(source)
    if not path.exists():
        raise FileNotFoundError(str(path))
    if not path.is_file():
        raise FileAccessError(str(path), f"Not a regular file: {path}")

    try:
        return path.read_text(encoding="utf-8"), str(path)
    except UnicodeDecodeError as e:
        raise FileAccessError(str(path), f"File is not valid UTF-8 text: {path}") from e
    except OSError as e:
        raise FileAccessError(str(path), f"Cannot read file {path}: {e}") from e


def _renumber(items: list[DiffItem], offset: int) -> list[DiffItem]:
    return [replace(item, id=f"{DIFF_ID_PREFIX}{offset + n}") for n, item in enumerate(items)]


def compare_streaming(
    engine: DiffEngine, left: str, right: str, chunk_size: int, show_progress: bool = True
) -> DiffResult:
    """Compare two texts window by window and merge the windows.

    Item ids are renumbered so they stay unique across windows; line
    numbers and positions stay relative to their window. Statistics are
    recomputed over the full inputs.
    """
    total = count_chunks(len(split_lines(left)), len(split_lines(right)), chunk_size)
    items: list[DiffItem] = []

    with ProgressContext(
        use_rich=sys.stderr.isatty(), use_progress=show_progress, total=total, description="Comparing"
    ) as progress:
        for chunk in engine.compute_diff_stream(left, right, chunk_size):
            items.extend(_renumber(chunk.items, len(items)))
            progress.update()

    return DiffResult(items=items, stats=calculate_stats(items, left, right))


def _should_use_color(parsed_args: argparse.Namespace, export_options: ExportOptions) -> bool:
    if export_options.format != "text":
        return False
    if parsed_args.color == "always":
        return True
    if parsed_args.color == "never" or parsed_args.output:
        return False
    return sys.stdout.isatty()


def main(args: list[str] | None = None) -> int:
    """Execute the textcompare command.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments (defaults to ``sys.argv[1:]``)

    Returns
    -------
    int
        Exit code (0 for success, with or without differences)

    """
    parser = create_parser()
    try:
        parsed_args = parser.parse_args(args)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0

    _setup_logging_level(parsed_args)

    if parsed_args.left == "-" and parsed_args.right == "-":
        print("Error: Cannot read both left and right from stdin", file=sys.stderr)
        return EXIT_FILE_ERROR

    try:
        config = _load_config(parsed_args)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        diff_options, export_options = resolve_options(parsed_args, config)

        left, left_label = _read_input(parsed_args.left)
        right, right_label = _read_input(parsed_args.right)
        logger.info("Comparing %s and %s", left_label, right_label)

        engine = DiffEngine(diff_options)
        if parsed_args.stream:
            result = compare_streaming(engine, left, right, parsed_args.chunk_size)
        else:
            result = engine.compute_diff(left, right)

        if not result.has_changes:
            logger.info("No differences found")

        if parsed_args.output:
            render_to_file(result, parsed_args.output, export_options)
            print(f"Report written to: {parsed_args.output}", file=sys.stderr)
        else:
            rendered = render_diff(result, export_options, use_color=_should_use_color(parsed_args, export_options))
            sys.stdout.write(rendered if rendered.endswith("\n") else rendered + "\n")

        if parsed_args.summary:
            SummaryRenderer(use_rich=sys.stderr.isatty()).render_diff_summary(result.stats)

    except TextCompareError as e:
        print(f"Error: {e}", file=sys.stderr)
        return get_exit_code_for_exception(e)
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        print(f"Unexpected error: {e}", file=sys.stderr)
        return EXIT_ERROR

    return EXIT_SUCCESS


__all__ = [
    "EXIT_ERROR",
    "EXIT_FILE_ERROR",
    "EXIT_RENDERING_ERROR",
    "EXIT_SUCCESS",
    "EXIT_VALIDATION_ERROR",
    "compare_streaming",
    "create_parser",
    "get_exit_code_for_exception",
    "main",
    "resolve_options",
]
