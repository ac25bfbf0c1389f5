#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/splitdiff/cli/__init__.py
"""Command line interface for splitdiff.

This module provides the ``splitdiff`` command for comparing two text files
and printing a side-by-side, unified, HTML or JSON view of the differences.

Usage:
    splitdiff original.txt modified.txt
    splitdiff original.txt modified.txt --format html --output diff.html
    cat draft.txt | splitdiff - final.txt --no-sections
"""

from __future__ import annotations

import argparse
import logging
import os
import shutil
import sys
from pathlib import Path
from typing import Any, Optional

from splitdiff.api import DiffResult, compare_texts
from splitdiff.cli.config import load_config_with_priority
from splitdiff.constants import (
    CONFIG_ENV_VAR,
    DEFAULT_COLOR_MODE,
    DEFAULT_MODIFIED_TITLE,
    DEFAULT_ORIGINAL_TITLE,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_TERMINAL_WIDTH,
    DEFAULT_TITLE,
    EXIT_DEPENDENCY_ERROR,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_RESOURCE_LIMIT,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    MIN_TERMINAL_WIDTH,
)
from splitdiff.exceptions import DependencyError, ResourceLimitExceeded, ValidationError
from splitdiff.logging_utils import configure_logging
from splitdiff.options import DiffOptions
from splitdiff.renderers import (
    CollapseState,
    HtmlDiffRenderer,
    JsonDiffRenderer,
    RichDiffRenderer,
    SideBySideRenderer,
    UnifiedRenderer,
)

logger = logging.getLogger(__name__)

STDIN_MARKER = "-"


def _validate_positive_int(value: str) -> int:
    """Validate that an argument is a positive integer.

    Raises
    ------
    argparse.ArgumentTypeError
        If value is not a positive integer

    """
    try:
        ivalue = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected an integer, got '{value}'") from e

    if ivalue <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {ivalue}")

    return ivalue


def _validate_width(value: str) -> int:
    """Validate the terminal width argument."""
    ivalue = _validate_positive_int(value)
    if ivalue < MIN_TERMINAL_WIDTH:
        raise argparse.ArgumentTypeError(f"width must be at least {MIN_TERMINAL_WIDTH}, got {ivalue}")
    return ivalue


def _get_version() -> str:
    from splitdiff import __version__

    return __version__


def _create_parser() -> argparse.ArgumentParser:
    """Create argparse parser for the splitdiff command.

    Option flags that can also come from a configuration file default to
    ``None`` so that only values given on the command line override it.

    Returns
    -------
    argparse.ArgumentParser
        Configured parser

    """
    parser = argparse.ArgumentParser(
        prog="splitdiff",
        description="Compare two text files line by line and show the result side by side",
    )

    parser.add_argument("original", help="Original file (use '-' for stdin)")
    parser.add_argument("modified", help="Modified file (use '-' for stdin)")

    # Output options
    output_group = parser.add_argument_group("output options")
    output_group.add_argument(
        "--format",
        "-f",
        choices=["side-by-side", "unified", "html", "json"],
        default=DEFAULT_OUTPUT_FORMAT,
        help="Output format: side-by-side (default), unified, html (visual), json (structured)",
    )
    output_group.add_argument("--output", "-o", help="Write diff to file (default: stdout)")
    output_group.add_argument(
        "--color",
        dest="color",
        choices=["auto", "always", "never"],
        default=DEFAULT_COLOR_MODE,
        help="Colorize output: auto (default, if terminal), always, never",
    )
    output_group.add_argument(
        "--rich",
        action="store_true",
        help="Render the side-by-side view with the rich library (pip install splitdiff[rich])",
    )
    output_group.add_argument(
        "--width",
        "-W",
        type=_validate_width,
        default=None,
        help=f"Total width of the side-by-side view (default: terminal width, at least {MIN_TERMINAL_WIDTH})",
    )
    output_group.add_argument(
        "--collapse-unchanged",
        action="store_true",
        help="Collapse sections that contain no changes",
    )
    output_group.add_argument("--title", default=DEFAULT_TITLE, help=f"Overall title (default: '{DEFAULT_TITLE}')")
    output_group.add_argument("--original-title", help="Label for the original side (default: file name)")
    output_group.add_argument("--modified-title", help="Label for the modified side (default: file name)")

    # Comparison options
    diff_group = parser.add_argument_group("comparison options")
    diff_group.add_argument(
        "--section-pattern",
        default=None,
        help="Regular expression matched at line start that opens a new section",
    )
    diff_group.add_argument(
        "--no-sections",
        action="store_true",
        help="Disable section headers so each side is a single section",
    )
    diff_group.add_argument(
        "--resource-limit",
        type=_validate_positive_int,
        default=None,
        help="Maximum number of line pairs (original lines x modified lines) to align",
    )
    diff_group.add_argument(
        "--no-pairing",
        action="store_true",
        help="Report substitutions as removed and added lines instead of modified pairs",
    )
    diff_group.add_argument(
        "--keep-trailing-empty",
        action="store_true",
        help="Count a trailing line break as an extra empty line",
    )

    # Configuration and logging
    misc_group = parser.add_argument_group("configuration and logging")
    misc_group.add_argument("--config", help=f"Path to a configuration file (overrides ${CONFIG_ENV_VAR})")
    misc_group.add_argument("--no-config", action="store_true", help="Ignore configuration files")
    misc_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        type=str.upper,
        help="Logging level (default: WARNING)",
    )
    misc_group.add_argument("--log-file", help="Also write log messages to this file")
    misc_group.add_argument(
        "--trace",
        action="store_true",
        help="Enable debug logging with timestamps and logger names",
    )
    misc_group.add_argument("--version", "-V", action="version", version=f"%(prog)s {_get_version()}")

    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes precedence over --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def _build_options(parsed_args: argparse.Namespace) -> DiffOptions:
    """Combine configuration file values with command line overrides.

    Raises
    ------
    ValidationError
        If the configuration file or an option value is invalid

    """
    config: dict[str, Any] = {}
    if not parsed_args.no_config:
        config = load_config_with_priority(
            explicit_path=parsed_args.config,
            env_var_path=os.environ.get(CONFIG_ENV_VAR),
        )
        if config:
            logger.debug("Loaded configuration: %s", config)

    options = DiffOptions.from_mapping(config)

    overrides: dict[str, Any] = {}
    if parsed_args.no_sections:
        overrides["section_header_pattern"] = None
    elif parsed_args.section_pattern is not None:
        overrides["section_header_pattern"] = parsed_args.section_pattern
    if parsed_args.resource_limit is not None:
        overrides["resource_limit"] = parsed_args.resource_limit
    if parsed_args.no_pairing:
        overrides["pair_substitutions"] = False
    if parsed_args.keep_trailing_empty:
        overrides["keep_trailing_empty"] = True

    if overrides:
        options = options.create_updated(**overrides)
    return options


def _read_input(source: str) -> tuple[str, str]:
    """Read one side of the comparison.

    Returns
    -------
    tuple of str
        The text and a label for it ("stdin" or the path)

    Raises
    ------
    OSError, UnicodeDecodeError
        If the file cannot be read as UTF-8 text

    """
    if source == STDIN_MARKER:
        return sys.stdin.read(), "stdin"

    path = Path(source)
    return path.read_text(encoding="utf-8"), str(path)


def _use_color(parsed_args: argparse.Namespace) -> bool:
    """Decide whether to emit color codes."""
    if parsed_args.color == "always":
        return True
    if parsed_args.color == "never" or parsed_args.output:
        return False
    # Auto-detect: use colors if stdout is a TTY
    return sys.stdout.isatty()


def _terminal_width(parsed_args: argparse.Namespace) -> int:
    if parsed_args.width is not None:
        return parsed_args.width
    columns = shutil.get_terminal_size((DEFAULT_TERMINAL_WIDTH, 24)).columns
    return max(columns, MIN_TERMINAL_WIDTH)


def _render(result: DiffResult, parsed_args: argparse.Namespace, collapse_state: CollapseState) -> str:
    """Render the comparison in the requested output format.

    Raises
    ------
    DependencyError
        If ``--rich`` is requested but the rich package is missing

    """
    use_color = _use_color(parsed_args)

    if parsed_args.format == "html":
        return HtmlDiffRenderer(collapse_state=collapse_state).render(result)
    elif parsed_args.format == "json":
        return JsonDiffRenderer(collapse_state=collapse_state).render(result)
    elif parsed_args.format == "unified":
        return UnifiedRenderer(use_color=use_color).render_to_string(result)

    if parsed_args.rich:
        rich_renderer = RichDiffRenderer(
            width=parsed_args.width,
            use_color=use_color,
            collapse_state=collapse_state,
        )
        return rich_renderer.render_to_string(result).rstrip("\n")

    return SideBySideRenderer(
        use_color=use_color,
        width=_terminal_width(parsed_args),
        show_sections=not parsed_args.no_sections,
        collapse_state=collapse_state,
    ).render_to_string(result)


def _report_resource_limit(error: ResourceLimitExceeded) -> None:
    """Explain a resource limit failure with a coarse size summary."""
    print(f"Error: {error.message}", file=sys.stderr)
    print(
        f"  Original: {error.original_size} lines, Modified: {error.modified_size} lines "
        f"({error.pair_count:,} line pairs, limit {error.limit:,})",
        file=sys.stderr,
    )
    print("  Compare smaller excerpts or raise --resource-limit.", file=sys.stderr)


def main(args: Optional[list[str]] = None) -> int:
    """Run the splitdiff command line interface.

    Parameters
    ----------
    args : list[str], optional
        Command line arguments; defaults to ``sys.argv[1:]``

    Returns
    -------
    int
        Exit code (0 for success)

    """
    parser = _create_parser()
    try:
        parsed = parser.parse_args(args)
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else EXIT_SUCCESS

    _setup_logging_level(parsed)

    if parsed.original == STDIN_MARKER and parsed.modified == STDIN_MARKER:
        print("Error: Cannot read both original and modified from stdin", file=sys.stderr)
        return EXIT_FILE_ERROR

    if parsed.rich and parsed.format != "side-by-side":
        print("Error: --rich only applies to the side-by-side format", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        options = _build_options(parsed)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        original_text, original_label = _read_input(parsed.original)
        modified_text, modified_label = _read_input(parsed.modified)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error: Cannot read input: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR

    original_title = parsed.original_title or original_label or DEFAULT_ORIGINAL_TITLE
    modified_title = parsed.modified_title or modified_label or DEFAULT_MODIFIED_TITLE

    try:
        result = compare_texts(
            original_text,
            modified_text,
            options,
            title=parsed.title,
            original_title=original_title,
            modified_title=modified_title,
        )

        collapse_state = CollapseState()
        if parsed.collapse_unchanged:
            collapse_state.collapse_unchanged(result.iter_sections())

        if not result.has_changes:
            print("No differences found.", file=sys.stderr)

        output = _render(result, parsed, collapse_state)
    except ResourceLimitExceeded as e:
        _report_resource_limit(e)
        return EXIT_RESOURCE_LIMIT
    except DependencyError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_DEPENDENCY_ERROR
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except Exception as e:
        logger.debug("Unexpected error", exc_info=True)
        print(f"Error comparing files: {e}", file=sys.stderr)
        return EXIT_ERROR

    if parsed.output:
        output_path = Path(parsed.output)
        try:
            output_path.write_text(output, encoding="utf-8")
        except OSError as e:
            print(f"Error: Cannot write output: {e}", file=sys.stderr)
            return EXIT_FILE_ERROR
        print(f"Diff written to: {output_path}", file=sys.stderr)
    else:
        print(output)

    return EXIT_SUCCESS


__all__ = ["main"]
