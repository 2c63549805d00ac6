"""Main entry point for the string-replace-all command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

import regex
import yaml

from . import __version__
from .logging_utils import setup_logging
from .pattern import Pattern, as_pattern, compile_pattern
from .replace import replace_all_with_count, string_replace_all_with_count
from .rules import load_rules

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="string-replace-all",
        description="Replace every occurrence of a literal or regex pattern with a literal replacement.",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"string-replace-all {__version__}",
        help="Show the version number and exit.",
    )
    parser.add_argument("pattern", nargs="?", help="The text (or, with --regex, the expression) to search for.")
    parser.add_argument("replacement", nargs="?", help="The literal replacement text.")
    parser.add_argument(
        "--regex",
        action="store_true",
        help="Treat the pattern as a regular expression instead of literal text.",
    )
    parser.add_argument(
        "-i",
        "--ignore-case",
        action="store_true",
        help="Match case-insensitively (requires --regex).",
    )
    parser.add_argument(
        "--collapse",
        action="store_true",
        help="Merge consecutive replacements into a single one.",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Apply the rules from a YAML rule file instead of a single pattern.",
    )
    parser.add_argument("--input", type=Path, help="Read text from this file (default: stdin).")
    parser.add_argument("-o", "--output", type=Path, help="Write the result to this file (default: stdout).")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug level logging.",
    )
    parser.add_argument("--log-file", type=Path, help="Write detailed debug logs to this file (with --debug).")
    return parser


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    """
    Parse and cross-check command-line arguments.

    Returns:
        argparse.Namespace: An object containing the parsed command-line arguments.

    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.config is None and (args.pattern is None or args.replacement is None):
        parser.error("a pattern and a replacement are required unless --config is given")
    if args.config is not None and args.pattern is not None:
        parser.error("--config cannot be combined with a pattern argument")
    if args.ignore_case and not args.regex:
        parser.error("--ignore-case requires --regex")
    return args


def _read_input(path: Path | None) -> str:
    """Read the input text from a file or stdin."""
    if path is None:
        return sys.stdin.read()
    return path.read_text(encoding="utf-8")


def _write_output(path: Path | None, text: str) -> None:
    """Write the result to a file or stdout."""
    if path is None:
        sys.stdout.write(text)
        return
    path.write_text(text, encoding="utf-8")
    logger.info("Wrote result to %s", path)


def _replace_single(text: str, args: argparse.Namespace) -> str:
    """Run one pattern/replacement pair given on the command line."""
    pattern: Pattern = compile_pattern(args.pattern, ignore_case=args.ignore_case) if args.regex else as_pattern(args.pattern)
    replace = string_replace_all_with_count if args.collapse else replace_all_with_count
    result, count = replace(text, pattern, args.replacement)
    logger.debug("Replaced %d occurrence(s).", count)
    return result


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = _parse_args(argv)
    setup_logging(__version__, debug=args.debug, log_file=args.log_file)

    try:
        text = _read_input(args.input)
        if args.config is not None:
            result = load_rules(args.config).apply(text)
        else:
            result = _replace_single(text, args)
        _write_output(args.output, result)
    except regex.error as e:
        logger.error("Invalid regular expression: %s", e)  # noqa: TRY400
        return 1
    except (FileNotFoundError, ValueError, yaml.YAMLError) as e:
        logger.error("%s", e)  # noqa: TRY400
        return 1
    except OSError:
        logger.exception("I/O error")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
