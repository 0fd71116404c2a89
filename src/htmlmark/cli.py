#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for htmlmark.

Option flags are generated from the :class:`~htmlmark.options.HtmlOptions`
field metadata, so every conversion option is available on the command line.

Examples
--------
Convert a file to stdout:
    $ htmlmark page.html

Write to a file with ATX headings:
    $ htmlmark page.html --heading-style atx --out page.md

Read from stdin:
    $ curl -s https://example.com | htmlmark -

Load options from a JSON file:
    $ htmlmark page.html --options-json options.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import MISSING, Field, fields
from pathlib import Path
from typing import Any, Optional

from htmlmark.api import html_to_markdown
from htmlmark.constants import EXIT_CONVERSION_ERROR, EXIT_FILE_ERROR, EXIT_SUCCESS, EXIT_VALIDATION_ERROR
from htmlmark.exceptions import FileError, HtmlMarkError, ValidationError
from htmlmark.logging_utils import configure_logging
from htmlmark.options import HtmlOptions

logger = logging.getLogger(__name__)

NONE_CHOICE = "none"

# Help sections keyed by the ``importance`` field metadata
OPTION_GROUP_TITLES = {
    "core": "conversion options",
    "advanced": "advanced conversion options",
}


def _get_version() -> str:
    """Get the version of the htmlmark package."""
    try:
        from importlib.metadata import PackageNotFoundError, version

        return version("htmlmark")
    except PackageNotFoundError:
        return "unknown"


def parse_tag_list(value: str) -> tuple[str, ...]:
    """Parse a comma-separated list of tag names."""
    return tuple(tag.strip().lower() for tag in value.split(",") if tag.strip())


def positive_int(value: str) -> int:
    """Argparse type accepting only positive integers."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got {value!r}") from None
    if number <= 0:
        raise argparse.ArgumentTypeError(f"Expected a positive integer, got {value!r}")
    return number


def option_flag(option_field: Field) -> str:
    """Return the ``--flag`` name for an options field."""
    cli_name = option_field.metadata.get("cli_name")
    if cli_name:
        return f"--{cli_name}"
    return "--" + option_field.name.replace("_", "-")


def get_argument_kwargs(option_field: Field) -> dict[str, Any]:
    """Build ``add_argument`` keyword arguments from field metadata.

    Every generated argument defaults to ``argparse.SUPPRESS`` so that only
    options given on the command line show up in the parsed namespace.
    """
    metadata = option_field.metadata
    kwargs: dict[str, Any] = {
        "dest": option_field.name,
        "default": argparse.SUPPRESS,
        "help": metadata.get("help", f"Configure {option_field.name}"),
    }
    default = option_field.default if option_field.default is not MISSING else None

    if isinstance(default, bool):
        kwargs["action"] = "store_false" if default else "store_true"
    elif "choices" in metadata:
        kwargs["choices"] = metadata["choices"]
    elif metadata.get("type") == "tag_list":
        kwargs["type"] = parse_tag_list
        kwargs["metavar"] = "TAGS"
    elif metadata.get("type") is int:
        kwargs["type"] = positive_int

    if default is not None and not isinstance(default, bool) and default != ():
        kwargs["help"] += f" (default: {default!r})"
    return kwargs


def add_options_arguments(parser: argparse.ArgumentParser) -> None:
    """Add one argument per :class:`HtmlOptions` field.

    Fields are grouped in the help output by their ``importance`` metadata;
    fields without one are treated as ``core``.
    """
    groups = {importance: parser.add_argument_group(title) for importance, title in OPTION_GROUP_TITLES.items()}
    for option_field in fields(HtmlOptions):
        if option_field.metadata.get("exclude_from_cli", False):
            continue
        importance = option_field.metadata.get("importance", "core")
        group = groups.get(importance, groups["core"])
        group.add_argument(option_flag(option_field), **get_argument_kwargs(option_field))


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        prog="htmlmark",
        description="Convert HTML to Markdown.",
    )
    parser.add_argument("input", nargs="?", default="-", help="Input HTML file, or '-' for stdin (default)")
    parser.add_argument("--out", "-o", help="Output Markdown file (default: stdout)")
    parser.add_argument("--options-json", help="JSON file with option values, overridden by command-line flags")
    parser.add_argument("--version", action="version", version=f"htmlmark {_get_version()}")

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    logging_group.add_argument("--verbose", "-v", action="store_true", help="Shortcut for --log-level DEBUG")
    logging_group.add_argument("--trace", action="store_true", help="Log with timestamps and logger names")
    logging_group.add_argument("--log-file", help="Also write log records to this file")

    add_options_arguments(parser)
    return parser


def load_options_from_json(json_file_path: str) -> dict:
    """Load options from a JSON file.

    Raises
    ------
    argparse.ArgumentTypeError
        If the JSON file cannot be read or does not hold an object.

    """
    json_path = Path(json_file_path)
    if not json_path.exists():
        raise argparse.ArgumentTypeError(f"Options JSON file does not exist: {json_file_path}")
    try:
        with open(json_path, "r", encoding="utf-8") as f:
            options = json.load(f)
    except json.JSONDecodeError as e:
        raise argparse.ArgumentTypeError(f"Invalid JSON in options file {json_file_path}: {e}") from e
    except OSError as e:
        raise argparse.ArgumentTypeError(f"Error reading options file {json_file_path}: {e}") from e

    if not isinstance(options, dict):
        raise argparse.ArgumentTypeError(f"Options JSON file must contain a JSON object, got {type(options).__name__}")
    return options


def map_args_to_options(parsed_args: argparse.Namespace, json_options: Optional[dict] = None) -> dict[str, Any]:
    """Collect option overrides from JSON and command-line flags, flags winning."""
    overrides: dict[str, Any] = dict(json_options or {})
    for option_field in fields(HtmlOptions):
        if hasattr(parsed_args, option_field.name):
            overrides[option_field.name] = getattr(parsed_args, option_field.name)

    if overrides.get("strip_document") == NONE_CHOICE:
        overrides["strip_document"] = None
    for name in ("convert", "strip", "keep_inline_images_in"):
        if isinstance(overrides.get(name), list):
            overrides[name] = tuple(overrides[name])
    return overrides


def main(args: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(
        parsed_args.log_level, verbose=parsed_args.verbose, log_file=parsed_args.log_file, trace_mode=parsed_args.trace
    )

    json_options = None
    if parsed_args.options_json:
        try:
            json_options = load_options_from_json(parsed_args.options_json)
        except argparse.ArgumentTypeError as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_VALIDATION_ERROR

    overrides = map_args_to_options(parsed_args, json_options)

    if parsed_args.input == "-":
        input_data: Any = sys.stdin.buffer.read()
    else:
        input_data = Path(parsed_args.input)

    try:
        markdown = html_to_markdown(input_data, **overrides)
    except ValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR
    except FileError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_FILE_ERROR
    except HtmlMarkError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONVERSION_ERROR

    if parsed_args.out:
        output_path = Path(parsed_args.out)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(markdown, encoding="utf-8")
        except OSError as e:
            print(f"Error: could not write {output_path}: {e}", file=sys.stderr)
            return EXIT_FILE_ERROR
        logger.info("Converted %s -> %s", parsed_args.input, output_path)
    else:
        sys.stdout.write(markdown)

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
