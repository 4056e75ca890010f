#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Command-line interface for org2wiki.

Reads a JSON document tree from a file or stdin and writes MediaWiki markup
to a file or stdout. Option values come from the built-in defaults, then a
configuration file, then command-line flags.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Any, Dict

from org2wiki import __version__
from org2wiki.api import load_document
from org2wiki.config import load_config_with_priority, options_from_config
from org2wiki.constants import HEADLINE_STYLES
from org2wiki.exceptions import OutputWriteError, ParsingError, ValidationError
from org2wiki.logging_utils import configure_logging
from org2wiki.renderers.mediawiki import MediaWikiRenderer

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 2

CONFIG_ENV_VAR = "ORG2WIKI_CONFIG"


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="org2wiki",
        description="Render a parsed outline document (JSON tree) as MediaWiki markup.",
    )
    parser.add_argument("input", help="JSON document tree, or '-' to read from stdin")
    parser.add_argument("-o", "--output", help="Output file (default: stdout)")
    parser.add_argument(
        "--config",
        help=f"Configuration file (.toml, .yaml, .json or pyproject.toml); defaults to ${CONFIG_ENV_VAR} "
        "or the nearest .org2wiki.* file",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    rendering = parser.add_argument_group("rendering options")
    rendering.add_argument("--headline-style", choices=list(HEADLINE_STYLES), help="Headline layout")
    table_class = rendering.add_mutually_exclusive_group()
    table_class.add_argument("--table-class", dest="default_table_class", help="CSS class applied to tables")
    table_class.add_argument("--no-table-class", action="store_true", help="Emit tables without a class attribute")
    rendering.add_argument(
        "--with-priority",
        dest="with_priority",
        action="store_const",
        const=True,
        help="Include headline priority cookies",
    )
    rendering.add_argument(
        "--no-todo-keywords",
        dest="with_todo_keywords",
        action="store_const",
        const=False,
        help="Omit TODO keywords from headlines",
    )
    rendering.add_argument(
        "--no-tags", dest="with_tags", action="store_const", const=False, help="Omit headline tags"
    )
    rendering.add_argument(
        "--smart-quotes",
        dest="with_smart_quotes",
        action="store_const",
        const=True,
        help="Use typographic quotes",
    )
    rendering.add_argument(
        "--no-special-strings",
        dest="with_special_strings",
        action="store_const",
        const=False,
        help="Keep --, ---, ... and \\- as written",
    )
    rendering.add_argument(
        "--preserve-breaks",
        dest="preserve_breaks",
        action="store_const",
        const=True,
        help="Keep source line breaks as hard breaks",
    )
    rendering.add_argument("--language", help="Language of generated fixed strings (e.g. 'fr')")

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    logging_group.add_argument("--log-file", help="Also write log output to this file")
    logging_group.add_argument("--trace", action="store_true", help="Timestamped log output with logger names")
    return parser


def _flag_overrides(parsed_args: argparse.Namespace) -> Dict[str, Any]:
    """Collect the rendering options given on the command line."""
    overrides: Dict[str, Any] = {}
    for name in (
        "headline_style",
        "default_table_class",
        "with_priority",
        "with_todo_keywords",
        "with_tags",
        "with_smart_quotes",
        "with_special_strings",
        "preserve_breaks",
        "language",
    ):
        value = getattr(parsed_args, name)
        if value is not None:
            overrides[name] = value
    if parsed_args.no_table_class:
        overrides["default_table_class"] = None
    return overrides


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return the process exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    configure_logging(parsed_args.log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)

    try:
        config = load_config_with_priority(parsed_args.config or os.environ.get(CONFIG_ENV_VAR))
        options = options_from_config(config)
        options = options_from_config(_flag_overrides(parsed_args), base=options)
    except (argparse.ArgumentTypeError, ValidationError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        document = load_document(sys.stdin if parsed_args.input == "-" else parsed_args.input)
    except (OSError, ParsingError) as e:
        print(f"Error: cannot load {parsed_args.input}: {e}", file=sys.stderr)
        return EXIT_ERROR

    renderer = MediaWikiRenderer(options)
    if parsed_args.output:
        try:
            renderer.render(document, parsed_args.output)
        except OutputWriteError as e:
            print(f"Error: {e}", file=sys.stderr)
            return EXIT_ERROR
        logger.info("Wrote %s", parsed_args.output)
    else:
        sys.stdout.write(renderer.render_to_string(document))
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
