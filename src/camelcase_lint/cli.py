"""Command line entry point for the camel case checker."""

import argparse
import logging
import sys
from dataclasses import replace

from camelcase_lint.naming_analysis.options import (
    PropertiesMode,
    PropertiesStyle,
    RuleOptions,
)
from camelcase_lint.pipelines.lint import format_violation, lint_paths, violations_to_dicts
from camelcase_lint.utils.config_loader import load_rule_options
from camelcase_lint.utils.file_loader import dump_json

logger = logging.getLogger("camelcase_lint")

EXIT_OK = 0
EXIT_VIOLATIONS = 1
EXIT_ERROR = 2


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="camelcase-lint",
        description="Flag JavaScript identifiers that are not in camel case",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  camelcase-lint src/                             # Check every .js/.mjs/.cjs/.jsx file
  camelcase-lint app.js --properties never        # Skip property names
  camelcase-lint app.js --ignore-destructuring    # Allow `const { foo_bar } = obj`
  camelcase-lint src/ --format json               # Machine readable output
        """,
    )

    parser.add_argument("paths", nargs="+", help="Files or directories to check")

    parser.add_argument(
        "--config",
        "-c",
        help="YAML file with a 'camelcase' section (defaults to config/camelcase.yaml)",
    )

    parser.add_argument(
        "--ignore-destructuring",
        action="store_true",
        default=None,
        help="Do not check identifiers introduced by destructuring",
    )

    parser.add_argument(
        "--properties",
        choices=[mode.value for mode in PropertiesMode],
        help="Whether property names are checked",
    )

    parser.add_argument(
        "--properties-style",
        choices=[style.value for style in PropertiesStyle],
        help="Casing required of property names",
    )

    parser.add_argument(
        "--format",
        "-f",
        choices=["text", "json"],
        default="text",
        help="Output format",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="count",
        default=0,
        help="Increase log verbosity (can be used multiple times)",
    )

    return parser


def resolve_options(args: argparse.Namespace) -> RuleOptions:
    """Merge command line overrides on top of the configured options."""
    options = load_rule_options(args.config)
    overrides = {}
    if args.ignore_destructuring is not None:
        overrides["ignore_destructuring"] = args.ignore_destructuring
    if args.properties:
        overrides["properties"] = PropertiesMode(args.properties)
    if args.properties_style:
        overrides["properties_style"] = PropertiesStyle(args.properties_style)
    return replace(options, **overrides)


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main(argv: list[str] | None = None) -> int:
    args = create_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        options = resolve_options(args)
        results = lint_paths(args.paths, options)
    except (OSError, ValueError) as e:
        logger.error("%s", e)
        return EXIT_ERROR

    if args.format == "json":
        print(dump_json(violations_to_dicts(results)))
    else:
        for path, violations in results.items():
            for violation in violations:
                print(format_violation(path, violation))

    total = sum(len(violations) for violations in results.values())
    return EXIT_VIOLATIONS if total else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
