import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from camelcase_lint.code_representation.ast_parser import ASTParser
from camelcase_lint.code_representation.estree import to_estree
from camelcase_lint.code_representation.traversal import iter_identifiers
from camelcase_lint.naming_analysis.analyzer import CamelCaseRule
from camelcase_lint.naming_analysis.options import RuleOptions
from camelcase_lint.naming_analysis.reporter import Violation
from camelcase_lint.utils.file_loader import find_source_files, load_code

logger = logging.getLogger(__name__)

RULE_ID = "camelcase"


def lint_source(
    source_code: str,
    options: RuleOptions | None = None,
    parser: ASTParser | None = None,
) -> list[Violation]:
    """Lint a JavaScript source string.

    Args:
        source_code (str): Source text to check.
        options (RuleOptions, optional): Rule options, defaults when omitted.
        parser (ASTParser, optional): Parser to reuse across calls.

    Returns:
        list[Violation]: Violations in traversal order.
    """
    parser = parser or ASTParser(language="javascript")
    program = to_estree(parser.parse_code_to_ast(source_code), source_code)
    return CamelCaseRule(options).run(iter_identifiers(program))


def lint_file(
    file_path: str | Path,
    options: RuleOptions | None = None,
    parser: ASTParser | None = None,
) -> list[Violation]:
    violations = lint_source(load_code(file_path), options, parser)
    logger.debug("%s: %d violation(s)", file_path, len(violations))
    return violations


def lint_paths(
    paths: Iterable[str | Path],
    options: RuleOptions | None = None,
) -> dict[Path, list[Violation]]:
    """Lint files and directories, searching directories for JavaScript sources."""
    parser = ASTParser(language="javascript")
    results: dict[Path, list[Violation]] = {}
    for path in paths:
        for source_file in find_source_files(path):
            results[source_file] = lint_file(source_file, options, parser)
    logger.info(
        "Checked %d file(s), found %d violation(s)",
        len(results),
        sum(len(violations) for violations in results.values()),
    )
    return results


def format_violation(path: str | Path, violation: Violation) -> str:
    return f"{path}:{violation.line}:{violation.column}: {violation.message} ({RULE_ID})"


def violations_to_dicts(results: dict[Path, list[Violation]]) -> list[dict[str, Any]]:
    return [
        {
            "file": str(path),
            "line": violation.line,
            "column": violation.column,
            "name": violation.name,
            "message": violation.message,
            "rule": RULE_ID,
        }
        for path, violations in results.items()
        for violation in violations
    ]
