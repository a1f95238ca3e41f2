from .lint import format_violation, lint_file, lint_paths, lint_source, violations_to_dicts

__all__ = [
    "format_violation",
    "lint_file",
    "lint_paths",
    "lint_source",
    "violations_to_dicts",
]
