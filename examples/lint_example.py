"""Example: checking a JavaScript snippet with different rule options."""

from pathlib import Path

from camelcase_lint.naming_analysis import PropertiesMode, RuleOptions
from camelcase_lint.pipelines import format_violation, lint_source

SOURCE = """
import { no_camel as no_camel } from "external";

const { category_id, user_name: userName, page_size = 20 } = query;
settings.max_items = 10;
render({ isVisible: true, show_header: false });
"""


def main() -> None:
    configurations = {
        "default": RuleOptions(),
        "ignoreDestructuring": RuleOptions(ignore_destructuring=True),
        "propertiesMode=never": RuleOptions(properties=PropertiesMode.NEVER),
    }
    for label, options in configurations.items():
        print(f"--- {label} ---")
        for violation in lint_source(SOURCE, options):
            print(format_violation(Path("example.js"), violation))


if __name__ == "__main__":
    main()
