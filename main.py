import sys
from collections import defaultdict

from camelcase_lint.cli import main as cli_main
from camelcase_lint.code_representation.ast_parser import ASTParser
from camelcase_lint.code_representation.estree import to_estree
from camelcase_lint.code_representation.traversal import iter_identifiers
from camelcase_lint.naming_analysis import CamelCaseRule, RuleOptions


def analyze_code(source_code="", options=None):
    js_parser = ASTParser(language="javascript")
    if not source_code:
        source_code = """
        import { no_camel as localName } from "external";
        import * as name_space from "other";

        var my_var = 1;
        obj.my_val = 1;
        const { category_id } = query;
        const { item_count = 0, total: grand_total } = summary;

        function compute_sum(firstValue, second_value = 0) {
            return new Some_Class(firstValue + second_value);
        }

        foo({ isCamelCased: true, no_camelcased: false });
        """
    options = options or RuleOptions()
    program = to_estree(js_parser.parse_code_to_ast(source_code), source_code)

    findings = defaultdict(list)
    rule = CamelCaseRule(options)
    for occurrence in iter_identifiers(program):
        verdict, violation = rule.evaluate(occurrence)
        if violation is not None:
            findings[verdict.role.value].append(occurrence.name)
    return findings


if __name__ == "__main__":
    if len(sys.argv) > 1:
        sys.exit(cli_main())
    findings = analyze_code()
    print("Findings:")
    for role, names in findings.items():
        print(f"{role}: {', '.join(names) if names else 'None'}")
