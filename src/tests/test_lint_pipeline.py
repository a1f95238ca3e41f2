import os
import sys
import tempfile
import unittest
from pathlib import Path

# Add the src directory to the path so we can import our modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from camelcase_lint.naming_analysis.options import (
    PropertiesMode,
    PropertiesStyle,
    RuleOptions,
)

IGNORE_DESTRUCTURING = RuleOptions(ignore_destructuring=True)
NEVER = RuleOptions(properties=PropertiesMode.NEVER)


class TestLintSource(unittest.TestCase):
    """End-to-end scenarios from JavaScript source to violations."""

    def setUp(self) -> None:
        try:
            from camelcase_lint.code_representation.ast_parser import ASTParser
            from camelcase_lint.pipelines import lint as lint_module
        except Exception as e:
            self.skipTest(f"Tree-sitter JavaScript grammar not available: {e}")
        self.lint = lint_module
        self.parser = ASTParser(language="javascript")

    def names(self, code, options=None):
        return [
            violation.name
            for violation in self.lint.lint_source(code, options, self.parser)
        ]

    def test_variable_declaration(self) -> None:
        assert self.names("var my_var = 1;") == ["my_var"]

    def test_camel_and_constant_names(self) -> None:
        code = "var fooBar = 1; const MAX_SIZE = 2; let __private__ = 3; var _hidden_ = 4;"
        assert self.names(code) == []

    def test_member_assignment(self) -> None:
        assert self.names("obj.my_val = 1;") == ["my_val"]

    def test_properties_never(self) -> None:
        assert self.names("obj.my_val = 1;", NEVER) == []
        assert self.names('foo({ no_camelcased: false });', NEVER) == []
        assert self.names("var foo_bar = obj.baz_qux;", NEVER) == ["foo_bar"]

    def test_object_keys_in_call(self) -> None:
        code = "foo({ isCamelCased: true, no_camelcased: false });"
        assert self.names(code) == ["no_camelcased"]

    def test_calls_and_constructors(self) -> None:
        assert self.names("some_function(); new Some_Class(); obj.do_something();") == []

    def test_underscored_object_name(self) -> None:
        assert self.names("no_camel.doSomething();") == ["no_camel"]

    def test_function_names_and_parameters(self) -> None:
        code = "function foo_bar(first_arg, secondArg = default_value) {}"
        assert self.names(code) == ["foo_bar", "first_arg"]

    def test_shorthand_destructuring(self) -> None:
        code = "const { category_id } = query;"
        assert self.names(code) == ["category_id"]
        assert self.names(code, IGNORE_DESTRUCTURING) == []

    def test_shorthand_destructuring_with_default(self) -> None:
        code = "const { category_id = 1 } = query;"
        assert self.names(code) == ["category_id"]
        assert self.names(code, IGNORE_DESTRUCTURING) == ["category_id"]

    def test_renamed_destructuring(self) -> None:
        assert self.names("const { category_id: categoryId } = query;") == []

        code = "const { no_camel: stillBad_name } = obj;"
        assert self.names(code) == ["stillBad_name"]
        assert self.names(code, IGNORE_DESTRUCTURING) == ["stillBad_name"]

    def test_import_bindings(self) -> None:
        cases = {
            'import { no_camel } from "m";': ["no_camel"],
            'import { no_camel as camelName } from "m";': [],
            'import { camelName as no_camel } from "m";': ["no_camel"],
            'import no_camel from "m";': ["no_camel"],
            'import * as no_camel from "m";': ["no_camel"],
        }
        for code, expected in cases.items():
            with self.subTest(code=code):
                assert self.names(code) == expected

    def test_import_alias_equal_to_imported_name(self) -> None:
        """The local binding is checked even when the alias repeats the imported name."""
        violations = self.lint.lint_source(
            'import { no_camel as no_camel } from "m";',
            parser=self.parser,
        )

        assert len(violations) == 1
        assert violations[0].name == "no_camel"
        assert violations[0].column == 22

    def test_properties_style(self) -> None:
        upper = RuleOptions(properties_style=PropertiesStyle.UPPER)
        assert self.names("obj.myVal = 1;", upper) == ["myVal"]
        assert self.names("obj.MyVal = 1;", upper) == []

    def test_comments_and_jsx_are_ignored(self) -> None:
        code = '// not_checked\nconst el = <my_tag data_attr="1" />;'
        assert self.names(code) == []

    def test_jsx_expressions_are_checked(self) -> None:
        assert self.names("const x = <div>{my_var}</div>;") == ["my_var"]
        assert self.names("const y = <a href={bad_name}>ok</a>;") == ["bad_name"]

    def test_object_methods(self) -> None:
        code = "var o = { foo_bar() {}, get baz_qux() { return 1; } };"
        assert self.names(code) == ["foo_bar", "baz_qux"]
        assert self.names(code, NEVER) == []

    def test_long_concatenation_chain(self) -> None:
        code = "var fooBar = " + " + ".join(["a"] * 2000) + " + bad_name;"
        assert self.names(code) == ["bad_name"]

    def test_columns_after_non_ascii_text(self) -> None:
        (violation,) = self.lint.lint_source(
            'var s = "日本"; var my_var = 1;',
            parser=self.parser,
        )
        assert violation.column == 18

    def test_messages_and_positions(self) -> None:
        (violation,) = self.lint.lint_source("var ok = 1;\nvar __bad_name = 2;", parser=self.parser)

        assert violation.message == "Identifier '__bad_name' is not in camel case."
        assert violation.line == 2
        assert violation.column == 5
        assert (
            self.lint.format_violation(Path("app.js"), violation)
            == "app.js:2:5: Identifier '__bad_name' is not in camel case. (camelcase)"
        )

    def test_results_are_deterministic(self) -> None:
        code = "const { a_b, c_d = 1, e: f_g } = h_i; a_b.x = c_d;"
        assert self.names(code) == self.names(code)
        # The second statement holds new nodes with the same names.
        assert self.names(code) == ["a_b", "c_d", "f_g", "h_i", "a_b", "c_d"]


class TestLintFiles(unittest.TestCase):
    """Test cases for file and directory linting."""

    def setUp(self) -> None:
        try:
            from camelcase_lint.pipelines import lint as lint_module
        except Exception as e:
            self.skipTest(f"Tree-sitter JavaScript grammar not available: {e}")
        self.lint = lint_module
        self.tmp_dir = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp_dir.name)

    def tearDown(self) -> None:
        self.tmp_dir.cleanup()

    def write(self, relative, content):
        path = self.root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    def test_lint_file(self) -> None:
        path = self.write("app.js", "var my_var = 1;\n")

        violations = self.lint.lint_file(path)
        assert [violation.name for violation in violations] == ["my_var"]

    def test_lint_paths_walks_directories(self) -> None:
        self.write("a.js", "var first_bad = 1;")
        self.write("nested/b.mjs", "var secondGood = 1;")
        self.write("nested/c.jsx", "let third_bad;")
        self.write("notes.txt", "var not_js = 1;")
        self.write("node_modules/dep/index.js", "var vendored_code = 1;")

        results = self.lint.lint_paths([self.root])

        assert sorted(path.name for path in results) == ["a.js", "b.mjs", "c.jsx"]
        records = self.lint.violations_to_dicts(results)
        assert sorted(record["name"] for record in records) == ["first_bad", "third_bad"]
        assert all(record["rule"] == "camelcase" for record in records)

    def test_missing_path(self) -> None:
        with pytest.raises(FileNotFoundError):
            self.lint.lint_paths([self.root / "missing.js"])


if __name__ == "__main__":
    unittest.main()
