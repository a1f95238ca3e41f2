import logging

import tree_sitter_javascript
from tree_sitter import Language, Node, Parser

from .code_representation import LanguageEnum

logger = logging.getLogger(__name__)

JAVASCRIPT_LANGUAGE = Language(tree_sitter_javascript.language())


class ASTParser:
    def __init__(self, language: str = "javascript") -> None:
        """Initialize the AST parser for a specific programming language.

        Args:
            language (str, optional): The programming language to parse. Defaults to "javascript".

        Raises:
            ValueError: If the language is not supported.
        """
        self.parser = Parser()
        match language.lower():
            case LanguageEnum.JAVASCRIPT.value | "js" | "jsx":
                self.parser.language = JAVASCRIPT_LANGUAGE
            case _:
                msg = f"Language '{language}' is not supported."
                raise ValueError(msg)
        self.language = LanguageEnum.JAVASCRIPT.value

    def parse_code_to_ast(self, code_string: str) -> Node:
        """Parses the given code string into an AST.

        Args:
            code_string (str): Source code as a string.

        Returns:
            Node: The root of the AST (tree-sitter object).
        """
        tree = self.parser.parse(bytes(code_string, "utf8"))
        if tree.root_node.has_error:
            logger.debug("Source contains syntax errors, linting the recovered tree")
        return tree.root_node

    def print_ast(self, node: Node, indent: str = "") -> None:
        """Helper function to print the AST structure (for debugging purposes)."""
        print(
            f"{indent}{node.type} [{node.start_point} - {node.end_point}] '{node.text.decode('utf8')}'",
        )
        for child in node.children:
            self.print_ast(child, indent + "  ")


if __name__ == "__main__":
    from textwrap import dedent

    js_parser = ASTParser(language="javascript")
    js_code = dedent(
        """
    import { no_camel as camelOk } from "module";
    const { category_id = 1 } = query;
    obj.my_val = 1;
    """,
    )
    js_parser.print_ast(js_parser.parse_code_to_ast(js_code))
