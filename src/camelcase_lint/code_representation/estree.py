"""Conversion of tree-sitter JavaScript trees into ESTree-shaped nodes."""

import logging
from collections.abc import Generator, Iterable

from tree_sitter import Node

from .code_representation import SyntaxNode

logger = logging.getLogger(__name__)

IDENTIFIER_TYPES = {
    "identifier",
    "property_identifier",
    "shorthand_property_identifier",
    "shorthand_property_identifier_pattern",
    "statement_identifier",
}

LITERAL_TYPES = {"string", "number", "true", "false", "null", "regex"}

# Parents whose identifier children are element or attribute names.
JSX_NAME_PARENTS = {
    "jsx_opening_element",
    "jsx_closing_element",
    "jsx_self_closing_element",
    "jsx_attribute",
    "jsx_namespace_name",
}
JSX_NAME_WRAPPERS = {"member_expression", "nested_identifier"}

RENAMED_TYPES = {
    "array": "ArrayExpression",
    "arrow_function": "ArrowFunctionExpression",
    "field_definition": "PropertyDefinition",
    "lexical_declaration": "VariableDeclaration",
    "rest_pattern": "RestElement",
    "statement_block": "BlockStatement",
    "super": "Super",
    "this": "ThisExpression",
    "variable_declaration": "VariableDeclaration",
}

RENAMED_FIELDS = {
    ("variable_declarator", "name"): "id",
    ("variable_declarator", "value"): "init",
}

SKIPPED_TYPES = {"comment", "hash_bang_line"}

# A conversion step yields the tree-sitter nodes it needs converted and is
# sent back the converted node (or None) for each.
Conversion = Generator[Node | None, SyntaxNode | None, SyntaxNode | None]


def pascal_case(ts_type: str) -> str:
    return "".join(part.capitalize() for part in ts_type.split("_"))


class ESTreeConverter:
    """Builds an ESTree-shaped ``SyntaxNode`` tree from a tree-sitter tree.

    Shorthand properties (``{ a }``, ``{ a = 1 }``) and unaliased import
    specifiers reuse a single identifier node for both of their fields, the
    same way the ESTree parsers the naming rule was designed against do.

    Conversion keeps its own stack of pending steps, so nesting depth is
    bounded by memory rather than by the interpreter's recursion limit.
    When the source is given, columns are counted in characters instead of
    tree-sitter's UTF-8 byte offsets.
    """

    def __init__(self, source: bytes | None = None) -> None:
        self._lines = source.split(b"\n") if source is not None else None
        self._handlers = {
            "assignment_expression": self._assignment_expression,
            "augmented_assignment_expression": self._assignment_expression,
            "assignment_pattern": self._assignment_pattern,
            "call_expression": self._call_expression,
            "import_statement": self._import_statement,
            "member_expression": self._member_expression,
            "new_expression": self._new_expression,
            "object": self._object,
            "object_pattern": self._object_pattern,
            "parenthesized_expression": self._parenthesized_expression,
            "subscript_expression": self._subscript_expression,
        }

    def convert(self, node: Node | None) -> SyntaxNode | None:
        pending = [self._visit(node)]
        result = None
        while pending:
            try:
                child = pending[-1].send(result)
            except StopIteration as stop:
                pending.pop()
                result = stop.value
            else:
                pending.append(self._visit(child))
                result = None
        return result

    def _visit(self, node: Node | None) -> Conversion:
        if node is None or node.type in SKIPPED_TYPES:
            return None
        if node.type in IDENTIFIER_TYPES:
            return self._identifier(node)
        if node.type == "private_property_identifier":
            return self._private_identifier(node)
        if node.type in LITERAL_TYPES:
            return SyntaxNode(type="Literal", start_point=self._point(node))
        handler = self._handlers.get(node.type, self._generic)
        return (yield from handler(node))

    def _convert_all(self, nodes: Iterable[Node]) -> Conversion:
        converted = []
        for node in nodes:
            child = yield node
            if child is not None:
                converted.append(child)
        return tuple(converted)

    def _identifier(self, node: Node) -> SyntaxNode:
        return SyntaxNode(
            type="JSXIdentifier" if _is_jsx_name(node) else "Identifier",
            name=_text(node),
            start_point=self._point(node),
            end_point=self._point(node, end=True),
        )

    def _private_identifier(self, node: Node) -> SyntaxNode:
        return SyntaxNode(
            type="PrivateIdentifier",
            name=_text(node).lstrip("#"),
            start_point=self._point(node),
        )

    def _member_expression(self, node: Node) -> Conversion:
        obj = yield node.child_by_field_name("object")
        prop = yield node.child_by_field_name("property")
        return self._build("MemberExpression", node, object=obj, property=prop)

    def _subscript_expression(self, node: Node) -> Conversion:
        obj = yield node.child_by_field_name("object")
        prop = yield node.child_by_field_name("index")
        return self._build("MemberExpression", node, computed=True, object=obj, property=prop)

    def _call_expression(self, node: Node) -> Conversion:
        callee = yield node.child_by_field_name("function")
        arguments = node.child_by_field_name("arguments")
        if arguments is not None and arguments.type == "template_string":
            quasi = yield arguments
            return self._build("TaggedTemplateExpression", node, tag=callee, quasi=quasi)
        return self._build(
            "CallExpression",
            node,
            callee=callee,
            arguments=(yield from self._arguments(arguments)),
        )

    def _new_expression(self, node: Node) -> Conversion:
        callee = yield node.child_by_field_name("constructor")
        return self._build(
            "NewExpression",
            node,
            callee=callee,
            arguments=(yield from self._arguments(node.child_by_field_name("arguments"))),
        )

    def _arguments(self, node: Node | None) -> Conversion:
        if node is None:
            return ()
        return (yield from self._convert_all(node.named_children))

    def _assignment_expression(self, node: Node) -> Conversion:
        left = yield node.child_by_field_name("left")
        right = yield node.child_by_field_name("right")
        return self._build("AssignmentExpression", node, left=left, right=right)

    def _assignment_pattern(self, node: Node) -> Conversion:
        left = yield node.child_by_field_name("left")
        right = yield node.child_by_field_name("right")
        return self._build("AssignmentPattern", node, left=left, right=right)

    def _parenthesized_expression(self, node: Node) -> Conversion:
        inner = yield from self._convert_all(node.named_children)
        if len(inner) == 1:
            return inner[0]
        return (yield from self._generic(node))

    def _object(self, node: Node) -> Conversion:
        properties = yield from self._properties(node.named_children)
        return self._build("ObjectExpression", node, properties=properties)

    def _object_pattern(self, node: Node) -> Conversion:
        properties = yield from self._properties(node.named_children)
        return self._build("ObjectPattern", node, properties=properties)

    def _properties(self, nodes: Iterable[Node]) -> Conversion:
        properties = []
        for child in nodes:
            match child.type:
                case "pair" | "pair_pattern":
                    converted = yield from self._pair(child)
                case "shorthand_property_identifier" | "shorthand_property_identifier_pattern":
                    identifier = self._identifier(child)
                    converted = self._build(
                        "Property",
                        child,
                        shorthand=True,
                        key=identifier,
                        value=identifier,
                    )
                case "object_assignment_pattern":
                    converted = yield from self._shorthand_default(child)
                case "method_definition":
                    converted = yield from self._object_method(child)
                case _:
                    converted = yield child
            if converted is not None:
                properties.append(converted)
        return tuple(properties)

    def _property_key(self, key: Node | None) -> Generator[Node | None, SyntaxNode | None, tuple]:
        """Convert a property key, unwrapping ``[expr]``; returns ``(key, computed)``."""
        if key is None or key.type != "computed_property_name":
            return (yield key), False
        inner = yield from self._convert_all(key.named_children)
        return (inner[0] if inner else None), True

    def _pair(self, node: Node) -> Conversion:
        key, computed = yield from self._property_key(node.child_by_field_name("key"))
        value = yield node.child_by_field_name("value")
        return self._build("Property", node, computed=computed, key=key, value=value)

    def _object_method(self, node: Node) -> Conversion:
        # Methods, getters and setters of object literals are properties
        # whose value is the function.
        key, computed = yield from self._property_key(node.child_by_field_name("name"))
        parameters = node.child_by_field_name("parameters")
        params = yield from self._convert_all(parameters.named_children if parameters else ())
        body = yield node.child_by_field_name("body")
        function = self._build("FunctionExpression", node, params=params, body=body)
        return self._build("Property", node, computed=computed, key=key, value=function)

    def _shorthand_default(self, node: Node) -> Conversion:
        left = node.child_by_field_name("left")
        if left is None or left.type != "shorthand_property_identifier_pattern":
            converted_left = yield left
            right = yield node.child_by_field_name("right")
            return self._build("AssignmentPattern", node, left=converted_left, right=right)
        identifier = self._identifier(left)
        right = yield node.child_by_field_name("right")
        default = self._build("AssignmentPattern", node, left=identifier, right=right)
        return self._build(
            "Property",
            node,
            shorthand=True,
            key=identifier,
            value=default,
        )

    def _import_statement(self, node: Node) -> Conversion:
        specifiers: list[SyntaxNode] = []
        for child in node.named_children:
            if child.type == "import_clause":
                specifiers.extend((yield from self._import_clause(child)))
        source = yield node.child_by_field_name("source")
        return self._build(
            "ImportDeclaration",
            node,
            specifiers=tuple(specifiers),
            source=source,
        )

    def _import_clause(self, node: Node) -> Conversion:
        specifiers = []
        for child in node.named_children:
            match child.type:
                case "identifier":
                    specifiers.append(
                        self._build("ImportDefaultSpecifier", child, local=self._identifier(child)),
                    )
                case "namespace_import":
                    local = yield from self._convert_all(child.named_children)
                    specifiers.append(
                        self._build(
                            "ImportNamespaceSpecifier",
                            child,
                            local=local[0] if local else None,
                        ),
                    )
                case "named_imports":
                    for specifier in child.named_children:
                        if specifier.type == "import_specifier":
                            specifiers.append((yield from self._import_specifier(specifier)))
        return specifiers

    def _import_specifier(self, node: Node) -> Conversion:
        imported = yield node.child_by_field_name("name")
        alias = node.child_by_field_name("alias")
        local = (yield alias) if alias is not None else imported
        return self._build("ImportSpecifier", node, imported=imported, local=local)

    def _generic(self, node: Node) -> Conversion:
        fields: dict[str, list[SyntaxNode]] = {}
        cursor = node.walk()
        if cursor.goto_first_child():
            while True:
                child = cursor.node
                if child.is_named:
                    if child.type == "formal_parameters":
                        fields.setdefault("params", []).extend(
                            (yield from self._convert_all(child.named_children)),
                        )
                    else:
                        field_name = cursor.field_name or "children"
                        converted = yield child
                        if converted is not None:
                            field_name = RENAMED_FIELDS.get((node.type, field_name), field_name)
                            fields.setdefault(field_name, []).append(converted)
                if not cursor.goto_next_sibling():
                    break
        if node.type == "ERROR":
            logger.debug("Converting error node at %s", node.start_point)
        return SyntaxNode(
            type=RENAMED_TYPES.get(node.type, pascal_case(node.type)),
            fields={
                name: values[0] if len(values) == 1 else tuple(values)
                for name, values in fields.items()
            },
            start_point=self._point(node),
            end_point=self._point(node, end=True),
        )

    def _build(
        self,
        estree_type: str,
        node: Node,
        *,
        shorthand: bool = False,
        computed: bool = False,
        **fields,
    ) -> SyntaxNode:
        return SyntaxNode(
            type=estree_type,
            fields=fields,
            shorthand=shorthand,
            computed=computed,
            start_point=self._point(node),
            end_point=self._point(node, end=True),
        )

    def _point(self, node: Node, end: bool = False) -> tuple[int, int]:
        row, column = node.end_point if end else node.start_point
        if self._lines is not None and row < len(self._lines):
            line = self._lines[row]
            if not line.isascii():
                column = len(line[:column].decode("utf-8", errors="replace"))
        return (row, column)


def _is_jsx_name(node: Node) -> bool:
    """True for element and attribute names, not for expressions in ``{...}``."""
    parent = node.parent
    while parent is not None and parent.type in JSX_NAME_WRAPPERS:
        parent = parent.parent
    return parent is not None and parent.type in JSX_NAME_PARENTS


def _text(node: Node) -> str:
    return node.text.decode("utf-8") if node.text else ""


def to_estree(root: Node, source_code: str | bytes | None = None) -> SyntaxNode:
    """Convert a tree-sitter root node into an ESTree-shaped ``Program``.

    Pass the parsed ``source_code`` to get character columns on lines with
    non-ASCII text; without it columns are UTF-8 byte offsets.
    """
    if isinstance(source_code, str):
        source_code = source_code.encode("utf-8")
    converted = ESTreeConverter(source_code).convert(root)
    if converted is None:
        msg = f"Cannot convert node of type '{root.type}'"
        raise ValueError(msg)
    return converted
