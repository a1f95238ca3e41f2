from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Union


class LanguageEnum(Enum):
    JAVASCRIPT = "javascript"


Child = Union["SyntaxNode", tuple["SyntaxNode", ...], None]


@dataclass(frozen=True, eq=False)
class SyntaxNode:
    """ESTree-shaped syntax node.

    Nodes compare and hash by identity, so the same object reached through
    two fields (shorthand properties) is recognisably the same occurrence.
    Nodes do not link to their parents; ancestry travels with the
    traversal in ``IdentifierOccurrence``.
    """

    type: str
    fields: Mapping[str, Child] = field(default_factory=dict)
    name: str | None = None
    shorthand: bool = False
    computed: bool = False
    start_point: tuple[int, int] = (0, 0)
    end_point: tuple[int, int] = (0, 0)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    def child(self, field_name: str) -> "SyntaxNode | None":
        value = self.fields.get(field_name)
        return value if isinstance(value, SyntaxNode) else None

    def iter_children(self) -> Iterator["SyntaxNode"]:
        """Yield direct children in field order."""
        for value in self.fields.values():
            if isinstance(value, SyntaxNode):
                yield value
            elif isinstance(value, tuple):
                yield from (item for item in value if item is not None)

    @property
    def line(self) -> int:
        return self.start_point[0] + 1

    @property
    def column(self) -> int:
        return self.start_point[1] + 1

    def __repr__(self) -> str:
        if self.name is not None:
            return f"{self.type}({self.name!r})"
        return f"{self.type}()"


def make_identifier(
    name: str,
    start_point: tuple[int, int] = (0, 0),
    node_type: str = "Identifier",
) -> SyntaxNode:
    return SyntaxNode(type=node_type, name=name, start_point=start_point)


def make_node(
    node_type: str,
    *,
    shorthand: bool = False,
    computed: bool = False,
    start_point: tuple[int, int] = (0, 0),
    **fields: Child,
) -> SyntaxNode:
    """Build a node by hand, e.g. ``make_node("MemberExpression", object=a, property=b)``."""
    return SyntaxNode(
        type=node_type,
        fields=fields,
        shorthand=shorthand,
        computed=computed,
        start_point=start_point,
    )


def node_type(node: SyntaxNode | None) -> str | None:
    return node.type if node is not None else None


def node_name(node: SyntaxNode | None) -> str | None:
    return node.name if node is not None else None


@dataclass(frozen=True)
class IdentifierOccurrence:
    """One visit of an identifier node together with its ancestor chain.

    ``ancestors`` is ordered nearest first. The occurrence is only valid for
    the duration of the check it is delivered to.
    """

    node: SyntaxNode
    ancestors: tuple[SyntaxNode, ...] = ()

    @property
    def name(self) -> str:
        return self.node.name or ""

    @property
    def parent(self) -> SyntaxNode | None:
        return self.ancestor(0)

    @property
    def grandparent(self) -> SyntaxNode | None:
        return self.ancestor(1)

    @property
    def effective_parent(self) -> SyntaxNode | None:
        # Assignments through a member access are visible one level up.
        if node_type(self.parent) == "MemberExpression":
            return self.grandparent
        return self.parent

    def ancestor(self, depth: int) -> SyntaxNode | None:
        if depth < len(self.ancestors):
            return self.ancestors[depth]
        return None

    def is_inside(self, ancestor_type: str) -> bool:
        return any(ancestor.type == ancestor_type for ancestor in self.ancestors)
