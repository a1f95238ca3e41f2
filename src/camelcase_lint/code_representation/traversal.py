from collections.abc import Iterator

from .code_representation import IdentifierOccurrence, SyntaxNode

IDENTIFIER_NODE_TYPES = {"Identifier"}


def iter_nodes(
    root: SyntaxNode,
) -> Iterator[tuple[SyntaxNode, tuple[SyntaxNode, ...]]]:
    """Depth-first, source-ordered walk yielding each node with its ancestors.

    Ancestors are ordered nearest first. A node reachable from two fields of
    its parent (shorthand properties) is yielded once per field.
    """
    to_visit: list[tuple[SyntaxNode, tuple[SyntaxNode, ...]]] = [(root, ())]
    while to_visit:
        node, ancestors = to_visit.pop()
        yield node, ancestors
        lineage = (node, *ancestors)
        to_visit.extend((child, lineage) for child in reversed(list(node.iter_children())))


def iter_identifiers(root: SyntaxNode) -> Iterator[IdentifierOccurrence]:
    for node, ancestors in iter_nodes(root):
        if node.type in IDENTIFIER_NODE_TYPES:
            yield IdentifierOccurrence(node=node, ancestors=ancestors)
