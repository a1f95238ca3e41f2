from .code_representation import (
    IdentifierOccurrence,
    LanguageEnum,
    SyntaxNode,
    make_identifier,
    make_node,
)
from .traversal import iter_identifiers, iter_nodes

__all__ = [
    "IdentifierOccurrence",
    "LanguageEnum",
    "SyntaxNode",
    "iter_identifiers",
    "iter_nodes",
    "make_identifier",
    "make_node",
]
