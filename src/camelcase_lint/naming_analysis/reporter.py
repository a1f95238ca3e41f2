import logging
from dataclasses import dataclass

from camelcase_lint.code_representation.code_representation import (
    IdentifierOccurrence,
    SyntaxNode,
)

logger = logging.getLogger(__name__)

MESSAGE_TEMPLATE = "Identifier '{name}' is not in camel case."


@dataclass(frozen=True)
class Violation:
    """A reported identifier; ``name`` is the original, unstripped name."""

    node: SyntaxNode
    name: str
    message: str

    @property
    def line(self) -> int:
        return self.node.line

    @property
    def column(self) -> int:
        return self.node.column

    def __str__(self) -> str:
        return f"{self.line}:{self.column}: {self.message}"


class ViolationReporter:
    """Records at most one violation per node identity."""

    def __init__(self) -> None:
        self._reported: set[SyntaxNode] = set()
        self.violations: list[Violation] = []

    def report(self, occurrence: IdentifierOccurrence) -> Violation | None:
        node = occurrence.node
        if node in self._reported:
            logger.debug("Skipping already reported identifier %r", node)
            return None
        self._reported.add(node)
        violation = Violation(
            node=node,
            name=occurrence.name,
            message=MESSAGE_TEMPLATE.format(name=occurrence.name),
        )
        self.violations.append(violation)
        return violation

    def __len__(self) -> int:
        return len(self.violations)
