import logging
from collections.abc import Iterable

from camelcase_lint.code_representation.code_representation import IdentifierOccurrence

from .options import RuleOptions
from .reporter import Violation, ViolationReporter
from .roles import Verdict, classify

logger = logging.getLogger(__name__)


class CamelCaseRule:
    """Runs the camel case check over the identifier occurrences of one tree.

    An instance covers a single run: its reporter, and with it the set of
    already reported nodes, is created fresh and never shared.
    """

    def __init__(self, options: RuleOptions | None = None) -> None:
        self.options = options or RuleOptions()
        self.reporter = ViolationReporter()

    def check(self, occurrence: IdentifierOccurrence) -> Violation | None:
        _verdict, violation = self.evaluate(occurrence)
        return violation

    def evaluate(
        self,
        occurrence: IdentifierOccurrence,
    ) -> tuple[Verdict, Violation | None]:
        """Classify the occurrence once and report it if it violates the rule."""
        verdict = classify(occurrence, self.options)
        logger.debug(
            "%r: role=%s reason=%s violation=%s",
            occurrence.node,
            verdict.role.value,
            verdict.reason,
            verdict.violation,
        )
        if not verdict.violation:
            return verdict, None
        return verdict, self.reporter.report(occurrence)

    def run(self, occurrences: Iterable[IdentifierOccurrence]) -> list[Violation]:
        for occurrence in occurrences:
            self.check(occurrence)
        return self.violations

    @property
    def violations(self) -> list[Violation]:
        return list(self.reporter.violations)
