"""Directive check for Scalpel.

Enforces surgical use of suppression directives:

- lint:ignore and lint:disable must name rule codes
- lint:disable must be matched by a lint:enable
- lint:enable without a prior lint:disable is warned about
- lint:ignore-file is forbidden
- legacy markers are migrated to their modern spelling
- notes must be separated from codes with ' -- '
"""

from scalpel.checks.base import Check, CheckContext, CheckRegistry
from scalpel.directives.reporter import SelfProtectingReporter
from scalpel.directives.tracker import SuppressionTracker


@CheckRegistry.register
class DirectivesCheck(Check):
    """Validates suppression directives and proposes repairs."""

    @property
    def name(self) -> str:
        return "directives"

    @property
    def description(self) -> str:
        return (
            "Requires suppression directives to name rule codes, balances "
            "disable/enable pairs, migrates legacy markers and repairs note separators"
        )

    def run(self, context: CheckContext) -> None:
        reporter = SelfProtectingReporter(context.sink, self.name, self.namespace)
        SuppressionTracker(reporter).scan(context.directives)
