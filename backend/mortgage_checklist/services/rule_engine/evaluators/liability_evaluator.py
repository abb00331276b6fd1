"""Liability payoff rules."""

from mortgage_checklist.models.domain.checklist import CategorizedItem
from mortgage_checklist.services.rule_engine.base import (
    EvaluationContext,
    EvaluationStage,
    RuleEvaluator,
)


class LiabilityEvaluator(RuleEvaluator):
    """Debts flagged to be paid at closing need payoff statements."""

    title = "Liability payoff documents"
    stage = EvaluationStage.APPLICATION

    def evaluate(self, context: EvaluationContext) -> list[CategorizedItem]:
        if any(lia.paid_at_closing for lia in context.application.all_liabilities):
            return [self._emit("PAYOFF_STATEMENTS")]
        return []
