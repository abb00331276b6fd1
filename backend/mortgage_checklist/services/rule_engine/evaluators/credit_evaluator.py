"""Credit history rules driven by borrower declarations."""

from mortgage_checklist.models.domain.checklist import CategorizedItem
from mortgage_checklist.services.rule_engine.base import (
    EvaluationContext,
    EvaluationStage,
    RuleEvaluator,
)


class CreditHistoryEvaluator(RuleEvaluator):
    """
    Evaluator for credit-related borrower documents.

    Handles:
    - Bankruptcy declaration: petition, schedules, discharge
    - Foreclosure declaration: foreclosure / short sale documents
    - Outstanding judgments: court payoff or release
    - Letter of explanation for recent credit inquiries (always requested)
    """

    title = "Credit history documents"
    stage = EvaluationStage.BORROWER

    def evaluate(self, context: EvaluationContext) -> list[CategorizedItem]:
        declaration = context.borrower.declaration
        items: list[CategorizedItem] = []

        if declaration.bankruptcy:
            items.append(self._emit_for_borrower("BANKRUPTCY_DOCS", context))
        if declaration.foreclosure:
            items.append(self._emit_for_borrower("FORECLOSURE_DOCS", context))
        if declaration.outstanding_judgments:
            items.append(self._emit_for_borrower("JUDGMENT_PAYOFF", context))

        items.append(self._emit_for_borrower("LOE_CREDIT_INQUIRIES", context))
        return items
