"""Loan-purpose rules for purchase and refinance transactions."""

from mortgage_checklist.core.enums import LoanPurpose
from mortgage_checklist.models.domain.checklist import CategorizedItem
from mortgage_checklist.services.rule_engine.base import (
    EvaluationContext,
    EvaluationStage,
    RuleEvaluator,
)


class TransactionEvaluator(RuleEvaluator):
    """
    Evaluator for documents driven by the loan purpose.

    Handles:
    - Purchase: purchase contract, earnest money proof, gift letter
    - Refinance / cash-out: subject mortgage statement, note, insurance dec page
    """

    title = "Loan purpose documents"
    stage = EvaluationStage.TRANSACTION

    def evaluate(self, context: EvaluationContext) -> list[CategorizedItem]:
        purpose = context.application.loan_purpose

        if purpose == LoanPurpose.PURCHASE:
            return [
                self._emit("PURCHASE_CONTRACT"),
                self._emit("EARNEST_MONEY_PROOF"),
                self._emit("GIFT_LETTER"),
            ]

        if purpose.is_refinance:
            return [
                self._emit("SUBJECT_MORTGAGE_STATEMENT"),
                self._emit("PROMISSORY_NOTE"),
                self._emit("SUBJECT_INSURANCE_DEC_PAGE"),
            ]

        return []
