"""Identity and citizenship rule evaluators."""

from mortgage_checklist.core.enums import CitizenshipType
from mortgage_checklist.models.domain.checklist import CategorizedItem
from mortgage_checklist.services.rule_engine.base import (
    EvaluationContext,
    EvaluationStage,
    RuleEvaluator,
)


class IdentityEvaluator(RuleEvaluator):
    """Every borrower provides a government-issued photo ID."""

    title = "Photo identification"
    stage = EvaluationStage.BORROWER

    def evaluate(self, context: EvaluationContext) -> list[CategorizedItem]:
        return [self._emit_for_borrower("GOVT_ID", context)]


class CitizenshipEvaluator(RuleEvaluator):
    """
    Evaluator for immigration documents of non-citizen borrowers.

    Handles:
    - Permanent residents: I-551 (green card), front and back
    - Everyone else who is not a US citizen: EAD or visa plus I-94

    Borrowers with no citizenship answer get no item.
    """

    title = "Citizenship documents"
    stage = EvaluationStage.BORROWER

    def evaluate(self, context: EvaluationContext) -> list[CategorizedItem]:
        citizenship = context.borrower.citizenship_type

        if citizenship in (CitizenshipType.UNSET, CitizenshipType.US_CITIZEN):
            return []

        if citizenship == CitizenshipType.PERMANENT_RESIDENT:
            return [self._emit_for_borrower("GREEN_CARD", context)]

        return [self._emit_for_borrower("EAD_VISA_I94", context)]
