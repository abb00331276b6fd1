"""Employment and residence history coverage rules."""

from mortgage_checklist.models.domain.checklist import CategorizedItem
from mortgage_checklist.services.rule_engine.base import (
    EvaluationContext,
    EvaluationStage,
    RuleEvaluator,
)


class HistoryCoverageEvaluator(RuleEvaluator):
    """
    Evaluator for the employment and residence history thresholds.

    A borrower short of the threshold (24 months by default) is asked for
    prior history covering the missing months; employment gaps also get a
    letter of explanation to review. Otherwise an Ok item records the
    coverage.
    """

    title = "History coverage"
    stage = EvaluationStage.BORROWER

    def evaluate(self, context: EvaluationContext) -> list[CategorizedItem]:
        borrower = context.borrower
        threshold = context.policy.coverage_threshold_months
        items: list[CategorizedItem] = []

        emp_months = context.calculator.accumulate_employment_months(
            borrower.employment_history
        )
        needed_emp = context.policy.needed_months(emp_months)
        if needed_emp > 0:
            items.append(
                self._emit_for_borrower(
                    "EMPLOYMENT_HISTORY_GAP", context, months=needed_emp, threshold=threshold
                )
            )
            items.append(self._emit_for_borrower("LOE_EMPLOYMENT_GAPS", context))
        else:
            items.append(
                self._emit_for_borrower("EMPLOYMENT_HISTORY_OK", context, threshold=threshold)
            )

        res_months = context.calculator.accumulate_residence_months(borrower.residences)
        needed_res = context.policy.needed_months(res_months)
        if needed_res > 0:
            items.append(
                self._emit_for_borrower(
                    "RESIDENCE_HISTORY_GAP", context, months=needed_res, threshold=threshold
                )
            )
        else:
            items.append(
                self._emit_for_borrower("RESIDENCE_HISTORY_OK", context, threshold=threshold)
            )

        return items
