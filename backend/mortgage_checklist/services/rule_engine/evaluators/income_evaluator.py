"""Income documentation rules for wage, variable, self-employed and rental income."""

from mortgage_checklist.core.enums import IncomeType
from mortgage_checklist.models.domain.checklist import CategorizedItem
from mortgage_checklist.services.rule_engine.base import (
    EvaluationContext,
    EvaluationStage,
    RuleEvaluator,
)


class IncomeEvaluator(RuleEvaluator):
    """
    Evaluator for per-borrower income documentation.

    Handles:
    - W-2 wage income (present job with income, not self-employed): pay stubs, W-2s
    - Variable income (bonus, overtime, commission): VOE
    - Self-employment: 1040s, YTD P&L; K-1s + 1120S for S-Corp income,
      K-1s + 1065 for partnership income (both may apply), business bank statements
    - Rental income: leases and rent receipts

    The rules are independent; a borrower can trigger any combination.
    """

    title = "Income documents"
    stage = EvaluationStage.BORROWER

    def evaluate(self, context: EvaluationContext) -> list[CategorizedItem]:
        borrower = context.borrower
        items: list[CategorizedItem] = []

        has_employment_income = any(
            record.is_present and record.has_income
            for record in borrower.employment_history
        )
        is_self_employed = any(record.self_employed for record in borrower.employment_history)

        if has_employment_income and not is_self_employed:
            items.append(self._emit_for_borrower("PAYSTUBS_30D", context))
            items.append(self._emit_for_borrower("W2_LAST_2Y", context))

        if borrower.has_income_type(*context.policy.variable_income_types):
            items.append(self._emit_for_borrower("VOE_VARIABLE_INCOME", context))

        if is_self_employed:
            items.extend(self._self_employment_items(context))

        if borrower.has_income_type(IncomeType.RENTAL):
            items.append(self._emit_for_borrower("RENTAL_LEASES", context))

        return items

    def _self_employment_items(self, context: EvaluationContext) -> list[CategorizedItem]:
        """Tax returns and business documents for a self-employed borrower."""
        borrower = context.borrower
        items = [
            self._emit_for_borrower("TAX_RETURNS_1040_2Y", context),
            self._emit_for_borrower("YTD_PNL_BALANCE_SHEET", context),
        ]

        if borrower.has_income_type(IncomeType.S_CORP):
            items.append(self._emit_for_borrower("K1_SCORP_2Y", context))
            items.append(self._emit_for_borrower("TAX_RETURNS_1120S_2Y", context))

        if borrower.has_income_type(IncomeType.PARTNERSHIP):
            items.append(self._emit_for_borrower("K1_PARTNERSHIP_2Y", context))
            items.append(self._emit_for_borrower("TAX_RETURNS_1065_2Y", context))

        items.append(self._emit_for_borrower("BUSINESS_BANK_STATEMENTS", context))
        return items
