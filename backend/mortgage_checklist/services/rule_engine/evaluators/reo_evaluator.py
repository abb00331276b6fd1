"""Real estate owned (REO) rules."""

from mortgage_checklist.models.domain.application import REOProperty
from mortgage_checklist.models.domain.checklist import CategorizedItem
from mortgage_checklist.services.rule_engine.base import (
    EvaluationContext,
    EvaluationStage,
    RuleEvaluator,
)


class REOEvaluator(RuleEvaluator):
    """
    Evaluator for documents on properties the borrowers already own.

    Handles:
    - Explicit REO properties: mortgage/HELOC statement, hazard insurance,
      property tax bill, and a lease for investment properties (or whenever
      rental income is reported), one set per property
    - REO inferred from mortgage/HELOC liabilities: the same three items once,
      generically
    - HELOC liabilities: most recent HELOC statement
    """

    title = "REO documents"
    stage = EvaluationStage.APPLICATION

    def evaluate(self, context: EvaluationContext) -> list[CategorizedItem]:
        flags = context.flags
        items: list[CategorizedItem] = []

        if flags.has_reo:
            if flags.reo_count > 0:
                items.extend(self._explicit_property_items(context))
            else:
                items.extend(
                    [
                        self._emit("INFERRED_REO_MORTGAGE_STATEMENTS"),
                        self._emit("INFERRED_REO_HAZARD_INSURANCE"),
                        self._emit("INFERRED_REO_PROPERTY_TAX"),
                    ]
                )

        if flags.heloc_count > 0:
            items.append(self._emit("HELOC_STATEMENTS"))

        return items

    def _explicit_property_items(self, context: EvaluationContext) -> list[CategorizedItem]:
        """Per-property items, numbered across all borrowers."""
        properties = [
            prop
            for borrower in context.application.borrowers
            for prop in borrower.reo_properties
        ]

        items: list[CategorizedItem] = []
        for idx, prop in enumerate(properties):
            label = self._property_label(prop, idx)
            items.append(self._emit("REO_MORTGAGE_STATEMENT", label=label))
            items.append(self._emit("REO_HAZARD_INSURANCE", label=label))
            items.append(self._emit("REO_PROPERTY_TAX", label=label))

            if (
                context.policy.is_investment_property(prop.property_type)
                or context.flags.has_rental_income
            ):
                items.append(self._emit("REO_LEASE_AGREEMENT", label=label))

        return items

    @staticmethod
    def _property_label(prop: REOProperty, idx: int) -> str:
        """Name suffix identifying the property, ``" – 1 Main St, Austin, TX"`` or ``" #2"``."""
        if prop.address_line:
            return f" – {prop.address_line}, {prop.city or ''}, {prop.state or ''}"
        return f" #{idx + 1}"
