"""Rule engine foundation with evaluation context, derived flags, and base evaluator."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from mortgage_checklist.core.enums import IncomeType, LiabilityType
from mortgage_checklist.models.domain.application import Borrower, LoanApplication
from mortgage_checklist.models.domain.checklist import CategorizedItem
from mortgage_checklist.services.rule_engine.catalog import get_template
from mortgage_checklist.services.rule_engine.duration import DurationCalculator
from mortgage_checklist.services.rule_engine.policy import ChecklistPolicy


class EvaluationStage(str, Enum):
    """When an evaluator runs relative to the per-borrower pass."""

    TRANSACTION = "transaction"  # before borrowers
    BORROWER = "borrower"  # once per borrower, in borrower order
    APPLICATION = "application"  # after borrowers


@dataclass(frozen=True)
class ApplicationFlags:
    """
    Application-level facts derived once per evaluation.

    Attributes:
        reo_count: Explicit REO properties across all borrowers
        mortgage_lien_count: Liabilities tagged as mortgages
        heloc_count: Liabilities tagged as HELOCs
        inferred_reo_count: Liens that imply REO, only when no REO is listed explicitly
        has_reo: Explicit or inferred REO present
        has_rental_income: Any borrower reports rental income
    """

    reo_count: int = 0
    mortgage_lien_count: int = 0
    heloc_count: int = 0
    inferred_reo_count: int = 0
    has_reo: bool = False
    has_rental_income: bool = False

    @classmethod
    def from_application(cls, application: LoanApplication) -> "ApplicationFlags":
        """Derive the flags from an application snapshot."""
        liabilities = application.all_liabilities
        reo_count = application.reo_count
        mortgage_lien_count = sum(
            1 for lia in liabilities if lia.liability_type == LiabilityType.MORTGAGE
        )
        heloc_count = sum(
            1 for lia in liabilities if lia.liability_type == LiabilityType.HELOC
        )

        # Explicit REO entries take precedence over inference from liens
        inferred_reo_count = (mortgage_lien_count + heloc_count) if reo_count == 0 else 0

        return cls(
            reo_count=reo_count,
            mortgage_lien_count=mortgage_lien_count,
            heloc_count=heloc_count,
            inferred_reo_count=inferred_reo_count,
            has_reo=reo_count > 0 or inferred_reo_count > 0,
            has_rental_income=any(
                borrower.has_income_type(IncomeType.RENTAL)
                for borrower in application.borrowers
            ),
        )


@dataclass(frozen=True)
class EvaluationContext:
    """
    Evaluation context passed to rule evaluators.

    Attributes:
        application: The loan application being evaluated
        policy: Checklist policy parameters
        flags: Application-level derived flags
        calculator: Duration calculator for history coverage
        borrower: The borrower under evaluation (borrower-stage evaluators only)
    """

    application: LoanApplication
    policy: ChecklistPolicy
    flags: ApplicationFlags
    calculator: DurationCalculator
    borrower: Optional[Borrower] = None

    def for_borrower(self, borrower: Borrower) -> "EvaluationContext":
        """Return a copy of this context scoped to one borrower."""
        return replace(self, borrower=borrower)


class RuleEvaluator(ABC):
    """
    Abstract base class for checklist rule evaluators using the Strategy pattern.

    Each concrete evaluator covers one area of the checklist (transaction,
    identity, income, ...) and returns the items its rules emit, in rule order.
    """

    #: Human-readable name used in logs and manual-review fallbacks
    title: str = "rule"

    #: When the engine runs this evaluator
    stage: EvaluationStage = EvaluationStage.APPLICATION

    @abstractmethod
    def evaluate(self, context: EvaluationContext) -> list[CategorizedItem]:
        """
        Evaluate the rules against the provided context.

        Args:
            context: EvaluationContext with the application and, for
                borrower-stage evaluators, the current borrower

        Returns:
            Categorized checklist items, in emission order
        """
        pass

    def _emit(self, code: str, **fields) -> CategorizedItem:
        """Render a catalog entry into a categorized item."""
        return get_template(code).render(**fields)

    def _emit_for_borrower(
        self, code: str, context: EvaluationContext, **fields
    ) -> CategorizedItem:
        """Render a per-borrower catalog entry prefixed with the borrower tag."""
        borrower = context.borrower or Borrower()
        return self._emit(code, tag=borrower.tag, **fields)
