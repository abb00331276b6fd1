"""Rule engine orchestrator that assembles the document checklist."""

import logging
from typing import List, Optional

from mortgage_checklist.models.domain.application import LoanApplication
from mortgage_checklist.models.domain.checklist import RecommendationSet
from mortgage_checklist.services.rule_engine.base import (
    ApplicationFlags,
    EvaluationContext,
    EvaluationStage,
    RuleEvaluator,
)
from mortgage_checklist.services.rule_engine.catalog import get_template
from mortgage_checklist.services.rule_engine.duration import DurationCalculator
from mortgage_checklist.services.rule_engine.evaluators import (
    AssetEvaluator,
    CitizenshipEvaluator,
    CreditHistoryEvaluator,
    HistoryCoverageEvaluator,
    IdentityEvaluator,
    IncomeEvaluator,
    LiabilityEvaluator,
    REOEvaluator,
    TransactionEvaluator,
)
from mortgage_checklist.services.rule_engine.policy import ChecklistPolicy

logger = logging.getLogger(__name__)


class RecommendationEngine:
    """
    Rule engine orchestrator for building a document checklist.

    This class:
    - Maintains an ordered registry of rule evaluators
    - Derives application-level flags once per evaluation
    - Runs transaction rules, then borrower rules per borrower, then
      application rules, so checklist order is deterministic
    - Replaces a failing evaluator's output with a manual-review item
    """

    def __init__(
        self,
        policy: Optional[ChecklistPolicy] = None,
        calculator: Optional[DurationCalculator] = None,
    ):
        """
        Initialize the engine with the default evaluators.

        Args:
            policy: Checklist policy (defaults to one built from settings)
            calculator: Duration calculator (defaults to the system clock)
        """
        self.policy = policy or ChecklistPolicy.from_settings()
        self.calculator = calculator or DurationCalculator()
        self._evaluators: List[RuleEvaluator] = []
        self._register_default_evaluators()

    def _register_default_evaluators(self):
        """Register default evaluators in checklist order."""
        # Transaction
        self.register_evaluator(TransactionEvaluator())

        # Per borrower
        self.register_evaluator(IdentityEvaluator())
        self.register_evaluator(HistoryCoverageEvaluator())
        self.register_evaluator(CitizenshipEvaluator())
        self.register_evaluator(IncomeEvaluator())
        self.register_evaluator(CreditHistoryEvaluator())

        # Application
        self.register_evaluator(AssetEvaluator())
        self.register_evaluator(LiabilityEvaluator())
        self.register_evaluator(REOEvaluator())

    def register_evaluator(self, evaluator: RuleEvaluator) -> None:
        """
        Register an additional evaluator.

        It runs after the already registered evaluators of the same stage.

        Args:
            evaluator: The evaluator instance
        """
        self._evaluators.append(evaluator)

    def evaluators_for(self, stage: EvaluationStage) -> List[RuleEvaluator]:
        """Registered evaluators of one stage, in registration order."""
        return [evaluator for evaluator in self._evaluators if evaluator.stage == stage]

    def evaluate(self, application: LoanApplication) -> RecommendationSet:
        """
        Build the document checklist for an application.

        Args:
            application: The loan application snapshot

        Returns:
            RecommendationSet with items in rule-evaluation order
        """
        context = EvaluationContext(
            application=application,
            policy=self.policy,
            flags=ApplicationFlags.from_application(application),
            calculator=self.calculator,
        )
        recommendations = RecommendationSet()

        for evaluator in self.evaluators_for(EvaluationStage.TRANSACTION):
            self._apply(evaluator, context, recommendations)

        borrower_evaluators = self.evaluators_for(EvaluationStage.BORROWER)
        for borrower in application.borrowers:
            borrower_context = context.for_borrower(borrower)
            for evaluator in borrower_evaluators:
                self._apply(evaluator, borrower_context, recommendations)

        for evaluator in self.evaluators_for(EvaluationStage.APPLICATION):
            self._apply(evaluator, context, recommendations)

        logger.debug(
            f"Evaluated application {application.application_number or '<unnumbered>'}: "
            f"{recommendations.counts()}"
        )
        return recommendations

    def _apply(
        self,
        evaluator: RuleEvaluator,
        context: EvaluationContext,
        recommendations: RecommendationSet,
    ) -> None:
        """Run one evaluator and collect its items."""
        try:
            items = evaluator.evaluate(context)
        except Exception as e:
            # If evaluation fails, flag the rule for manual review
            logger.error(f"Evaluator '{evaluator.title}' failed: {e}", exc_info=True)
            items = [get_template("MANUAL_REVIEW").render(rule=evaluator.title)]

        for item in items:
            recommendations.add(item)
