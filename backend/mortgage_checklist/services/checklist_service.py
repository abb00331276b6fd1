"""Checklist service for turning application payloads into document checklists."""

import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from mortgage_checklist.models.domain.application import LoanApplication
from mortgage_checklist.models.domain.checklist import ChecklistResult
from mortgage_checklist.models.schemas.application import LoanApplicationPayload
from mortgage_checklist.services.export.csv_exporter import csv_filename, export_to_csv
from mortgage_checklist.services.rule_engine.coverage import compute_coverage_stats
from mortgage_checklist.services.rule_engine.engine import RecommendationEngine
from mortgage_checklist.services.rule_engine.policy import ChecklistPolicy

logger = logging.getLogger(__name__)

Payload = Union[Mapping[str, Any], LoanApplicationPayload]


class ChecklistService:
    """
    Checklist service to orchestrate checklist generation.

    This service:
    - Normalizes raw application payloads into domain snapshots
    - Runs the recommendation engine and coverage aggregator on the same snapshot
    - Exports checklists as CSV
    """

    def __init__(
        self,
        policy: Optional[ChecklistPolicy] = None,
        engine: Optional[RecommendationEngine] = None,
    ):
        """
        Initialize the checklist service.

        Args:
            policy: Checklist policy (ignored when an engine is given)
            engine: Recommendation engine (defaults to one built from the policy)
        """
        self.engine = engine or RecommendationEngine(policy=policy)

    def generate(self, payload: Payload) -> ChecklistResult:
        """
        Generate the checklist for a raw application payload.

        Args:
            payload: Application as a camelCase mapping or a parsed payload

        Returns:
            ChecklistResult with recommendations and coverage stats

        Raises:
            ValueError: If the payload is not an object
        """
        return self.generate_for_application(self.to_application(payload))

    def generate_for_application(self, application: LoanApplication) -> ChecklistResult:
        """
        Generate the checklist for an application snapshot.

        Args:
            application: The loan application snapshot

        Returns:
            ChecklistResult with recommendations and coverage stats
        """
        recommendations = self.engine.evaluate(application)
        coverage = compute_coverage_stats(
            application.borrowers,
            policy=self.engine.policy,
            calculator=self.engine.calculator,
        )

        logger.info(
            f"Generated checklist for application "
            f"{application.application_number or '<unnumbered>'}: "
            f"{len(application.borrowers)} borrower(s), "
            f"{recommendations.total_items} item(s) {recommendations.counts()}"
        )
        return ChecklistResult(recommendations=recommendations, coverage=coverage)

    def export_csv(self, payload: Payload) -> tuple[str, str]:
        """
        Generate the checklist and export it as CSV.

        Args:
            payload: Application as a camelCase mapping or a parsed payload

        Returns:
            Tuple of (download filename, CSV text)

        Raises:
            ValueError: If the payload is not an object
        """
        application = self.to_application(payload)
        result = self.generate_for_application(application)
        return csv_filename(application.application_number), export_to_csv(
            result.recommendations
        )

    @staticmethod
    def to_application(payload: Payload) -> LoanApplication:
        """
        Normalize a payload into a domain snapshot.

        Raises:
            ValueError: If the payload is not an object
        """
        if isinstance(payload, LoanApplicationPayload):
            return payload.to_domain()
        if not isinstance(payload, Mapping):
            raise ValueError(
                f"Application payload must be an object, got {type(payload).__name__}"
            )
        return LoanApplicationPayload.model_validate(dict(payload)).to_domain()
