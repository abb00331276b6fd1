"""
Shared pytest fixtures for the checklist test suite.

Provides:
  - ``calculator``: a DurationCalculator pinned to ``FIXED_TODAY`` so ongoing
    jobs have a stable length.
  - ``engine`` / ``service``: rule engine and checklist service using that clock.
  - Sample application payloads in the intake form's camelCase shape.
"""

from datetime import date

import pytest

from mortgage_checklist.services.checklist_service import ChecklistService
from mortgage_checklist.services.rule_engine import (
    ChecklistPolicy,
    DurationCalculator,
    RecommendationEngine,
)

FIXED_TODAY = date(2025, 6, 15)


# ── Engine fixtures ───────────────────────────────────────────────────────────

@pytest.fixture
def calculator() -> DurationCalculator:
    """Duration calculator whose "today" is ``FIXED_TODAY``."""
    return DurationCalculator(today=lambda: FIXED_TODAY)


@pytest.fixture
def policy() -> ChecklistPolicy:
    """Default 24-month policy."""
    return ChecklistPolicy()


@pytest.fixture
def engine(policy: ChecklistPolicy, calculator: DurationCalculator) -> RecommendationEngine:
    return RecommendationEngine(policy=policy, calculator=calculator)


@pytest.fixture
def service(engine: RecommendationEngine) -> ChecklistService:
    return ChecklistService(engine=engine)


# ── Sample payloads ───────────────────────────────────────────────────────────

@pytest.fixture
def purchase_payload() -> dict:
    """Purchase application with one borrower and no history records."""
    return {
        "applicationNumber": "APP-100",
        "loanPurpose": "Purchase",
        "borrowers": [{"firstName": "Jane", "lastName": "Doe"}],
    }


@pytest.fixture
def covered_borrower() -> dict:
    """Salaried US citizen with more than 24 months of job and address history."""
    return {
        "firstName": "Sam",
        "lastName": "Lee",
        "citizenshipType": "USCitizen",
        "employmentHistory": [
            {
                "employerName": "Acme Corp",
                "startDate": "2020-01-01",
                "employmentStatus": "Present",
                "monthlyIncome": 8000,
                "selfEmployed": False,
            }
        ],
        "residences": [{"addressLine": "1 Main St", "durationMonths": 36}],
        "assets": [
            {"assetType": "Checking", "accountNumber": "123456789", "bankName": "First Bank"}
        ],
        "declaration": {"bankruptcy": False, "foreclosure": False, "outstandingJudgments": False},
    }
