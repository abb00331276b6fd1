"""Domain models for the application."""

from mortgage_checklist.models.domain.application import (
    Asset,
    Borrower,
    Declaration,
    EmploymentRecord,
    IncomeSource,
    Liability,
    LoanApplication,
    REOProperty,
    Residence,
)
from mortgage_checklist.models.domain.checklist import (
    CategorizedItem,
    ChecklistResult,
    Coverage,
    CoverageStats,
    RecommendationItem,
    RecommendationSet,
)

__all__ = [
    "Asset",
    "Borrower",
    "Declaration",
    "EmploymentRecord",
    "IncomeSource",
    "Liability",
    "LoanApplication",
    "REOProperty",
    "Residence",
    "CategorizedItem",
    "ChecklistResult",
    "Coverage",
    "CoverageStats",
    "RecommendationItem",
    "RecommendationSet",
]
