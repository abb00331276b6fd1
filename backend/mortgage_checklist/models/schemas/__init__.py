"""Pydantic schemas for API validation and serialization."""

from mortgage_checklist.models.schemas.application import (
    AssetPayload,
    BorrowerPayload,
    DeclarationPayload,
    EmploymentPayload,
    IncomeSourcePayload,
    LiabilityPayload,
    LoanApplicationPayload,
    REOPropertyPayload,
    ResidencePayload,
)
from mortgage_checklist.models.schemas.checklist import (
    ChecklistResponse,
    CoverageResponse,
    CoverageStatsResponse,
    RecommendationItemResponse,
    RecommendationSetResponse,
)

__all__ = [
    # Application payloads
    "AssetPayload",
    "BorrowerPayload",
    "DeclarationPayload",
    "EmploymentPayload",
    "IncomeSourcePayload",
    "LiabilityPayload",
    "LoanApplicationPayload",
    "REOPropertyPayload",
    "ResidencePayload",
    # Checklist responses
    "ChecklistResponse",
    "CoverageResponse",
    "CoverageStatsResponse",
    "RecommendationItemResponse",
    "RecommendationSetResponse",
]
