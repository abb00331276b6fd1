"""Pydantic schemas for checklist responses."""

from dataclasses import asdict

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from mortgage_checklist.core.enums import DocumentStatus
from mortgage_checklist.models.domain.checklist import ChecklistResult


class ResponseModel(BaseModel):
    """Base schema serialized with camelCase keys."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class RecommendationItemResponse(ResponseModel):
    """Schema for a single checklist item."""

    name: str
    status: DocumentStatus
    reason: str


class RecommendationSetResponse(ResponseModel):
    """Schema for the four checklist sections, in display order."""

    general: list[RecommendationItemResponse] = Field(default_factory=list)
    income: list[RecommendationItemResponse] = Field(default_factory=list)
    assets: list[RecommendationItemResponse] = Field(default_factory=list)
    credit: list[RecommendationItemResponse] = Field(default_factory=list)


class CoverageResponse(ResponseModel):
    """Schema for months needed vs. covered."""

    needed: int
    covered: int


class CoverageStatsResponse(ResponseModel):
    """Schema for the application-wide coverage summary."""

    employment_coverage: CoverageResponse
    residence_coverage: CoverageResponse
    has_declaration_flags: bool
    reo_count: int


class ChecklistResponse(ResponseModel):
    """Schema for a generated document checklist."""

    recommendations: RecommendationSetResponse
    coverage: CoverageStatsResponse

    @classmethod
    def from_result(cls, result: ChecklistResult) -> "ChecklistResponse":
        """Build the response from a service result."""
        return cls.model_validate(asdict(result))
