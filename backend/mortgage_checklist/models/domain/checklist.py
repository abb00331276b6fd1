"""Checklist domain models produced by the rule engine."""

from dataclasses import dataclass, field
from typing import Iterator

from mortgage_checklist.core.enums import DocumentStatus, RecommendationCategory


@dataclass(frozen=True)
class RecommendationItem:
    """
    A single document requirement.

    Attributes:
        name: Document name, prefixed with the borrower tag for per-borrower items
        status: Required, Conditional, Review or Ok
        reason: Justification shown next to the item
    """

    name: str
    status: DocumentStatus
    reason: str


@dataclass(frozen=True)
class CategorizedItem:
    """A recommendation item together with the checklist section it belongs to."""

    category: RecommendationCategory
    item: RecommendationItem


@dataclass
class RecommendationSet:
    """
    Document checklist grouped into four ordered sections.

    Items keep the order in which the rules emitted them.
    """

    general: list[RecommendationItem] = field(default_factory=list)
    income: list[RecommendationItem] = field(default_factory=list)
    assets: list[RecommendationItem] = field(default_factory=list)
    credit: list[RecommendationItem] = field(default_factory=list)

    def add(self, categorized: CategorizedItem) -> None:
        self.section(categorized.category).append(categorized.item)

    def section(self, category: RecommendationCategory) -> list[RecommendationItem]:
        return getattr(self, category.value)

    def sections(self) -> Iterator[tuple[RecommendationCategory, list[RecommendationItem]]]:
        """Yield ``(category, items)`` in display order."""
        for category in RecommendationCategory:
            yield category, self.section(category)

    @property
    def total_items(self) -> int:
        return sum(len(items) for _, items in self.sections())

    def counts(self) -> dict[str, int]:
        return {category.value: len(items) for category, items in self.sections()}


@dataclass(frozen=True)
class Coverage:
    """Months still needed and months documented for one kind of history."""

    needed: int = 0
    covered: int = 0


@dataclass(frozen=True)
class CoverageStats:
    """
    Application-wide coverage summary.

    Attributes:
        employment_coverage: Weakest borrower's employment history coverage
        residence_coverage: Weakest borrower's residence history coverage
        has_declaration_flags: Any borrower declared bankruptcy, foreclosure or judgments
        reo_count: Explicit REO properties across all borrowers
    """

    employment_coverage: Coverage = field(default_factory=Coverage)
    residence_coverage: Coverage = field(default_factory=Coverage)
    has_declaration_flags: bool = False
    reo_count: int = 0


@dataclass(frozen=True)
class ChecklistResult:
    """Recommendations and coverage computed from one application snapshot."""

    recommendations: RecommendationSet
    coverage: CoverageStats
