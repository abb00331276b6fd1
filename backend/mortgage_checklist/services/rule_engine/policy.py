"""Tunable parameters of the document checklist rules."""

from dataclasses import dataclass
from typing import Optional

from mortgage_checklist.config import Settings, settings
from mortgage_checklist.core.enums import IncomeType

DEFAULT_COVERAGE_THRESHOLD_MONTHS = 24
DEFAULT_ACCOUNT_MASK_DIGITS = 4


@dataclass(frozen=True)
class ChecklistPolicy:
    """
    Lender policy knobs for the checklist rules.

    Attributes:
        coverage_threshold_months: Months of employment and residence history to document
        variable_income_types: Income tags that require a VOE confirming a 2-year history
        account_mask_digits: Trailing account digits shown on asset statement items
        investment_property_keyword: REO property types containing this need a lease
    """

    coverage_threshold_months: int = DEFAULT_COVERAGE_THRESHOLD_MONTHS
    variable_income_types: frozenset[IncomeType] = frozenset(
        {IncomeType.BONUS, IncomeType.OVERTIME, IncomeType.COMMISSION}
    )
    account_mask_digits: int = DEFAULT_ACCOUNT_MASK_DIGITS
    investment_property_keyword: str = "invest"

    def __post_init__(self):
        """Reject settings that would make the rules meaningless."""
        if self.coverage_threshold_months < 1:
            raise ValueError(
                f"coverage_threshold_months must be >= 1, got {self.coverage_threshold_months}"
            )
        if self.account_mask_digits < 1:
            raise ValueError(
                f"account_mask_digits must be >= 1, got {self.account_mask_digits}"
            )

    def needed_months(self, covered_months: int) -> int:
        """Months of history still missing, never negative."""
        return max(0, self.coverage_threshold_months - covered_months)

    def is_investment_property(self, property_type: Optional[str]) -> bool:
        return self.investment_property_keyword.lower() in (property_type or "").lower()

    @classmethod
    def from_settings(cls, config: Optional[Settings] = None) -> "ChecklistPolicy":
        """Build the policy from application settings."""
        config = config or settings
        return cls(
            coverage_threshold_months=config.COVERAGE_THRESHOLD_MONTHS,
            account_mask_digits=config.ACCOUNT_MASK_DIGITS,
        )
