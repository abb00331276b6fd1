"""Application-wide coverage statistics."""

from typing import Iterable, Optional

from mortgage_checklist.models.domain.application import Borrower
from mortgage_checklist.models.domain.checklist import Coverage, CoverageStats
from mortgage_checklist.services.rule_engine.duration import DurationCalculator
from mortgage_checklist.services.rule_engine.policy import ChecklistPolicy


def compute_coverage_stats(
    borrowers: Iterable[Borrower],
    policy: Optional[ChecklistPolicy] = None,
    calculator: Optional[DurationCalculator] = None,
) -> CoverageStats:
    """
    Summarize history coverage across borrowers.

    The application is only as covered as its weakest borrower: ``needed`` is
    the largest per-borrower shortfall and ``covered`` the smallest coverage
    seen. ``reo_count`` counts explicit REO properties only; REO inferred from
    liabilities is not included.

    Args:
        borrowers: Borrowers in application order
        policy: Checklist policy (defaults to one built from settings)
        calculator: Duration calculator (defaults to the system clock)

    Returns:
        CoverageStats, all zero / False for no borrowers
    """
    policy = policy or ChecklistPolicy.from_settings()
    calculator = calculator or DurationCalculator()

    emp_needed = res_needed = 0
    emp_covered: Optional[int] = None
    res_covered: Optional[int] = None
    has_flags = False
    reo_count = 0

    for borrower in borrowers:
        emp_months = calculator.accumulate_employment_months(borrower.employment_history)
        res_months = calculator.accumulate_residence_months(borrower.residences)

        emp_needed = max(emp_needed, policy.needed_months(emp_months))
        res_needed = max(res_needed, policy.needed_months(res_months))
        emp_covered = emp_months if emp_covered is None else min(emp_covered, emp_months)
        res_covered = res_months if res_covered is None else min(res_covered, res_months)

        has_flags = has_flags or borrower.declaration.has_flags
        reo_count += len(borrower.reo_properties)

    return CoverageStats(
        employment_coverage=Coverage(needed=emp_needed, covered=emp_covered or 0),
        residence_coverage=Coverage(needed=res_needed, covered=res_covered or 0),
        has_declaration_flags=has_flags,
        reo_count=reo_count,
    )
