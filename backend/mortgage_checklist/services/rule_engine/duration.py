"""Whole-month duration arithmetic for employment and residence history."""

from datetime import date, datetime
from typing import Callable, Iterable, Optional

from mortgage_checklist.models.domain.application import (
    DateLike,
    EmploymentRecord,
    Residence,
)

_FALLBACK_FORMATS = ("%m/%d/%Y", "%Y/%m/%d")


def parse_date(value: DateLike) -> Optional[date]:
    """
    Parse a date-like value.

    Accepts ``date``/``datetime`` instances and ISO 8601 strings (date or
    datetime), plus ``MM/DD/YYYY``. Returns None for anything else.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        pass

    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    return None


class DurationCalculator:
    """
    Month arithmetic used for the 24-month history checks.

    Partial final months are dropped, and unparseable dates count as zero
    months so bad input only ever increases the documents requested.
    """

    def __init__(self, today: Optional[Callable[[], date]] = None):
        """
        Initialize the calculator.

        Args:
            today: Clock used as the end date of ongoing jobs (defaults to ``date.today``)
        """
        self._today = today or date.today

    @staticmethod
    def months_between(start: DateLike, end: DateLike) -> int:
        """
        Whole calendar months from ``start`` to ``end``.

        Returns 0 when either date is absent or unparseable, or when ``end``
        precedes ``start``.
        """
        start_date = parse_date(start)
        end_date = parse_date(end)
        if start_date is None or end_date is None:
            return 0

        months = (end_date.year - start_date.year) * 12
        months += end_date.month - start_date.month
        if end_date.day < start_date.day:
            months -= 1

        return max(0, months)

    def accumulate_employment_months(self, records: Iterable[EmploymentRecord]) -> int:
        """
        Sum employment months across records.

        Ongoing jobs run until today. Overlapping jobs are not deduplicated, so
        concurrent part-time jobs both count toward coverage.
        """
        today = self._today()
        total = 0
        for record in records:
            end = record.end_date or today
            total += self.months_between(record.start_date, end)
        return total

    @staticmethod
    def accumulate_residence_months(residences: Iterable[Residence]) -> int:
        """Sum the pre-computed residence durations."""
        return sum(residence.duration_months or 0 for residence in residences)


# Module-level shortcut for callers that only need the date math
months_between = DurationCalculator.months_between
