from datetime import date, datetime

import pytest

from mortgage_checklist.models.domain.application import EmploymentRecord, Residence
from mortgage_checklist.services.rule_engine.duration import (
    DurationCalculator,
    months_between,
    parse_date,
)


@pytest.mark.parametrize(
    "start,end,expected",
    [
        ("2020-01-15", "2020-03-15", 2),
        ("2020-01-15", "2020-03-14", 1),  # partial final month dropped
        ("2020-01-31", "2020-02-29", 0),
        ("2019-06-01", "2021-06-01", 24),
        ("2020-05-01", "2020-05-01", 0),
        ("2021-01-01", "2020-01-01", 0),  # end before start
    ],
)
def test_months_between(start: str, end: str, expected: int) -> None:
    assert months_between(start, end) == expected


def test_months_between_accepts_dates_and_datetimes() -> None:
    assert months_between(date(2020, 1, 1), datetime(2021, 1, 1, 12, 30)) == 12


@pytest.mark.parametrize("bad", [None, "", "garbage", "2020-13-01", 20200101])
def test_months_between_unparseable_is_zero(bad) -> None:
    """Bad dates count as no history rather than raising."""
    assert months_between(bad, "2024-01-01") == 0
    assert months_between("2020-01-01", bad) == 0


def test_parse_date_formats() -> None:
    assert parse_date("2023-04-05") == date(2023, 4, 5)
    assert parse_date("2023-04-05T10:00:00Z") == date(2023, 4, 5)
    assert parse_date("04/05/2023") == date(2023, 4, 5)
    assert parse_date("  2023-04-05  ") == date(2023, 4, 5)
    assert parse_date("April 5th") is None


def test_accumulate_employment_uses_today_for_ongoing_jobs(
    calculator: DurationCalculator,
) -> None:
    records = [EmploymentRecord(start_date="2024-06-15")]
    assert calculator.accumulate_employment_months(records) == 12


def test_accumulate_employment_sums_overlapping_jobs(calculator: DurationCalculator) -> None:
    """Concurrent jobs both count; overlap is not deduplicated."""
    records = [
        EmploymentRecord(start_date="2024-01-15", end_date="2025-01-15"),
        EmploymentRecord(start_date="2024-01-15", end_date="2025-01-15"),
    ]
    assert calculator.accumulate_employment_months(records) == 24


def test_accumulate_employment_ignores_records_without_start(
    calculator: DurationCalculator,
) -> None:
    records = [EmploymentRecord(end_date="2024-01-01"), EmploymentRecord(start_date="bad")]
    assert calculator.accumulate_employment_months(records) == 0


def test_accumulate_residence_months() -> None:
    residences = [Residence(duration_months=10), Residence(), Residence(duration_months=5)]
    assert DurationCalculator.accumulate_residence_months(residences) == 15
    assert DurationCalculator.accumulate_residence_months([]) == 0
