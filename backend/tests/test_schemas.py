from datetime import date
from decimal import Decimal

import pytest

from mortgage_checklist.core.enums import (
    CitizenshipType,
    DocumentStatus,
    EmploymentStatus,
    IncomeType,
    LiabilityType,
    LoanPurpose,
)
from mortgage_checklist.models.domain.application import Declaration
from mortgage_checklist.models.domain.checklist import (
    ChecklistResult,
    Coverage,
    CoverageStats,
    RecommendationItem,
    RecommendationSet,
)
from mortgage_checklist.models.schemas import (
    ChecklistResponse,
    EmploymentPayload,
    LoanApplicationPayload,
    REOPropertyPayload,
)
from mortgage_checklist.models.schemas.application import coerce_int


def test_camel_case_payload_to_domain() -> None:
    payload = LoanApplicationPayload.model_validate(
        {
            "applicationNumber": "APP-7",
            "loanPurpose": "Cash-Out Refinance",
            "borrowers": [
                {
                    "firstName": "Jane",
                    "lastName": "Doe",
                    "citizenshipType": "PermanentResidentAlien",
                    "employmentHistory": [
                        {
                            "employerName": "Acme",
                            "startDate": "2021-03-01",
                            "employmentStatus": "Present",
                            "monthlyIncome": "5,000.50",
                            "selfEmployed": "false",
                        }
                    ],
                    "residences": [{"addressLine": "1 Main St", "durationMonths": "18"}],
                    "incomeSources": [{"incomeType": "S-Corp", "monthlyAmount": 2500}],
                    "assets": [{"assetType": "Savings", "accountNumber": 987654321}],
                    "reoProperties": [{"addressLine": "9 Pine", "associatedLiability": "0"}],
                    "declaration": {"bankruptcy": "true", "foreclosure": False},
                }
            ],
            "liabilities": [{"liabilityType": "MortgageLoan", "toBePaidOff": True}],
        }
    )

    application = payload.to_domain()

    assert application.application_number == "APP-7"
    assert application.loan_purpose == LoanPurpose.CASH_OUT
    borrower = application.borrowers[0]
    assert borrower.tag == "[Jane Doe]"
    assert borrower.citizenship_type == CitizenshipType.PERMANENT_RESIDENT

    job = borrower.employment_history[0]
    assert job.employment_status == EmploymentStatus.PRESENT
    assert job.monthly_income == Decimal("5000.50")
    assert job.self_employed is False
    assert job.start_date == "2021-03-01"
    assert job.end_date is None

    assert borrower.residences[0].duration_months == 18
    assert borrower.income_sources[0].income_types == {IncomeType.S_CORP}
    assert borrower.income_sources[0].raw_type == "S-Corp"
    assert borrower.assets[0].account_number == "987654321"
    assert borrower.reo_properties[0].liability_indexes == (0,)
    assert borrower.declaration == Declaration(bankruptcy=True)

    liability = application.liabilities[0]
    assert liability.liability_type == LiabilityType.MORTGAGE
    assert liability.paid_at_closing


def test_snake_case_keys_are_accepted() -> None:
    payload = LoanApplicationPayload.model_validate(
        {"loan_purpose": "Purchase", "borrowers": [{"first_name": "Ann", "last_name": "One"}]}
    )

    application = payload.to_domain()

    assert application.loan_purpose == LoanPurpose.PURCHASE
    assert application.borrowers[0].full_name == "Ann One"


def test_malformed_values_become_absent() -> None:
    payload = LoanApplicationPayload.model_validate(
        {
            "loanPurpose": 42,
            "borrowers": [
                {
                    "firstName": None,
                    "employmentHistory": [
                        "not a record",
                        {"monthlyIncome": "n/a", "startDate": ""},
                    ],
                    "residences": "none",
                    "incomeSources": None,
                    "assets": {"assetType": "Checking"},
                    "declaration": "yes",
                    "reoProperties": [{"associatedLiability": ""}],
                },
                "stray string",
            ],
            "liabilities": 7,
            "somethingElse": {"ignored": True},
        }
    )

    application = payload.to_domain()

    assert application.loan_purpose == LoanPurpose.UNSET
    assert application.liabilities == ()
    assert len(application.borrowers) == 1
    borrower = application.borrowers[0]
    assert borrower.full_name == " "
    assert len(borrower.employment_history) == 1
    assert borrower.employment_history[0].monthly_income is None
    assert borrower.employment_history[0].start_date is None
    assert borrower.residences == ()
    assert borrower.income_sources == ()
    assert borrower.assets == ()
    assert borrower.declaration == Declaration()
    assert borrower.reo_properties[0].liability_indexes == ()


def test_empty_payload() -> None:
    application = LoanApplicationPayload.model_validate({}).to_domain()

    assert application.borrowers == ()
    assert application.loan_purpose == LoanPurpose.UNSET


def test_employment_accepts_dates_and_is_present_flag() -> None:
    record = EmploymentPayload(start_date=date(2020, 1, 1), is_present=True).to_domain()

    assert record.start_date == "2020-01-01"
    assert record.employment_status == EmploymentStatus.PRESENT


def test_explicit_status_wins_over_is_present() -> None:
    record = EmploymentPayload(employment_status="Prior", is_present=True).to_domain()

    assert record.employment_status == EmploymentStatus.PRIOR


def test_negative_liability_index_is_dropped() -> None:
    assert REOPropertyPayload(associated_liability=-1).to_domain().liability_indexes == ()


def test_checklist_response_serializes_camel_case() -> None:
    recommendations = RecommendationSet()
    recommendations.general.append(
        RecommendationItem(name="Item", status=DocumentStatus.REQUIRED, reason="Why")
    )
    result = ChecklistResult(
        recommendations=recommendations,
        coverage=CoverageStats(
            employment_coverage=Coverage(needed=4, covered=20),
            has_declaration_flags=True,
            reo_count=2,
        ),
    )

    body = ChecklistResponse.from_result(result).model_dump(by_alias=True, mode="json")

    assert body["recommendations"] == {
        "general": [{"name": "Item", "status": "required", "reason": "Why"}],
        "income": [],
        "assets": [],
        "credit": [],
    }
    assert body["coverage"] == {
        "employmentCoverage": {"needed": 4, "covered": 20},
        "residenceCoverage": {"needed": 0, "covered": 0},
        "hasDeclarationFlags": True,
        "reoCount": 2,
    }


@pytest.mark.parametrize(
    "value, expected",
    [
        ("18", 18),
        ("18.9", 18),
        ("1,200", 1200),
        ("999999999", 999999999),
        ("1000000000", None),
        ("1e99999999", None),
        ("-1e99999999", None),
        ("1E+999999999", None),
        ("abc", None),
    ],
)
def test_coerce_int(value, expected) -> None:
    assert coerce_int(value) == expected


def test_huge_exponent_counts_are_absent() -> None:
    residence = LoanApplicationPayload.model_validate(
        {"borrowers": [{"residences": [{"durationMonths": "1e99999999"}]}]}
    ).to_domain().borrowers[0].residences[0]

    assert residence.duration_months is None
    assert REOPropertyPayload(associated_liability="1e99999999").to_domain().liability_indexes == ()
