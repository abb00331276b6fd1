import logging

import pytest

from mortgage_checklist.core.enums import DocumentStatus
from mortgage_checklist.models.domain.checklist import ChecklistResult, Coverage
from mortgage_checklist.models.schemas import LoanApplicationPayload
from mortgage_checklist.services.checklist_service import ChecklistService
from mortgage_checklist.services.rule_engine import ChecklistPolicy


def test_generate_from_raw_payload(service: ChecklistService, purchase_payload: dict) -> None:
    result = service.generate(purchase_payload)

    assert isinstance(result, ChecklistResult)
    assert result.recommendations.general[0].name == "Executed purchase contract"
    assert result.coverage.employment_coverage == Coverage(needed=24, covered=0)
    assert result.coverage.residence_coverage == Coverage(needed=24, covered=0)


def test_generate_for_covered_borrower(service: ChecklistService, covered_borrower: dict) -> None:
    result = service.generate({"loanPurpose": "Refinance", "borrowers": [covered_borrower]})

    general = result.recommendations.general
    assert [item.status for item in general if "coverage" in item.name] == [
        DocumentStatus.OK,
        DocumentStatus.OK,
    ]
    assert result.recommendations.assets[0].name == (
        "[Sam Lee] Account statements (2 months) – Checking ****6789"
    )
    assert result.coverage.employment_coverage.needed == 0
    assert result.coverage.residence_coverage.covered == 36


def test_generate_accepts_parsed_payload(
    service: ChecklistService, purchase_payload: dict
) -> None:
    parsed = LoanApplicationPayload.model_validate(purchase_payload)

    assert service.generate(parsed) == service.generate(purchase_payload)


@pytest.mark.parametrize("payload", [None, "application", ["not", "an", "object"], 42])
def test_non_object_payload_is_rejected(service: ChecklistService, payload) -> None:
    with pytest.raises(ValueError, match="must be an object"):
        service.generate(payload)


def test_export_csv(service: ChecklistService, purchase_payload: dict) -> None:
    filename, csv_text = service.export_csv(purchase_payload)

    assert filename == "doc-checklist-APP-100.csv"
    lines = csv_text.split("\n")
    assert lines[0] == '"Section","Item","Status","Reason"'
    assert lines[1] == '"General","Executed purchase contract","Required","Loan purpose is Purchase."'


def test_generate_logs_summary(
    service: ChecklistService, purchase_payload: dict, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.INFO, logger="mortgage_checklist.services.checklist_service"):
        service.generate(purchase_payload)

    assert "APP-100" in caplog.text
    assert "1 borrower(s)" in caplog.text


def test_policy_is_passed_to_default_engine() -> None:
    service = ChecklistService(policy=ChecklistPolicy(coverage_threshold_months=6))

    result = service.generate({"borrowers": [{"firstName": "A", "lastName": "B"}]})

    assert result.coverage.residence_coverage.needed == 6
    assert "[A B] Prior residence addresses to cover missing 6 months" in [
        item.name for item in result.recommendations.general
    ]


def test_huge_exponent_duration_is_treated_as_missing(service: ChecklistService) -> None:
    result = service.generate(
        {
            "borrowers": [
                {"firstName": "A", "lastName": "B", "residences": [{"durationMonths": "1e99999999"}]}
            ]
        }
    )

    assert result.coverage.residence_coverage == Coverage(needed=24, covered=0)


def test_combined_income_text_keeps_every_rule(service: ChecklistService) -> None:
    result = service.generate(
        {
            "borrowers": [
                {
                    "firstName": "A",
                    "lastName": "B",
                    "employmentHistory": [{"selfEmployed": True}],
                    "incomeSources": [{"incomeType": "S-Corp rental income"}],
                }
            ]
        }
    )

    income = [item.name for item in result.recommendations.income]
    assert "[A B] K-1s (S-Corp) – last 2 years" in income
    assert "[A B] Current lease(s) + 2 months rent receipts" in income
