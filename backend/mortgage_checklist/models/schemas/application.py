"""Pydantic schemas for loan application payloads.

Payloads arrive in the intake form's camelCase shape, mid-edit, so every field
is optional and malformed values are coerced to "absent" rather than rejected.
``to_domain()`` converts a payload into the immutable domain snapshot the rule
engine evaluates, classifying free-text values along the way.
"""

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from mortgage_checklist.core.classification import (
    classify_citizenship,
    classify_employment_status,
    classify_income_types,
    classify_liability_type,
    classify_loan_purpose,
)
from mortgage_checklist.core.enums import EmploymentStatus
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

_TRUE_STRINGS = {"true", "yes", "y", "1", "on"}

# Month counts and list indexes never need more digits than this
_MAX_INT_DIGITS = 9


# ==================== Coercion Helpers ====================


def coerce_text(value: Any) -> Optional[str]:
    """Strings stay (blank becomes None), numbers become text, anything else is absent."""
    if isinstance(value, str):
        return value.strip() or None
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float, Decimal)):
        return str(value)
    return None


def coerce_date_text(value: Any) -> Optional[str]:
    """Dates become ISO strings; strings are kept for the duration parser."""
    if isinstance(value, date):
        return value.isoformat()
    return coerce_text(value)


def coerce_decimal(value: Any) -> Optional[Decimal]:
    """Parse a money amount; non-numeric input is absent."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip().replace(",", "").lstrip("$")
        if not value:
            return None
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None
    return amount if amount.is_finite() else None


def coerce_int(value: Any) -> Optional[int]:
    """
    Parse a whole number (fractions truncated).

    Non-numeric input is absent, and so is anything with more than
    ``_MAX_INT_DIGITS`` integer digits (e.g. ``"1e99999999"``), which is
    rejected before it is expanded into an int.
    """
    amount = coerce_decimal(value)
    if amount is None or amount.adjusted() >= _MAX_INT_DIGITS:
        return None
    return int(amount)


def coerce_bool(value: Any) -> bool:
    """Form checkboxes arrive as booleans or as "true"/"false" strings."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    if isinstance(value, (int, float)):
        return value != 0
    return False


def coerce_records(value: Any) -> list:
    """Keep object entries of a list; a non-list collection is empty."""
    if not isinstance(value, (list, tuple)):
        return []
    return [entry for entry in value if isinstance(entry, (dict, BaseModel))]


# ==================== Payload Schemas ====================


class PayloadModel(BaseModel):
    """Base schema accepting camelCase or snake_case keys and ignoring unknown ones."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class EmploymentPayload(PayloadModel):
    """Schema for one employment history entry."""

    employer_name: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    employment_status: Optional[str] = None
    is_present: bool = False
    monthly_income: Optional[Decimal] = None
    self_employed: bool = False

    @field_validator("employer_name", "employment_status", mode="before")
    @classmethod
    def validate_text(cls, v: Any) -> Optional[str]:
        return coerce_text(v)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def validate_dates(cls, v: Any) -> Optional[str]:
        return coerce_date_text(v)

    @field_validator("monthly_income", mode="before")
    @classmethod
    def validate_amount(cls, v: Any) -> Optional[Decimal]:
        return coerce_decimal(v)

    @field_validator("is_present", "self_employed", mode="before")
    @classmethod
    def validate_flags(cls, v: Any) -> bool:
        return coerce_bool(v)

    def to_domain(self) -> EmploymentRecord:
        status = classify_employment_status(self.employment_status)
        if status == EmploymentStatus.UNSET and self.is_present:
            status = EmploymentStatus.PRESENT
        return EmploymentRecord(
            employer_name=self.employer_name,
            start_date=self.start_date,
            end_date=self.end_date,
            employment_status=status,
            monthly_income=self.monthly_income,
            self_employed=self.self_employed,
        )


class ResidencePayload(PayloadModel):
    """Schema for one residence history entry."""

    address_line: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    residency_basis: Optional[str] = None
    duration_months: Optional[int] = None

    @field_validator("address_line", "city", "state", "zip_code", "residency_basis", mode="before")
    @classmethod
    def validate_text(cls, v: Any) -> Optional[str]:
        return coerce_text(v)

    @field_validator("duration_months", mode="before")
    @classmethod
    def validate_duration(cls, v: Any) -> Optional[int]:
        return coerce_int(v)

    def to_domain(self) -> Residence:
        return Residence(
            address_line=self.address_line,
            city=self.city,
            state=self.state,
            zip_code=self.zip_code,
            residency_basis=self.residency_basis,
            duration_months=self.duration_months,
        )


class IncomeSourcePayload(PayloadModel):
    """Schema for one additional income source."""

    income_type: Optional[str] = None
    monthly_amount: Optional[Decimal] = None

    @field_validator("income_type", mode="before")
    @classmethod
    def validate_text(cls, v: Any) -> Optional[str]:
        return coerce_text(v)

    @field_validator("monthly_amount", mode="before")
    @classmethod
    def validate_amount(cls, v: Any) -> Optional[Decimal]:
        return coerce_decimal(v)

    def to_domain(self) -> IncomeSource:
        return IncomeSource(
            income_types=classify_income_types(self.income_type),
            raw_type=self.income_type or "",
            monthly_amount=self.monthly_amount,
        )


class AssetPayload(PayloadModel):
    """Schema for one asset account."""

    asset_type: Optional[str] = None
    account_number: Optional[str] = None
    bank_name: Optional[str] = None

    @field_validator("asset_type", "account_number", "bank_name", mode="before")
    @classmethod
    def validate_text(cls, v: Any) -> Optional[str]:
        return coerce_text(v)

    def to_domain(self) -> Asset:
        return Asset(
            asset_type=self.asset_type,
            account_number=self.account_number,
            bank_name=self.bank_name,
        )


class LiabilityPayload(PayloadModel):
    """Schema for one liability."""

    liability_type: Optional[str] = None
    creditor_name: Optional[str] = None
    to_be_paid_off: bool = False
    payoff_status: bool = False

    @field_validator("liability_type", "creditor_name", mode="before")
    @classmethod
    def validate_text(cls, v: Any) -> Optional[str]:
        return coerce_text(v)

    @field_validator("to_be_paid_off", "payoff_status", mode="before")
    @classmethod
    def validate_flags(cls, v: Any) -> bool:
        return coerce_bool(v)

    def to_domain(self) -> Liability:
        return Liability(
            liability_type=classify_liability_type(self.liability_type),
            raw_type=self.liability_type or "",
            creditor_name=self.creditor_name,
            to_be_paid_off=self.to_be_paid_off,
            payoff_status=self.payoff_status,
        )


class REOPropertyPayload(PayloadModel):
    """Schema for one real-estate-owned property."""

    address_line: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    property_type: Optional[str] = None
    associated_liability: Optional[int] = None

    @field_validator("address_line", "city", "state", "zip_code", "property_type", mode="before")
    @classmethod
    def validate_text(cls, v: Any) -> Optional[str]:
        return coerce_text(v)

    @field_validator("associated_liability", mode="before")
    @classmethod
    def validate_index(cls, v: Any) -> Optional[int]:
        index = coerce_int(v)
        return index if index is not None and index >= 0 else None

    def to_domain(self) -> REOProperty:
        indexes = () if self.associated_liability is None else (self.associated_liability,)
        return REOProperty(
            address_line=self.address_line,
            city=self.city,
            state=self.state,
            zip_code=self.zip_code,
            property_type=self.property_type,
            liability_indexes=indexes,
        )


class DeclarationPayload(PayloadModel):
    """Schema for the declaration answers used by the checklist."""

    bankruptcy: bool = False
    foreclosure: bool = False
    outstanding_judgments: bool = False

    @field_validator("bankruptcy", "foreclosure", "outstanding_judgments", mode="before")
    @classmethod
    def validate_flags(cls, v: Any) -> bool:
        return coerce_bool(v)

    def to_domain(self) -> Declaration:
        return Declaration(
            bankruptcy=self.bankruptcy,
            foreclosure=self.foreclosure,
            outstanding_judgments=self.outstanding_judgments,
        )


class BorrowerPayload(PayloadModel):
    """Schema for a borrower and their nested records."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    citizenship_type: Optional[str] = None
    employment_history: list[EmploymentPayload] = Field(default_factory=list)
    residences: list[ResidencePayload] = Field(default_factory=list)
    income_sources: list[IncomeSourcePayload] = Field(default_factory=list)
    assets: list[AssetPayload] = Field(default_factory=list)
    liabilities: list[LiabilityPayload] = Field(default_factory=list)
    reo_properties: list[REOPropertyPayload] = Field(default_factory=list)
    declaration: Optional[DeclarationPayload] = None

    @field_validator("first_name", "last_name", "citizenship_type", mode="before")
    @classmethod
    def validate_text(cls, v: Any) -> Optional[str]:
        return coerce_text(v)

    @field_validator(
        "employment_history",
        "residences",
        "income_sources",
        "assets",
        "liabilities",
        "reo_properties",
        mode="before",
    )
    @classmethod
    def validate_records(cls, v: Any) -> list:
        return coerce_records(v)

    @field_validator("declaration", mode="before")
    @classmethod
    def validate_declaration(cls, v: Any) -> Any:
        return v if isinstance(v, (dict, BaseModel)) else None

    def to_domain(self) -> Borrower:
        return Borrower(
            first_name=self.first_name or "",
            last_name=self.last_name or "",
            citizenship_type=classify_citizenship(self.citizenship_type),
            employment_history=tuple(e.to_domain() for e in self.employment_history),
            residences=tuple(r.to_domain() for r in self.residences),
            income_sources=tuple(i.to_domain() for i in self.income_sources),
            assets=tuple(a.to_domain() for a in self.assets),
            liabilities=tuple(lia.to_domain() for lia in self.liabilities),
            reo_properties=tuple(p.to_domain() for p in self.reo_properties),
            declaration=self.declaration.to_domain() if self.declaration else Declaration(),
        )


class LoanApplicationPayload(PayloadModel):
    """Schema for a loan application snapshot submitted for a checklist."""

    application_number: Optional[str] = None
    loan_purpose: Optional[str] = None
    borrowers: list[BorrowerPayload] = Field(default_factory=list)
    liabilities: list[LiabilityPayload] = Field(default_factory=list)

    @field_validator("application_number", "loan_purpose", mode="before")
    @classmethod
    def validate_text(cls, v: Any) -> Optional[str]:
        return coerce_text(v)

    @field_validator("borrowers", "liabilities", mode="before")
    @classmethod
    def validate_records(cls, v: Any) -> list:
        return coerce_records(v)

    def to_domain(self) -> LoanApplication:
        """Convert to the immutable snapshot evaluated by the rule engine."""
        return LoanApplication(
            application_number=self.application_number,
            loan_purpose=classify_loan_purpose(self.loan_purpose),
            borrowers=tuple(b.to_domain() for b in self.borrowers),
            liabilities=tuple(lia.to_domain() for lia in self.liabilities),
        )
