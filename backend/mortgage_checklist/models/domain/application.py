"""Application domain models: immutable snapshots of a mortgage application."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional, Union

from mortgage_checklist.core.enums import (
    CitizenshipType,
    EmploymentStatus,
    IncomeType,
    LiabilityType,
    LoanPurpose,
)

# ISO date string or date; unparseable strings are kept and resolve to 0 months.
DateLike = Union[date, str, None]


@dataclass(frozen=True)
class EmploymentRecord:
    """A single job in the borrower's employment history."""

    employer_name: Optional[str] = None
    start_date: DateLike = None
    end_date: DateLike = None  # absent means ongoing
    employment_status: EmploymentStatus = EmploymentStatus.UNSET
    monthly_income: Optional[Decimal] = None
    self_employed: bool = False

    @property
    def is_present(self) -> bool:
        return self.employment_status == EmploymentStatus.PRESENT

    @property
    def has_income(self) -> bool:
        return self.monthly_income is not None and self.monthly_income > 0


@dataclass(frozen=True)
class Residence:
    """A current or prior address with a pre-computed duration."""

    address_line: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    residency_basis: Optional[str] = None
    duration_months: Optional[int] = None


@dataclass(frozen=True)
class IncomeSource:
    """A non-employment income source (bonus, rental, K-1 income, ...)."""

    # A combined entry such as "S-Corp rental" carries several tags
    income_types: frozenset[IncomeType] = frozenset({IncomeType.UNCLASSIFIED})
    raw_type: str = ""
    monthly_amount: Optional[Decimal] = None


@dataclass(frozen=True)
class Asset:
    """A deposit or investment account."""

    asset_type: Optional[str] = None
    account_number: Optional[str] = None
    bank_name: Optional[str] = None

    def masked_account(self, digits: int = 4) -> str:
        """Return ``****1234`` style suffix, or an empty string without an account number."""
        if not self.account_number:
            return ""
        return "****" + self.account_number[-digits:]


@dataclass(frozen=True)
class Liability:
    """A debt reported on the application."""

    liability_type: LiabilityType = LiabilityType.UNCLASSIFIED
    raw_type: str = ""
    creditor_name: Optional[str] = None
    to_be_paid_off: bool = False
    payoff_status: bool = False

    @property
    def paid_at_closing(self) -> bool:
        return self.to_be_paid_off or self.payoff_status


@dataclass(frozen=True)
class REOProperty:
    """Real estate owned by the borrower other than the subject property."""

    address_line: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip_code: Optional[str] = None
    property_type: Optional[str] = None
    # Indexes into the borrower's liabilities secured by this property
    liability_indexes: tuple[int, ...] = ()


@dataclass(frozen=True)
class Declaration:
    """Borrower declarations consumed by the checklist rules."""

    bankruptcy: bool = False
    foreclosure: bool = False
    outstanding_judgments: bool = False

    @property
    def has_flags(self) -> bool:
        """True when any adverse declaration is answered yes."""
        return self.bankruptcy or self.foreclosure or self.outstanding_judgments


@dataclass(frozen=True)
class Borrower:
    """Borrower with their employment, residence, income, asset and REO records."""

    first_name: str = ""
    last_name: str = ""
    citizenship_type: CitizenshipType = CitizenshipType.UNSET
    employment_history: tuple[EmploymentRecord, ...] = ()
    residences: tuple[Residence, ...] = ()
    income_sources: tuple[IncomeSource, ...] = ()
    assets: tuple[Asset, ...] = ()
    liabilities: tuple[Liability, ...] = ()
    reo_properties: tuple[REOProperty, ...] = ()
    declaration: Declaration = field(default_factory=Declaration)

    @property
    def full_name(self) -> str:
        """Return full name of borrower."""
        return f"{self.first_name} {self.last_name}"

    @property
    def tag(self) -> str:
        """Checklist prefix identifying the borrower, e.g. ``[Jane Doe]``."""
        return f"[{self.full_name}]"

    def has_income_type(self, *income_types: IncomeType) -> bool:
        return any(
            not source.income_types.isdisjoint(income_types) for source in self.income_sources
        )


@dataclass(frozen=True)
class LoanApplication:
    """Loan application snapshot evaluated by the checklist rules."""

    application_number: Optional[str] = None
    loan_purpose: LoanPurpose = LoanPurpose.UNSET
    borrowers: tuple[Borrower, ...] = ()
    liabilities: tuple[Liability, ...] = ()

    @property
    def all_liabilities(self) -> tuple[Liability, ...]:
        """
        Application-level liabilities.

        The intake form collects liabilities per borrower and flattens them
        onto the application on submit. Snapshots taken before submit only
        carry the per-borrower lists, so those are flattened here.
        """
        if self.liabilities:
            return self.liabilities
        return tuple(
            liability
            for borrower in self.borrowers
            for liability in borrower.liabilities
        )

    @property
    def reo_count(self) -> int:
        return sum(len(borrower.reo_properties) for borrower in self.borrowers)
