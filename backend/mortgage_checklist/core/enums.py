"""Core enums for type safety across the application."""

from enum import Enum


class LoanPurpose(str, Enum):
    """Loan transaction purpose."""

    PURCHASE = "Purchase"
    REFINANCE = "Refinance"
    CASH_OUT = "CashOut"
    UNSET = ""

    @property
    def is_refinance(self) -> bool:
        """Refinance and cash-out refinance share the subject-property documents."""
        return self in (LoanPurpose.REFINANCE, LoanPurpose.CASH_OUT)


class CitizenshipType(str, Enum):
    """Borrower citizenship / residency status."""

    US_CITIZEN = "USCitizen"
    PERMANENT_RESIDENT = "PermanentResident"
    NON_PERMANENT_RESIDENT = "NonPermanentResident"
    OTHER = "Other"
    UNSET = ""


class EmploymentStatus(str, Enum):
    """Whether an employment record is the current job or a prior one."""

    PRESENT = "Present"
    PRIOR = "Prior"
    UNSET = ""


class IncomeType(str, Enum):
    """Normalized income source tags."""

    BASE = "Base"
    BONUS = "Bonus"
    OVERTIME = "Overtime"
    COMMISSION = "Commission"
    RENTAL = "Rental"
    S_CORP = "S-Corp"
    PARTNERSHIP = "Partnership"
    SELF_EMPLOYMENT = "SelfEmployment"
    SOCIAL_SECURITY = "SocialSecurity"
    PENSION = "Pension"
    DISABILITY = "Disability"
    CHILD_SUPPORT = "ChildSupport"
    ALIMONY = "Alimony"
    INVESTMENT = "Investment"
    UNEMPLOYMENT = "Unemployment"
    OTHER = "Other"

    # Free text that matched no known tag
    UNCLASSIFIED = "Unclassified"


class LiabilityType(str, Enum):
    """Normalized liability tags."""

    MORTGAGE = "Mortgage"
    HELOC = "HELOC"
    REVOLVING = "Revolving"
    INSTALLMENT = "Installment"
    LEASE = "Lease"
    OTHER = "Other"

    # Free text that matched no known tag
    UNCLASSIFIED = "Unclassified"


class DocumentStatus(str, Enum):
    """Checklist item status."""

    REQUIRED = "required"
    CONDITIONAL = "conditional"
    REVIEW = "review"
    OK = "ok"

    @property
    def label(self) -> str:
        """Display label, e.g. ``Required``."""
        return self.value.capitalize()


class RecommendationCategory(str, Enum):
    """Checklist sections, in display order."""

    GENERAL = "general"
    INCOME = "income"
    ASSETS = "assets"
    CREDIT = "credit"

    @property
    def label(self) -> str:
        """Display label, e.g. ``General``."""
        return self.value.capitalize()
