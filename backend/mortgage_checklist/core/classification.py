"""Normalization of free-text form values into core enums.

The intake form stores loan purpose, citizenship, employment status, income type
and liability type as free text. These helpers map that text onto the enums in
``mortgage_checklist.core.enums`` once, at the input boundary, so the rule engine
only ever compares enum members.

Values that match no known tag fall into an ``UNCLASSIFIED``/``OTHER``/``UNSET``
bucket and are logged so they can be added to the patterns below.
"""

import logging
import re
from typing import Optional

from mortgage_checklist.core.enums import (
    CitizenshipType,
    EmploymentStatus,
    IncomeType,
    LiabilityType,
    LoanPurpose,
)

logger = logging.getLogger(__name__)

# Every matching pattern contributes a tag, so "S-Corp rental" is both S_CORP and RENTAL.
_INCOME_PATTERNS: list[tuple[re.Pattern, IncomeType]] = [
    (re.compile(r"s-?corp|s\s*corporation", re.IGNORECASE), IncomeType.S_CORP),
    (re.compile(r"partnership", re.IGNORECASE), IncomeType.PARTNERSHIP),
    (re.compile(r"rental", re.IGNORECASE), IncomeType.RENTAL),
    (re.compile(r"bonus", re.IGNORECASE), IncomeType.BONUS),
    (re.compile(r"overtime", re.IGNORECASE), IncomeType.OVERTIME),
    (re.compile(r"commission", re.IGNORECASE), IncomeType.COMMISSION),
    (re.compile(r"self[\s-]*employ", re.IGNORECASE), IncomeType.SELF_EMPLOYMENT),
    (re.compile(r"social\s*security", re.IGNORECASE), IncomeType.SOCIAL_SECURITY),
    (re.compile(r"pension|retirement", re.IGNORECASE), IncomeType.PENSION),
    (re.compile(r"disability", re.IGNORECASE), IncomeType.DISABILITY),
    (re.compile(r"child\s*support", re.IGNORECASE), IncomeType.CHILD_SUPPORT),
    (re.compile(r"alimony", re.IGNORECASE), IncomeType.ALIMONY),
    (re.compile(r"unemploy", re.IGNORECASE), IncomeType.UNEMPLOYMENT),
    (re.compile(r"invest|dividend|interest", re.IGNORECASE), IncomeType.INVESTMENT),
    (
        re.compile(r"base|salary|wage|(?<!self)(?<!self-)(?<!self )(?<!un)employment", re.IGNORECASE),
        IncomeType.BASE,
    ),
    (re.compile(r"^other$", re.IGNORECASE), IncomeType.OTHER),
]

_LIABILITY_PATTERNS: list[tuple[re.Pattern, LiabilityType]] = [
    (re.compile(r"heloc", re.IGNORECASE), LiabilityType.HELOC),
    (re.compile(r"mortgage", re.IGNORECASE), LiabilityType.MORTGAGE),
    (re.compile(r"revolving|credit\s*card", re.IGNORECASE), LiabilityType.REVOLVING),
    (re.compile(r"installment|auto|student|personal\s*loan", re.IGNORECASE), LiabilityType.INSTALLMENT),
    (re.compile(r"lease", re.IGNORECASE), LiabilityType.LEASE),
    (re.compile(r"^other$", re.IGNORECASE), LiabilityType.OTHER),
]

_CITIZEN_PATTERN = re.compile(r"citizen|\bu\.?s\.?(?![a-z])", re.IGNORECASE)
_NON_CITIZEN_PATTERN = re.compile(r"non[\s-]*(u\.?s\.?|citizen)", re.IGNORECASE)
_NON_PERMANENT_PATTERN = re.compile(r"non[\s-]*(permanent|resident)", re.IGNORECASE)
_PERMANENT_PATTERN = re.compile(r"permanent|resident", re.IGNORECASE)


def _squash(value: Optional[str]) -> str:
    return "".join(ch.lower() for ch in (value or "") if ch.isalnum())


def classify_income_types(raw: Optional[str]) -> frozenset[IncomeType]:
    """
    Map a free-text income type onto every ``IncomeType`` tag it mentions.

    Text matching nothing is ``{UNCLASSIFIED}``.
    """
    text = (raw or "").strip()
    if not text:
        return frozenset({IncomeType.UNCLASSIFIED})

    income_types = frozenset(
        income_type for pattern, income_type in _INCOME_PATTERNS if pattern.search(text)
    )
    if income_types:
        return income_types

    logger.warning(f"Unclassified income type: {text!r}")
    return frozenset({IncomeType.UNCLASSIFIED})


def classify_liability_type(raw: Optional[str]) -> LiabilityType:
    """Map a free-text liability type onto a ``LiabilityType`` tag."""
    text = (raw or "").strip()
    if not text:
        return LiabilityType.UNCLASSIFIED

    for pattern, liability_type in _LIABILITY_PATTERNS:
        if pattern.search(text):
            return liability_type

    logger.warning(f"Unclassified liability type: {text!r}")
    return LiabilityType.UNCLASSIFIED


def classify_citizenship(raw: Optional[str]) -> CitizenshipType:
    """
    Map a free-text citizenship value onto a ``CitizenshipType``.

    Negated forms ("NonPermanentResidentAlien", "Non-US Citizen") are checked
    first, since they also contain the positive keywords.
    """
    text = (raw or "").strip()
    if not text:
        return CitizenshipType.UNSET
    if _NON_PERMANENT_PATTERN.search(text):
        return CitizenshipType.NON_PERMANENT_RESIDENT
    if _NON_CITIZEN_PATTERN.search(text):
        return CitizenshipType.OTHER
    if _CITIZEN_PATTERN.search(text):
        return CitizenshipType.US_CITIZEN
    if _PERMANENT_PATTERN.search(text):
        return CitizenshipType.PERMANENT_RESIDENT
    return CitizenshipType.OTHER


def classify_loan_purpose(raw: Optional[str]) -> LoanPurpose:
    """Map a free-text loan purpose onto a ``LoanPurpose``."""
    key = _squash(raw)
    if not key:
        return LoanPurpose.UNSET
    if key == "purchase":
        return LoanPurpose.PURCHASE
    if key in ("cashout", "cashoutrefinance", "cashoutrefi"):
        return LoanPurpose.CASH_OUT
    if key in ("refinance", "refi", "ratetermrefi", "ratetermrefinance"):
        return LoanPurpose.REFINANCE

    logger.warning(f"Unrecognized loan purpose: {raw!r}")
    return LoanPurpose.UNSET


def classify_employment_status(raw: Optional[str]) -> EmploymentStatus:
    """Map a free-text employment status onto an ``EmploymentStatus``."""
    key = _squash(raw)
    if key in ("present", "current"):
        return EmploymentStatus.PRESENT
    if key in ("prior", "previous", "former"):
        return EmploymentStatus.PRIOR
    return EmploymentStatus.UNSET
