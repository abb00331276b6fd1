"""
Document catalog for the checklist rules.

Each entry maps a document code to its section, status, display name and
reason. Names are ``str.format`` templates; per-borrower entries start with
``{tag}`` and are rendered with the borrower tag, e.g. ``[Jane Doe]``.
"""

from dataclasses import dataclass

from mortgage_checklist.core.enums import DocumentStatus, RecommendationCategory
from mortgage_checklist.models.domain.checklist import CategorizedItem, RecommendationItem

GENERAL = RecommendationCategory.GENERAL
INCOME = RecommendationCategory.INCOME
ASSETS = RecommendationCategory.ASSETS
CREDIT = RecommendationCategory.CREDIT

REQUIRED = DocumentStatus.REQUIRED
CONDITIONAL = DocumentStatus.CONDITIONAL
REVIEW = DocumentStatus.REVIEW
OK = DocumentStatus.OK


@dataclass(frozen=True)
class DocumentTemplate:
    """A catalog entry that renders into a categorized checklist item."""

    category: RecommendationCategory
    status: DocumentStatus
    name: str
    reason: str

    def render(self, **fields) -> CategorizedItem:
        """Fill the name/reason templates and return the categorized item."""
        return CategorizedItem(
            category=self.category,
            item=RecommendationItem(
                name=self.name.format(**fields),
                status=self.status,
                reason=self.reason.format(**fields),
            ),
        )


DOCUMENT_CATALOG: dict[str, DocumentTemplate] = {
    # Transaction
    "PURCHASE_CONTRACT": DocumentTemplate(
        GENERAL, REQUIRED, "Executed purchase contract", "Loan purpose is Purchase."
    ),
    "EARNEST_MONEY_PROOF": DocumentTemplate(
        GENERAL,
        REQUIRED,
        "Earnest money proof (canceled check / statement)",
        "Shows source of EMD.",
    ),
    "GIFT_LETTER": DocumentTemplate(
        GENERAL,
        CONDITIONAL,
        "(Conditional) Gift letter + donor ability evidence",
        "If gift funds are used.",
    ),
    "SUBJECT_MORTGAGE_STATEMENT": DocumentTemplate(
        GENERAL, REQUIRED, "Current mortgage statement (subject property)", "Refinance."
    ),
    "PROMISSORY_NOTE": DocumentTemplate(
        GENERAL, REQUIRED, "Promissory Note (copy)", "Refinance."
    ),
    "SUBJECT_INSURANCE_DEC_PAGE": DocumentTemplate(
        GENERAL,
        REQUIRED,
        "Insurance declaration page (subject)",
        "Verify hazard coverage.",
    ),
    # Identity & history
    "GOVT_ID": DocumentTemplate(
        GENERAL,
        REQUIRED,
        "{tag} Government-issued photo ID",
        "Always required per borrower.",
    ),
    "EMPLOYMENT_HISTORY_GAP": DocumentTemplate(
        GENERAL,
        REQUIRED,
        "{tag} Prior employment history to cover missing {months} months",
        "Must document {threshold} months employment.",
    ),
    "LOE_EMPLOYMENT_GAPS": DocumentTemplate(
        GENERAL,
        REVIEW,
        "{tag} Letter of explanation for any gaps > 30 days",
        "Request if gaps are identified.",
    ),
    "EMPLOYMENT_HISTORY_OK": DocumentTemplate(
        GENERAL,
        OK,
        "{tag} Employment history coverage ({threshold} months)",
        "Sufficient based on employment dates.",
    ),
    "RESIDENCE_HISTORY_GAP": DocumentTemplate(
        GENERAL,
        REQUIRED,
        "{tag} Prior residence addresses to cover missing {months} months",
        "Must provide {threshold} months address history.",
    ),
    "RESIDENCE_HISTORY_OK": DocumentTemplate(
        GENERAL,
        OK,
        "{tag} Residence history coverage ({threshold} months)",
        "Sufficient based on durations.",
    ),
    "GREEN_CARD": DocumentTemplate(
        GENERAL,
        REQUIRED,
        "{tag} I-551 (Permanent Resident/Green Card) – front & back",
        "Non-US citizen (permanent resident).",
    ),
    "EAD_VISA_I94": DocumentTemplate(
        GENERAL,
        REQUIRED,
        "{tag} Valid EAD card (I-766) or visa with work authorization + I-94",
        "Non-permanent resident alien.",
    ),
    # Credit events
    "BANKRUPTCY_DOCS": DocumentTemplate(
        CREDIT,
        REQUIRED,
        "{tag} Bankruptcy documents (petition, schedules, discharge). "
        "If Ch. 13: 12 months trustee payment history",
        "BK indicated on declarations.",
    ),
    "FORECLOSURE_DOCS": DocumentTemplate(
        CREDIT,
        REQUIRED,
        "{tag} Foreclosure / short sale documents + LOE",
        "History of foreclosure/short sale.",
    ),
    "JUDGMENT_PAYOFF": DocumentTemplate(
        CREDIT,
        REQUIRED,
        "{tag} Court payoff / release for outstanding judgments or liens",
        "Outstanding judgments indicated.",
    ),
    "LOE_CREDIT_INQUIRIES": DocumentTemplate(
        CREDIT,
        CONDITIONAL,
        "{tag} Letter of explanation for any recent credit inquiries",
        "Requested for underwriting clarity.",
    ),
    # Income
    "PAYSTUBS_30D": DocumentTemplate(
        INCOME,
        REQUIRED,
        "{tag} 30 days most recent pay stubs",
        "W-2 employment income present.",
    ),
    "W2_LAST_2Y": DocumentTemplate(
        INCOME, REQUIRED, "{tag} W-2s for last 2 years", "Standard for W-2 income."
    ),
    "VOE_VARIABLE_INCOME": DocumentTemplate(
        INCOME,
        REQUIRED,
        "{tag} VOE confirming 2-year history of bonus/OT/commission",
        "Needed to use variable income.",
    ),
    "TAX_RETURNS_1040_2Y": DocumentTemplate(
        INCOME,
        REQUIRED,
        "{tag} 1040 personal tax returns – last 2 years",
        "Self-employment indicated.",
    ),
    "YTD_PNL_BALANCE_SHEET": DocumentTemplate(
        INCOME,
        REQUIRED,
        "{tag} Year-to-date P&L and balance sheet",
        "Support current year performance.",
    ),
    "K1_SCORP_2Y": DocumentTemplate(
        INCOME,
        REQUIRED,
        "{tag} K-1s (S-Corp) – last 2 years",
        "S-Corporation income present.",
    ),
    "TAX_RETURNS_1120S_2Y": DocumentTemplate(
        INCOME,
        REQUIRED,
        "{tag} 1120S business tax returns – last 2 years",
        "S-Corporation ownership.",
    ),
    "K1_PARTNERSHIP_2Y": DocumentTemplate(
        INCOME,
        REQUIRED,
        "{tag} K-1s (Partnership) – last 2 years",
        "Partnership income present.",
    ),
    "TAX_RETURNS_1065_2Y": DocumentTemplate(
        INCOME,
        REQUIRED,
        "{tag} 1065 partnership tax returns – last 2 years",
        "Partnership ownership.",
    ),
    "BUSINESS_BANK_STATEMENTS": DocumentTemplate(
        INCOME,
        CONDITIONAL,
        "{tag} (Conditional) Business bank statements (2-3 months)",
        "If needed to support cash flow/P&L.",
    ),
    "RENTAL_LEASES": DocumentTemplate(
        INCOME,
        CONDITIONAL,
        "{tag} Current lease(s) + 2 months rent receipts",
        "Rental income present.",
    ),
    # Assets
    "ACCOUNT_STATEMENTS_2M": DocumentTemplate(
        ASSETS,
        REQUIRED,
        "{tag} Account statements (2 months) – {asset_type} {masked_account}",
        "Verify funds to close & reserves.",
    ),
    "PROOF_OF_FUNDS": DocumentTemplate(
        ASSETS,
        REQUIRED,
        "Proof of funds for down payment & closing",
        "No assets listed in application.",
    ),
    "ASSET_STATEMENTS_IF_NEEDED": DocumentTemplate(
        ASSETS,
        CONDITIONAL,
        "Asset statements (if cash-to-close required)",
        "Provide if needed.",
    ),
    # Liabilities & REO
    "PAYOFF_STATEMENTS": DocumentTemplate(
        CREDIT,
        REQUIRED,
        "Payoff statements for debts to be paid at closing",
        "Flagged in liabilities.",
    ),
    "REO_MORTGAGE_STATEMENT": DocumentTemplate(
        CREDIT, REQUIRED, "Mortgage/HELOC statement{label}", "REO property identified."
    ),
    "REO_HAZARD_INSURANCE": DocumentTemplate(
        CREDIT, REQUIRED, "Hazard insurance declaration page{label}", "Verify coverage."
    ),
    "REO_PROPERTY_TAX": DocumentTemplate(
        CREDIT,
        CONDITIONAL,
        "Property tax bill{label}",
        "Provide if taxes are not escrowed.",
    ),
    "REO_LEASE_AGREEMENT": DocumentTemplate(
        INCOME, CONDITIONAL, "Lease agreement{label}", "Investment/rental property."
    ),
    "INFERRED_REO_MORTGAGE_STATEMENTS": DocumentTemplate(
        CREDIT,
        REQUIRED,
        "Mortgage/HELOC statement(s) – each REO property",
        "Mortgage/HELOC liabilities present.",
    ),
    "INFERRED_REO_HAZARD_INSURANCE": DocumentTemplate(
        CREDIT,
        REQUIRED,
        "Hazard insurance declaration page – each REO property",
        "Verify coverage on owned properties.",
    ),
    "INFERRED_REO_PROPERTY_TAX": DocumentTemplate(
        CREDIT,
        CONDITIONAL,
        "Property tax bill – each REO property",
        "Provide if taxes not escrowed.",
    ),
    "HELOC_STATEMENTS": DocumentTemplate(
        CREDIT,
        REQUIRED,
        "HELOC statement(s) (most recent)",
        "HELOC liability detected.",
    ),
    # Engine fallback when a rule cannot be evaluated
    "MANUAL_REVIEW": DocumentTemplate(
        GENERAL,
        REVIEW,
        "Manual review: {rule} could not be evaluated",
        "Rule evaluation failed; review the application by hand.",
    ),
}


def get_template(code: str) -> DocumentTemplate:
    """
    Look up a catalog entry.

    Raises:
        KeyError: If the code is not in the catalog
    """
    return DOCUMENT_CATALOG[code]
