"""Asset statement rules."""

from mortgage_checklist.core.enums import LoanPurpose
from mortgage_checklist.models.domain.checklist import CategorizedItem
from mortgage_checklist.services.rule_engine.base import (
    EvaluationContext,
    EvaluationStage,
    RuleEvaluator,
)


class AssetEvaluator(RuleEvaluator):
    """
    Evaluator for funds-to-close documentation.

    One statement item per listed asset, tagged with its owner and masked
    account number. Without assets, purchases need proof of funds and other
    transactions get a conditional request.
    """

    title = "Asset documents"
    stage = EvaluationStage.APPLICATION

    def evaluate(self, context: EvaluationContext) -> list[CategorizedItem]:
        application = context.application
        digits = context.policy.account_mask_digits

        items = [
            self._emit(
                "ACCOUNT_STATEMENTS_2M",
                tag=borrower.tag,
                asset_type=asset.asset_type or "Asset",
                masked_account=asset.masked_account(digits),
            )
            for borrower in application.borrowers
            for asset in borrower.assets
        ]
        if items:
            return items

        if application.loan_purpose == LoanPurpose.PURCHASE:
            return [self._emit("PROOF_OF_FUNDS")]

        return [self._emit("ASSET_STATEMENTS_IF_NEEDED")]
