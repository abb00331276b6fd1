"""Rule evaluators for the sections of the document checklist."""

from .asset_evaluator import AssetEvaluator
from .coverage_evaluator import HistoryCoverageEvaluator
from .credit_evaluator import CreditHistoryEvaluator
from .identity_evaluator import CitizenshipEvaluator, IdentityEvaluator
from .income_evaluator import IncomeEvaluator
from .liability_evaluator import LiabilityEvaluator
from .reo_evaluator import REOEvaluator
from .transaction_evaluator import TransactionEvaluator

__all__ = [
    "AssetEvaluator",
    "CitizenshipEvaluator",
    "CreditHistoryEvaluator",
    "HistoryCoverageEvaluator",
    "IdentityEvaluator",
    "IncomeEvaluator",
    "LiabilityEvaluator",
    "REOEvaluator",
    "TransactionEvaluator",
]
