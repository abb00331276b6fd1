"""Rule engine for deriving a document checklist from a loan application."""

from .base import ApplicationFlags, EvaluationContext, EvaluationStage, RuleEvaluator
from .coverage import compute_coverage_stats
from .duration import DurationCalculator, months_between, parse_date
from .engine import RecommendationEngine
from .policy import ChecklistPolicy

__all__ = [
    "ApplicationFlags",
    "ChecklistPolicy",
    "DurationCalculator",
    "EvaluationContext",
    "EvaluationStage",
    "RecommendationEngine",
    "RuleEvaluator",
    "compute_coverage_stats",
    "months_between",
    "parse_date",
]
