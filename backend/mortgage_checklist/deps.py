"""Dependency injection for FastAPI endpoints."""

from mortgage_checklist.services.checklist_service import ChecklistService

__all__ = ["get_checklist_service"]


def get_checklist_service() -> ChecklistService:
    """
    Get checklist service dependency.

    Built per request so each evaluation reads the clock afresh.
    """
    return ChecklistService()
