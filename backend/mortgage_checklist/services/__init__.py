"""Service layer for business logic."""

from mortgage_checklist.services.checklist_service import ChecklistService

__all__ = ["ChecklistService"]
