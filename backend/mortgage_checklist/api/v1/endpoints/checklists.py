"""Checklist endpoints for generating and exporting document checklists."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, HTTPException, Response, status

from mortgage_checklist.deps import get_checklist_service
from mortgage_checklist.models.schemas.checklist import ChecklistResponse
from mortgage_checklist.services.checklist_service import ChecklistService

logger = logging.getLogger(__name__)

router = APIRouter()

ApplicationBody = Annotated[
    Any,
    Body(description="Loan application snapshot in the intake form's camelCase shape"),
]


@router.post(
    "",
    response_model=ChecklistResponse,
    summary="Generate a document checklist",
    description="Derive the categorized document checklist and coverage stats for an application",
)
async def generate_checklist(
    payload: ApplicationBody,
    service: Annotated[ChecklistService, Depends(get_checklist_service)],
) -> ChecklistResponse:
    """
    Generate the document checklist for a loan application.

    Missing or malformed fields are treated as absent, so a partially filled
    application still yields a checklist (asking for more documents, not fewer).
    """
    try:
        result = service.generate(payload)
        return ChecklistResponse.from_result(result)
    except ValueError as e:
        logger.error(f"Validation error generating checklist: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.error(f"Error generating checklist: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate checklist",
        )


@router.post(
    "/export",
    response_class=Response,
    summary="Export a document checklist as CSV",
    description="Generate the checklist for an application and download it as CSV",
)
async def export_checklist(
    payload: ApplicationBody,
    service: Annotated[ChecklistService, Depends(get_checklist_service)],
) -> Response:
    """
    Export the document checklist as a CSV attachment.

    Columns are Section, Item, Status and Reason, one row per checklist item.
    """
    try:
        filename, content = service.export_csv(payload)
    except ValueError as e:
        logger.error(f"Validation error exporting checklist: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except Exception as e:
        logger.error(f"Error exporting checklist: {str(e)}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to export checklist",
        )

    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
