"""Labels API endpoints"""

import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from typing import List
from uuid import UUID

from ..exceptions import DuplicateError
from ..storage.label_service import LabelService
from .deps import get_current_user, get_label_service
from .schemas import LabelCreate, LabelResponse, SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[LabelResponse])
def list_labels(labels: LabelService = Depends(get_label_service)):
    """List all labels ordered by name"""

    try:
        return labels.list_labels()
    except SQLAlchemyError:
        logger.exception("Error fetching labels")
        raise HTTPException(status_code=500, detail="Failed to fetch labels")


@router.post("", response_model=LabelResponse, status_code=201)
def create_label(label_data: LabelCreate, labels: LabelService = Depends(get_label_service)):
    """Create a new label with a unique name"""

    try:
        return labels.create_label(name=label_data.name, color=label_data.color)
    except DuplicateError as e:
        raise HTTPException(status_code=409, detail=e.message)
    except SQLAlchemyError:
        logger.exception("Error creating label")
        raise HTTPException(status_code=500, detail="Failed to create label")


@router.delete("/{label_id}", response_model=SuccessResponse)
def delete_label(label_id: UUID, labels: LabelService = Depends(get_label_service)):
    """Delete a label and detach it from every issue"""

    try:
        deleted = labels.delete_label(str(label_id))
    except SQLAlchemyError:
        logger.exception("Error deleting label %s", label_id)
        raise HTTPException(status_code=500, detail="Failed to delete label")

    if not deleted:
        raise HTTPException(status_code=404, detail="Label not found")

    return SuccessResponse(message="Label deleted successfully", id=str(label_id))
