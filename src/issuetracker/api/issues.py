"""Issues API endpoints"""

import logging
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from typing import Optional
from uuid import UUID

from ..exceptions import InvalidQueryError, InvalidReferenceError
from ..models import IssuePriority, IssueStatus, User
from ..storage.issue_query import IssueQuery
from ..storage.issue_service import UNCHANGED, IssueService
from .deps import get_current_user, get_issue_service
from .schemas import (
    IssueCreate,
    IssueUpdate,
    IssueResponse,
    IssueListResponse,
    SuccessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_user)])


def _str_or_none(value: Optional[UUID]) -> Optional[str]:
    return str(value) if value is not None else None


@router.get("", response_model=IssueListResponse)
def list_issues(
    page: int = Query(1, description="Page number, starting at 1"),
    limit: int = Query(10, description="Page size, 1 to 100"),
    search: Optional[str] = Query(None, description="Case-insensitive search in title"),
    status: Optional[IssueStatus] = Query(None, description="Filter by status"),
    priority: Optional[IssuePriority] = Query(None, description="Filter by priority"),
    assignee_id: Optional[UUID] = Query(None, alias="assigneeId", description="Filter by assignee"),
    label_id: Optional[UUID] = Query(None, alias="labelId", description="Only issues carrying this label"),
    sort_field: Optional[str] = Query(None, alias="sortField", description="updatedAt, priority or status"),
    sort_direction: Optional[str] = Query(None, alias="sortDirection", description="asc or desc"),
    issues: IssueService = Depends(get_issue_service),
):
    """List issues with filtering, sorting and pagination"""

    try:
        query = IssueQuery(
            page=page,
            limit=limit,
            search=search,
            status=status,
            priority=priority,
            assignee_id=_str_or_none(assignee_id),
            label_id=_str_or_none(label_id),
            sort_field=sort_field,
            sort_direction=sort_direction,
        )
    except InvalidQueryError as e:
        raise HTTPException(status_code=400, detail=e.message)

    try:
        return issues.list_issues(query)
    except SQLAlchemyError:
        logger.exception("Error fetching issues")
        raise HTTPException(status_code=500, detail="Failed to fetch issues")


@router.post("", response_model=SuccessResponse, status_code=201)
def create_issue(
    issue_data: IssueCreate,
    current_user: User = Depends(get_current_user),
    issues: IssueService = Depends(get_issue_service),
):
    """Create a new issue"""

    try:
        issue_id = issues.create_issue(
            title=issue_data.title,
            description=issue_data.description,
            status=issue_data.status,
            priority=issue_data.priority,
            assignee_id=_str_or_none(issue_data.assignee_id),
            label_ids=[str(label_id) for label_id in issue_data.label_ids],
            created_by=current_user.id,
        )
    except InvalidReferenceError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except SQLAlchemyError:
        logger.exception("Error creating issue")
        raise HTTPException(status_code=500, detail="Failed to create issue")

    return SuccessResponse(message="Issue created successfully", id=issue_id)


@router.get("/{issue_id}", response_model=IssueResponse)
def get_issue(issue_id: UUID, issues: IssueService = Depends(get_issue_service)):
    """Get issue by ID"""

    try:
        issue = issues.get_issue(str(issue_id))
    except SQLAlchemyError:
        logger.exception("Error fetching issue %s", issue_id)
        raise HTTPException(status_code=500, detail="Failed to fetch issue")

    if not issue:
        raise HTTPException(status_code=404, detail="Issue not found")

    return issue


@router.put("/{issue_id}", response_model=SuccessResponse)
def update_issue(
    issue_id: UUID,
    issue_data: IssueUpdate,
    issues: IssueService = Depends(get_issue_service),
):
    """Update issue"""

    issue_id = str(issue_id)

    try:
        # Omitted assigneeId keeps the current assignee; explicit null clears it
        if "assignee_id" in issue_data.model_fields_set:
            assignee_id = _str_or_none(issue_data.assignee_id)
        else:
            assignee_id = UNCHANGED

        updated = issues.update_issue(
            issue_id,
            assignee_id=assignee_id,
            title=issue_data.title,
            description=issue_data.description,
            status=issue_data.status,
            priority=issue_data.priority,
            label_ids=[str(label_id) for label_id in issue_data.label_ids or []],
        )
    except InvalidReferenceError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except SQLAlchemyError:
        logger.exception("Error updating issue %s", issue_id)
        raise HTTPException(status_code=500, detail="Failed to update issue")

    if not updated:
        raise HTTPException(status_code=404, detail="Issue not found")

    return SuccessResponse(message="Issue updated successfully", id=issue_id)


@router.delete("/{issue_id}", response_model=SuccessResponse)
def delete_issue(issue_id: UUID, issues: IssueService = Depends(get_issue_service)):
    """Delete issue together with its comments and label links"""

    issue_id = str(issue_id)

    try:
        deleted = issues.delete_issue(issue_id)
    except SQLAlchemyError:
        logger.exception("Error deleting issue %s", issue_id)
        raise HTTPException(status_code=500, detail="Failed to delete issue")

    if not deleted:
        raise HTTPException(status_code=404, detail="Issue not found")

    return SuccessResponse(message="Issue deleted successfully", id=issue_id)
