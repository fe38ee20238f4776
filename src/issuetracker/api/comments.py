"""Comments API endpoints"""

import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from typing import List
from uuid import UUID

from ..models import User
from ..storage.comment_service import CommentService
from ..storage.issue_service import IssueService
from .deps import get_comment_service, get_current_user, get_issue_service
from .schemas import CommentCreate, CommentResponse, SuccessResponse

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.post("/issues/{issue_id}/comments", response_model=CommentResponse, status_code=201)
def create_comment(
    issue_id: UUID,
    comment_data: CommentCreate,
    current_user: User = Depends(get_current_user),
    comments: CommentService = Depends(get_comment_service),
):
    """Add comment to issue"""

    try:
        comment = comments.create_comment(str(issue_id), current_user.id, comment_data.content)
    except SQLAlchemyError:
        logger.exception("Error creating comment on issue %s", issue_id)
        raise HTTPException(status_code=500, detail="Failed to create comment")

    if comment is None:
        raise HTTPException(status_code=404, detail="Issue not found")

    return comment


@router.get("/issues/{issue_id}/comments", response_model=List[CommentResponse])
def list_comments(
    issue_id: UUID,
    issues: IssueService = Depends(get_issue_service),
    comments: CommentService = Depends(get_comment_service),
):
    """Get all comments for an issue, oldest first"""

    try:
        if not issues.issue_exists(str(issue_id)):
            raise HTTPException(status_code=404, detail="Issue not found")
        return comments.list_comments(str(issue_id))
    except SQLAlchemyError:
        logger.exception("Error fetching comments for issue %s", issue_id)
        raise HTTPException(status_code=500, detail="Failed to fetch comments")


@router.delete("/comments/{comment_id}", response_model=SuccessResponse)
def delete_comment(comment_id: UUID, comments: CommentService = Depends(get_comment_service)):
    """Delete a comment"""

    try:
        deleted = comments.delete_comment(str(comment_id))
    except SQLAlchemyError:
        logger.exception("Error deleting comment %s", comment_id)
        raise HTTPException(status_code=500, detail="Failed to delete comment")

    if not deleted:
        raise HTTPException(status_code=404, detail="Comment not found")

    return SuccessResponse(message="Comment deleted successfully", id=str(comment_id))
