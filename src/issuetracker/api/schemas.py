"""Pydantic schemas for API requests and responses"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel
from typing import Optional, List
from datetime import datetime
from uuid import UUID

from ..models import IssueStatus, IssuePriority


class CamelModel(BaseModel):
    """Base schema: snake_case in Python, camelCase on the wire"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


# User / auth schemas
class UserSummary(CamelModel):
    """Creator, assignee or comment author as embedded in other objects"""
    id: str
    name: str


class UserResponse(CamelModel):
    id: str
    name: str
    email: str


class RegisterRequest(CamelModel):
    email: EmailStr = Field(..., description="Login email, unique per user")
    name: str = Field(..., min_length=1, max_length=200, description="Display name")
    password: str = Field(..., min_length=6, max_length=128, description="Plain-text password")


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class TokenResponse(CamelModel):
    token: str
    user: UserResponse


class RegisterResponse(TokenResponse):
    message: str


# Label schemas
class LabelCreate(CamelModel):
    """Schema for creating labels"""
    name: str = Field(..., min_length=1, max_length=100, description="Label name")
    color: str = Field(..., min_length=1, max_length=32, description="Display color, e.g. #ef4444")


class LabelResponse(CamelModel):
    id: str
    name: str
    color: str


# Issue schemas
class IssueCreate(CamelModel):
    """Schema for creating an issue; the creator is the authenticated user"""
    title: str = Field(..., min_length=1, max_length=500, description="Issue title")
    description: str = Field(..., min_length=1, description="Problem statement")
    status: IssueStatus = Field(IssueStatus.TODO, description="Workflow status")
    priority: IssuePriority = Field(IssuePriority.MEDIUM, description="Priority")
    assignee_id: Optional[UUID] = Field(None, description="Assigned user")
    label_ids: List[UUID] = Field(default_factory=list, description="Labels to attach")


class IssueUpdate(CamelModel):
    """Schema for updating an issue.

    Omitted scalars are left unchanged. ``assigneeId`` omitted keeps the
    assignee, ``null`` clears it. ``labelIds`` replaces the whole label set,
    omitting it clears all labels.
    """
    title: Optional[str] = Field(None, min_length=1, max_length=500)
    description: Optional[str] = Field(None, min_length=1)
    status: Optional[IssueStatus] = None
    priority: Optional[IssuePriority] = None
    assignee_id: Optional[UUID] = None
    label_ids: Optional[List[UUID]] = None


class IssueResponse(CamelModel):
    """Schema for issue responses"""
    id: str
    title: str
    description: str
    status: IssueStatus
    priority: IssuePriority
    creator: UserSummary
    assignee: Optional[UserSummary] = None
    labels: List[LabelResponse]
    created_at: datetime
    updated_at: datetime


class PaginationMeta(CamelModel):
    page: int
    limit: int
    total_issues: int
    total_pages: int


class IssueListResponse(CamelModel):
    """Schema for issue list responses"""
    data: List[IssueResponse]
    meta: PaginationMeta


# Comment schemas
class CommentCreate(CamelModel):
    """Schema for creating comments"""
    content: str = Field(..., min_length=1, description="Comment text")


class CommentResponse(CamelModel):
    id: str
    issue_id: str
    content: str
    author: Optional[UserSummary] = None
    created_at: datetime


# Common response schemas
class SuccessResponse(CamelModel):
    """Schema for success responses"""
    message: str
    id: Optional[str] = None


class ErrorResponse(CamelModel):
    """Schema for error responses"""
    message: str
