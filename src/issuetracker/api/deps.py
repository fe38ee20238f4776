"""FastAPI dependencies: shared resources, services and the current user"""

from typing import Optional

from fastapi import Depends, Header, HTTPException, Request

from ..config import Config
from ..exceptions import AuthenticationError
from ..models import User
from ..security import decode_access_token
from ..storage.comment_service import CommentService
from ..storage.database import Database
from ..storage.issue_service import IssueService
from ..storage.label_service import LabelService
from ..storage.user_service import UserService


def get_config(request: Request) -> Config:
    return request.app.state.config


def get_database(request: Request) -> Database:
    return request.app.state.db


def get_issue_service(db: Database = Depends(get_database)) -> IssueService:
    return IssueService(db)


def get_label_service(db: Database = Depends(get_database)) -> LabelService:
    return LabelService(db)


def get_comment_service(db: Database = Depends(get_database)) -> CommentService:
    return CommentService(db)


def get_user_service(db: Database = Depends(get_database)) -> UserService:
    return UserService(db)


def _unauthorized(message: str) -> HTTPException:
    return HTTPException(
        status_code=401,
        detail=message,
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(
    authorization: Optional[str] = Header(None),
    config: Config = Depends(get_config),
    users: UserService = Depends(get_user_service),
) -> User:
    """Resolve ``Authorization: Bearer <token>`` to a stored user"""
    if not authorization:
        raise _unauthorized("Authorization header missing")

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0] != "Bearer":
        raise _unauthorized("Invalid authorization format")

    try:
        payload = decode_access_token(parts[1], config)
    except AuthenticationError as e:
        raise _unauthorized(e.message)

    user = users.get_user(payload["sub"])
    if user is None:
        raise _unauthorized("Invalid or expired token")
    return user
