"""Users API endpoints"""

from fastapi import APIRouter, Depends
from typing import List

from ..storage.user_service import UserService
from .deps import get_current_user, get_user_service
from .schemas import UserResponse

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[UserResponse])
def list_users(users: UserService = Depends(get_user_service)):
    """List all users (for assignee selection)"""
    return users.list_users()
