"""Registration and login endpoints"""

import logging
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError

from ..config import Config
from ..exceptions import AuthenticationError, DuplicateError
from ..security import create_access_token
from ..storage.user_service import UserService
from .deps import get_config, get_user_service
from .schemas import LoginRequest, RegisterRequest, RegisterResponse, TokenResponse, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/register", response_model=RegisterResponse, status_code=201)
def register(
    body: RegisterRequest,
    users: UserService = Depends(get_user_service),
    config: Config = Depends(get_config),
):
    """Create a user and return an access token for it"""

    try:
        user = users.register_user(email=body.email, name=body.name, password=body.password)
    except DuplicateError as e:
        raise HTTPException(status_code=409, detail=e.message)
    except SQLAlchemyError:
        logger.exception("Register error")
        raise HTTPException(status_code=500, detail="Registration failed")

    return RegisterResponse(
        message="User registered successfully",
        token=create_access_token(user.id, user.email, config),
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=TokenResponse)
def login(
    body: LoginRequest,
    users: UserService = Depends(get_user_service),
    config: Config = Depends(get_config),
):
    """Exchange email and password for an access token"""

    try:
        user = users.authenticate(body.email, body.password)
    except AuthenticationError:
        raise HTTPException(status_code=401, detail="Invalid email or password")
    except SQLAlchemyError:
        logger.exception("Login error")
        raise HTTPException(status_code=500, detail="Login failed")

    return TokenResponse(
        token=create_access_token(user.id, user.email, config),
        user=UserResponse.model_validate(user),
    )
