"""Authentication routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, Field

from quorum.application.usecase.auth import (
    AuthResponse,
    ChangePasswordRequest,
    ChangePasswordResponse,
    ChangePasswordUseCase,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from quorum.application.usecase.user import UserDetail
from quorum.domain.error import DomainError
from quorum.interface.api.security import bearer_scheme, require_user
from quorum.interface.error import to_http_exception

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    """API request for registering."""

    username: str
    email: str
    password: str = Field(min_length=1)


class LoginAPIRequest(BaseModel):
    """API request for logging in."""

    email: str
    password: str


class UpdateProfileAPIRequest(BaseModel):
    """API request for editing the signed-in user's profile."""

    username: Optional[str] = None
    email: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    avatar: Optional[str] = None


class ChangePasswordAPIRequest(BaseModel):
    """API request for changing password."""

    current_password: str
    new_password: str


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterAPIRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> AuthResponse:
    """Create an account and return a token for it.

    Raises:
        HTTPException: 400 on invalid input, 409 if username or email is taken
    """
    try:
        return await register_use_case.execute(
            RegisterRequest(
                username=request.username,
                email=request.email,
                password=request.password,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginAPIRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> AuthResponse:
    """Exchange email and password for a token.

    Raises:
        HTTPException: 401 if the credentials are wrong
    """
    try:
        return await login_use_case.execute(
            LoginRequest(email=request.email, password=request.password)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get("/me", response_model=UserDetail)
async def get_me(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> UserDetail:
    """Return the signed-in user."""
    return await require_user(credentials, get_current_user_use_case)


@router.put("/profile", response_model=UserDetail)
async def update_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> UserDetail:
    """Edit the signed-in user's profile.

    Raises:
        HTTPException: 401 if not authenticated, 409 if username or email is taken
    """
    user = await require_user(credentials, get_current_user_use_case)
    try:
        return await update_profile_use_case.execute(
            UpdateProfileRequest(
                user_id=user.user_id, **request.model_dump(exclude_none=True)
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.put("/change-password", response_model=ChangePasswordResponse)
async def change_password(
    request: ChangePasswordAPIRequest,
    change_password_use_case: FromDishka[ChangePasswordUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> ChangePasswordResponse:
    """Change the signed-in user's password.

    Raises:
        HTTPException: 401 if not authenticated, 400 if the current password
            is wrong or the new one too short
    """
    user = await require_user(credentials, get_current_user_use_case)
    try:
        return await change_password_use_case.execute(
            ChangePasswordRequest(
                user_id=user.user_id,
                current_password=request.current_password,
                new_password=request.new_password,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)
