"""Bearer token authentication for routes."""

from typing import Optional

from fastapi import HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from quorum.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
)
from quorum.application.usecase.user import UserDetail
from quorum.util.jwt import JWTError

bearer_scheme = HTTPBearer(auto_error=False)


async def require_user(
    credentials: Optional[HTTPAuthorizationCredentials],
    get_current_user_use_case: GetCurrentUserUseCase,
) -> UserDetail:
    """Resolve the bearer token to the signed-in user.

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authorized, no token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=credentials.credentials)
        )
    except JWTError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": "Bearer"},
        )


async def optional_user(
    credentials: Optional[HTTPAuthorizationCredentials],
    get_current_user_use_case: GetCurrentUserUseCase,
) -> Optional[UserDetail]:
    """Resolve the bearer token if one is present and valid.

    Anonymous requests and bad tokens both yield None.
    """
    if credentials is None:
        return None
    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=credentials.credentials)
        )
    except JWTError:
        return None
