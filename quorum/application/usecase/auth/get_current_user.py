"""Get current user use case."""

from uuid import UUID

from pydantic import BaseModel

from quorum.application.usecase.user.common import UserDetail
from quorum.domain.service import JWTService, UserService
from quorum.domain.value import UserId
from quorum.util.jwt import JWTError


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserUseCase:
    """Use case for resolving a bearer token to the signed-in user."""

    def __init__(self, jwt_service: JWTService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            user_service: User domain service
        """
        self.jwt_service = jwt_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserDetail:
        """Execute get current user flow.

        Steps:
        1. Verify JWT token via JWT service
        2. Load the user named by the token's subject
        3. Reject accounts that no longer exist or were deactivated

        Args:
            request: Request with JWT token

        Returns:
            The signed-in user's profile, email included

        Raises:
            JWTError: If the token is invalid or expired, or its user is
                gone or deactivated
        """
        payload = self.jwt_service.verify_token(request.token)

        try:
            user_id = UserId(UUID(payload.sub))
        except ValueError:
            raise JWTError("Invalid token subject")

        user = await self.user_service.get_user_by_id(user_id)
        if not user or not user.is_active:
            raise JWTError("User not found or deactivated")

        return UserDetail.from_user(user, include_email=True)
