"""Change password use case."""

from uuid import UUID

from pydantic import BaseModel

from quorum.domain.service import AuthService, UserService
from quorum.domain.value import UserId


class ChangePasswordRequest(BaseModel):
    """Change password request."""

    user_id: str  # From authenticated user
    current_password: str
    new_password: str


class ChangePasswordResponse(BaseModel):
    """Change password response."""

    message: str = "Password changed successfully"


class ChangePasswordUseCase:
    """Use case for changing the signed-in user's password."""

    def __init__(self, auth_service: AuthService, user_service: UserService) -> None:
        self.auth_service = auth_service
        self.user_service = user_service

    async def execute(self, request: ChangePasswordRequest) -> ChangePasswordResponse:
        """Execute change password flow.

        Raises:
            ValidationError: If the current password is wrong or the new one
                is too short
        """
        user = await self.user_service.get_active_user_by_id(
            UserId(UUID(request.user_id))
        )
        await self.auth_service.change_password(
            user, request.current_password, request.new_password
        )
        return ChangePasswordResponse()
