"""Delete user use case."""

from uuid import UUID

from pydantic import BaseModel

from quorum.domain.service import UserService
from quorum.domain.value import UserId, Username


class DeleteUserRequest(BaseModel):
    """Delete user request."""

    username: str  # Target user
    user_id: str  # From authenticated user


class DeleteUserResponse(BaseModel):
    """Delete user response."""

    message: str = "User deleted successfully"


class DeleteUserUseCase:
    """Use case for soft-deleting an account (self or admin)."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: DeleteUserRequest) -> DeleteUserResponse:
        """Execute delete user flow.

        Raises:
            NotFoundError: If the target user does not exist
            NotAuthorizedError: If the actor is neither the user nor an admin
            BusinessRuleViolationError: If an admin deletes their own account
        """
        actor = await self.user_service.get_active_user_by_id(
            UserId(UUID(request.user_id))
        )
        target = await self.user_service.get_active_user(Username(request.username))
        await self.user_service.deactivate_user(target, actor)
        return DeleteUserResponse()
