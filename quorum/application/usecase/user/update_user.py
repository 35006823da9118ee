"""Update user use case (self or admin)."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from quorum.application.usecase.user.common import UserDetail
from quorum.domain.error import NotAuthorizedError
from quorum.domain.service import UserService
from quorum.domain.value import Email, UserId, Username, UserRole

ADMIN_ONLY_FIELDS = frozenset({"role", "reputation", "is_active"})


class UpdateUserRequest(BaseModel):
    """Update user request. Fields left as None are kept."""

    username: str  # Target user
    user_id: str  # From authenticated user
    new_username: Optional[Username] = None
    email: Optional[Email] = None
    bio: Optional[str] = Field(default=None, max_length=500)
    location: Optional[str] = Field(default=None, max_length=100)
    website: Optional[str] = Field(default=None, max_length=200)
    avatar: Optional[str] = None
    role: Optional[UserRole] = None
    reputation: Optional[int] = None
    is_active: Optional[bool] = None


class UpdateUserUseCase:
    """Use case for editing a user account.

    Users may edit their own profile fields. Admins may edit anyone and
    additionally change role, reputation and active status.
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUserRequest) -> UserDetail:
        """Execute update user flow.

        Raises:
            NotFoundError: If the target or acting user does not exist
            NotAuthorizedError: If the actor is neither the user nor an admin,
                or a non-admin passes an admin-only field
            AlreadyExistsError: If the new username or email is taken
        """
        with logfire.span(
            "update_user.execute", username=request.username, actor_id=request.user_id
        ):
            actor = await self.user_service.get_active_user_by_id(
                UserId(UUID(request.user_id))
            )
            target = await self.user_service.get_active_user(
                Username(request.username)
            )
            if actor.id != target.id and not actor.is_admin:
                raise NotAuthorizedError(
                    "update", "User", str(target.id), str(actor.id)
                )

            fields = {
                name: value
                for name, value in request
                if name not in ("username", "user_id") and value is not None
            }
            if "new_username" in fields:
                fields["username"] = fields.pop("new_username")
            if not actor.is_admin and ADMIN_ONLY_FIELDS & fields.keys():
                raise NotAuthorizedError(
                    "change role or status of", "User", str(target.id), str(actor.id)
                )

            updated = await self.user_service.update_profile(target, fields)
            return UserDetail.from_user(updated, include_email=actor.id == target.id)
