"""Update own profile use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from quorum.application.usecase.user.common import UserDetail
from quorum.domain.service import UserService
from quorum.domain.value import Email, UserId, Username


class UpdateProfileRequest(BaseModel):
    """Update profile request. Fields left as None are kept."""

    user_id: str  # From authenticated user
    username: Optional[Username] = None
    email: Optional[Email] = None
    bio: Optional[str] = Field(default=None, max_length=500)
    location: Optional[str] = Field(default=None, max_length=100)
    website: Optional[str] = Field(default=None, max_length=200)
    avatar: Optional[str] = None


class UpdateProfileUseCase:
    """Use case for a user editing their own profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateProfileRequest) -> UserDetail:
        """Execute update profile flow.

        Raises:
            NotFoundError: If the user does not exist
            AlreadyExistsError: If the new username or email is taken
        """
        with logfire.span("update_profile.execute", user_id=request.user_id):
            user = await self.user_service.get_active_user_by_id(
                UserId(UUID(request.user_id))
            )
            fields = {
                name: value
                for name, value in request
                if name != "user_id" and value is not None
            }
            updated = await self.user_service.update_profile(user, fields)
            return UserDetail.from_user(updated, include_email=True)
