"""Follow user use case."""

from uuid import UUID

from pydantic import BaseModel

from quorum.domain.service import UserService
from quorum.domain.value import UserId, Username


class FollowUserRequest(BaseModel):
    """Follow user request."""

    username: str  # User to follow or unfollow
    user_id: str  # From authenticated user


class FollowUserResponse(BaseModel):
    """Follow user response."""

    is_following: bool
    follower_count: int


class FollowUserUseCase:
    """Use case for toggling whether one user follows another."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: FollowUserRequest) -> FollowUserResponse:
        """Execute follow toggle flow.

        Raises:
            NotFoundError: If either user does not exist
            BusinessRuleViolationError: If a user tries to follow themselves
        """
        follower = await self.user_service.get_active_user_by_id(
            UserId(UUID(request.user_id))
        )
        target = await self.user_service.get_active_user(Username(request.username))
        target, is_following = await self.user_service.toggle_follow(follower, target)
        return FollowUserResponse(
            is_following=is_following, follower_count=len(target.follower_ids)
        )
