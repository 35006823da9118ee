"""Followers and following listings."""

from enum import Enum

from pydantic import BaseModel

from quorum.application.usecase.user.common import UserSummary
from quorum.domain.service import UserService
from quorum.domain.value import Username


class FollowDirection(str, Enum):
    """Which side of the follow graph to list."""

    FOLLOWERS = "followers"
    FOLLOWING = "following"


class ListFollowsRequest(BaseModel):
    """List follows request."""

    username: str
    direction: FollowDirection


class ListFollowsResponse(BaseModel):
    """List follows response."""

    users: list[UserSummary]


class ListFollowsUseCase:
    """Use case for listing a user's followers or followed users."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ListFollowsRequest) -> ListFollowsResponse:
        """Execute list follows flow.

        Deactivated accounts are left out.

        Raises:
            NotFoundError: If no active user has that username
        """
        user = await self.user_service.get_active_user(Username(request.username))
        if request.direction == FollowDirection.FOLLOWERS:
            ids = user.follower_ids
        else:
            ids = user.following_ids
        users = await self.user_service.get_users_by_ids(ids)
        return ListFollowsResponse(users=[UserSummary.from_user(u) for u in users])
