"""Top users use case."""

from pydantic import BaseModel, Field

from quorum.application.usecase.user.common import UserSummary
from quorum.domain.repository import UserSortOrder
from quorum.domain.service import UserService


class TopUsersRequest(BaseModel):
    """Top users request."""

    limit: int = Field(default=10, ge=1, le=50)


class TopUsersResponse(BaseModel):
    """Top users response."""

    users: list[UserSummary]


class TopUsersUseCase:
    """Use case for the highest-reputation users."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: TopUsersRequest) -> TopUsersResponse:
        users, _ = await self.user_service.list_users(
            None, None, UserSortOrder.REPUTATION, request.limit, 0
        )
        return TopUsersResponse(users=[UserSummary.from_user(u) for u in users])
