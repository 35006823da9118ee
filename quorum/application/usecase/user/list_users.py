"""List users use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from quorum.application.usecase.common import PageRequest, Pagination
from quorum.application.usecase.user.common import UserSummary
from quorum.domain.repository import UserSortOrder
from quorum.domain.service import UserService
from quorum.domain.value import UserRole


class ListUsersRequest(PageRequest):
    """List users request."""

    limit: int = Field(default=20, ge=1, le=100)
    search: Optional[str] = None  # Matches usernames
    role: Optional[UserRole] = None
    sort_by: UserSortOrder = UserSortOrder.REPUTATION


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[UserSummary]
    pagination: Pagination


class ListUsersUseCase:
    """Use case for the user directory."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize list users use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        """Execute list users flow."""
        with logfire.span("list_users.execute", sort=request.sort_by.value):
            search = request.search.strip() if request.search else None
            users, total = await self.user_service.list_users(
                search or None,
                request.role,
                request.sort_by,
                request.limit,
                request.offset,
            )
            return ListUsersResponse(
                users=[UserSummary.from_user(u) for u in users],
                pagination=Pagination.build(request, total),
            )
