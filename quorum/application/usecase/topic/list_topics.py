"""List topics use case."""

from typing import Optional

import logfire
from pydantic import BaseModel, Field

from quorum.application.usecase.common import PageRequest, Pagination
from quorum.application.usecase.topic.common import TopicInfo
from quorum.domain.repository import TopicSortOrder
from quorum.domain.service import TopicService


class ListTopicsRequest(PageRequest):
    """List topics request."""

    limit: int = Field(default=20, ge=1, le=100)
    search: Optional[str] = None
    sort_by: TopicSortOrder = TopicSortOrder.POPULAR


class ListTopicsResponse(BaseModel):
    """List topics response."""

    topics: list[TopicInfo]
    pagination: Pagination


class ListTopicsUseCase:
    """Use case for listing active topics."""

    def __init__(self, topic_service: TopicService) -> None:
        """Initialize list topics use case.

        Args:
            topic_service: Topic domain service
        """
        self.topic_service = topic_service

    async def execute(self, request: ListTopicsRequest) -> ListTopicsResponse:
        """Execute list topics flow."""
        with logfire.span("list_topics.execute", sort=request.sort_by.value):
            search = request.search.strip() if request.search else None
            topics, total = await self.topic_service.list_topics(
                search or None, request.sort_by, request.limit, request.offset
            )
            return ListTopicsResponse(
                topics=[TopicInfo.from_topic(t) for t in topics],
                pagination=Pagination.build(request, total),
            )
