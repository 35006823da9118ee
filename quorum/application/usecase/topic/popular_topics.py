"""Popular topics use case."""

from pydantic import BaseModel, Field

from quorum.application.usecase.topic.common import TopicInfo
from quorum.domain.repository import TopicSortOrder
from quorum.domain.service import TopicService


class PopularTopicsRequest(BaseModel):
    """Popular topics request."""

    limit: int = Field(default=10, ge=1, le=50)


class PopularTopicsResponse(BaseModel):
    """Popular topics response."""

    topics: list[TopicInfo]


class PopularTopicsUseCase:
    """Use case for the topics with the most questions and followers."""

    def __init__(self, topic_service: TopicService) -> None:
        self.topic_service = topic_service

    async def execute(self, request: PopularTopicsRequest) -> PopularTopicsResponse:
        """Execute popular topics flow."""
        topics, _ = await self.topic_service.list_topics(
            None, TopicSortOrder.POPULAR, request.limit, 0
        )
        return PopularTopicsResponse(topics=[TopicInfo.from_topic(t) for t in topics])
