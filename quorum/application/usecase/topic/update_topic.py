"""Update topic use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from quorum.application.usecase.topic.common import TopicInfo
from quorum.domain.service import TopicService, UserService
from quorum.domain.value import HexColor, UserId


class UpdateTopicRequest(BaseModel):
    """Update topic request. Fields left as None are kept."""

    slug: str
    user_id: str  # From authenticated user
    name: Optional[str] = Field(default=None, min_length=2, max_length=50)
    description: Optional[str] = Field(default=None, max_length=500)
    color: Optional[HexColor] = None
    icon: Optional[str] = Field(default=None, max_length=16)


class UpdateTopicUseCase:
    """Use case for editing a topic (admin, moderator or creator)."""

    def __init__(self, topic_service: TopicService, user_service: UserService) -> None:
        self.topic_service = topic_service
        self.user_service = user_service

    async def execute(self, request: UpdateTopicRequest) -> TopicInfo:
        """Execute update topic flow.

        Raises:
            NotFoundError: If the topic does not exist
            NotAuthorizedError: If the user may not edit the topic
            AlreadyExistsError: If the new name is taken
        """
        actor = await self.user_service.get_active_user_by_id(
            UserId(UUID(request.user_id))
        )
        topic = await self.topic_service.get_active_topic(request.slug)
        fields = {
            name: value
            for name, value in request
            if name not in ("slug", "user_id") and value is not None
        }
        updated = await self.topic_service.update_topic(topic, actor, fields)
        return TopicInfo.from_topic(updated)
