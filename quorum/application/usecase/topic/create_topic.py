"""Create topic use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from quorum.application.usecase.base import BaseUseCase
from quorum.application.usecase.topic.common import TopicInfo
from quorum.domain.error import NotAuthorizedError
from quorum.domain.service import TopicService, UserService
from quorum.domain.value import HexColor, UserId


class CreateTopicRequest(BaseModel):
    """Create topic request."""

    user_id: str  # From authenticated user
    name: str = Field(min_length=2, max_length=50)
    description: str = Field(default="", max_length=500)
    color: Optional[HexColor] = None
    icon: Optional[str] = Field(default=None, max_length=16)


class CreateTopicUseCase(BaseUseCase):
    """Use case for an admin creating a topic."""

    def __init__(self, topic_service: TopicService, user_service: UserService) -> None:
        """Initialize create topic use case.

        Args:
            topic_service: Topic domain service
            user_service: User domain service
        """
        self.topic_service = topic_service
        self.user_service = user_service

    async def execute(self, request: CreateTopicRequest) -> TopicInfo:
        """Execute create topic flow.

        Raises:
            NotAuthorizedError: If the user is not an admin
            AlreadyExistsError: If the topic name is taken
        """
        with logfire.span("create_topic.execute", name=request.name):
            actor = await self.user_service.get_active_user_by_id(
                UserId(UUID(request.user_id))
            )
            if not actor.is_admin:
                raise NotAuthorizedError("create", "Topic", request.name, str(actor.id))

            topic = await self.topic_service.create_topic(
                name=request.name,
                description=request.description,
                created_by=actor.id,
                color=str(request.color) if request.color else None,
                icon=request.icon,
            )
            return TopicInfo.from_topic(topic)
