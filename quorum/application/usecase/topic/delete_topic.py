"""Delete topic use case."""

from uuid import UUID

from pydantic import BaseModel

from quorum.domain.error import NotAuthorizedError
from quorum.domain.service import TopicService, UserService
from quorum.domain.value import UserId


class DeleteTopicRequest(BaseModel):
    """Delete topic request."""

    slug: str
    user_id: str  # From authenticated user


class DeleteTopicResponse(BaseModel):
    """Delete topic response."""

    message: str = "Topic deleted successfully"


class DeleteTopicUseCase:
    """Use case for an admin soft-deleting a topic."""

    def __init__(self, topic_service: TopicService, user_service: UserService) -> None:
        self.topic_service = topic_service
        self.user_service = user_service

    async def execute(self, request: DeleteTopicRequest) -> DeleteTopicResponse:
        """Execute delete topic flow.

        Raises:
            NotAuthorizedError: If the user is not an admin
            NotFoundError: If the topic does not exist
            BusinessRuleViolationError: If active questions use the topic
        """
        actor = await self.user_service.get_active_user_by_id(
            UserId(UUID(request.user_id))
        )
        if not actor.is_admin:
            raise NotAuthorizedError("delete", "Topic", request.slug, str(actor.id))

        topic = await self.topic_service.get_active_topic(request.slug)
        await self.topic_service.delete_topic(topic)
        return DeleteTopicResponse()
