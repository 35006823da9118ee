"""Topic moderator management use cases (admin only)."""

from uuid import UUID

from pydantic import BaseModel

from quorum.application.usecase.user.common import UserSummary
from quorum.domain.error import NotAuthorizedError
from quorum.domain.model import Topic
from quorum.domain.service import TopicService, UserService
from quorum.domain.value import UserId, Username


class AddModeratorRequest(BaseModel):
    """Add moderator request."""

    slug: str
    user_id: str  # From authenticated user
    username: Username  # User to promote


class RemoveModeratorRequest(BaseModel):
    """Remove moderator request."""

    slug: str
    user_id: str  # From authenticated user
    moderator_id: str  # User to remove


class ModeratorsResponse(BaseModel):
    """Moderators of a topic after the change."""

    moderators: list[UserSummary]


class _ModeratorUseCase:
    def __init__(self, topic_service: TopicService, user_service: UserService) -> None:
        self.topic_service = topic_service
        self.user_service = user_service

    async def _load(self, slug: str, user_id: str) -> Topic:
        actor = await self.user_service.get_active_user_by_id(UserId(UUID(user_id)))
        if not actor.is_admin:
            raise NotAuthorizedError("manage moderators of", "Topic", slug, user_id)
        return await self.topic_service.get_active_topic(slug)

    async def _response(self, topic: Topic) -> ModeratorsResponse:
        users = await self.user_service.get_users_by_ids(topic.moderator_ids)
        return ModeratorsResponse(moderators=[UserSummary.from_user(u) for u in users])


class AddModeratorUseCase(_ModeratorUseCase):
    """Use case for making a user a topic moderator."""

    async def execute(self, request: AddModeratorRequest) -> ModeratorsResponse:
        """Execute add moderator flow.

        Raises:
            NotAuthorizedError: If the acting user is not an admin
            NotFoundError: If the topic or user does not exist
            BusinessRuleViolationError: If the user already moderates the topic
        """
        topic = await self._load(request.slug, request.user_id)
        user = await self.user_service.get_active_user(request.username)
        topic = await self.topic_service.add_moderator(topic, user)
        return await self._response(topic)


class RemoveModeratorUseCase(_ModeratorUseCase):
    """Use case for removing a topic moderator."""

    async def execute(self, request: RemoveModeratorRequest) -> ModeratorsResponse:
        """Execute remove moderator flow.

        Raises:
            NotAuthorizedError: If the acting user is not an admin
            NotFoundError: If the topic does not exist
        """
        topic = await self._load(request.slug, request.user_id)
        topic = await self.topic_service.remove_moderator(
            topic, UserId(UUID(request.moderator_id))
        )
        return await self._response(topic)
