"""Follow topic use case."""

from uuid import UUID

from pydantic import BaseModel

from quorum.domain.service import TopicService, UserService
from quorum.domain.value import UserId


class FollowTopicRequest(BaseModel):
    """Follow topic request."""

    slug: str
    user_id: str  # From authenticated user


class FollowTopicResponse(BaseModel):
    """Follow topic response."""

    is_following: bool
    follower_count: int


class FollowTopicUseCase:
    """Use case for toggling whether a user follows a topic."""

    def __init__(self, topic_service: TopicService, user_service: UserService) -> None:
        self.topic_service = topic_service
        self.user_service = user_service

    async def execute(self, request: FollowTopicRequest) -> FollowTopicResponse:
        """Execute follow toggle flow.

        Raises:
            NotFoundError: If the topic does not exist
        """
        user = await self.user_service.get_active_user_by_id(
            UserId(UUID(request.user_id))
        )
        topic = await self.topic_service.get_active_topic(request.slug)
        topic, is_following = await self.topic_service.toggle_follow(user, topic)
        return FollowTopicResponse(
            is_following=is_following, follower_count=topic.follower_count
        )
