"""Get topic use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from quorum.application.usecase.question.common import QuestionSummary
from quorum.application.usecase.topic.common import TopicInfo
from quorum.application.usecase.user.common import UserSummary
from quorum.domain.repository import QuestionQuery, QuestionSortOrder
from quorum.domain.service import QuestionService, TopicService, UserService
from quorum.domain.value import UserId

RECENT_QUESTIONS = 10


class GetTopicRequest(BaseModel):
    """Get topic request."""

    slug: str
    user_id: Optional[str] = None  # Current user ID (if authenticated)


class GetTopicResponse(BaseModel):
    """Get topic response."""

    topic: TopicInfo
    moderators: list[UserSummary]
    recent_questions: list[QuestionSummary]
    is_following: bool


class GetTopicUseCase:
    """Use case for a topic page: the topic, its moderators and recent questions."""

    def __init__(
        self,
        topic_service: TopicService,
        question_service: QuestionService,
        user_service: UserService,
    ) -> None:
        """Initialize get topic use case.

        Args:
            topic_service: Topic domain service
            question_service: Question domain service
            user_service: User domain service
        """
        self.topic_service = topic_service
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: GetTopicRequest) -> GetTopicResponse:
        """Execute get topic flow.

        Raises:
            NotFoundError: If no active topic has that slug
        """
        topic = await self.topic_service.get_active_topic(request.slug)
        moderators = await self.user_service.get_users_by_ids(topic.moderator_ids)
        questions, _ = await self.question_service.list_questions(
            QuestionQuery(topic_id=topic.id, sort=QuestionSortOrder.RECENT),
            RECENT_QUESTIONS,
            0,
        )

        topic_ids = list({t for q in questions for t in q.topic_ids})
        topics = {t.id: t for t in await self.topic_service.get_topics_by_ids(topic_ids)}

        viewer_id = UserId(UUID(request.user_id)) if request.user_id else None
        is_following = False
        if viewer_id is not None:
            viewer = await self.user_service.get_user_by_id(viewer_id)
            is_following = bool(viewer and topic.id in viewer.followed_topic_ids)

        return GetTopicResponse(
            topic=TopicInfo.from_topic(topic),
            moderators=[UserSummary.from_user(u) for u in moderators],
            recent_questions=[
                QuestionSummary.from_question(q, topics, viewer_id) for q in questions
            ],
            is_following=is_following,
        )
