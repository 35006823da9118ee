"""Get user profile use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from quorum.application.usecase.question.common import QuestionSummary
from quorum.application.usecase.user.common import UserDetail
from quorum.domain.repository import QuestionQuery, QuestionSortOrder
from quorum.domain.service import QuestionService, TopicService, UserService
from quorum.domain.value import Username

RECENT_QUESTIONS = 5


class GetUserProfileRequest(BaseModel):
    """Get user profile request."""

    username: str
    user_id: Optional[str] = None  # Current user ID (if authenticated)


class GetUserProfileResponse(BaseModel):
    """Get user profile response."""

    user: UserDetail
    question_count: int
    recent_questions: list[QuestionSummary]


class GetUserProfileUseCase:
    """Use case for a public profile page.

    The email address is only shown to the user themselves.
    """

    def __init__(
        self,
        user_service: UserService,
        question_service: QuestionService,
        topic_service: TopicService,
    ) -> None:
        """Initialize get user profile use case.

        Args:
            user_service: User domain service
            question_service: Question domain service
            topic_service: Topic domain service
        """
        self.user_service = user_service
        self.question_service = question_service
        self.topic_service = topic_service

    async def execute(self, request: GetUserProfileRequest) -> GetUserProfileResponse:
        """Execute get profile flow.

        Raises:
            NotFoundError: If no active user has that username
        """
        with logfire.span("get_user_profile.execute", username=request.username):
            user = await self.user_service.get_active_user(Username(request.username))
            questions, total = await self.question_service.list_questions(
                QuestionQuery(author_id=user.id, sort=QuestionSortOrder.RECENT),
                RECENT_QUESTIONS,
                0,
            )

            topic_ids = list({t for q in questions for t in q.topic_ids})
            topics = {
                t.id: t for t in await self.topic_service.get_topics_by_ids(topic_ids)
            }
            is_self = request.user_id == str(user.id)

            return GetUserProfileResponse(
                user=UserDetail.from_user(user, include_email=is_self),
                question_count=total,
                recent_questions=[
                    QuestionSummary.from_question(q, topics, None) for q in questions
                ],
            )
