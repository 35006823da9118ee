"""List a user's questions use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from quorum.application.usecase.common import PageRequest, Pagination
from quorum.application.usecase.question.common import QuestionSummary
from quorum.domain.repository import QuestionQuery, QuestionSortOrder
from quorum.domain.service import QuestionService, TopicService, UserService
from quorum.domain.value import UserId, Username


class ListUserQuestionsRequest(PageRequest):
    """List user questions request."""

    username: str
    sort_by: QuestionSortOrder = QuestionSortOrder.RECENT
    user_id: Optional[str] = None  # Current user ID (if authenticated)


class ListUserQuestionsResponse(BaseModel):
    """List user questions response."""

    questions: list[QuestionSummary]
    pagination: Pagination


class ListUserQuestionsUseCase:
    """Use case for the active questions asked by one user."""

    def __init__(
        self,
        user_service: UserService,
        question_service: QuestionService,
        topic_service: TopicService,
    ) -> None:
        self.user_service = user_service
        self.question_service = question_service
        self.topic_service = topic_service

    async def execute(
        self, request: ListUserQuestionsRequest
    ) -> ListUserQuestionsResponse:
        """Execute list user questions flow.

        Raises:
            NotFoundError: If no active user has that username
        """
        user = await self.user_service.get_active_user(Username(request.username))
        questions, total = await self.question_service.list_questions(
            QuestionQuery(author_id=user.id, sort=request.sort_by),
            request.limit,
            request.offset,
        )

        topic_ids = list({t for q in questions for t in q.topic_ids})
        topics = {t.id: t for t in await self.topic_service.get_topics_by_ids(topic_ids)}
        viewer_id = UserId(UUID(request.user_id)) if request.user_id else None

        return ListUserQuestionsResponse(
            questions=[
                QuestionSummary.from_question(q, topics, viewer_id) for q in questions
            ],
            pagination=Pagination.build(request, total),
        )
