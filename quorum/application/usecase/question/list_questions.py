"""List questions use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from quorum.application.usecase.common import PageRequest, Pagination
from quorum.application.usecase.question.common import QuestionSummary
from quorum.domain.error import NotFoundError
from quorum.domain.repository import QuestionQuery, QuestionSortOrder
from quorum.domain.service import QuestionService, TopicService, UserService
from quorum.domain.service.question_service import normalize_tags
from quorum.domain.value import UserId, Username


class ListQuestionsRequest(PageRequest):
    """List questions request."""

    topic: Optional[str] = None  # Topic slug
    author: Optional[str] = None  # Author username
    search: Optional[str] = None
    tags: Optional[str] = None  # Comma-separated
    sort_by: QuestionSortOrder = QuestionSortOrder.RECENT
    user_id: Optional[str] = None  # Current user ID (if authenticated)


class ListQuestionsResponse(BaseModel):
    """List questions response."""

    questions: list[QuestionSummary]
    pagination: Pagination


class ListQuestionsUseCase:
    """Use case for listing questions with filtering and pagination."""

    def __init__(
        self,
        question_service: QuestionService,
        topic_service: TopicService,
        user_service: UserService,
    ) -> None:
        """Initialize list questions use case.

        Args:
            question_service: Question domain service
            topic_service: Topic domain service
            user_service: User domain service
        """
        self.question_service = question_service
        self.topic_service = topic_service
        self.user_service = user_service

    async def _build_query(self, request: ListQuestionsRequest) -> QuestionQuery:
        topic_id = None
        if request.topic:
            try:
                topic_id = (await self.topic_service.get_active_topic(request.topic)).id
            except NotFoundError:
                logfire.info("Ignoring unknown topic filter", topic=request.topic)

        author_id = None
        if request.author:
            try:
                author = await self.user_service.get_active_user(
                    Username(request.author)
                )
                author_id = author.id
            except (NotFoundError, ValueError):
                logfire.info("Ignoring unknown author filter", author=request.author)

        search = request.search.strip() if request.search else None
        return QuestionQuery(
            topic_id=topic_id,
            author_id=author_id,
            search=search or None,
            tags=normalize_tags(request.tags, limit=50),
            sort=request.sort_by,
        )

    async def execute(self, request: ListQuestionsRequest) -> ListQuestionsResponse:
        """Execute list questions flow.

        A topic or author filter naming nothing that exists is dropped, so
        the listing falls back to the unfiltered questions.

        Args:
            request: Filters, sort order and page

        Returns:
            A page of question summaries with pagination
        """
        with logfire.span(
            "list_questions.execute",
            sort=request.sort_by.value,
            topic=request.topic,
            page=request.page,
        ):
            query = await self._build_query(request)

            questions, total = await self.question_service.list_questions(
                query, request.limit, request.offset
            )

            topic_ids = list({t for q in questions for t in q.topic_ids})
            topics = {
                t.id: t for t in await self.topic_service.get_topics_by_ids(topic_ids)
            }
            viewer_id = UserId(UUID(request.user_id)) if request.user_id else None

            return ListQuestionsResponse(
                questions=[
                    QuestionSummary.from_question(q, topics, viewer_id)
                    for q in questions
                ],
                pagination=Pagination.build(request, total),
            )
