"""Update question use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from quorum.application.usecase.question.common import QuestionDetail
from quorum.domain.service import QuestionService, TopicService, UserService
from quorum.domain.value import QuestionId, UserId


class UpdateQuestionRequest(BaseModel):
    """Update question request. Fields left as None are kept."""

    model_config = ConfigDict(str_strip_whitespace=True)

    question_id: str
    user_id: str  # From authenticated user
    title: Optional[str] = Field(default=None, min_length=10, max_length=200)
    description: Optional[str] = Field(default=None, min_length=20)
    topics: Optional[list[str]] = None  # Replaces all topics when given
    tags: list[str] | str | None = None  # Replaces all tags when given


class UpdateQuestionUseCase:
    """Use case for editing a question (author or admin)."""

    def __init__(
        self,
        question_service: QuestionService,
        topic_service: TopicService,
        user_service: UserService,
    ) -> None:
        self.question_service = question_service
        self.topic_service = topic_service
        self.user_service = user_service

    async def execute(self, request: UpdateQuestionRequest) -> QuestionDetail:
        """Execute update question flow.

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the user is neither the author nor an admin
        """
        actor = await self.user_service.get_active_user_by_id(
            UserId(UUID(request.user_id))
        )

        topic_ids = None
        if request.topics is not None:
            topics = await self.topic_service.resolve_slugs(request.topics)
            topic_ids = [t.id for t in topics]

        question = await self.question_service.update_question(
            QuestionId(UUID(request.question_id)),
            actor,
            title=request.title,
            description=request.description,
            topic_ids=topic_ids,
            tags=request.tags,
        )
        topics_by_id = {
            t.id: t
            for t in await self.topic_service.get_topics_by_ids(question.topic_ids)
        }
        return QuestionDetail.from_question(question, topics_by_id, actor.id)
