"""Get question use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from quorum.application.usecase.question.common import QuestionDetail
from quorum.domain.error import ConflictError
from quorum.domain.service import QuestionService, TopicService
from quorum.domain.value import QuestionId, UserId


class GetQuestionRequest(BaseModel):
    """Get question request."""

    question_id: str
    user_id: Optional[str] = None  # Current user ID (if authenticated)


class GetQuestionUseCase:
    """Use case for reading a question, counting the view of signed-in users."""

    def __init__(
        self, question_service: QuestionService, topic_service: TopicService
    ) -> None:
        """Initialize get question use case.

        Args:
            question_service: Question domain service
            topic_service: Topic domain service
        """
        self.question_service = question_service
        self.topic_service = topic_service

    async def execute(self, request: GetQuestionRequest) -> QuestionDetail:
        """Execute get question flow.

        Anonymous reads never count as views. A view that keeps losing
        concurrent writes is dropped and the question is still returned.

        Raises:
            NotFoundError: If the question does not exist or was deleted
        """
        question_id = QuestionId(UUID(request.question_id))
        with logfire.span("get_question.execute", question_id=request.question_id):
            viewer_id = UserId(UUID(request.user_id)) if request.user_id else None
            if viewer_id:
                try:
                    question = await self.question_service.record_view(
                        question_id, viewer_id
                    )
                except ConflictError:
                    logfire.warn(
                        "View not recorded after repeated conflicts",
                        question_id=request.question_id,
                    )
                    question = await self.question_service.get_question(question_id)
            else:
                question = await self.question_service.get_question(question_id)

            topics = {
                t.id: t
                for t in await self.topic_service.get_topics_by_ids(question.topic_ids)
            }
            return QuestionDetail.from_question(question, topics, viewer_id)
