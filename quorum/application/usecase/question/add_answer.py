"""Add answer use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from quorum.application.usecase.question.common import AnswerInfo
from quorum.config import QuestionSettings
from quorum.domain.error import ValidationError
from quorum.domain.service import QuestionService, UserService
from quorum.domain.value import QuestionId, UserId


class AddAnswerRequest(BaseModel):
    """Add answer request."""

    question_id: str
    user_id: str  # From authenticated user
    content: str


class AddAnswerResponse(BaseModel):
    """Add answer response."""

    answer: AnswerInfo
    answer_count: int


class AddAnswerUseCase:
    """Use case for answering a question."""

    def __init__(
        self,
        question_service: QuestionService,
        user_service: UserService,
        settings: QuestionSettings,
    ) -> None:
        """Initialize add answer use case.

        Args:
            question_service: Question domain service
            user_service: User domain service
            settings: Question policy settings
        """
        self.question_service = question_service
        self.user_service = user_service
        self.settings = settings

    async def execute(self, request: AddAnswerRequest) -> AddAnswerResponse:
        """Execute add answer flow.

        Raises:
            ValidationError: If the answer is empty or shorter than the
                configured minimum
            NotFoundError: If the question does not exist
        """
        with logfire.span(
            "add_answer.execute",
            question_id=request.question_id,
            user_id=request.user_id,
        ):
            content = request.content.strip()
            if not content:
                raise ValidationError("Answer content is required")
            minimum = self.settings.min_answer_length
            if len(content) < minimum:
                raise ValidationError(
                    f"Answer must be at least {minimum} characters long"
                )

            author = await self.user_service.get_active_user_by_id(
                UserId(UUID(request.user_id))
            )
            question, answer = await self.question_service.add_answer(
                QuestionId(UUID(request.question_id)), author, content
            )
            return AddAnswerResponse(
                answer=AnswerInfo.from_answer(answer, author.id),
                answer_count=question.answer_count,
            )
