"""Accept answer use case."""

from uuid import UUID

from pydantic import BaseModel

from quorum.application.usecase.question.common import AnswerInfo
from quorum.domain.service import QuestionService
from quorum.domain.value import AnswerId, QuestionId, UserId


class AcceptAnswerRequest(BaseModel):
    """Accept answer request."""

    question_id: str
    answer_id: str
    user_id: str  # From authenticated user
    accepted: bool = True  # False clears the flag


class AcceptAnswerUseCase:
    """Use case for the question author marking an answer as accepted."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: AcceptAnswerRequest) -> AnswerInfo:
        """Execute accept answer flow.

        Raises:
            NotFoundError: If the question or answer does not exist
            NotAuthorizedError: If the user is not the question's author
        """
        user_id = UserId(UUID(request.user_id))
        answer = await self.question_service.set_answer_accepted(
            QuestionId(UUID(request.question_id)),
            AnswerId(UUID(request.answer_id)),
            user_id,
            request.accepted,
        )
        return AnswerInfo.from_answer(answer, user_id)
