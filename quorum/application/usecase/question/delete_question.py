"""Delete question use case."""

from uuid import UUID

from pydantic import BaseModel

from quorum.domain.service import QuestionService, UserService
from quorum.domain.value import QuestionId, UserId


class DeleteQuestionRequest(BaseModel):
    """Delete question request."""

    question_id: str
    user_id: str  # From authenticated user


class DeleteQuestionResponse(BaseModel):
    """Delete question response."""

    message: str = "Question deleted successfully"


class DeleteQuestionUseCase:
    """Use case for soft-deleting a question (author or admin)."""

    def __init__(
        self, question_service: QuestionService, user_service: UserService
    ) -> None:
        self.question_service = question_service
        self.user_service = user_service

    async def execute(self, request: DeleteQuestionRequest) -> DeleteQuestionResponse:
        """Execute delete question flow.

        Raises:
            NotFoundError: If the question does not exist or is already deleted
            NotAuthorizedError: If the user is neither the author nor an admin
        """
        actor = await self.user_service.get_active_user_by_id(
            UserId(UUID(request.user_id))
        )
        await self.question_service.delete_question(
            QuestionId(UUID(request.question_id)), actor
        )
        return DeleteQuestionResponse()
