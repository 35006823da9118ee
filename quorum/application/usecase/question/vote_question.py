"""Vote on question use case."""

from uuid import UUID

from pydantic import BaseModel

from quorum.application.usecase.question.common import VoteResponse
from quorum.domain.service import QuestionService
from quorum.domain.value import QuestionId, UserId, parse_vote_type


class VoteQuestionRequest(BaseModel):
    """Vote on question request."""

    question_id: str
    user_id: str  # From authenticated user
    vote_type: str  # upvote, downvote or remove


class VoteQuestionUseCase:
    """Use case for voting on a question."""

    def __init__(self, question_service: QuestionService) -> None:
        """Initialize vote question use case.

        Args:
            question_service: Question domain service
        """
        self.question_service = question_service

    async def execute(self, request: VoteQuestionRequest) -> VoteResponse:
        """Execute vote flow.

        Returns:
            The question's new score and the user's resulting vote

        Raises:
            ValidationError: If the vote type is unknown
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the user wrote the question
        """
        vote_type = parse_vote_type(request.vote_type)
        user_id = UserId(UUID(request.user_id))

        question = await self.question_service.vote(
            QuestionId(UUID(request.question_id)), user_id, vote_type
        )
        return VoteResponse(
            score=question.score,
            upvote_count=len(question.votes.upvotes),
            downvote_count=len(question.votes.downvotes),
            user_vote=question.user_vote(user_id),
        )
