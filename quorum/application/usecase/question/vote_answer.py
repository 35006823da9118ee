"""Vote on answer use case."""

from uuid import UUID

from pydantic import BaseModel

from quorum.application.usecase.question.common import VoteResponse
from quorum.domain.service import QuestionService
from quorum.domain.value import AnswerId, QuestionId, UserId, parse_vote_type


class VoteAnswerRequest(BaseModel):
    """Vote on answer request."""

    question_id: str
    answer_id: str
    user_id: str  # From authenticated user
    vote_type: str  # upvote, downvote or remove


class VoteAnswerUseCase:
    """Use case for voting on an answer."""

    def __init__(self, question_service: QuestionService) -> None:
        self.question_service = question_service

    async def execute(self, request: VoteAnswerRequest) -> VoteResponse:
        """Execute answer vote flow.

        Raises:
            ValidationError: If the vote type is unknown
            NotFoundError: If the question or answer does not exist
            NotAuthorizedError: If the user wrote the answer
        """
        vote_type = parse_vote_type(request.vote_type)
        user_id = UserId(UUID(request.user_id))

        answer = await self.question_service.vote_on_answer(
            QuestionId(UUID(request.question_id)),
            AnswerId(UUID(request.answer_id)),
            user_id,
            vote_type,
        )
        return VoteResponse(
            score=answer.score,
            upvote_count=len(answer.votes.upvotes),
            downvote_count=len(answer.votes.downvotes),
            user_vote=answer.votes.vote_of(user_id),
        )
