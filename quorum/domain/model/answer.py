"""Answer entity.

Answers live inside their parent question's document and are only
reachable through it.
"""

from datetime import datetime

from pydantic import Field

from quorum.domain.error import NotAuthorizedError
from quorum.domain.model.common import DomainModel
from quorum.domain.value import AnswerId, UserId, Username, VoteLedger, VoteType


class Answer(DomainModel):
    """Answer to a question, with its own vote ledger."""

    id: AnswerId
    content: str = Field(min_length=1)
    author_id: UserId
    author_username: Username
    votes: VoteLedger = VoteLedger()
    is_accepted: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def score(self) -> int:
        """Net vote score."""
        return self.votes.score

    def vote(self, user_id: UserId, vote_type: VoteType) -> "Answer":
        """Apply a user's vote to this answer.

        Raises:
            NotAuthorizedError: If the user wrote the answer
        """
        if user_id == self.author_id:
            raise NotAuthorizedError("vote on", "Answer", str(self.id), str(user_id))
        return self.model_copy(update={"votes": self.votes.apply(user_id, vote_type)})
