"""Question aggregate root.

A question document owns its answers, its own vote ledger and a bounded
log of recent views. All mutations are pure: each operation returns a new
Question and leaves the original untouched, so a caller can load, mutate
and save the aggregate as one unit.
"""

from datetime import datetime, timedelta
from typing import Optional
from uuid import uuid4

from pydantic import Field

from quorum.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from quorum.domain.model.answer import Answer
from quorum.domain.model.common import DomainModel
from quorum.domain.value import (
    AnswerId,
    Attachment,
    QuestionId,
    TopicId,
    UserId,
    Username,
    ViewEntry,
    VoteLedger,
    VoteType,
)

VIEW_DEDUP_WINDOW = timedelta(hours=24)
VIEW_LOG_CAPACITY = 100
MAX_TAGS = 10


class Question(DomainModel):
    """Question aggregate root.

    Business rules:
    - A user is in at most one of the vote sets (enforced by VoteLedger)
    - Nobody votes on their own question or answer
    - Answers are kept in insertion order and never removed
    - ``last_activity`` moves forward whenever an answer is appended
    - ``version`` increases by one on every successful save
    """

    id: QuestionId
    title: str = Field(min_length=10, max_length=200)
    description: str = Field(min_length=20)
    author_id: UserId
    author_username: Username
    topic_ids: list[TopicId] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list, max_length=MAX_TAGS)
    attachments: list[Attachment] = Field(default_factory=list)
    answers: list[Answer] = Field(default_factory=list)
    votes: VoteLedger = VoteLedger()
    views: int = Field(default=0, ge=0)
    view_log: list[ViewEntry] = Field(default_factory=list)
    is_active: bool = True
    last_activity: datetime = Field(default_factory=datetime.now)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
    version: int = Field(default=0, ge=0)  # 0 until first persisted

    @property
    def score(self) -> int:
        """Net vote score of the question."""
        return self.votes.score

    @property
    def answer_count(self) -> int:
        """Number of answers."""
        return len(self.answers)

    @property
    def has_accepted_answer(self) -> bool:
        """Whether any answer is flagged as accepted."""
        return any(answer.is_accepted for answer in self.answers)

    def user_vote(self, user_id: Optional[UserId]) -> VoteType | None:
        """Current vote label of a user on the question."""
        return self.votes.vote_of(user_id)

    def get_answer(self, answer_id: AnswerId) -> Answer:
        """Find an answer by ID.

        Raises:
            NotFoundError: If no answer with that ID exists on this question
        """
        for answer in self.answers:
            if answer.id == answer_id:
                return answer
        raise NotFoundError("Answer", str(answer_id))

    def vote(self, user_id: UserId, vote_type: VoteType) -> "Question":
        """Apply a user's vote to the question.

        Args:
            user_id: Voting user
            vote_type: Vote to apply

        Returns:
            Updated question

        Raises:
            NotAuthorizedError: If the user is the question's author
        """
        if user_id == self.author_id:
            raise NotAuthorizedError("vote on", "Question", str(self.id), str(user_id))
        return self.model_copy(update={"votes": self.votes.apply(user_id, vote_type)})

    def add_answer(
        self,
        author_id: UserId,
        author_username: Username,
        content: str,
        now: Optional[datetime] = None,
    ) -> tuple["Question", Answer]:
        """Append a new answer.

        Args:
            author_id: Answer author
            author_username: Author's username (denormalized)
            content: Answer body, trimmed before storing
            now: Creation time (defaults to the current time)

        Returns:
            Tuple of (updated question, new answer)

        Raises:
            ValidationError: If the trimmed content is empty
        """
        content = content.strip()
        if not content:
            raise ValidationError("Answer content is required")

        now = now or datetime.now()
        answer = Answer(
            id=AnswerId(uuid4()),
            content=content,
            author_id=author_id,
            author_username=author_username,
            created_at=now,
            updated_at=now,
        )
        updated = self.model_copy(
            update={
                "answers": [*self.answers, answer],
                "last_activity": max(now, self.last_activity),
            }
        )
        return updated, answer

    def vote_on_answer(
        self, answer_id: AnswerId, user_id: UserId, vote_type: VoteType
    ) -> tuple["Question", Answer]:
        """Apply a user's vote to one of the answers.

        Returns:
            Tuple of (updated question, updated answer)

        Raises:
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the user wrote the answer
        """
        answer = self.get_answer(answer_id).vote(user_id, vote_type)
        return self._replace_answer(answer), answer

    def set_answer_accepted(
        self, answer_id: AnswerId, user_id: UserId, accepted: bool
    ) -> tuple["Question", Answer]:
        """Set the accepted flag of an answer.

        Only the question author may accept answers. Other answers keep
        their flag as is.

        Raises:
            NotFoundError: If the answer does not exist
            NotAuthorizedError: If the user is not the question's author
        """
        if user_id != self.author_id:
            raise NotAuthorizedError(
                "accept answers on", "Question", str(self.id), str(user_id)
            )
        answer = self.get_answer(answer_id).model_copy(
            update={"is_accepted": accepted, "updated_at": datetime.now()}
        )
        return self._replace_answer(answer), answer

    def record_view(
        self,
        user_id: UserId,
        now: Optional[datetime] = None,
        window: timedelta = VIEW_DEDUP_WINDOW,
        capacity: int = VIEW_LOG_CAPACITY,
    ) -> tuple["Question", bool]:
        """Count a view unless the user already viewed within the window.

        The log keeps only the ``capacity`` most recent entries; the oldest
        are dropped first.

        Args:
            user_id: Viewing user
            now: View time (defaults to the current time)
            window: Deduplication window
            capacity: Maximum number of log entries

        Returns:
            Tuple of (question, whether the view was counted). The same
            instance is returned when the view was not counted.
        """
        now = now or datetime.now()
        recent = any(
            entry.user_id == user_id and now - entry.viewed_at < window
            for entry in self.view_log
        )
        if recent:
            return self, False

        view_log = [*self.view_log, ViewEntry(user_id=user_id, viewed_at=now)]
        updated = self.model_copy(
            update={"views": self.views + 1, "view_log": view_log[-capacity:]}
        )
        return updated, True

    def _replace_answer(self, answer: Answer) -> "Question":
        answers = [answer if a.id == answer.id else a for a in self.answers]
        return self.model_copy(update={"answers": answers})
