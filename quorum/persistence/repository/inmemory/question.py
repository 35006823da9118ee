"""In-memory question repository for testing."""

from datetime import datetime
from typing import Optional

from quorum.domain.error import ConflictError
from quorum.domain.model.question import Question
from quorum.domain.repository.question import (
    QuestionQuery,
    QuestionRepository,
    QuestionSortOrder,
)
from quorum.domain.value import QuestionId, TopicId, UserId


class InMemoryQuestionRepository(QuestionRepository):
    """In-memory implementation of QuestionRepository for testing.

    Applies the same version check as the PostgreSQL implementation.
    """

    def __init__(self) -> None:
        self._questions: dict[QuestionId, Question] = {}

    def _matches(self, question: Question, query: QuestionQuery) -> bool:
        if not question.is_active:
            return False
        if query.topic_id is not None and query.topic_id not in question.topic_ids:
            return False
        if query.author_id is not None and question.author_id != query.author_id:
            return False
        if query.search:
            needle = query.search.lower()
            haystacks = [question.title, question.description, " ".join(question.tags)]
            if not any(needle in text.lower() for text in haystacks):
                return False
        if query.tags and not set(query.tags) & set(question.tags):
            return False
        if query.sort == QuestionSortOrder.UNANSWERED and question.answers:
            return False
        return True

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        return self._questions.get(question_id)

    async def find_all(
        self, query: QuestionQuery, limit: int = 10, offset: int = 0
    ) -> list[Question]:
        """Find active questions matching a query."""
        questions = [q for q in self._questions.values() if self._matches(q, query)]

        if query.sort in (QuestionSortOrder.RECENT, QuestionSortOrder.UNANSWERED):
            questions.sort(key=lambda q: q.created_at, reverse=True)
        elif query.sort == QuestionSortOrder.POPULAR:
            questions.sort(key=lambda q: (q.views, q.created_at), reverse=True)
        elif query.sort == QuestionSortOrder.ANSWERED:
            questions.sort(key=lambda q: (q.answer_count, q.created_at), reverse=True)
        else:
            questions.sort(key=lambda q: q.last_activity, reverse=True)

        return questions[offset : offset + limit]

    async def count(self, query: QuestionQuery) -> int:
        """Count active questions matching a query."""
        return sum(1 for q in self._questions.values() if self._matches(q, query))

    async def save(self, question: Question) -> Question:
        """Insert or update a question under a version check."""
        stored = self._questions.get(question.id)
        stored_version = stored.version if stored else 0
        if stored_version != question.version:
            raise ConflictError("Question", str(question.id))

        saved = question.model_copy(update={"version": question.version + 1})
        self._questions[question.id] = saved
        return saved

    async def count_active_by_topic(self, topic_id: TopicId) -> int:
        """Count active questions referencing a topic."""
        return sum(
            1
            for q in self._questions.values()
            if q.is_active and topic_id in q.topic_ids
        )

    async def deactivate_by_author(self, author_id: UserId) -> int:
        """Soft-delete all active questions of an author."""
        count = 0
        for question in list(self._questions.values()):
            if question.author_id == author_id and question.is_active:
                self._questions[question.id] = question.model_copy(
                    update={
                        "is_active": False,
                        "updated_at": datetime.now(),
                        "version": question.version + 1,
                    }
                )
                count += 1
        return count
