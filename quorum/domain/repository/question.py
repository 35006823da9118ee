"""Question repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from quorum.domain.model.question import Question
from quorum.domain.value import QuestionId, TopicId, UserId
from quorum.domain.value.common import ValueObject


class QuestionSortOrder(str, Enum):
    """Sort order for question listings."""

    RECENT = "recent"  # created_at DESC
    POPULAR = "popular"  # views DESC, then created_at DESC
    ANSWERED = "answered"  # answer count DESC, then created_at DESC
    UNANSWERED = "unanswered"  # questions without answers, created_at DESC
    ACTIVE = "active"  # last_activity DESC


class QuestionQuery(ValueObject):
    """Filters for listing questions.

    Only active questions are ever listed. Every filter left as None is
    ignored; ``tags`` matches questions carrying any of the given tags.
    """

    topic_id: Optional[TopicId] = None
    author_id: Optional[UserId] = None
    search: Optional[str] = None  # Case-insensitive substring of title/description
    tags: list[str] = []
    sort: QuestionSortOrder = QuestionSortOrder.RECENT


class QuestionRepository(ABC):
    """Repository for the Question aggregate.

    The whole aggregate (answers, vote ledgers, view log) is loaded and
    saved as one unit. Saves are guarded by the aggregate's ``version``.
    """

    @abstractmethod
    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID.

        Inactive questions are returned too; callers decide visibility.

        Args:
            question_id: The question's unique identifier

        Returns:
            The question if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self, query: QuestionQuery, limit: int = 10, offset: int = 0
    ) -> List[Question]:
        """Find active questions matching a query.

        Args:
            query: Filters and sort order
            limit: Maximum number of questions to return
            offset: Number of questions to skip

        Returns:
            List of matching questions
        """
        pass

    @abstractmethod
    async def count(self, query: QuestionQuery) -> int:
        """Count active questions matching a query.

        Args:
            query: Filters (sort is ignored except for UNANSWERED)

        Returns:
            Number of matching questions
        """
        pass

    @abstractmethod
    async def save(self, question: Question) -> Question:
        """Save a question (create or update).

        A question with version 0 is inserted. Any other question is
        updated only if the stored version still equals ``question.version``.

        Args:
            question: The question to save

        Returns:
            The saved question, with its version incremented

        Raises:
            ConflictError: If the stored version differs (concurrent write)
        """
        pass

    @abstractmethod
    async def count_active_by_topic(self, topic_id: TopicId) -> int:
        """Count active questions referencing a topic.

        Args:
            topic_id: Topic ID

        Returns:
            Number of active questions in the topic
        """
        pass

    @abstractmethod
    async def deactivate_by_author(self, author_id: UserId) -> int:
        """Soft-delete all active questions of an author.

        Args:
            author_id: Author's user ID

        Returns:
            Number of questions deactivated
        """
        pass
