"""Topic repository interface."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional

from quorum.domain.model.topic import Topic
from quorum.domain.value import TopicId, TopicSlug


class TopicSortOrder(str, Enum):
    """Sort order for topic listings."""

    POPULAR = "popular"  # question_count DESC, follower_count DESC
    RECENT = "recent"  # created_at DESC
    ACTIVE = "active"  # last_activity DESC
    ALPHABETICAL = "alphabetical"  # name ASC


class TopicRepository(ABC):
    """Repository interface for Topic entity."""

    @abstractmethod
    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Find topic by ID.

        Args:
            topic_id: Topic identifier

        Returns:
            Topic if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, topic_ids: list[TopicId]) -> List[Topic]:
        """Find topics by IDs.

        Args:
            topic_ids: Topic identifiers

        Returns:
            Topics found, in no particular order
        """
        pass

    @abstractmethod
    async def find_by_slug(self, slug: TopicSlug) -> Optional[Topic]:
        """Find topic by slug.

        Args:
            slug: Topic slug

        Returns:
            Topic if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_slugs(self, slugs: list[TopicSlug]) -> List[Topic]:
        """Find active topics by slugs.

        Args:
            slugs: Topic slugs

        Returns:
            Active topics matching any of the slugs
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Topic]:
        """Find topic by name, case-insensitively.

        Args:
            name: Topic name

        Returns:
            Topic if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        search: Optional[str] = None,
        sort: TopicSortOrder = TopicSortOrder.POPULAR,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Topic]:
        """Find active topics.

        Args:
            search: Case-insensitive substring of name or description
            sort: Sort order
            limit: Maximum number of topics to return
            offset: Number of topics to skip

        Returns:
            List of topics
        """
        pass

    @abstractmethod
    async def count(self, search: Optional[str] = None) -> int:
        """Count active topics matching the search."""
        pass

    @abstractmethod
    async def save(self, topic: Topic) -> Topic:
        """Save or update a topic.

        Args:
            topic: Topic to save

        Returns:
            Saved topic
        """
        pass

    @abstractmethod
    async def adjust_question_count(self, topic_ids: list[TopicId], delta: int) -> None:
        """Atomically add ``delta`` to question_count of several topics (floor 0).

        Also refreshes last_activity when ``delta`` is positive.

        Args:
            topic_ids: Topics to adjust
            delta: Amount to add (negative to decrement)
        """
        pass

    @abstractmethod
    async def adjust_follower_count(self, topic_id: TopicId, delta: int) -> None:
        """Atomically add ``delta`` to a topic's follower_count (floor 0).

        Args:
            topic_id: Topic to adjust
            delta: Amount to add (negative to decrement)
        """
        pass
