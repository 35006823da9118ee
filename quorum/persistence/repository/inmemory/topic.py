"""In-memory topic repository for testing."""

from datetime import datetime
from typing import Optional

from quorum.domain.model.topic import Topic
from quorum.domain.repository.topic import TopicRepository, TopicSortOrder
from quorum.domain.value import TopicId, TopicSlug


class InMemoryTopicRepository(TopicRepository):
    """In-memory implementation of TopicRepository for testing."""

    def __init__(self) -> None:
        self._topics: dict[TopicId, Topic] = {}

    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Find topic by ID."""
        return self._topics.get(topic_id)

    async def find_by_ids(self, topic_ids: list[TopicId]) -> list[Topic]:
        """Find topics by IDs."""
        return [self._topics[i] for i in dict.fromkeys(topic_ids) if i in self._topics]

    async def find_by_slug(self, slug: TopicSlug) -> Optional[Topic]:
        """Find topic by slug."""
        for topic in self._topics.values():
            if topic.slug == slug:
                return topic
        return None

    async def find_by_slugs(self, slugs: list[TopicSlug]) -> list[Topic]:
        """Find active topics by slugs."""
        return [t for t in self._topics.values() if t.slug in slugs and t.is_active]

    async def find_by_name(self, name: str) -> Optional[Topic]:
        """Find topic by name, case-insensitively."""
        for topic in self._topics.values():
            if topic.name.lower() == name.strip().lower():
                return topic
        return None

    def _filter(self, search: Optional[str]) -> list[Topic]:
        topics = [t for t in self._topics.values() if t.is_active]
        if search:
            needle = search.lower()
            topics = [
                t
                for t in topics
                if needle in t.name.lower() or needle in t.description.lower()
            ]
        return topics

    async def find_all(
        self,
        search: Optional[str] = None,
        sort: TopicSortOrder = TopicSortOrder.POPULAR,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Topic]:
        """Find active topics."""
        topics = self._filter(search)

        if sort == TopicSortOrder.RECENT:
            topics.sort(key=lambda t: t.created_at, reverse=True)
        elif sort == TopicSortOrder.ACTIVE:
            topics.sort(key=lambda t: t.last_activity, reverse=True)
        elif sort == TopicSortOrder.ALPHABETICAL:
            topics.sort(key=lambda t: t.name)
        else:
            topics.sort(
                key=lambda t: (t.question_count, t.follower_count), reverse=True
            )

        return topics[offset : offset + limit]

    async def count(self, search: Optional[str] = None) -> int:
        """Count active topics matching the search."""
        return len(self._filter(search))

    async def save(self, topic: Topic) -> Topic:
        """Save or update a topic."""
        self._topics[topic.id] = topic
        return topic

    async def adjust_question_count(self, topic_ids: list[TopicId], delta: int) -> None:
        """Adjust question_count, never below zero."""
        for topic_id in topic_ids:
            topic = self._topics.get(topic_id)
            if not topic:
                continue
            update = {"question_count": max(0, topic.question_count + delta)}
            if delta > 0:
                update["last_activity"] = datetime.now()
            self._topics[topic_id] = topic.model_copy(update=update)

    async def adjust_follower_count(self, topic_id: TopicId, delta: int) -> None:
        """Adjust follower_count, never below zero."""
        topic = self._topics.get(topic_id)
        if topic:
            self._topics[topic_id] = topic.model_copy(
                update={"follower_count": max(0, topic.follower_count + delta)}
            )
