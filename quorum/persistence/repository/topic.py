"""PostgreSQL implementation of Topic repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from quorum.domain.model import Topic
from quorum.domain.repository.topic import TopicRepository, TopicSortOrder
from quorum.domain.value import TopicId, TopicSlug
from quorum.persistence.mappers import row_to_topic, topic_to_dict
from quorum.persistence.search import LIKE_ESCAPE, contains_pattern
from quorum.persistence.tables import topics_table


class PostgresTopicRepository(TopicRepository):
    """PostgreSQL implementation of TopicRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _find_many(self, stmt) -> List[Topic]:
        result = await self.session.execute(stmt)
        return [row_to_topic(dict(row)) for row in result.mappings()]

    async def find_by_id(self, topic_id: TopicId) -> Optional[Topic]:
        """Find topic by ID."""
        topics = await self._find_many(
            select(topics_table).where(topics_table.c.id == topic_id)
        )
        return topics[0] if topics else None

    async def find_by_ids(self, topic_ids: list[TopicId]) -> List[Topic]:
        """Find topics by IDs."""
        if not topic_ids:
            return []
        return await self._find_many(
            select(topics_table).where(topics_table.c.id.in_(topic_ids))
        )

    async def find_by_slug(self, slug: TopicSlug) -> Optional[Topic]:
        """Find topic by slug."""
        topics = await self._find_many(
            select(topics_table).where(topics_table.c.slug == str(slug))
        )
        return topics[0] if topics else None

    async def find_by_slugs(self, slugs: list[TopicSlug]) -> List[Topic]:
        """Find active topics by slugs."""
        if not slugs:
            return []
        return await self._find_many(
            select(topics_table)
            .where(topics_table.c.slug.in_([str(s) for s in slugs]))
            .where(topics_table.c.is_active.is_(True))
        )

    async def find_by_name(self, name: str) -> Optional[Topic]:
        """Find topic by name, case-insensitively."""
        topics = await self._find_many(
            select(topics_table).where(
                func.lower(topics_table.c.name) == name.strip().lower()
            )
        )
        return topics[0] if topics else None

    def _filter(self, stmt, search: Optional[str]):
        stmt = stmt.where(topics_table.c.is_active.is_(True))
        if search:
            pattern = contains_pattern(search)
            stmt = stmt.where(
                or_(
                    topics_table.c.name.ilike(pattern, escape=LIKE_ESCAPE),
                    topics_table.c.description.ilike(pattern, escape=LIKE_ESCAPE),
                )
            )
        return stmt

    async def find_all(
        self,
        search: Optional[str] = None,
        sort: TopicSortOrder = TopicSortOrder.POPULAR,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Topic]:
        """Find active topics."""
        with logfire.span(
            "topic_repository.find_all", sort=sort.value, limit=limit, offset=offset
        ):
            stmt = self._filter(select(topics_table), search)

            if sort == TopicSortOrder.RECENT:
                stmt = stmt.order_by(desc(topics_table.c.created_at))
            elif sort == TopicSortOrder.ACTIVE:
                stmt = stmt.order_by(desc(topics_table.c.last_activity))
            elif sort == TopicSortOrder.ALPHABETICAL:
                stmt = stmt.order_by(topics_table.c.name)
            else:
                stmt = stmt.order_by(
                    desc(topics_table.c.question_count),
                    desc(topics_table.c.follower_count),
                )

            return await self._find_many(stmt.limit(limit).offset(offset))

    async def count(self, search: Optional[str] = None) -> int:
        """Count active topics matching the search."""
        stmt = self._filter(select(func.count()).select_from(topics_table), search)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, topic: Topic) -> Topic:
        """Save or update a topic."""
        with logfire.span("topic_repository.save", topic_id=str(topic.id)):
            existing = await self.find_by_id(topic.id)
            topic_dict = topic_to_dict(topic)

            if existing:
                stmt = (
                    topics_table.update()
                    .where(topics_table.c.id == topic.id)
                    .values(**topic_dict)
                )
            else:
                stmt = topics_table.insert().values(**topic_dict)
            await self.session.execute(stmt)

            await self.session.flush()
            return topic

    async def adjust_question_count(self, topic_ids: list[TopicId], delta: int) -> None:
        """Atomically adjust question_count, never below zero."""
        if not topic_ids:
            return
        values = {
            "question_count": func.greatest(topics_table.c.question_count + delta, 0)
        }
        if delta > 0:
            values["last_activity"] = func.now()
        stmt = (
            topics_table.update()
            .where(topics_table.c.id.in_(topic_ids))
            .values(**values)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def adjust_follower_count(self, topic_id: TopicId, delta: int) -> None:
        """Atomically adjust follower_count, never below zero."""
        stmt = (
            topics_table.update()
            .where(topics_table.c.id == topic_id)
            .values(
                follower_count=func.greatest(topics_table.c.follower_count + delta, 0)
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
