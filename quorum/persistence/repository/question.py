"""PostgreSQL implementation of Question repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from quorum.domain.error import ConflictError
from quorum.domain.model import Question
from quorum.domain.repository.question import (
    QuestionQuery,
    QuestionRepository,
    QuestionSortOrder,
)
from quorum.domain.value import QuestionId, TopicId, UserId
from quorum.persistence.mappers import question_to_dict, row_to_question
from quorum.persistence.search import LIKE_ESCAPE, contains_pattern
from quorum.persistence.tables import questions_table

_answer_count = func.jsonb_array_length(questions_table.c.answers)


class PostgresQuestionRepository(QuestionRepository):
    """PostgreSQL implementation of QuestionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _filter(self, stmt, query: QuestionQuery):
        stmt = stmt.where(questions_table.c.is_active.is_(True))

        if query.topic_id is not None:
            stmt = stmt.where(questions_table.c.topic_ids.any(query.topic_id))

        if query.author_id is not None:
            stmt = stmt.where(questions_table.c.author_id == query.author_id)

        if query.search:
            pattern = contains_pattern(query.search)
            stmt = stmt.where(
                or_(
                    questions_table.c.title.ilike(pattern, escape=LIKE_ESCAPE),
                    questions_table.c.description.ilike(pattern, escape=LIKE_ESCAPE),
                    func.array_to_string(questions_table.c.tags, " ").ilike(
                        pattern, escape=LIKE_ESCAPE
                    ),
                )
            )

        if query.tags:
            stmt = stmt.where(questions_table.c.tags.overlap(query.tags))

        if query.sort == QuestionSortOrder.UNANSWERED:
            stmt = stmt.where(_answer_count == 0)

        return stmt

    async def find_by_id(self, question_id: QuestionId) -> Optional[Question]:
        """Find a question by ID."""
        with logfire.span("question_repository.find_by_id", question_id=str(question_id)):
            stmt = select(questions_table).where(questions_table.c.id == question_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()
            return row_to_question(dict(row)) if row else None

    async def find_all(
        self, query: QuestionQuery, limit: int = 10, offset: int = 0
    ) -> List[Question]:
        """Find active questions matching a query."""
        with logfire.span(
            "question_repository.find_all",
            sort=query.sort.value,
            limit=limit,
            offset=offset,
        ):
            stmt = self._filter(select(questions_table), query)

            if query.sort == QuestionSortOrder.RECENT:
                stmt = stmt.order_by(desc(questions_table.c.created_at))
            elif query.sort == QuestionSortOrder.POPULAR:
                stmt = stmt.order_by(
                    desc(questions_table.c.views), desc(questions_table.c.created_at)
                )
            elif query.sort == QuestionSortOrder.ANSWERED:
                stmt = stmt.order_by(
                    desc(_answer_count), desc(questions_table.c.created_at)
                )
            elif query.sort == QuestionSortOrder.UNANSWERED:
                stmt = stmt.order_by(desc(questions_table.c.created_at))
            else:
                stmt = stmt.order_by(desc(questions_table.c.last_activity))

            stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            questions = [row_to_question(dict(row)) for row in result.mappings()]
            logfire.info("Found questions", count=len(questions))
            return questions

    async def count(self, query: QuestionQuery) -> int:
        """Count active questions matching a query."""
        with logfire.span("question_repository.count"):
            stmt = self._filter(
                select(func.count()).select_from(questions_table), query
            )
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def save(self, question: Question) -> Question:
        """Insert a new question or update it under a version check."""
        with logfire.span(
            "question_repository.save",
            question_id=str(question.id),
            version=question.version,
        ):
            new_version = question.version + 1
            values = {**question_to_dict(question), "version": new_version}

            if question.version == 0:
                await self.session.execute(questions_table.insert().values(**values))
            else:
                stmt = (
                    questions_table.update()
                    .where(questions_table.c.id == question.id)
                    .where(questions_table.c.version == question.version)
                    .values(**values)
                )
                result = await self.session.execute(stmt)
                if result.rowcount == 0:
                    logfire.warn(
                        "Stale question version",
                        question_id=str(question.id),
                        expected_version=question.version,
                    )
                    raise ConflictError("Question", str(question.id))

            await self.session.flush()
            return question.model_copy(update={"version": new_version})

    async def count_active_by_topic(self, topic_id: TopicId) -> int:
        """Count active questions referencing a topic."""
        stmt = (
            select(func.count())
            .select_from(questions_table)
            .where(questions_table.c.is_active.is_(True))
            .where(questions_table.c.topic_ids.any(topic_id))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def deactivate_by_author(self, author_id: UserId) -> int:
        """Soft-delete all active questions of an author."""
        stmt = (
            questions_table.update()
            .where(questions_table.c.author_id == author_id)
            .where(questions_table.c.is_active.is_(True))
            .values(
                is_active=False,
                updated_at=func.now(),
                version=questions_table.c.version + 1,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
