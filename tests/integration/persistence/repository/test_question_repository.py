"""Integration tests for the PostgreSQL repositories.

These tests verify optimistic versioning of question documents and the
atomic counter updates against a real database.
"""

from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from quorum.domain.error import ConflictError
from quorum.domain.repository import (
    QuestionQuery,
    QuestionRepository,
    QuestionSortOrder,
    TopicRepository,
    UserRepository,
)
from quorum.domain.value import UserId, VoteType
from tests.conftest import make_question, make_topic, make_user
from tests.harness import create_env_fixture

# Integration test fixture - real PostgreSQL, mocked attachment storage
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture(autouse=True)
async def clean_database(integration_env):
    """Clean database before each test."""
    session = await integration_env.get(AsyncSession)
    await session.execute(text("TRUNCATE TABLE questions, topics, users CASCADE"))
    await session.commit()
    yield


class TestQuestionRepositoryIntegration:
    """Integration tests for PostgresQuestionRepository."""

    @pytest.mark.asyncio
    async def test_document_round_trip(self, integration_env):
        """Answers, votes and the view log survive a save and reload."""
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        question_repo = await integration_env.get(QuestionRepository)
        author = await user_repo.save(make_user("author"))
        bob = await user_repo.save(make_user("bob"))

        question, answer = make_question(author, tags=["python"]).add_answer(
            bob.id, bob.username, "Use reversed() on the list."
        )
        question = question.vote(bob.id, VoteType.UPVOTE)
        question, _ = question.record_view(bob.id)

        # Act
        saved = await question_repo.save(question)
        found = await question_repo.find_by_id(question.id)

        # Assert
        assert saved.version == 1
        assert found is not None
        assert found.version == 1
        assert found.answers[0].id == answer.id
        assert found.answers[0].content == "Use reversed() on the list."
        assert found.score == 1
        assert found.views == 1
        assert found.view_log[0].user_id == bob.id
        assert found.tags == ["python"]

    @pytest.mark.asyncio
    async def test_stale_version_is_rejected(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        question_repo = await integration_env.get(QuestionRepository)
        author = await user_repo.save(make_user("author"))
        saved = await question_repo.save(make_question(author))
        await question_repo.save(saved.vote(UserId(uuid4()), VoteType.UPVOTE))

        # Act & Assert
        with pytest.raises(ConflictError):
            await question_repo.save(saved.vote(UserId(uuid4()), VoteType.DOWNVOTE))

    @pytest.mark.asyncio
    async def test_unanswered_filter(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        question_repo = await integration_env.get(QuestionRepository)
        author = await user_repo.save(make_user("author"))
        bob = await user_repo.save(make_user("bob"))
        answered, _ = make_question(author, title="An answered question").add_answer(
            bob.id, bob.username, "Here is an answer."
        )
        await question_repo.save(answered)
        waiting = await question_repo.save(make_question(author, title="Nobody answered yet"))

        query = QuestionQuery(sort=QuestionSortOrder.UNANSWERED)
        found = await question_repo.find_all(query)

        assert [q.id for q in found] == [waiting.id]
        assert await question_repo.count(query) == 1

    @pytest.mark.asyncio
    async def test_deactivate_by_author(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        question_repo = await integration_env.get(QuestionRepository)
        author = await user_repo.save(make_user("author"))
        question = await question_repo.save(make_question(author))

        count = await question_repo.deactivate_by_author(author.id)
        found = await question_repo.find_by_id(question.id)

        assert count == 1
        assert found.is_active is False
        assert found.version == 2


class TestCounterIntegration:
    """Atomic counter updates on topics and users."""

    @pytest.mark.asyncio
    async def test_counters_never_drop_below_zero(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        topic_repo = await integration_env.get(TopicRepository)
        author = await user_repo.save(make_user("author"))
        topic = await topic_repo.save(make_topic("Python", author.id))

        # Act
        await topic_repo.adjust_question_count([topic.id], 1)
        await topic_repo.adjust_question_count([topic.id], -1)
        await topic_repo.adjust_question_count([topic.id], -1)
        await topic_repo.adjust_follower_count(topic.id, -1)
        await user_repo.adjust_questions_asked(author.id, -1)

        # Assert
        stored_topic = await topic_repo.find_by_id(topic.id)
        stored_user = await user_repo.find_by_id(author.id)
        assert stored_topic.question_count == 0
        assert stored_topic.follower_count == 0
        assert stored_user.questions_asked == 0
