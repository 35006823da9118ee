"""Unit tests for QuestionService."""

from uuid import uuid4

import pytest

from quorum.config import QuestionSettings
from quorum.domain.error import ConflictError, NotAuthorizedError, NotFoundError
from quorum.domain.model import Question
from quorum.domain.service import QuestionService, normalize_tags
from quorum.domain.value import QuestionId, UserId, VoteType
from quorum.persistence.repository.inmemory import (
    InMemoryQuestionRepository,
    InMemoryTopicRepository,
    InMemoryUserRepository,
)
from tests.conftest import make_question, make_topic, make_user


class RacingQuestionRepository(InMemoryQuestionRepository):
    """Question repository where another writer sneaks in before each of
    the first ``races`` saves of an existing question."""

    def __init__(self, races: int) -> None:
        super().__init__()
        self.races = races
        self.save_calls = 0

    async def save(self, question: Question) -> Question:
        self.save_calls += 1
        if question.version > 0 and self.races > 0:
            self.races -= 1
            stored = self._questions[question.id]
            rival = UserId(uuid4())
            self._questions[question.id] = stored.model_copy(
                update={
                    "votes": stored.votes.apply(rival, VoteType.UPVOTE),
                    "version": stored.version + 1,
                }
            )
        return await super().save(question)


def build_service(question_repo=None, settings=None):
    question_repo = question_repo or InMemoryQuestionRepository()
    topic_repo = InMemoryTopicRepository()
    user_repo = InMemoryUserRepository()
    service = QuestionService(
        question_repository=question_repo,
        topic_repository=topic_repo,
        user_repository=user_repo,
        settings=settings or QuestionSettings(),
    )
    return service, question_repo, topic_repo, user_repo


class TestNormalizeTags:
    """Tests for normalize_tags()."""

    def test_trims_lowercases_and_drops_empty(self):
        assert normalize_tags(" Python, ,ASYNC ", 10) == ["python", "async"]

    def test_accepts_list(self):
        assert normalize_tags(["  A ", "b"], 10) == ["a", "b"]

    def test_truncates_to_limit(self):
        raw = ",".join(f"t{i}" for i in range(15))
        assert normalize_tags(raw, 10) == [f"t{i}" for i in range(10)]

    def test_none_gives_empty_list(self):
        assert normalize_tags(None, 10) == []


class TestCreateQuestion:
    """Tests for QuestionService.create_question()."""

    @pytest.mark.asyncio
    async def test_bumps_topic_and_author_counters(self):
        # Arrange
        service, _, topic_repo, user_repo = build_service()
        author = await user_repo.save(make_user("author"))
        python = await topic_repo.save(make_topic("Python", author.id))

        # Act
        question = await service.create_question(
            author=author,
            title="  What is a generator?  ",
            description="I keep seeing yield in code and do not get it.",
            topic_ids=[python.id, python.id],
            tags="Python, Generators",
            attachments=[],
        )

        # Assert
        assert question.version == 1
        assert question.title == "What is a generator?"
        assert question.topic_ids == [python.id]
        assert question.tags == ["python", "generators"]
        assert (await topic_repo.find_by_id(python.id)).question_count == 1
        assert (await user_repo.find_by_id(author.id)).questions_asked == 1


class TestVote:
    """Tests for QuestionService.vote()."""

    @pytest.mark.asyncio
    async def test_vote_switch_and_remove(self):
        # Arrange
        service, question_repo, _, _ = build_service()
        author = make_user("author")
        question = await question_repo.save(make_question(author))
        voter = UserId(uuid4())

        # Act & Assert
        up = await service.vote(question.id, voter, VoteType.UPVOTE)
        assert up.score == 1
        assert up.user_vote(voter) == VoteType.UPVOTE

        down = await service.vote(question.id, voter, VoteType.DOWNVOTE)
        assert down.score == -1
        assert voter not in down.votes.upvotes

        removed = await service.vote(question.id, voter, VoteType.REMOVE)
        assert removed.score == 0
        assert removed.user_vote(voter) is None

    @pytest.mark.asyncio
    async def test_self_vote_is_rejected_and_not_saved(self):
        service, question_repo, _, _ = build_service()
        author = make_user("author")
        question = await question_repo.save(make_question(author))

        with pytest.raises(NotAuthorizedError):
            await service.vote(question.id, author.id, VoteType.UPVOTE)

        stored = await question_repo.find_by_id(question.id)
        assert stored.version == question.version
        assert stored.score == 0

    @pytest.mark.asyncio
    async def test_unknown_question_raises_not_found(self):
        service, _, _, _ = build_service()

        with pytest.raises(NotFoundError):
            await service.vote(QuestionId(uuid4()), UserId(uuid4()), VoteType.UPVOTE)


class TestOptimisticConcurrency:
    """Version-checked saves and the retry loop."""

    @pytest.mark.asyncio
    async def test_stale_save_raises_conflict(self):
        """Saving from an outdated copy should be refused."""
        # Arrange
        question_repo = InMemoryQuestionRepository()
        author = make_user("author")
        saved = await question_repo.save(make_question(author))
        await question_repo.save(saved.vote(UserId(uuid4()), VoteType.UPVOTE))

        # Act & Assert
        with pytest.raises(ConflictError):
            await question_repo.save(saved.vote(UserId(uuid4()), VoteType.DOWNVOTE))

    @pytest.mark.asyncio
    async def test_transient_conflict_is_retried(self):
        """A lost race should be retried from a fresh load, keeping both writes."""
        # Arrange
        question_repo = RacingQuestionRepository(races=1)
        service, _, _, _ = build_service(question_repo)
        author = make_user("author")
        question = await question_repo.save(make_question(author))
        voter = UserId(uuid4())

        # Act
        result = await service.vote(question.id, voter, VoteType.UPVOTE)

        # Assert
        assert result.score == 2  # rival's vote and ours
        assert result.user_vote(voter) == VoteType.UPVOTE
        assert result.version == question.version + 2

    @pytest.mark.asyncio
    async def test_gives_up_after_max_attempts(self):
        question_repo = RacingQuestionRepository(races=5)
        service, _, _, _ = build_service(
            question_repo, QuestionSettings(max_save_attempts=3)
        )
        author = make_user("author")
        question = await question_repo.save(make_question(author))

        with pytest.raises(ConflictError):
            await service.vote(question.id, UserId(uuid4()), VoteType.UPVOTE)

        assert question_repo.save_calls == 1 + 3  # insert + three attempts


class TestAnswers:
    """Tests for answering through the service."""

    @pytest.mark.asyncio
    async def test_add_answer_persists(self):
        service, question_repo, _, _ = build_service()
        author, bob = make_user("author"), make_user("bob")
        question = await question_repo.save(make_question(author))

        saved, answer = await service.add_answer(
            question.id, bob, "This is a valid answer body"
        )

        stored = await question_repo.find_by_id(question.id)
        assert stored.answer_count == 1
        assert stored.answers[0].id == answer.id
        assert saved.version == stored.version

    @pytest.mark.asyncio
    async def test_vote_on_answer_and_accept(self):
        service, question_repo, _, _ = build_service()
        author, bob = make_user("author"), make_user("bob")
        question = await question_repo.save(make_question(author))
        _, answer = await service.add_answer(question.id, bob, "A helpful answer text")

        voted = await service.vote_on_answer(
            question.id, answer.id, author.id, VoteType.UPVOTE
        )
        accepted = await service.set_answer_accepted(
            question.id, answer.id, author.id, True
        )

        assert voted.score == 1
        assert accepted.is_accepted is True
        stored = await question_repo.find_by_id(question.id)
        assert stored.has_accepted_answer is True


class TestRecordView:
    """Tests for QuestionService.record_view()."""

    @pytest.mark.asyncio
    async def test_repeat_view_causes_no_write(self):
        # Arrange
        service, question_repo, _, _ = build_service()
        author = make_user("author")
        question = await question_repo.save(make_question(author))
        viewer = UserId(uuid4())

        # Act
        first = await service.record_view(question.id, viewer)
        second = await service.record_view(question.id, viewer)

        # Assert
        assert first.views == 1
        assert second.views == 1
        assert second.version == first.version


class TestUpdateAndDelete:
    """Tests for editing and soft-deleting questions."""

    @pytest.mark.asyncio
    async def test_update_moves_topic_counters(self):
        # Arrange
        service, _, topic_repo, user_repo = build_service()
        author = await user_repo.save(make_user("author"))
        python = await topic_repo.save(make_topic("Python", author.id))
        rust = await topic_repo.save(make_topic("Rust", author.id))
        question = await service.create_question(
            author, "Which language is faster?", "Comparing two languages here.",
            [python.id], None, [],
        )

        # Act
        updated = await service.update_question(question.id, author, topic_ids=[rust.id])

        # Assert
        assert updated.topic_ids == [rust.id]
        assert (await topic_repo.find_by_id(python.id)).question_count == 0
        assert (await topic_repo.find_by_id(rust.id)).question_count == 1

    @pytest.mark.asyncio
    async def test_only_author_or_admin_may_update(self):
        service, question_repo, _, _ = build_service()
        author, other = make_user("author"), make_user("other")
        question = await question_repo.save(make_question(author))

        with pytest.raises(NotAuthorizedError):
            await service.update_question(question.id, other, title="A different title")

    @pytest.mark.asyncio
    async def test_delete_decrements_counters_never_below_zero(self):
        # Arrange
        service, question_repo, topic_repo, user_repo = build_service()
        author = await user_repo.save(make_user("author"))
        python = await topic_repo.save(make_topic("Python", author.id))
        # Saved directly, so no counters were bumped
        question = await question_repo.save(make_question(author, topic_ids=[python.id]))

        # Act
        deleted = await service.delete_question(question.id, author)

        # Assert
        assert deleted.is_active is False
        assert (await topic_repo.find_by_id(python.id)).question_count == 0
        assert (await user_repo.find_by_id(author.id)).questions_asked == 0
        with pytest.raises(NotFoundError):
            await service.get_question(question.id)
