"""Unit tests for the Question aggregate."""

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from quorum.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from quorum.domain.model.question import VIEW_LOG_CAPACITY
from quorum.domain.value import AnswerId, UserId, Username, VoteType
from tests.conftest import make_question, make_user


@pytest.fixture
def author():
    return make_user("author")


@pytest.fixture
def question(author):
    return make_question(author)


class TestVote:
    """Tests for Question.vote()."""

    def test_upvote_sets_score_and_user_vote(self, question):
        # Arrange
        voter = UserId(uuid4())

        # Act
        updated = question.vote(voter, VoteType.UPVOTE)

        # Assert
        assert updated.score == 1
        assert updated.user_vote(voter) == VoteType.UPVOTE
        assert question.score == 0  # original untouched

    def test_self_vote_is_forbidden_and_changes_nothing(self, question, author):
        """The author voting on their own question should be rejected."""
        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            question.vote(author.id, VoteType.UPVOTE)
        assert question.votes.upvotes == frozenset()
        assert question.votes.downvotes == frozenset()


class TestAddAnswer:
    """Tests for Question.add_answer()."""

    def test_appends_answer(self, question):
        # Arrange
        answerer = make_user("bob")

        # Act
        updated, answer = question.add_answer(
            answerer.id, answerer.username, "  This is a valid answer body  "
        )

        # Assert
        assert updated.answer_count == question.answer_count + 1
        assert answer.content == "This is a valid answer body"
        assert answer.is_accepted is False
        assert answer.score == 0
        assert updated.answers[-1] == answer

    def test_last_activity_never_moves_backwards(self, question):
        """An answer timestamped in the past must not rewind last_activity."""
        # Arrange
        answerer = make_user("bob")
        earlier = question.last_activity - timedelta(hours=1)

        # Act
        updated, _ = question.add_answer(
            answerer.id, answerer.username, "An answer from the past", now=earlier
        )

        # Assert
        assert updated.last_activity == question.last_activity

    def test_last_activity_moves_forward(self, question):
        answerer = make_user("bob")
        later = question.last_activity + timedelta(minutes=5)

        updated, _ = question.add_answer(
            answerer.id, answerer.username, "An answer from later on", now=later
        )

        assert updated.last_activity == later

    def test_rejects_blank_content(self, question):
        with pytest.raises(ValidationError):
            question.add_answer(UserId(uuid4()), Username("bob"), "   ")


class TestAnswerVotesAndAcceptance:
    """Tests for voting on and accepting answers."""

    def test_vote_on_answer_updates_only_that_answer(self, question):
        # Arrange
        bob, carol = make_user("bob"), make_user("carol")
        question, first = question.add_answer(bob.id, bob.username, "First answer here")
        question, second = question.add_answer(
            carol.id, carol.username, "Second answer here"
        )

        # Act
        updated, answer = question.vote_on_answer(first.id, carol.id, VoteType.UPVOTE)

        # Assert
        assert answer.score == 1
        assert updated.get_answer(first.id).score == 1
        assert updated.get_answer(second.id).score == 0
        assert updated.score == 0

    def test_answer_author_cannot_vote_on_own_answer(self, question):
        bob = make_user("bob")
        question, answer = question.add_answer(bob.id, bob.username, "My own answer")

        with pytest.raises(NotAuthorizedError):
            question.vote_on_answer(answer.id, bob.id, VoteType.UPVOTE)

    def test_unknown_answer_raises_not_found(self, question):
        with pytest.raises(NotFoundError):
            question.vote_on_answer(AnswerId(uuid4()), UserId(uuid4()), VoteType.UPVOTE)

    def test_question_author_accepts_answer(self, question, author):
        bob = make_user("bob")
        question, answer = question.add_answer(bob.id, bob.username, "Accept me please")

        updated, accepted = question.set_answer_accepted(answer.id, author.id, True)

        assert accepted.is_accepted is True
        assert updated.has_accepted_answer is True

    def test_only_question_author_may_accept(self, question):
        bob = make_user("bob")
        question, answer = question.add_answer(bob.id, bob.username, "Accept me please")

        with pytest.raises(NotAuthorizedError):
            question.set_answer_accepted(answer.id, bob.id, True)

    def test_accepting_is_not_exclusive(self, question, author):
        """Several answers may be flagged as accepted at once."""
        bob, carol = make_user("bob"), make_user("carol")
        question, first = question.add_answer(bob.id, bob.username, "First answer here")
        question, second = question.add_answer(
            carol.id, carol.username, "Second answer here"
        )

        question, _ = question.set_answer_accepted(first.id, author.id, True)
        question, _ = question.set_answer_accepted(second.id, author.id, True)

        assert all(a.is_accepted for a in question.answers)


class TestRecordView:
    """Tests for Question.record_view()."""

    def test_first_view_is_counted(self, question):
        # Arrange
        viewer = UserId(uuid4())

        # Act
        updated, counted = question.record_view(viewer)

        # Assert
        assert counted is True
        assert updated.views == 1
        assert updated.view_log[-1].user_id == viewer

    def test_repeat_view_within_window_is_not_counted(self, question):
        """A second view 23 hours later should not count and return the same instance."""
        # Arrange
        viewer = UserId(uuid4())
        start = datetime(2024, 1, 1, 12, 0)
        question, _ = question.record_view(viewer, now=start)

        # Act
        again, counted = question.record_view(viewer, now=start + timedelta(hours=23))

        # Assert
        assert counted is False
        assert again is question
        assert again.views == 1

    def test_view_after_window_is_counted_again(self, question):
        viewer = UserId(uuid4())
        start = datetime(2024, 1, 1, 12, 0)
        question, _ = question.record_view(viewer, now=start)

        again, counted = question.record_view(viewer, now=start + timedelta(hours=24))

        assert counted is True
        assert again.views == 2

    def test_log_keeps_only_most_recent_entries(self, question):
        """101 distinct viewers should leave exactly the 100 most recent in the log."""
        # Arrange
        start = datetime(2024, 1, 1)
        viewers = [UserId(uuid4()) for _ in range(VIEW_LOG_CAPACITY + 1)]

        # Act
        for i, viewer in enumerate(viewers):
            question, _ = question.record_view(
                viewer, now=start + timedelta(seconds=i)
            )

        # Assert
        assert question.views == VIEW_LOG_CAPACITY + 1
        assert len(question.view_log) == VIEW_LOG_CAPACITY
        assert [entry.user_id for entry in question.view_log] == viewers[1:]

    def test_evicted_viewer_is_counted_again(self, question):
        """Once pushed out of the log, a viewer's next view counts even inside the window."""
        start = datetime(2024, 1, 1)
        first = UserId(uuid4())
        question, _ = question.record_view(first, now=start)
        for i in range(VIEW_LOG_CAPACITY):
            question, _ = question.record_view(
                UserId(uuid4()), now=start + timedelta(seconds=i + 1)
            )

        _, counted = question.record_view(first, now=start + timedelta(minutes=10))

        assert counted is True
