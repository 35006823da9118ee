"""Unit tests for AddAnswerUseCase and AcceptAnswerUseCase."""

import pytest

from quorum.application.usecase.question import (
    AcceptAnswerRequest,
    AcceptAnswerUseCase,
    AddAnswerRequest,
    AddAnswerUseCase,
)
from quorum.domain.error import NotAuthorizedError, ValidationError
from quorum.domain.repository import QuestionRepository, UserRepository
from tests.conftest import make_question, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestAddAnswerUseCase:
    """Tests for AddAnswerUseCase."""

    @pytest.mark.asyncio
    async def test_add_answer(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        use_case = await unit_env.get(AddAnswerUseCase)
        author = await user_repo.save(make_user("author"))
        bob = await user_repo.save(make_user("bob"))
        question = await question_repo.save(make_question(author))

        # Act
        response = await use_case.execute(
            AddAnswerRequest(
                question_id=str(question.id),
                user_id=str(bob.id),
                content="  This is a valid answer body  ",
            )
        )

        # Assert
        assert response.answer_count == 1
        assert response.answer.content == "This is a valid answer body"
        assert response.answer.author_username == "bob"
        assert response.answer.is_accepted is False
        assert response.answer.score == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("content", ["", "   ", "too short"])
    async def test_short_answers_are_rejected(self, unit_env, content):
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        use_case = await unit_env.get(AddAnswerUseCase)
        author = await user_repo.save(make_user("author"))
        question = await question_repo.save(make_question(author))

        with pytest.raises(ValidationError):
            await use_case.execute(
                AddAnswerRequest(
                    question_id=str(question.id), user_id=str(author.id), content=content
                )
            )

        assert (await question_repo.find_by_id(question.id)).answers == []


class TestAcceptAnswerUseCase:
    """Tests for AcceptAnswerUseCase."""

    @pytest.mark.asyncio
    async def test_only_question_author_accepts(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        question_repo = await unit_env.get(QuestionRepository)
        add_answer = await unit_env.get(AddAnswerUseCase)
        accept = await unit_env.get(AcceptAnswerUseCase)
        author = await user_repo.save(make_user("author"))
        bob = await user_repo.save(make_user("bob"))
        question = await question_repo.save(make_question(author))
        added = await add_answer.execute(
            AddAnswerRequest(
                question_id=str(question.id),
                user_id=str(bob.id),
                content="Use reversed() or slicing with [::-1].",
            )
        )
        answer_id = added.answer.answer_id

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await accept.execute(
                AcceptAnswerRequest(
                    question_id=str(question.id),
                    answer_id=answer_id,
                    user_id=str(bob.id),
                    accepted=True,
                )
            )

        accepted = await accept.execute(
            AcceptAnswerRequest(
                question_id=str(question.id),
                answer_id=answer_id,
                user_id=str(author.id),
                accepted=True,
            )
        )
        assert accepted.is_accepted is True
