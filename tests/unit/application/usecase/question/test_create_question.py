"""Unit tests for CreateQuestionUseCase."""

import pytest

from quorum.adapter.storage import AttachmentStorage, Upload
from quorum.application.usecase.question import (
    CreateQuestionRequest,
    CreateQuestionUseCase,
)
from quorum.domain.error import NotFoundError, ValidationError
from quorum.domain.repository import TopicRepository, UserRepository
from tests.conftest import make_topic, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateQuestionUseCase:
    """Tests for CreateQuestionUseCase."""

    @pytest.mark.asyncio
    async def test_create_with_topics_tags_and_attachment(self, unit_env):
        """Known topic slugs are resolved and unknown ones ignored."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        topic_repo = await unit_env.get(TopicRepository)
        storage = await unit_env.get(AttachmentStorage)
        use_case = await unit_env.get(CreateQuestionUseCase)

        alice = await user_repo.save(make_user("alice"))
        python = await topic_repo.save(make_topic("Python", alice.id))

        request = CreateQuestionRequest(
            user_id=str(alice.id),
            title="How do I reverse a list in Python?",
            description="I have a list and want it in the opposite order.",
            topics=["python", "no-such-topic"],
            tags="Lists, Python",
            uploads=[
                Upload(filename="shot.PNG", content_type="image/png", data=b"\x89PNG")
            ],
        )

        # Act
        detail = await use_case.execute(request)

        # Assert
        assert [t.slug for t in detail.topics] == ["python"]
        assert detail.tags == ["lists", "python"]
        assert detail.score == 0
        assert detail.answers == []
        assert len(detail.attachments) == 1
        attachment = detail.attachments[0]
        assert attachment.original_name == "shot.PNG"
        assert attachment.filename.endswith(".png")
        assert storage.files[attachment.filename] == b"\x89PNG"
        assert (await topic_repo.find_by_id(python.id)).question_count == 1
        assert (await user_repo.find_by_id(alice.id)).questions_asked == 1

    @pytest.mark.asyncio
    async def test_rejected_attachment_stores_nothing(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        storage = await unit_env.get(AttachmentStorage)
        use_case = await unit_env.get(CreateQuestionUseCase)
        alice = await user_repo.save(make_user("alice"))

        request = CreateQuestionRequest(
            user_id=str(alice.id),
            title="Why does my script crash?",
            description="Attaching the script and a screenshot of the crash.",
            uploads=[
                Upload(filename="ok.png", content_type="image/png", data=b"png"),
                Upload(filename="run.sh", content_type="text/x-sh", data=b"rm -rf"),
            ],
        )

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(request)
        assert storage.files == {}
        assert (await user_repo.find_by_id(alice.id)).questions_asked == 0

    @pytest.mark.asyncio
    async def test_unknown_author(self, unit_env):
        use_case = await unit_env.get(CreateQuestionUseCase)
        request = CreateQuestionRequest(
            user_id="00000000-0000-0000-0000-000000000000",
            title="Who am I asking as here?",
            description="This author was never registered anywhere.",
        )

        with pytest.raises(NotFoundError):
            await use_case.execute(request)
