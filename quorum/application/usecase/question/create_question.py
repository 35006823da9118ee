"""Create question use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, ConfigDict, Field

from quorum.adapter.storage import AttachmentStorage, Upload
from quorum.application.usecase.base import BaseUseCase
from quorum.application.usecase.question.common import QuestionDetail
from quorum.domain.service import QuestionService, TopicService, UserService
from quorum.domain.value import UserId


class CreateQuestionRequest(BaseModel):
    """Create question request."""

    model_config = ConfigDict(str_strip_whitespace=True)

    user_id: str  # From authenticated user
    title: str = Field(min_length=10, max_length=200)
    description: str = Field(min_length=20)
    topics: list[str] = []  # Topic slugs; unknown ones are ignored
    tags: list[str] | str | None = None
    uploads: list[Upload] = []


class CreateQuestionUseCase(BaseUseCase):
    """Use case for asking a question, with optional attachments."""

    def __init__(
        self,
        question_service: QuestionService,
        topic_service: TopicService,
        user_service: UserService,
        attachment_storage: AttachmentStorage,
    ) -> None:
        """Initialize create question use case.

        Args:
            question_service: Question domain service
            topic_service: Topic domain service
            user_service: User domain service
            attachment_storage: Attachment storage
        """
        self.question_service = question_service
        self.topic_service = topic_service
        self.user_service = user_service
        self.attachment_storage = attachment_storage

    async def execute(self, request: CreateQuestionRequest) -> QuestionDetail:
        """Execute create question flow.

        Steps:
        1. Load the author
        2. Resolve topic slugs to active topics
        3. Validate and store attachments
        4. Save the question and bump topic and author counters

        Raises:
            NotFoundError: If the author does not exist
            ValidationError: If an attachment is rejected
        """
        with logfire.span(
            "create_question.execute",
            user_id=request.user_id,
            uploads=len(request.uploads),
        ):
            author = await self.user_service.get_active_user_by_id(
                UserId(UUID(request.user_id))
            )
            topics = await self.topic_service.resolve_slugs(request.topics)
            attachments = await self.attachment_storage.store_all(request.uploads)

            question = await self.question_service.create_question(
                author=author,
                title=request.title,
                description=request.description,
                topic_ids=[t.id for t in topics],
                tags=request.tags,
                attachments=attachments,
            )
            return QuestionDetail.from_question(
                question, {t.id: t for t in topics}, author.id
            )
