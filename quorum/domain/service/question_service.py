"""Question domain service.

Every change to an existing question is a read-modify-write of the whole
aggregate: load by ID, apply a pure transform, save with a version check.
When the save loses a race the whole cycle is retried from a fresh load.
"""

from datetime import datetime, timedelta
from typing import Any, Callable, Optional, TypeVar
from uuid import uuid4

import logfire

from quorum.config import QuestionSettings
from quorum.domain.error import ConflictError, NotAuthorizedError, NotFoundError
from quorum.domain.model.answer import Answer
from quorum.domain.model.question import Question
from quorum.domain.model.user import User
from quorum.domain.repository import (
    QuestionQuery,
    QuestionRepository,
    TopicRepository,
    UserRepository,
)
from quorum.domain.value import (
    AnswerId,
    Attachment,
    QuestionId,
    TopicId,
    UserId,
    VoteType,
)

from .base import Service

T = TypeVar("T")


def normalize_tags(raw: list[str] | str | None, limit: int) -> list[str]:
    """Normalize user-supplied tags.

    Accepts a list or a comma-separated string. Each tag is trimmed and
    lowercased, empty entries are dropped and only the first ``limit`` are
    kept. Duplicates are kept.

    Examples:
        >>> normalize_tags(" Python, ,ASYNC ", 10)
        ['python', 'async']
    """
    if raw is None:
        return []
    items = raw.split(",") if isinstance(raw, str) else raw
    tags = [tag.strip().lower() for tag in items]
    return [tag for tag in tags if tag][:limit]


class QuestionService(Service):
    """Domain service for question, answer and vote operations."""

    def __init__(
        self,
        question_repository: QuestionRepository,
        topic_repository: TopicRepository,
        user_repository: UserRepository,
        settings: QuestionSettings,
    ) -> None:
        """Initialize question service.

        Args:
            question_repository: Question repository
            topic_repository: Topic repository (question counters)
            user_repository: User repository (questions_asked counter)
            settings: Question policy settings
        """
        self.question_repository = question_repository
        self.topic_repository = topic_repository
        self.user_repository = user_repository
        self.settings = settings

    async def get_question(self, question_id: QuestionId) -> Question:
        """Get an active question.

        Raises:
            NotFoundError: If the question does not exist or was deleted
        """
        question = await self.question_repository.find_by_id(question_id)
        if not question or not question.is_active:
            logfire.warn("Question not found", question_id=str(question_id))
            raise NotFoundError("Question", str(question_id))
        return question

    async def list_questions(
        self, query: QuestionQuery, limit: int, offset: int
    ) -> tuple[list[Question], int]:
        """List active questions.

        Returns:
            Tuple of (page of questions, total matching questions)
        """
        with logfire.span(
            "question_service.list_questions", sort=query.sort.value, offset=offset
        ):
            questions = await self.question_repository.find_all(query, limit, offset)
            total = await self.question_repository.count(query)
            return questions, total

    async def _mutate(
        self,
        question_id: QuestionId,
        transform: Callable[[Question], tuple[Question, T]],
    ) -> tuple[Question, T]:
        """Load, transform and save a question, retrying on version conflicts.

        ``transform`` must be pure: it may run once per attempt. When it
        returns the very instance it was given, nothing is saved.

        Raises:
            ConflictError: If every attempt lost a concurrent write
        """
        attempts = self.settings.max_save_attempts
        for attempt in range(1, attempts + 1):
            question = await self.get_question(question_id)
            updated, result = transform(question)
            if updated is question:
                return question, result
            try:
                saved = await self.question_repository.save(updated)
                return saved, result
            except ConflictError:
                logfire.warn(
                    "Question save conflict",
                    question_id=str(question_id),
                    attempt=attempt,
                    max_attempts=attempts,
                )
                if attempt == attempts:
                    raise
        raise ConflictError("Question", str(question_id))

    async def create_question(
        self,
        author: User,
        title: str,
        description: str,
        topic_ids: list[TopicId],
        tags: list[str] | str | None,
        attachments: list[Attachment],
    ) -> Question:
        """Create a question and bump the related counters.

        Args:
            author: Asking user
            title: Question title (trimmed)
            description: Question body (trimmed)
            topic_ids: Resolved, active topic IDs
            tags: Raw tags, normalized before storing
            attachments: Stored attachment metadata

        Returns:
            Saved question
        """
        with logfire.span("question_service.create_question", author_id=str(author.id)):
            now = datetime.now()
            question = Question(
                id=QuestionId(uuid4()),
                title=title.strip(),
                description=description.strip(),
                author_id=author.id,
                author_username=author.username,
                topic_ids=list(dict.fromkeys(topic_ids)),
                tags=normalize_tags(tags, self.settings.max_tags),
                attachments=attachments,
                last_activity=now,
                created_at=now,
                updated_at=now,
            )
            saved = await self.question_repository.save(question)

            await self.topic_repository.adjust_question_count(saved.topic_ids, 1)
            await self.user_repository.adjust_questions_asked(author.id, 1)

            logfire.info(
                "Question created",
                question_id=str(saved.id),
                topics=len(saved.topic_ids),
                attachments=len(saved.attachments),
            )
            return saved

    def _check_owner(self, question: Question, actor: User, action: str) -> None:
        if question.author_id != actor.id and not actor.is_admin:
            raise NotAuthorizedError(action, "Question", str(question.id), str(actor.id))

    async def update_question(
        self,
        question_id: QuestionId,
        actor: User,
        title: Optional[str] = None,
        description: Optional[str] = None,
        topic_ids: Optional[list[TopicId]] = None,
        tags: list[str] | str | None = None,
    ) -> Question:
        """Edit a question's metadata. Fields left as None are kept.

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the actor is neither the author nor an admin
        """
        with logfire.span(
            "question_service.update_question",
            question_id=str(question_id),
            actor_id=str(actor.id),
        ):

            def edit(question: Question) -> tuple[Question, list[TopicId]]:
                self._check_owner(question, actor, "update")
                fields: dict[str, Any] = {"updated_at": datetime.now()}
                if title:
                    fields["title"] = title.strip()
                if description:
                    fields["description"] = description.strip()
                if topic_ids is not None:
                    fields["topic_ids"] = list(dict.fromkeys(topic_ids))
                if tags is not None:
                    fields["tags"] = normalize_tags(tags, self.settings.max_tags)
                updated = Question.model_validate({**question.model_dump(), **fields})
                return updated, question.topic_ids

            saved, previous_topics = await self._mutate(question_id, edit)

            removed = [t for t in previous_topics if t not in saved.topic_ids]
            added = [t for t in saved.topic_ids if t not in previous_topics]
            if removed:
                await self.topic_repository.adjust_question_count(removed, -1)
            if added:
                await self.topic_repository.adjust_question_count(added, 1)

            logfire.info("Question updated", question_id=str(saved.id))
            return saved

    async def delete_question(self, question_id: QuestionId, actor: User) -> Question:
        """Soft-delete a question and decrement the related counters.

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the actor is neither the author nor an admin
        """
        with logfire.span(
            "question_service.delete_question",
            question_id=str(question_id),
            actor_id=str(actor.id),
        ):

            def deactivate(question: Question) -> tuple[Question, None]:
                self._check_owner(question, actor, "delete")
                updated = question.model_copy(
                    update={"is_active": False, "updated_at": datetime.now()}
                )
                return updated, None

            saved, _ = await self._mutate(question_id, deactivate)

            await self.topic_repository.adjust_question_count(saved.topic_ids, -1)
            await self.user_repository.adjust_questions_asked(saved.author_id, -1)

            logfire.info("Question deleted", question_id=str(saved.id))
            return saved

    async def vote(
        self, question_id: QuestionId, user_id: UserId, vote_type: VoteType
    ) -> Question:
        """Vote on a question.

        Raises:
            NotFoundError: If the question does not exist
            NotAuthorizedError: If the user wrote the question
        """
        with logfire.span(
            "question_service.vote",
            question_id=str(question_id),
            user_id=str(user_id),
            vote_type=vote_type.value,
        ):
            saved, _ = await self._mutate(
                question_id, lambda q: (q.vote(user_id, vote_type), None)
            )
            logfire.info(
                "Question vote applied", question_id=str(question_id), score=saved.score
            )
            return saved

    async def add_answer(
        self, question_id: QuestionId, author: User, content: str
    ) -> tuple[Question, Answer]:
        """Append an answer to a question.

        Returns:
            Tuple of (saved question, new answer)

        Raises:
            NotFoundError: If the question does not exist
            ValidationError: If the content is empty
        """
        with logfire.span(
            "question_service.add_answer",
            question_id=str(question_id),
            author_id=str(author.id),
        ):
            saved, answer = await self._mutate(
                question_id,
                lambda q: q.add_answer(author.id, author.username, content),
            )
            logfire.info(
                "Answer added",
                question_id=str(question_id),
                answer_id=str(answer.id),
                answer_count=saved.answer_count,
            )
            return saved, answer

    async def vote_on_answer(
        self,
        question_id: QuestionId,
        answer_id: AnswerId,
        user_id: UserId,
        vote_type: VoteType,
    ) -> Answer:
        """Vote on an answer.

        Returns:
            The updated answer

        Raises:
            NotFoundError: If the question or answer does not exist
            NotAuthorizedError: If the user wrote the answer
        """
        with logfire.span(
            "question_service.vote_on_answer",
            question_id=str(question_id),
            answer_id=str(answer_id),
            user_id=str(user_id),
            vote_type=vote_type.value,
        ):
            _, answer = await self._mutate(
                question_id, lambda q: q.vote_on_answer(answer_id, user_id, vote_type)
            )
            logfire.info(
                "Answer vote applied", answer_id=str(answer_id), score=answer.score
            )
            return answer

    async def set_answer_accepted(
        self,
        question_id: QuestionId,
        answer_id: AnswerId,
        user_id: UserId,
        accepted: bool,
    ) -> Answer:
        """Set or clear the accepted flag of an answer.

        Raises:
            NotFoundError: If the question or answer does not exist
            NotAuthorizedError: If the user is not the question's author
        """
        with logfire.span(
            "question_service.set_answer_accepted",
            question_id=str(question_id),
            answer_id=str(answer_id),
            accepted=accepted,
        ):
            _, answer = await self._mutate(
                question_id,
                lambda q: q.set_answer_accepted(answer_id, user_id, accepted),
            )
            logfire.info(
                "Answer acceptance set", answer_id=str(answer_id), accepted=accepted
            )
            return answer

    async def record_view(self, question_id: QuestionId, user_id: UserId) -> Question:
        """Count a view of a question by an authenticated user.

        Repeat views inside the deduplication window are not counted and
        cause no write.

        Returns:
            The question as it now stands
        """
        window = timedelta(hours=self.settings.view_dedup_hours)
        capacity = self.settings.view_log_capacity
        with logfire.span(
            "question_service.record_view",
            question_id=str(question_id),
            user_id=str(user_id),
        ):
            saved, counted = await self._mutate(
                question_id,
                lambda q: q.record_view(user_id, window=window, capacity=capacity),
            )
            if counted:
                logfire.info("Question view counted", question_id=str(question_id))
            return saved
