"""Topic domain service."""

import re
from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

import logfire

from quorum.domain.error import (
    AlreadyExistsError,
    BusinessRuleViolationError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from quorum.domain.model.topic import Topic
from quorum.domain.model.user import User
from quorum.domain.repository import (
    QuestionRepository,
    TopicRepository,
    TopicSortOrder,
    UserRepository,
)
from quorum.domain.value import TopicId, TopicSlug, UserId

from .base import Service


def slugify(name: str) -> str:
    """Derive a topic slug from its name.

    Lowercases, keeps only ``[a-z0-9 -]``, turns whitespace into hyphens,
    collapses runs of hyphens and strips them from both ends.

    Examples:
        >>> slugify("Machine Learning!")
        'machine-learning'
        >>> slugify("  C++ / Rust  ")
        'c-rust'
    """
    slug = name.lower()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


class TopicService(Service):
    """Domain service for topic operations."""

    def __init__(
        self,
        topic_repository: TopicRepository,
        question_repository: QuestionRepository,
        user_repository: UserRepository,
    ) -> None:
        """Initialize topic service.

        Args:
            topic_repository: Topic repository
            question_repository: Question repository (for deletion checks)
            user_repository: User repository (for followed topics)
        """
        self.topic_repository = topic_repository
        self.question_repository = question_repository
        self.user_repository = user_repository

    def _make_slug(self, name: str) -> TopicSlug:
        slug = slugify(name)
        if not slug:
            raise ValidationError(f"Topic name {name!r} has no usable characters")
        return TopicSlug(slug[:60].rstrip("-"))

    async def get_active_topic(self, slug: TopicSlug | str) -> Topic:
        """Get an active topic by slug.

        Raises:
            NotFoundError: If no active topic has that slug
        """
        with logfire.span("topic_service.get_active_topic", slug=str(slug)):
            try:
                valid_slug = TopicSlug(str(slug))
            except ValueError as e:
                logfire.warn("Malformed topic slug", slug=str(slug))
                raise NotFoundError("Topic", str(slug)) from e
            topic = await self.topic_repository.find_by_slug(valid_slug)
            if not topic or not topic.is_active:
                logfire.warn("Topic not found", slug=str(slug))
                raise NotFoundError("Topic", str(slug))
            return topic

    async def get_topics_by_ids(self, topic_ids: list[TopicId]) -> list[Topic]:
        """Get topics by ID, keeping the order of ``topic_ids``."""
        if not topic_ids:
            return []
        by_id = {t.id: t for t in await self.topic_repository.find_by_ids(topic_ids)}
        return [by_id[topic_id] for topic_id in topic_ids if topic_id in by_id]

    async def resolve_slugs(self, slugs: list[str]) -> list[Topic]:
        """Resolve topic slugs to active topics, silently skipping unknown ones."""
        valid: list[TopicSlug] = []
        for slug in slugs:
            try:
                valid.append(TopicSlug(slug.strip().lower()))
            except ValueError:
                logfire.warn("Ignoring malformed topic slug", slug=slug)
        if not valid:
            return []
        return await self.topic_repository.find_by_slugs(valid)

    async def list_topics(
        self,
        search: Optional[str],
        sort: TopicSortOrder,
        limit: int,
        offset: int,
    ) -> tuple[list[Topic], int]:
        """List active topics.

        Returns:
            Tuple of (page of topics, total matching topics)
        """
        with logfire.span("topic_service.list_topics", search=search, sort=sort.value):
            topics = await self.topic_repository.find_all(
                search=search, sort=sort, limit=limit, offset=offset
            )
            total = await self.topic_repository.count(search=search)
            return topics, total

    async def create_topic(
        self,
        name: str,
        description: str,
        created_by: UserId,
        color: Optional[str] = None,
        icon: Optional[str] = None,
    ) -> Topic:
        """Create a topic.

        Args:
            name: Display name (unique case-insensitively)
            description: Topic description
            created_by: Creating user
            color: Hex color (default purple)
            icon: Icon (default speech bubble)

        Returns:
            Saved topic

        Raises:
            AlreadyExistsError: If a topic with that name or slug exists
        """
        name = name.strip()
        with logfire.span("topic_service.create_topic", name=name):
            if await self.topic_repository.find_by_name(name):
                raise AlreadyExistsError("Topic", "name", name)

            slug = self._make_slug(name)
            if await self.topic_repository.find_by_slug(slug):
                raise AlreadyExistsError("Topic", "slug", str(slug))

            now = datetime.now()
            data: dict[str, Any] = {
                "id": TopicId(uuid4()),
                "name": name,
                "slug": slug,
                "description": description.strip(),
                "created_by": created_by,
                "last_activity": now,
                "created_at": now,
                "updated_at": now,
            }
            if color:
                data["color"] = color
            if icon:
                data["icon"] = icon

            topic = await self.topic_repository.save(Topic.model_validate(data))
            logfire.info("Topic created", topic_id=str(topic.id), slug=str(topic.slug))
            return topic

    async def update_topic(
        self, topic: Topic, actor: User, fields: dict[str, Any]
    ) -> Topic:
        """Update name, description, color or icon of a topic.

        Renaming regenerates the slug.

        Raises:
            NotAuthorizedError: If the actor is not an admin, moderator or
                the topic's creator
            AlreadyExistsError: If the new name is taken by another topic
        """
        with logfire.span("topic_service.update_topic", topic_id=str(topic.id)):
            if not topic.can_be_edited_by(actor.id, actor.is_admin):
                raise NotAuthorizedError(
                    "update", "Topic", str(topic.id), str(actor.id)
                )

            update = dict(fields)
            name = update.get("name")
            if name is not None:
                name = name.strip()
                update["name"] = name
                if name.lower() != topic.name.lower():
                    existing = await self.topic_repository.find_by_name(name)
                    if existing and existing.id != topic.id:
                        raise AlreadyExistsError("Topic", "name", name)
                update["slug"] = self._make_slug(name)

            updated = Topic.model_validate(
                {**topic.model_dump(), **update, "updated_at": datetime.now()}
            )
            saved = await self.topic_repository.save(updated)
            logfire.info("Topic updated", topic_id=str(saved.id), slug=str(saved.slug))
            return saved

    async def delete_topic(self, topic: Topic) -> Topic:
        """Soft-delete a topic.

        Raises:
            BusinessRuleViolationError: If active questions reference the topic
        """
        with logfire.span("topic_service.delete_topic", topic_id=str(topic.id)):
            count = await self.question_repository.count_active_by_topic(topic.id)
            if count > 0:
                raise BusinessRuleViolationError(
                    f"Cannot delete topic with {count} active questions"
                )
            saved = await self.topic_repository.save(
                topic.model_copy(update={"is_active": False, "updated_at": datetime.now()})
            )
            logfire.info("Topic deleted", topic_id=str(topic.id))
            return saved

    async def toggle_follow(self, user: User, topic: Topic) -> tuple[Topic, bool]:
        """Follow a topic, or unfollow when already following.

        Returns:
            Tuple of (topic with its updated follower count, whether the user
            now follows it)
        """
        with logfire.span(
            "topic_service.toggle_follow", topic_id=str(topic.id), user_id=str(user.id)
        ):
            if topic.id in user.followed_topic_ids:
                followed = [i for i in user.followed_topic_ids if i != topic.id]
                delta = -1
            else:
                followed = [*user.followed_topic_ids, topic.id]
                delta = 1

            await self.user_repository.save(
                user.model_copy(
                    update={"followed_topic_ids": followed, "updated_at": datetime.now()}
                )
            )
            await self.topic_repository.adjust_follower_count(topic.id, delta)
            refreshed = await self.topic_repository.find_by_id(topic.id) or topic
            logfire.info(
                "Topic follow toggled",
                topic_id=str(topic.id),
                user_id=str(user.id),
                is_following=delta > 0,
            )
            return refreshed, delta > 0

    async def add_moderator(self, topic: Topic, user: User) -> Topic:
        """Add a user to a topic's moderators.

        Raises:
            BusinessRuleViolationError: If the user already moderates the topic
        """
        with logfire.span(
            "topic_service.add_moderator", topic_id=str(topic.id), user_id=str(user.id)
        ):
            if user.id in topic.moderator_ids:
                raise BusinessRuleViolationError("User is already a moderator")
            return await self.topic_repository.save(
                topic.model_copy(
                    update={
                        "moderator_ids": [*topic.moderator_ids, user.id],
                        "updated_at": datetime.now(),
                    }
                )
            )

    async def remove_moderator(self, topic: Topic, user_id: UserId) -> Topic:
        """Remove a user from a topic's moderators (no-op if absent)."""
        with logfire.span(
            "topic_service.remove_moderator",
            topic_id=str(topic.id),
            user_id=str(user_id),
        ):
            return await self.topic_repository.save(
                topic.model_copy(
                    update={
                        "moderator_ids": [i for i in topic.moderator_ids if i != user_id],
                        "updated_at": datetime.now(),
                    }
                )
            )
