"""Test configuration and fixtures."""

import os
from datetime import datetime
from typing import Optional
from uuid import uuid4

# Test defaults, applied before any Settings() is created
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__BCRYPT_ROUNDS", "4")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret")

from quorum.domain.model import Question, Topic, User  # noqa: E402
from quorum.domain.value import (  # noqa: E402
    QuestionId,
    TopicId,
    TopicSlug,
    UserId,
    Username,
    UserRole,
    Email,
)


def make_user(
    username: str = "alice",
    role: UserRole = UserRole.USER,
    **fields,
) -> User:
    """Build a user with sensible defaults (not persisted)."""
    return User(
        id=UserId(uuid4()),
        username=Username(username),
        email=Email(f"{username}@example.com"),
        password_hash="not-a-real-hash",
        role=role,
        **fields,
    )


def make_topic(name: str, created_by: UserId, **fields) -> Topic:
    """Build an active topic whose slug is its lowercased name."""
    return Topic(
        id=TopicId(uuid4()),
        name=name,
        slug=TopicSlug(name.lower().replace(" ", "-")),
        created_by=created_by,
        **fields,
    )


def make_question(
    author: User,
    title: str = "How do I reverse a list in Python?",
    topic_ids: Optional[list[TopicId]] = None,
    created_at: Optional[datetime] = None,
    **fields,
) -> Question:
    """Build a new (unsaved, version 0) question."""
    now = created_at or datetime.now()
    return Question(
        id=QuestionId(uuid4()),
        title=title,
        description="I have a list and want it in the opposite order.",
        author_id=author.id,
        author_username=author.username,
        topic_ids=topic_ids or [],
        last_activity=now,
        created_at=now,
        updated_at=now,
        **fields,
    )
