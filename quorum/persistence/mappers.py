"""Mappers for converting between database rows and domain models.

The domain models are immutable pydantic models, so rows are mapped by
hand instead of through SQLAlchemy's ORM. Embedded documents (answers,
vote ledgers, the view log, attachments) are dumped in JSON mode for the
JSONB columns and re-validated on the way back.
"""

from typing import Any, Dict

from quorum.domain.model import Question, Topic, User
from quorum.domain.value import UserRole


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User.model_validate(
        {
            **row,
            "role": UserRole(row["role"]),
            "followed_topic_ids": list(row.get("followed_topic_ids") or []),
            "following_ids": list(row.get("following_ids") or []),
            "follower_ids": list(row.get("follower_ids") or []),
        }
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_topic(row: Dict[str, Any]) -> Topic:
    """Convert database row to Topic domain model."""
    return Topic.model_validate(
        {**row, "moderator_ids": list(row.get("moderator_ids") or [])}
    )


def topic_to_dict(topic: Topic) -> Dict[str, Any]:
    """Convert Topic domain model to database dict."""
    return topic.model_dump()


# Embedded documents stored as JSONB
_DOCUMENT_FIELDS = ("answers", "votes", "view_log", "attachments")


def row_to_question(row: Dict[str, Any]) -> Question:
    """Convert database row to Question domain model.

    Args:
        row: Database row as dict (JSONB columns already decoded)

    Returns:
        Question domain model
    """
    return Question.model_validate(
        {
            **row,
            "topic_ids": list(row.get("topic_ids") or []),
            "tags": list(row.get("tags") or []),
        }
    )


def question_to_dict(question: Question) -> Dict[str, Any]:
    """Convert Question domain model to database dict.

    Args:
        question: Question domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = question.model_dump(exclude=set(_DOCUMENT_FIELDS))
    documents = question.model_dump(mode="json", include=set(_DOCUMENT_FIELDS))
    return {**data, **documents}
