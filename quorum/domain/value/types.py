"""Domain value objects for Quorum.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from datetime import datetime
from enum import Enum

from pydantic import Field, field_validator

from quorum.domain.value.common import RootValueObject, ValueObject
from quorum.domain.value.identifiers import UserId


class UserRole(str, Enum):
    """Role of a user account."""

    USER = "user"
    MODERATOR = "moderator"
    ADMIN = "admin"


class Username(RootValueObject[str]):
    """Public, unique user name.

    Must be 3-30 characters after trimming surrounding whitespace.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username length."""
        v = v.strip()
        if len(v) < 3 or len(v) > 30:
            raise ValueError("Username must be 3-30 characters")
        return v


class Email(RootValueObject[str]):
    """Lowercased email address."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate email shape and normalize case."""
        v = v.strip().lower()
        if not re.match(r"^[^@\s]+@[^@\s]+\.[a-z]{2,}$", v):
            raise ValueError("Please enter a valid email")
        return v


class TopicSlug(RootValueObject[str]):
    """URL-safe topic slug.

    Lowercase alphanumeric words joined by single hyphens.
    Examples: 'machine-learning', 'python', 'web-development'
    """

    @field_validator("root")
    @classmethod
    def validate_slug_format(cls, v: str) -> str:
        """Validate slug format."""
        if not re.match(r"^[a-z0-9]+(?:-[a-z0-9]+)*$", v):
            raise ValueError(
                "Slug must be lowercase alphanumeric with hyphens, "
                "no leading/trailing hyphens or consecutive hyphens"
            )
        if len(v) > 60:
            raise ValueError("Slug must be at most 60 characters")
        return v


class HexColor(RootValueObject[str]):
    """CSS hex color such as '#8B5CF6' or '#fff'."""

    @field_validator("root")
    @classmethod
    def validate_hex(cls, v: str) -> str:
        """Validate hex color format."""
        if not re.match(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$", v):
            raise ValueError("Please enter a valid hex color")
        return v


class Attachment(ValueObject):
    """Metadata of a file uploaded with a question.

    The file itself lives in attachment storage; only metadata is kept on
    the question document.
    """

    filename: str  # Stored file name (unique)
    original_name: str
    mimetype: str
    size: int = Field(ge=0)
    path: str
    uploaded_at: datetime = Field(default_factory=datetime.now)


class ViewEntry(ValueObject):
    """One entry of a question's bounded view log."""

    user_id: UserId
    viewed_at: datetime
