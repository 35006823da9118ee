"""User aggregate root.

Users register with a username, email and password, ask and answer
questions, and accumulate reputation.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from quorum.domain.model.common import DomainModel
from quorum.domain.value import Email, TopicId, UserId, Username, UserRole


class User(DomainModel):
    """User aggregate root.

    Accounts are never hard-deleted; deleting an account sets
    ``is_active`` to False so historical references stay valid.
    """

    id: UserId
    username: Username
    email: Email
    password_hash: str
    role: UserRole = UserRole.USER
    reputation: int = 0
    questions_asked: int = Field(default=0, ge=0)
    avatar: str = ""
    bio: str = Field(default="", max_length=500)
    location: str = Field(default="", max_length=100)
    website: str = Field(default="", max_length=200)
    followed_topic_ids: list[TopicId] = Field(default_factory=list)
    following_ids: list[UserId] = Field(default_factory=list)
    follower_ids: list[UserId] = Field(default_factory=list)
    is_active: bool = True
    last_login: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_admin(self) -> bool:
        """Whether the user has the admin role."""
        return self.role == UserRole.ADMIN
