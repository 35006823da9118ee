"""User response models shared by user, auth and topic use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from quorum.domain.model import User
from quorum.domain.value import UserRole


class UserSummary(BaseModel):
    """Public short form of a user."""

    user_id: str
    username: str
    avatar: str
    reputation: int
    questions_asked: int
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(
            user_id=str(user.id),
            username=str(user.username),
            avatar=user.avatar,
            reputation=user.reputation,
            questions_asked=user.questions_asked,
            created_at=user.created_at,
        )


class UserDetail(UserSummary):
    """Full user profile.

    ``email`` is only filled in when the viewer is the user themselves.
    """

    email: Optional[str] = None
    role: UserRole
    bio: str
    location: str
    website: str
    followed_topic_ids: list[str]
    following_count: int
    follower_count: int
    is_active: bool
    last_login: Optional[datetime]

    @classmethod
    def from_user(cls, user: User, include_email: bool = False) -> "UserDetail":
        return cls(
            **UserSummary.from_user(user).model_dump(),
            email=str(user.email) if include_email else None,
            role=user.role,
            bio=user.bio,
            location=user.location,
            website=user.website,
            followed_topic_ids=[str(t) for t in user.followed_topic_ids],
            following_count=len(user.following_ids),
            follower_count=len(user.follower_ids),
            is_active=user.is_active,
            last_login=user.last_login,
        )
