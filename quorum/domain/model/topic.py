"""Topic entity for categorizing questions."""

from datetime import datetime

from pydantic import Field

from quorum.domain.model.common import DomainModel
from quorum.domain.value import HexColor, TopicId, TopicSlug, UserId


class Topic(DomainModel):
    """Topic entity.

    Topics are named categories a question can belong to. Counters are
    maintained by question creation/deletion and follow/unfollow and
    never drop below zero.
    """

    id: TopicId
    name: str = Field(min_length=2, max_length=50)
    slug: TopicSlug
    description: str = Field(default="", max_length=500)
    color: HexColor = HexColor("#8B5CF6")
    icon: str = "💬"
    question_count: int = Field(default=0, ge=0)
    follower_count: int = Field(default=0, ge=0)
    moderator_ids: list[UserId] = Field(default_factory=list)
    created_by: UserId
    is_active: bool = True
    last_activity: datetime = Field(default_factory=datetime.now)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def can_be_edited_by(self, user_id: UserId, is_admin: bool) -> bool:
        """Admins, moderators and the creator may edit a topic."""
        return is_admin or user_id in self.moderator_ids or user_id == self.created_by
