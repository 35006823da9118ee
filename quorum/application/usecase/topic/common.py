"""Topic response models."""

from datetime import datetime

from pydantic import BaseModel

from quorum.domain.model import Topic


class TopicInfo(BaseModel):
    """Topic as returned by the API."""

    topic_id: str
    name: str
    slug: str
    description: str
    color: str
    icon: str
    question_count: int
    follower_count: int
    moderator_ids: list[str]
    created_by: str
    last_activity: datetime
    created_at: datetime

    @classmethod
    def from_topic(cls, topic: Topic) -> "TopicInfo":
        return cls(
            topic_id=str(topic.id),
            name=topic.name,
            slug=str(topic.slug),
            description=topic.description,
            color=str(topic.color),
            icon=topic.icon,
            question_count=topic.question_count,
            follower_count=topic.follower_count,
            moderator_ids=[str(m) for m in topic.moderator_ids],
            created_by=str(topic.created_by),
            last_activity=topic.last_activity,
            created_at=topic.created_at,
        )
