"""Question response models.

Derived fields (score, answer count, acceptance, the viewer's vote) are
computed from the aggregate at response time and never stored.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from quorum.domain.model import Answer, Question, Topic
from quorum.domain.value import Attachment, TopicId, UserId, VoteType


class TopicRef(BaseModel):
    """Topic reference embedded in question responses."""

    topic_id: str
    name: str
    slug: str
    color: str


def topic_refs(question: Question, topics: dict[TopicId, Topic]) -> list[TopicRef]:
    """Topic references of a question, skipping topics that no longer exist."""
    return [
        TopicRef(
            topic_id=str(topic.id),
            name=topic.name,
            slug=str(topic.slug),
            color=str(topic.color),
        )
        for topic in (topics.get(t) for t in question.topic_ids)
        if topic is not None
    ]


class AnswerInfo(BaseModel):
    """Answer as returned by the API."""

    answer_id: str
    content: str
    author_id: str
    author_username: str
    score: int
    upvote_count: int
    downvote_count: int
    user_vote: Optional[VoteType]
    is_accepted: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_answer(
        cls, answer: Answer, viewer_id: Optional[UserId] = None
    ) -> "AnswerInfo":
        return cls(
            answer_id=str(answer.id),
            content=answer.content,
            author_id=str(answer.author_id),
            author_username=str(answer.author_username),
            score=answer.score,
            upvote_count=len(answer.votes.upvotes),
            downvote_count=len(answer.votes.downvotes),
            user_vote=answer.votes.vote_of(viewer_id),
            is_accepted=answer.is_accepted,
            created_at=answer.created_at,
            updated_at=answer.updated_at,
        )


class QuestionSummary(BaseModel):
    """Question list item."""

    question_id: str
    title: str
    description: str
    author_id: str
    author_username: str
    topics: list[TopicRef]
    tags: list[str]
    score: int
    user_vote: Optional[VoteType]
    views: int
    answer_count: int
    has_accepted_answer: bool
    last_activity: datetime
    created_at: datetime

    @classmethod
    def from_question(
        cls,
        question: Question,
        topics: dict[TopicId, Topic],
        viewer_id: Optional[UserId] = None,
    ) -> "QuestionSummary":
        return cls(
            question_id=str(question.id),
            title=question.title,
            description=question.description,
            author_id=str(question.author_id),
            author_username=str(question.author_username),
            topics=topic_refs(question, topics),
            tags=question.tags,
            score=question.score,
            user_vote=question.user_vote(viewer_id),
            views=question.views,
            answer_count=question.answer_count,
            has_accepted_answer=question.has_accepted_answer,
            last_activity=question.last_activity,
            created_at=question.created_at,
        )


class QuestionDetail(QuestionSummary):
    """Full question with answers and attachments."""

    upvote_count: int
    downvote_count: int
    attachments: list[Attachment]
    answers: list[AnswerInfo]
    updated_at: datetime

    @classmethod
    def from_question(
        cls,
        question: Question,
        topics: dict[TopicId, Topic],
        viewer_id: Optional[UserId] = None,
    ) -> "QuestionDetail":
        return cls(
            **QuestionSummary.from_question(question, topics, viewer_id).model_dump(),
            upvote_count=len(question.votes.upvotes),
            downvote_count=len(question.votes.downvotes),
            attachments=question.attachments,
            answers=[AnswerInfo.from_answer(a, viewer_id) for a in question.answers],
            updated_at=question.updated_at,
        )


class VoteResponse(BaseModel):
    """Result of a vote on a question or answer."""

    score: int
    upvote_count: int
    downvote_count: int
    user_vote: Optional[VoteType]
