"""Topic use cases."""

from .common import TopicInfo
from .create_topic import CreateTopicRequest, CreateTopicUseCase
from .delete_topic import DeleteTopicRequest, DeleteTopicResponse, DeleteTopicUseCase
from .follow_topic import FollowTopicRequest, FollowTopicResponse, FollowTopicUseCase
from .get_topic import GetTopicRequest, GetTopicResponse, GetTopicUseCase
from .list_topics import ListTopicsRequest, ListTopicsResponse, ListTopicsUseCase
from .moderators import (
    AddModeratorRequest,
    AddModeratorUseCase,
    ModeratorsResponse,
    RemoveModeratorRequest,
    RemoveModeratorUseCase,
)
from .popular_topics import (
    PopularTopicsRequest,
    PopularTopicsResponse,
    PopularTopicsUseCase,
)
from .update_topic import UpdateTopicRequest, UpdateTopicUseCase

__all__ = [
    "AddModeratorRequest",
    "AddModeratorUseCase",
    "CreateTopicRequest",
    "CreateTopicUseCase",
    "DeleteTopicRequest",
    "DeleteTopicResponse",
    "DeleteTopicUseCase",
    "FollowTopicRequest",
    "FollowTopicResponse",
    "FollowTopicUseCase",
    "GetTopicRequest",
    "GetTopicResponse",
    "GetTopicUseCase",
    "ListTopicsRequest",
    "ListTopicsResponse",
    "ListTopicsUseCase",
    "ModeratorsResponse",
    "PopularTopicsRequest",
    "PopularTopicsResponse",
    "PopularTopicsUseCase",
    "RemoveModeratorRequest",
    "RemoveModeratorUseCase",
    "TopicInfo",
    "UpdateTopicRequest",
    "UpdateTopicUseCase",
]
