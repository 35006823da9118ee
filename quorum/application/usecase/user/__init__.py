"""User use cases."""

from .common import UserDetail, UserSummary
from .delete_user import DeleteUserRequest, DeleteUserResponse, DeleteUserUseCase
from .follow_user import FollowUserRequest, FollowUserResponse, FollowUserUseCase
from .get_user_profile import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
)
from .list_follows import (
    FollowDirection,
    ListFollowsRequest,
    ListFollowsResponse,
    ListFollowsUseCase,
)
from .list_user_questions import (
    ListUserQuestionsRequest,
    ListUserQuestionsResponse,
    ListUserQuestionsUseCase,
)
from .list_users import ListUsersRequest, ListUsersResponse, ListUsersUseCase
from .top_users import TopUsersRequest, TopUsersResponse, TopUsersUseCase
from .update_user import UpdateUserRequest, UpdateUserUseCase

__all__ = [
    "DeleteUserRequest",
    "DeleteUserResponse",
    "DeleteUserUseCase",
    "FollowDirection",
    "FollowUserRequest",
    "FollowUserResponse",
    "FollowUserUseCase",
    "GetUserProfileRequest",
    "GetUserProfileResponse",
    "GetUserProfileUseCase",
    "ListFollowsRequest",
    "ListFollowsResponse",
    "ListFollowsUseCase",
    "ListUserQuestionsRequest",
    "ListUserQuestionsResponse",
    "ListUserQuestionsUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "TopUsersRequest",
    "TopUsersResponse",
    "TopUsersUseCase",
    "UpdateUserRequest",
    "UpdateUserUseCase",
    "UserDetail",
    "UserSummary",
]
