"""User routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel

from quorum.application.usecase.auth import GetCurrentUserUseCase
from quorum.application.usecase.user import (
    DeleteUserRequest,
    DeleteUserResponse,
    DeleteUserUseCase,
    FollowDirection,
    FollowUserRequest,
    FollowUserResponse,
    FollowUserUseCase,
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
    ListFollowsRequest,
    ListFollowsResponse,
    ListFollowsUseCase,
    ListUserQuestionsRequest,
    ListUserQuestionsResponse,
    ListUserQuestionsUseCase,
    ListUsersRequest,
    ListUsersResponse,
    ListUsersUseCase,
    TopUsersRequest,
    TopUsersResponse,
    TopUsersUseCase,
    UpdateUserRequest,
    UpdateUserUseCase,
    UserDetail,
)
from quorum.domain.error import DomainError
from quorum.domain.repository import QuestionSortOrder, UserSortOrder
from quorum.domain.value import UserRole
from quorum.interface.api.security import bearer_scheme, optional_user, require_user
from quorum.interface.error import to_http_exception

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserAPIRequest(BaseModel):
    """API request for editing a user.

    ``role``, ``reputation`` and ``is_active`` are honoured for admins only.
    """

    username: Optional[str] = None
    email: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    avatar: Optional[str] = None
    role: Optional[UserRole] = None
    reputation: Optional[int] = None
    is_active: Optional[bool] = None


@router.get("", response_model=ListUsersResponse)
async def list_users(
    list_users_use_case: FromDishka[ListUsersUseCase],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    search: Optional[str] = None,
    role: Optional[UserRole] = None,
    sort_by: UserSortOrder = UserSortOrder.REPUTATION,
) -> ListUsersResponse:
    """List active users."""
    return await list_users_use_case.execute(
        ListUsersRequest(
            page=page, limit=limit, search=search, role=role, sort_by=sort_by
        )
    )


@router.get("/top", response_model=TopUsersResponse)
async def top_users(top_users_use_case: FromDishka[TopUsersUseCase]) -> TopUsersResponse:
    """Ten users with the highest reputation."""
    return await top_users_use_case.execute(TopUsersRequest())


@router.get("/{username}", response_model=GetUserProfileResponse)
async def get_user_profile(
    username: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> GetUserProfileResponse:
    """Public profile. The email is only included for the user themselves."""
    user = await optional_user(credentials, get_current_user_use_case)
    try:
        return await get_user_profile_use_case.execute(
            GetUserProfileRequest(
                username=username, user_id=user.user_id if user else None
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get("/{username}/questions", response_model=ListUserQuestionsResponse)
async def list_user_questions(
    username: str,
    list_user_questions_use_case: FromDishka[ListUserQuestionsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    sort_by: QuestionSortOrder = QuestionSortOrder.RECENT,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> ListUserQuestionsResponse:
    """Questions asked by a user."""
    user = await optional_user(credentials, get_current_user_use_case)
    try:
        return await list_user_questions_use_case.execute(
            ListUserQuestionsRequest(
                username=username,
                page=page,
                limit=limit,
                sort_by=sort_by,
                user_id=user.user_id if user else None,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.put("/{username}", response_model=UserDetail)
async def update_user(
    username: str,
    request: UpdateUserAPIRequest,
    update_user_use_case: FromDishka[UpdateUserUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> UserDetail:
    """Edit a user (self or admin)."""
    user = await require_user(credentials, get_current_user_use_case)
    fields = request.model_dump(exclude_none=True)
    if "username" in fields:
        fields["new_username"] = fields.pop("username")
    try:
        return await update_user_use_case.execute(
            UpdateUserRequest(username=username, user_id=user.user_id, **fields)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.delete("/{username}", response_model=DeleteUserResponse)
async def delete_user(
    username: str,
    delete_user_use_case: FromDishka[DeleteUserUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> DeleteUserResponse:
    """Soft-delete an account and its questions (self or admin)."""
    user = await require_user(credentials, get_current_user_use_case)
    try:
        return await delete_user_use_case.execute(
            DeleteUserRequest(username=username, user_id=user.user_id)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.post("/{username}/follow", response_model=FollowUserResponse)
async def follow_user(
    username: str,
    follow_user_use_case: FromDishka[FollowUserUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> FollowUserResponse:
    """Follow a user, or unfollow when already following."""
    user = await require_user(credentials, get_current_user_use_case)
    try:
        return await follow_user_use_case.execute(
            FollowUserRequest(username=username, user_id=user.user_id)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get("/{username}/followers", response_model=ListFollowsResponse)
async def list_followers(
    username: str,
    list_follows_use_case: FromDishka[ListFollowsUseCase],
) -> ListFollowsResponse:
    """Users following this user."""
    try:
        return await list_follows_use_case.execute(
            ListFollowsRequest(username=username, direction=FollowDirection.FOLLOWERS)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get("/{username}/following", response_model=ListFollowsResponse)
async def list_following(
    username: str,
    list_follows_use_case: FromDishka[ListFollowsUseCase],
) -> ListFollowsResponse:
    """Users this user follows."""
    try:
        return await list_follows_use_case.execute(
            ListFollowsRequest(username=username, direction=FollowDirection.FOLLOWING)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)
