"""Topic routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel

from quorum.application.usecase.auth import GetCurrentUserUseCase
from quorum.application.usecase.topic import (
    AddModeratorRequest,
    AddModeratorUseCase,
    CreateTopicRequest,
    CreateTopicUseCase,
    DeleteTopicRequest,
    DeleteTopicResponse,
    DeleteTopicUseCase,
    FollowTopicRequest,
    FollowTopicResponse,
    FollowTopicUseCase,
    GetTopicRequest,
    GetTopicResponse,
    GetTopicUseCase,
    ListTopicsRequest,
    ListTopicsResponse,
    ListTopicsUseCase,
    ModeratorsResponse,
    PopularTopicsRequest,
    PopularTopicsResponse,
    PopularTopicsUseCase,
    RemoveModeratorRequest,
    RemoveModeratorUseCase,
    TopicInfo,
    UpdateTopicRequest,
    UpdateTopicUseCase,
)
from quorum.domain.error import DomainError
from quorum.domain.repository import TopicSortOrder
from quorum.interface.api.security import bearer_scheme, optional_user, require_user
from quorum.interface.error import to_http_exception

router = APIRouter(prefix="/topics", tags=["topics"], route_class=DishkaRoute)


class CreateTopicAPIRequest(BaseModel):
    """API request for creating a topic."""

    name: str
    description: str = ""
    color: Optional[str] = None
    icon: Optional[str] = None


class UpdateTopicAPIRequest(BaseModel):
    """API request for editing a topic."""

    name: Optional[str] = None
    description: Optional[str] = None
    color: Optional[str] = None
    icon: Optional[str] = None


class AddModeratorAPIRequest(BaseModel):
    """API request for adding a moderator."""

    username: str


@router.get("", response_model=ListTopicsResponse)
async def list_topics(
    list_topics_use_case: FromDishka[ListTopicsUseCase],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    search: Optional[str] = None,
    sort_by: TopicSortOrder = TopicSortOrder.POPULAR,
) -> ListTopicsResponse:
    """List active topics."""
    return await list_topics_use_case.execute(
        ListTopicsRequest(page=page, limit=limit, search=search, sort_by=sort_by)
    )


@router.get("/popular", response_model=PopularTopicsResponse)
async def popular_topics(
    popular_topics_use_case: FromDishka[PopularTopicsUseCase],
) -> PopularTopicsResponse:
    """Top ten topics by questions and followers."""
    return await popular_topics_use_case.execute(PopularTopicsRequest())


@router.get("/{slug}", response_model=GetTopicResponse)
async def get_topic(
    slug: str,
    get_topic_use_case: FromDishka[GetTopicUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> GetTopicResponse:
    """Read a topic with its moderators and recent questions."""
    user = await optional_user(credentials, get_current_user_use_case)
    try:
        return await get_topic_use_case.execute(
            GetTopicRequest(slug=slug, user_id=user.user_id if user else None)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.post("", response_model=TopicInfo, status_code=status.HTTP_201_CREATED)
async def create_topic(
    request: CreateTopicAPIRequest,
    create_topic_use_case: FromDishka[CreateTopicUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TopicInfo:
    """Create a topic (admin only)."""
    user = await require_user(credentials, get_current_user_use_case)
    try:
        return await create_topic_use_case.execute(
            CreateTopicRequest(user_id=user.user_id, **request.model_dump(exclude_none=True))
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.put("/{slug}", response_model=TopicInfo)
async def update_topic(
    slug: str,
    request: UpdateTopicAPIRequest,
    update_topic_use_case: FromDishka[UpdateTopicUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> TopicInfo:
    """Edit a topic (admin, moderator or creator)."""
    user = await require_user(credentials, get_current_user_use_case)
    try:
        return await update_topic_use_case.execute(
            UpdateTopicRequest(
                slug=slug, user_id=user.user_id, **request.model_dump(exclude_none=True)
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.delete("/{slug}", response_model=DeleteTopicResponse)
async def delete_topic(
    slug: str,
    delete_topic_use_case: FromDishka[DeleteTopicUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> DeleteTopicResponse:
    """Soft-delete a topic (admin only, refused while questions use it)."""
    user = await require_user(credentials, get_current_user_use_case)
    try:
        return await delete_topic_use_case.execute(
            DeleteTopicRequest(slug=slug, user_id=user.user_id)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.post("/{slug}/follow", response_model=FollowTopicResponse)
async def follow_topic(
    slug: str,
    follow_topic_use_case: FromDishka[FollowTopicUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> FollowTopicResponse:
    """Follow a topic, or unfollow it when already following."""
    user = await require_user(credentials, get_current_user_use_case)
    try:
        return await follow_topic_use_case.execute(
            FollowTopicRequest(slug=slug, user_id=user.user_id)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.post("/{slug}/moderators", response_model=ModeratorsResponse)
async def add_moderator(
    slug: str,
    request: AddModeratorAPIRequest,
    add_moderator_use_case: FromDishka[AddModeratorUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> ModeratorsResponse:
    """Make a user a moderator of the topic (admin only)."""
    user = await require_user(credentials, get_current_user_use_case)
    try:
        return await add_moderator_use_case.execute(
            AddModeratorRequest(
                slug=slug, user_id=user.user_id, username=request.username
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.delete("/{slug}/moderators/{moderator_id}", response_model=ModeratorsResponse)
async def remove_moderator(
    slug: str,
    moderator_id: str,
    remove_moderator_use_case: FromDishka[RemoveModeratorUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> ModeratorsResponse:
    """Remove a moderator from the topic (admin only)."""
    user = await require_user(credentials, get_current_user_use_case)
    try:
        return await remove_moderator_use_case.execute(
            RemoveModeratorRequest(
                slug=slug, user_id=user.user_id, moderator_id=moderator_id
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)
