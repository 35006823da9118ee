"""Question and answer routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status
from fastapi.security import HTTPAuthorizationCredentials
from pydantic import BaseModel, ConfigDict, Field

from quorum.adapter.storage import Upload
from quorum.application.usecase.auth import GetCurrentUserUseCase
from quorum.application.usecase.question import (
    AcceptAnswerRequest,
    AcceptAnswerUseCase,
    AddAnswerRequest,
    AddAnswerResponse,
    AddAnswerUseCase,
    AnswerInfo,
    CreateQuestionRequest,
    CreateQuestionUseCase,
    DeleteQuestionRequest,
    DeleteQuestionResponse,
    DeleteQuestionUseCase,
    GetQuestionRequest,
    GetQuestionUseCase,
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
    QuestionDetail,
    UpdateQuestionRequest,
    UpdateQuestionUseCase,
    VoteAnswerRequest,
    VoteAnswerUseCase,
    VoteQuestionRequest,
    VoteQuestionUseCase,
    VoteResponse,
)
from quorum.domain.error import DomainError
from quorum.domain.repository import QuestionSortOrder
from quorum.interface.api.security import bearer_scheme, optional_user, require_user
from quorum.interface.error import to_http_exception

router = APIRouter(prefix="/questions", tags=["questions"], route_class=DishkaRoute)


def split_form_list(values: list[str]) -> list[str]:
    """Flatten repeated and comma-separated form values into one list."""
    return [item.strip() for value in values for item in value.split(",") if item.strip()]


class UpdateQuestionAPIRequest(BaseModel):
    """API request for editing a question."""

    title: Optional[str] = None
    description: Optional[str] = None
    topics: Optional[list[str]] = None
    tags: list[str] | str | None = None


class VoteAPIRequest(BaseModel):
    """API request for voting."""

    model_config = ConfigDict(populate_by_name=True)

    vote_type: str = Field(alias="voteType")


class AddAnswerAPIRequest(BaseModel):
    """API request for answering a question."""

    content: str


class AcceptAnswerAPIRequest(BaseModel):
    """API request for (un)accepting an answer."""

    accepted: bool = True


@router.get("", response_model=ListQuestionsResponse)
async def list_questions(
    list_questions_use_case: FromDishka[ListQuestionsUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    topic: Optional[str] = None,
    author: Optional[str] = None,
    search: Optional[str] = None,
    tags: Optional[str] = None,
    sort_by: QuestionSortOrder = QuestionSortOrder.RECENT,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> ListQuestionsResponse:
    """List active questions with filters, sorting and pagination."""
    user = await optional_user(credentials, get_current_user_use_case)
    try:
        return await list_questions_use_case.execute(
            ListQuestionsRequest(
                page=page,
                limit=limit,
                topic=topic,
                author=author,
                search=search,
                tags=tags,
                sort_by=sort_by,
                user_id=user.user_id if user else None,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.get("/{question_id}", response_model=QuestionDetail)
async def get_question(
    question_id: str,
    get_question_use_case: FromDishka[GetQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> QuestionDetail:
    """Read a question with its answers.

    Authenticated reads count as a view at most once per day per user.
    """
    user = await optional_user(credentials, get_current_user_use_case)
    try:
        return await get_question_use_case.execute(
            GetQuestionRequest(
                question_id=question_id, user_id=user.user_id if user else None
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.post("", response_model=QuestionDetail, status_code=status.HTTP_201_CREATED)
async def create_question(
    create_question_use_case: FromDishka[CreateQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    title: str = Form(...),
    description: str = Form(...),
    topics: list[str] = Form(default=[]),
    tags: Optional[str] = Form(default=None),
    attachments: list[UploadFile] = File(default=[]),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> QuestionDetail:
    """Ask a question (multipart form, up to five attachments).

    Raises:
        HTTPException: 401 if not authenticated, 400 on invalid input or a
            rejected attachment
    """
    user = await require_user(credentials, get_current_user_use_case)
    uploads = [
        Upload(
            filename=file.filename or "upload",
            content_type=file.content_type or "application/octet-stream",
            data=await file.read(),
        )
        for file in attachments
    ]
    try:
        return await create_question_use_case.execute(
            CreateQuestionRequest(
                user_id=user.user_id,
                title=title,
                description=description,
                topics=split_form_list(topics),
                tags=tags,
                uploads=uploads,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.put("/{question_id}", response_model=QuestionDetail)
async def update_question(
    question_id: str,
    request: UpdateQuestionAPIRequest,
    update_question_use_case: FromDishka[UpdateQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> QuestionDetail:
    """Edit a question (author or admin)."""
    user = await require_user(credentials, get_current_user_use_case)
    try:
        return await update_question_use_case.execute(
            UpdateQuestionRequest(
                question_id=question_id,
                user_id=user.user_id,
                **request.model_dump(exclude_none=True),
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.delete("/{question_id}", response_model=DeleteQuestionResponse)
async def delete_question(
    question_id: str,
    delete_question_use_case: FromDishka[DeleteQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> DeleteQuestionResponse:
    """Soft-delete a question (author or admin)."""
    user = await require_user(credentials, get_current_user_use_case)
    try:
        return await delete_question_use_case.execute(
            DeleteQuestionRequest(question_id=question_id, user_id=user.user_id)
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.post("/{question_id}/vote", response_model=VoteResponse)
async def vote_question(
    question_id: str,
    request: VoteAPIRequest,
    vote_question_use_case: FromDishka[VoteQuestionUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> VoteResponse:
    """Upvote, downvote or remove a vote on a question.

    Raises:
        HTTPException: 400 on an unknown vote type, 403 on a self-vote,
            404 if the question does not exist
    """
    user = await require_user(credentials, get_current_user_use_case)
    try:
        return await vote_question_use_case.execute(
            VoteQuestionRequest(
                question_id=question_id,
                user_id=user.user_id,
                vote_type=request.vote_type,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.post(
    "/{question_id}/answers",
    response_model=AddAnswerResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_answer(
    question_id: str,
    request: AddAnswerAPIRequest,
    add_answer_use_case: FromDishka[AddAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> AddAnswerResponse:
    """Answer a question."""
    user = await require_user(credentials, get_current_user_use_case)
    try:
        return await add_answer_use_case.execute(
            AddAnswerRequest(
                question_id=question_id,
                user_id=user.user_id,
                content=request.content,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.post("/{question_id}/answers/{answer_id}/vote", response_model=VoteResponse)
async def vote_answer(
    question_id: str,
    answer_id: str,
    request: VoteAPIRequest,
    vote_answer_use_case: FromDishka[VoteAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> VoteResponse:
    """Upvote, downvote or remove a vote on an answer."""
    user = await require_user(credentials, get_current_user_use_case)
    try:
        return await vote_answer_use_case.execute(
            VoteAnswerRequest(
                question_id=question_id,
                answer_id=answer_id,
                user_id=user.user_id,
                vote_type=request.vote_type,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)


@router.put("/{question_id}/answers/{answer_id}/accept", response_model=AnswerInfo)
async def accept_answer(
    question_id: str,
    answer_id: str,
    accept_answer_use_case: FromDishka[AcceptAnswerUseCase],
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    request: AcceptAnswerAPIRequest = AcceptAnswerAPIRequest(),
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> AnswerInfo:
    """Accept an answer, or clear the flag (question author only)."""
    user = await require_user(credentials, get_current_user_use_case)
    try:
        return await accept_answer_use_case.execute(
            AcceptAnswerRequest(
                question_id=question_id,
                answer_id=answer_id,
                user_id=user.user_id,
                accepted=request.accepted,
            )
        )
    except (DomainError, ValueError) as e:
        raise to_http_exception(e)
