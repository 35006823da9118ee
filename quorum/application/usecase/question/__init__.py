"""Question and answer use cases."""

from .accept_answer import AcceptAnswerRequest, AcceptAnswerUseCase
from .add_answer import AddAnswerRequest, AddAnswerResponse, AddAnswerUseCase
from .common import AnswerInfo, QuestionDetail, QuestionSummary, TopicRef, VoteResponse
from .create_question import CreateQuestionRequest, CreateQuestionUseCase
from .delete_question import (
    DeleteQuestionRequest,
    DeleteQuestionResponse,
    DeleteQuestionUseCase,
)
from .get_question import GetQuestionRequest, GetQuestionUseCase
from .list_questions import (
    ListQuestionsRequest,
    ListQuestionsResponse,
    ListQuestionsUseCase,
)
from .update_question import UpdateQuestionRequest, UpdateQuestionUseCase
from .vote_answer import VoteAnswerRequest, VoteAnswerUseCase
from .vote_question import VoteQuestionRequest, VoteQuestionUseCase

__all__ = [
    "AcceptAnswerRequest",
    "AcceptAnswerUseCase",
    "AddAnswerRequest",
    "AddAnswerResponse",
    "AddAnswerUseCase",
    "AnswerInfo",
    "CreateQuestionRequest",
    "CreateQuestionUseCase",
    "DeleteQuestionRequest",
    "DeleteQuestionResponse",
    "DeleteQuestionUseCase",
    "GetQuestionRequest",
    "GetQuestionUseCase",
    "ListQuestionsRequest",
    "ListQuestionsResponse",
    "ListQuestionsUseCase",
    "QuestionDetail",
    "QuestionSummary",
    "TopicRef",
    "UpdateQuestionRequest",
    "UpdateQuestionUseCase",
    "VoteAnswerRequest",
    "VoteAnswerUseCase",
    "VoteQuestionRequest",
    "VoteQuestionUseCase",
    "VoteResponse",
]
