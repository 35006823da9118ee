"""Domain services."""

from .auth_service import AuthService
from .base import Service
from .jwt_service import JWTService
from .question_service import QuestionService, normalize_tags
from .topic_service import TopicService, slugify
from .user_service import UserService

__all__ = [
    "AuthService",
    "JWTService",
    "QuestionService",
    "Service",
    "TopicService",
    "UserService",
    "normalize_tags",
    "slugify",
]
