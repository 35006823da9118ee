"""Application layer DI providers."""

from dishka import Scope, provide

from quorum.adapter.storage import AttachmentStorage
from quorum.application.usecase.auth import (
    ChangePasswordUseCase,
    GetCurrentUserUseCase,
    LoginUseCase,
    RegisterUseCase,
    UpdateProfileUseCase,
)
from quorum.application.usecase.question import (
    AcceptAnswerUseCase,
    AddAnswerUseCase,
    CreateQuestionUseCase,
    DeleteQuestionUseCase,
    GetQuestionUseCase,
    ListQuestionsUseCase,
    UpdateQuestionUseCase,
    VoteAnswerUseCase,
    VoteQuestionUseCase,
)
from quorum.application.usecase.topic import (
    AddModeratorUseCase,
    CreateTopicUseCase,
    DeleteTopicUseCase,
    FollowTopicUseCase,
    GetTopicUseCase,
    ListTopicsUseCase,
    PopularTopicsUseCase,
    RemoveModeratorUseCase,
    UpdateTopicUseCase,
)
from quorum.application.usecase.user import (
    DeleteUserUseCase,
    FollowUserUseCase,
    GetUserProfileUseCase,
    ListFollowsUseCase,
    ListUserQuestionsUseCase,
    ListUsersUseCase,
    TopUsersUseCase,
    UpdateUserUseCase,
)
from quorum.config import QuestionSettings
from quorum.domain.service import (
    AuthService,
    JWTService,
    QuestionService,
    TopicService,
    UserService,
)
from quorum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_register_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> RegisterUseCase:
        """Provide register use case."""
        return RegisterUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide
    def get_login_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> LoginUseCase:
        """Provide login use case."""
        return LoginUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    @provide
    def get_update_profile_use_case(
        self, user_service: UserService
    ) -> UpdateProfileUseCase:
        """Provide update profile use case."""
        return UpdateProfileUseCase(user_service=user_service)

    @provide
    def get_change_password_use_case(
        self, auth_service: AuthService, user_service: UserService
    ) -> ChangePasswordUseCase:
        """Provide change password use case."""
        return ChangePasswordUseCase(
            auth_service=auth_service, user_service=user_service
        )

    # Question use cases
    @provide
    def get_list_questions_use_case(
        self,
        question_service: QuestionService,
        topic_service: TopicService,
        user_service: UserService,
    ) -> ListQuestionsUseCase:
        """Provide list questions use case."""
        return ListQuestionsUseCase(
            question_service=question_service,
            topic_service=topic_service,
            user_service=user_service,
        )

    @provide
    def get_get_question_use_case(
        self, question_service: QuestionService, topic_service: TopicService
    ) -> GetQuestionUseCase:
        """Provide get question use case."""
        return GetQuestionUseCase(
            question_service=question_service, topic_service=topic_service
        )

    @provide
    def get_create_question_use_case(
        self,
        question_service: QuestionService,
        topic_service: TopicService,
        user_service: UserService,
        attachment_storage: AttachmentStorage,
    ) -> CreateQuestionUseCase:
        """Provide create question use case."""
        return CreateQuestionUseCase(
            question_service=question_service,
            topic_service=topic_service,
            user_service=user_service,
            attachment_storage=attachment_storage,
        )

    @provide
    def get_update_question_use_case(
        self,
        question_service: QuestionService,
        topic_service: TopicService,
        user_service: UserService,
    ) -> UpdateQuestionUseCase:
        """Provide update question use case."""
        return UpdateQuestionUseCase(
            question_service=question_service,
            topic_service=topic_service,
            user_service=user_service,
        )

    @provide
    def get_delete_question_use_case(
        self, question_service: QuestionService, user_service: UserService
    ) -> DeleteQuestionUseCase:
        """Provide delete question use case."""
        return DeleteQuestionUseCase(
            question_service=question_service, user_service=user_service
        )

    @provide
    def get_vote_question_use_case(
        self, question_service: QuestionService
    ) -> VoteQuestionUseCase:
        """Provide vote question use case."""
        return VoteQuestionUseCase(question_service=question_service)

    @provide
    def get_add_answer_use_case(
        self,
        question_service: QuestionService,
        user_service: UserService,
        settings: QuestionSettings,
    ) -> AddAnswerUseCase:
        """Provide add answer use case."""
        return AddAnswerUseCase(
            question_service=question_service,
            user_service=user_service,
            settings=settings,
        )

    @provide
    def get_vote_answer_use_case(
        self, question_service: QuestionService
    ) -> VoteAnswerUseCase:
        """Provide vote answer use case."""
        return VoteAnswerUseCase(question_service=question_service)

    @provide
    def get_accept_answer_use_case(
        self, question_service: QuestionService
    ) -> AcceptAnswerUseCase:
        """Provide accept answer use case."""
        return AcceptAnswerUseCase(question_service=question_service)

    # Topic use cases
    @provide
    def get_list_topics_use_case(self, topic_service: TopicService) -> ListTopicsUseCase:
        """Provide list topics use case."""
        return ListTopicsUseCase(topic_service=topic_service)

    @provide
    def get_popular_topics_use_case(
        self, topic_service: TopicService
    ) -> PopularTopicsUseCase:
        """Provide popular topics use case."""
        return PopularTopicsUseCase(topic_service=topic_service)

    @provide
    def get_get_topic_use_case(
        self,
        topic_service: TopicService,
        question_service: QuestionService,
        user_service: UserService,
    ) -> GetTopicUseCase:
        """Provide get topic use case."""
        return GetTopicUseCase(
            topic_service=topic_service,
            question_service=question_service,
            user_service=user_service,
        )

    @provide
    def get_create_topic_use_case(
        self, topic_service: TopicService, user_service: UserService
    ) -> CreateTopicUseCase:
        """Provide create topic use case."""
        return CreateTopicUseCase(topic_service=topic_service, user_service=user_service)

    @provide
    def get_update_topic_use_case(
        self, topic_service: TopicService, user_service: UserService
    ) -> UpdateTopicUseCase:
        """Provide update topic use case."""
        return UpdateTopicUseCase(topic_service=topic_service, user_service=user_service)

    @provide
    def get_delete_topic_use_case(
        self, topic_service: TopicService, user_service: UserService
    ) -> DeleteTopicUseCase:
        """Provide delete topic use case."""
        return DeleteTopicUseCase(topic_service=topic_service, user_service=user_service)

    @provide
    def get_follow_topic_use_case(
        self, topic_service: TopicService, user_service: UserService
    ) -> FollowTopicUseCase:
        """Provide follow topic use case."""
        return FollowTopicUseCase(topic_service=topic_service, user_service=user_service)

    @provide
    def get_add_moderator_use_case(
        self, topic_service: TopicService, user_service: UserService
    ) -> AddModeratorUseCase:
        """Provide add moderator use case."""
        return AddModeratorUseCase(
            topic_service=topic_service, user_service=user_service
        )

    @provide
    def get_remove_moderator_use_case(
        self, topic_service: TopicService, user_service: UserService
    ) -> RemoveModeratorUseCase:
        """Provide remove moderator use case."""
        return RemoveModeratorUseCase(
            topic_service=topic_service, user_service=user_service
        )

    # User use cases
    @provide
    def get_list_users_use_case(self, user_service: UserService) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(user_service=user_service)

    @provide
    def get_top_users_use_case(self, user_service: UserService) -> TopUsersUseCase:
        """Provide top users use case."""
        return TopUsersUseCase(user_service=user_service)

    @provide
    def get_get_user_profile_use_case(
        self,
        user_service: UserService,
        question_service: QuestionService,
        topic_service: TopicService,
    ) -> GetUserProfileUseCase:
        """Provide get user profile use case."""
        return GetUserProfileUseCase(
            user_service=user_service,
            question_service=question_service,
            topic_service=topic_service,
        )

    @provide
    def get_list_user_questions_use_case(
        self,
        user_service: UserService,
        question_service: QuestionService,
        topic_service: TopicService,
    ) -> ListUserQuestionsUseCase:
        """Provide list user questions use case."""
        return ListUserQuestionsUseCase(
            user_service=user_service,
            question_service=question_service,
            topic_service=topic_service,
        )

    @provide
    def get_update_user_use_case(self, user_service: UserService) -> UpdateUserUseCase:
        """Provide update user use case."""
        return UpdateUserUseCase(user_service=user_service)

    @provide
    def get_delete_user_use_case(self, user_service: UserService) -> DeleteUserUseCase:
        """Provide delete user use case."""
        return DeleteUserUseCase(user_service=user_service)

    @provide
    def get_follow_user_use_case(self, user_service: UserService) -> FollowUserUseCase:
        """Provide follow user use case."""
        return FollowUserUseCase(user_service=user_service)

    @provide
    def get_list_follows_use_case(
        self, user_service: UserService
    ) -> ListFollowsUseCase:
        """Provide followers/following use case."""
        return ListFollowsUseCase(user_service=user_service)
