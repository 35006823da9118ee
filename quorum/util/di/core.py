"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from quorum.config import AuthSettings, QuestionSettings, Settings, UploadSettings
from quorum.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings provider. Sections are exposed separately so services only
    depend on the part of the configuration they read.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_question_settings(self, settings: Settings) -> QuestionSettings:
        return settings.questions

    @provide(scope=Scope.APP)
    def provide_upload_settings(self, settings: Settings) -> UploadSettings:
        return settings.uploads
