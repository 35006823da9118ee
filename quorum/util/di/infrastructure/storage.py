"""Attachment storage infrastructure providers."""

from dishka import Scope, provide

from quorum.adapter.storage import AttachmentStorage, LocalAttachmentStorage
from quorum.config import UploadSettings
from quorum.util.di.base import ProviderBase


class StorageProvider(ProviderBase):
    """Attachment storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider writing to the local upload directory."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_attachment_storage(self, settings: UploadSettings) -> AttachmentStorage:
        """Provide local disk attachment storage."""
        return LocalAttachmentStorage(settings)
