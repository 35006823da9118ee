"""Attachment storage interface."""

import secrets
import time
from abc import ABC, abstractmethod
from pathlib import PurePath

from pydantic import BaseModel

from quorum.config import UploadSettings
from quorum.domain.error import ValidationError
from quorum.domain.value import Attachment

_ALLOWED_MEDIA = ("image/", "video/")


class Upload(BaseModel):
    """A file received with a request, fully read into memory."""

    filename: str
    content_type: str
    data: bytes


class AttachmentStorage(ABC):
    """Stores uploaded files and returns their attachment metadata.

    Only images and videos with an allowed extension and within the size
    limit are accepted.
    """

    def __init__(self, settings: UploadSettings) -> None:
        """Initialize storage.

        Args:
            settings: Upload limits and location
        """
        self.settings = settings

    def validate(self, uploads: list[Upload]) -> None:
        """Check a batch of uploads against the upload limits.

        Raises:
            ValidationError: If there are too many files, or any file is
                too large or not an allowed image/video type
        """
        if len(uploads) > self.settings.max_files:
            raise ValidationError(
                f"At most {self.settings.max_files} attachments are allowed"
            )
        for upload in uploads:
            extension = PurePath(upload.filename).suffix.lower().lstrip(".")
            if (
                extension not in self.settings.allowed_extensions
                or not upload.content_type.startswith(_ALLOWED_MEDIA)
            ):
                raise ValidationError(
                    "Only images (JPEG, JPG, PNG, GIF) and videos "
                    "(MP4, MOV, AVI, WEBM, MKV) are allowed"
                )
            if len(upload.data) > self.settings.max_file_size:
                raise ValidationError(f"File {upload.filename!r} is too large")

    def make_filename(self, original_name: str) -> str:
        """Unique stored file name keeping the original extension."""
        suffix = PurePath(original_name).suffix.lower()
        return f"attachment-{int(time.time() * 1000)}-{secrets.token_hex(6)}{suffix}"

    async def store_all(self, uploads: list[Upload]) -> list[Attachment]:
        """Validate and store a batch of uploads.

        Nothing is stored unless every upload is valid.
        """
        self.validate(uploads)
        return [await self.store(upload) for upload in uploads]

    @abstractmethod
    async def store(self, upload: Upload) -> Attachment:
        """Store one upload.

        Args:
            upload: Uploaded file

        Returns:
            Metadata of the stored file
        """
        raise NotImplementedError
