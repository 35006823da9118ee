"""In-memory attachment storage for testing."""

from quorum.domain.value import Attachment

from .base import AttachmentStorage, Upload


class InMemoryAttachmentStorage(AttachmentStorage):
    """Keeps uploaded bytes in a dict keyed by stored file name."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.files: dict[str, bytes] = {}

    async def store(self, upload: Upload) -> Attachment:
        """Keep one upload in memory."""
        filename = self.make_filename(upload.filename)
        self.files[filename] = upload.data
        return Attachment(
            filename=filename,
            original_name=upload.filename,
            mimetype=upload.content_type,
            size=len(upload.data),
            path=f"{self.settings.directory}/{filename}",
        )
