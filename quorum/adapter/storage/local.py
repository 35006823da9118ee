"""Local disk attachment storage."""

from pathlib import Path

import aiofiles
import aiofiles.os
import logfire

from quorum.adapter.error import StorageError
from quorum.domain.value import Attachment

from .base import AttachmentStorage, Upload


class LocalAttachmentStorage(AttachmentStorage):
    """Writes uploads under ``settings.directory``, served at ``/uploads``."""

    async def store(self, upload: Upload) -> Attachment:
        """Write one upload to disk."""
        directory = Path(self.settings.directory)
        filename = self.make_filename(upload.filename)
        path = directory / filename

        with logfire.span(
            "attachment_storage.store", filename=filename, size=len(upload.data)
        ):
            try:
                await aiofiles.os.makedirs(directory, exist_ok=True)
                async with aiofiles.open(path, "wb") as f:
                    await f.write(upload.data)
            except OSError as e:
                logfire.error("Failed to store attachment", filename=filename, error=str(e))
                raise StorageError(f"Could not store {upload.filename!r}") from e

            logfire.info("Attachment stored", filename=filename)
            return Attachment(
                filename=filename,
                original_name=upload.filename,
                mimetype=upload.content_type,
                size=len(upload.data),
                path=path.as_posix(),
            )
