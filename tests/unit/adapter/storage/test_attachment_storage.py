"""Unit tests for attachment storage."""

import pytest

from quorum.adapter.storage import InMemoryAttachmentStorage, LocalAttachmentStorage, Upload
from quorum.config import UploadSettings
from quorum.domain.error import ValidationError


def png(name: str = "diagram.png", size: int = 16) -> Upload:
    return Upload(filename=name, content_type="image/png", data=b"x" * size)


class TestValidate:
    """Tests for AttachmentStorage.validate()."""

    def test_accepts_images_and_videos(self):
        storage = InMemoryAttachmentStorage(UploadSettings())

        storage.validate(
            [png(), Upload(filename="clip.MP4", content_type="video/mp4", data=b"v")]
        )

    def test_rejects_disallowed_extension(self):
        storage = InMemoryAttachmentStorage(UploadSettings())

        with pytest.raises(ValidationError):
            storage.validate(
                [Upload(filename="notes.pdf", content_type="application/pdf", data=b"")]
            )

    def test_rejects_mismatched_content_type(self):
        storage = InMemoryAttachmentStorage(UploadSettings())

        with pytest.raises(ValidationError):
            storage.validate(
                [Upload(filename="evil.png", content_type="text/html", data=b"")]
            )

    def test_rejects_oversized_file(self):
        storage = InMemoryAttachmentStorage(UploadSettings(max_file_size=10))

        with pytest.raises(ValidationError):
            storage.validate([png(size=11)])

    def test_rejects_too_many_files(self):
        storage = InMemoryAttachmentStorage(UploadSettings(max_files=2))

        with pytest.raises(ValidationError):
            storage.validate([png("a.png"), png("b.png"), png("c.png")])


class TestLocalAttachmentStorage:
    """Tests for LocalAttachmentStorage."""

    @pytest.mark.asyncio
    async def test_writes_file_under_directory(self, tmp_path):
        # Arrange
        directory = tmp_path / "uploads"
        storage = LocalAttachmentStorage(UploadSettings(directory=str(directory)))

        # Act
        [attachment] = await storage.store_all([png("Screen Shot.PNG", size=4)])

        # Assert
        stored = directory / attachment.filename
        assert stored.read_bytes() == b"xxxx"
        assert attachment.filename.startswith("attachment-")
        assert attachment.filename.endswith(".png")
        assert attachment.original_name == "Screen Shot.PNG"
        assert attachment.mimetype == "image/png"
        assert attachment.size == 4

    @pytest.mark.asyncio
    async def test_file_names_are_unique(self, tmp_path):
        storage = LocalAttachmentStorage(UploadSettings(directory=str(tmp_path)))

        attachments = await storage.store_all([png(), png()])

        assert attachments[0].filename != attachments[1].filename
        assert len(list(tmp_path.iterdir())) == 2
