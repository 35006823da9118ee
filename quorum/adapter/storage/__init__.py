"""Attachment storage adapters."""

from .base import AttachmentStorage, Upload
from .local import LocalAttachmentStorage
from .memory import InMemoryAttachmentStorage

__all__ = [
    "AttachmentStorage",
    "InMemoryAttachmentStorage",
    "LocalAttachmentStorage",
    "Upload",
]
