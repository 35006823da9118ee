"""Adapter layer errors."""


class AdapterError(Exception):
    """Base adapter error."""

    pass


class StorageError(AdapterError):
    """Attachment storage backend failure."""

    pass
