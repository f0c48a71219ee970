# media_library/services/exceptions.py

"""
MEDIA SERVICE ERRORS
"""


class MediaError(Exception):
    """Base exception for media library failures."""


class MediaValidationError(MediaError):
    """Raised when an upload is rejected (type or size). Nothing was stored."""


class MediaStorageError(MediaError):
    """Raised when the storage backend fails to save, list, or delete."""
