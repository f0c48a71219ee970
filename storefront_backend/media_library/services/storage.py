# media_library/services/storage.py

"""
MEDIA GATEWAY

Purpose:
- Upload / list / delete admin media in the bucket directory
  settings.MEDIA_BUCKET of Django's default storage.

Rules:
- Stored names are generated: <epoch-ms>-<7 base36 chars>.<ext>
  (client file names are never used as storage paths).
- Callers pass the ceiling and accepted MIME families per upload kind:
    media library   image/* or video/*, MEDIA_LIBRARY_MAX_BYTES (10 MB)
    product images  image/* only,       PRODUCT_IMAGE_MAX_BYTES (5 MB)
- Deletion is by the last path segment of a URL or a bare name.
- Validation failures raise MediaValidationError before storage is touched.
- Backend failures are logged and raised as MediaStorageError.
"""

from __future__ import annotations

import logging
import mimetypes
import re
import secrets
import string
import time

from django.conf import settings
from django.core.files.storage import default_storage

from media_library.services.exceptions import MediaStorageError, MediaValidationError

logger = logging.getLogger(__name__)

LIBRARY_MIME_PREFIXES = ("image/", "video/")
PRODUCT_IMAGE_MIME_PREFIXES = ("image/",)

LIST_LIMIT = 100

_BASE36 = string.digits + string.ascii_lowercase
_EXT_CHARS = re.compile(r"[^a-z0-9]")


def _bucket() -> str:
    return settings.MEDIA_BUCKET.strip("/")


def _path(name: str) -> str:
    return f"{_bucket()}/{name}"


def _megabytes(num_bytes: int) -> str:
    mb = num_bytes / (1024 * 1024)
    return f"{mb:g}MB"


def generate_file_name(original_name: str) -> str:
    """
    "photo.JPG" -> "1718000000000-k3j9x0a.jpg"
    """
    ext = ""
    if "." in (original_name or ""):
        ext = _EXT_CHARS.sub("", original_name.rsplit(".", 1)[-1].lower())
    millis = int(time.time() * 1000)
    suffix = "".join(secrets.choice(_BASE36) for _ in range(7))
    return f"{millis}-{suffix}.{ext or 'bin'}"


def _content_type(upload) -> str:
    declared = (getattr(upload, "content_type", None) or "").lower()
    if declared:
        return declared
    guessed, _ = mimetypes.guess_type(getattr(upload, "name", "") or "")
    return (guessed or "").lower()


def validate_upload(upload, *, max_bytes: int, allowed_prefixes) -> None:
    content_type = _content_type(upload)
    if not content_type.startswith(tuple(allowed_prefixes)):
        kinds = " and ".join(p.rstrip("/") for p in allowed_prefixes)
        raise MediaValidationError(f"Only {kinds} files are allowed")

    if upload.size > max_bytes:
        raise MediaValidationError(f"File size must be less than {_megabytes(max_bytes)}")


def upload_file(upload, *, max_bytes: int, allowed_prefixes) -> str:
    """
    Validate and store one uploaded file. Returns the storage URL.
    """
    validate_upload(upload, max_bytes=max_bytes, allowed_prefixes=allowed_prefixes)

    name = generate_file_name(getattr(upload, "name", ""))
    try:
        saved = default_storage.save(_path(name), upload)
        url = default_storage.url(saved)
    except Exception as exc:  # backends raise their own error types
        logger.exception("Media upload failed", extra={"file_name": name})
        raise MediaStorageError("Failed to upload file") from exc

    logger.info(
        "Media uploaded",
        extra={"file_name": saved, "size": upload.size, "content_type": _content_type(upload)},
    )
    return url


def _created_at(path: str):
    try:
        return default_storage.get_created_time(path)
    except (NotImplementedError, OSError):
        return None


def list_files(limit: int = LIST_LIMIT) -> list[dict]:
    """
    Files in the bucket, newest first: [{name, url, created_at}].
    A bucket that does not exist yet is empty.
    """
    try:
        _, names = default_storage.listdir(_bucket())
    except FileNotFoundError:
        return []
    except Exception as exc:  # backends raise their own error types
        logger.exception("Media listing failed")
        raise MediaStorageError("Failed to load files") from exc

    entries = [
        {
            "name": name,
            "url": default_storage.url(_path(name)),
            "created_at": _created_at(_path(name)),
        }
        for name in names
        if not name.startswith(".")
    ]
    # Undated entries sort last; the name prefix is the upload time.
    entries.sort(key=lambda e: (e["created_at"] is not None, e["created_at"] or 0, e["name"]), reverse=True)
    return entries[:limit]


def file_name_from_reference(url_or_name: str) -> str:
    name = (url_or_name or "").split("?", 1)[0].rstrip("/").rsplit("/", 1)[-1]
    if not name or name.startswith(".") or "\\" in name:
        raise MediaValidationError("Invalid file name")
    return name


def delete_file(url_or_name: str) -> str:
    """Delete by URL or bare name. Missing files are not an error."""
    name = file_name_from_reference(url_or_name)
    try:
        default_storage.delete(_path(name))
    except Exception as exc:  # backends raise their own error types
        logger.exception("Media delete failed", extra={"file_name": name})
        raise MediaStorageError("Failed to delete file") from exc

    logger.info("Media deleted", extra={"file_name": name})
    return name
