# media_library/views.py

"""
MEDIA LIBRARY API (admin console)

GET    /api/admin/media/                  list bucket files (newest first)
POST   /api/admin/media/                  upload images/videos (multipart "file", repeatable, <= 10 MB each)
DELETE /api/admin/media/<name>/           delete by file name
POST   /api/admin/media/product-images/   upload product images (multipart "file", repeatable, <= 5 MB each)

Uploads:
- Every file in the request is validated before any is stored.
- If storing file N fails, files 1..N-1 from the same request are deleted
  again, so a request stores all of its files or none.

Errors:
- 400 {"detail": ...} validation (type/size/missing file)
- 502 {"detail": "Failed to ..."} storage backend failure
"""

from __future__ import annotations

import logging

from django.conf import settings
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import serializers, status
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from media_library.services import storage
from media_library.services.exceptions import (
    MediaError,
    MediaStorageError,
    MediaValidationError,
)

logger = logging.getLogger(__name__)


class MediaFileSerializer(serializers.Serializer):
    name = serializers.CharField()
    url = serializers.CharField()
    created_at = serializers.DateTimeField(allow_null=True)


class MediaUploadInputSerializer(serializers.Serializer):
    file = serializers.ListField(child=serializers.FileField())


def _absolute(request, url: str) -> str:
    if url.startswith("/"):
        return request.build_absolute_uri(url)
    return url


class MediaErrorMixin:
    def handle_exception(self, exc):
        if isinstance(exc, MediaValidationError):
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)
        if isinstance(exc, MediaError):
            return Response({"detail": str(exc)}, status=status.HTTP_502_BAD_GATEWAY)
        return super().handle_exception(exc)


def _uploaded_files(request) -> list:
    files = request.FILES.getlist("file")
    if not files:
        raise MediaValidationError("No file provided")
    return files


def _store_all(uploads, *, max_bytes: int, allowed_prefixes) -> list[str]:
    """
    Validate every upload, then store them in order. Returns storage URLs.

    On a storage failure the files already stored by this call are removed
    before the error is re-raised.
    """
    for upload in uploads:
        storage.validate_upload(upload, max_bytes=max_bytes, allowed_prefixes=allowed_prefixes)

    stored: list[str] = []
    try:
        for upload in uploads:
            stored.append(
                storage.upload_file(
                    upload, max_bytes=max_bytes, allowed_prefixes=allowed_prefixes
                )
            )
    except MediaStorageError:
        for url in stored:
            try:
                storage.delete_file(url)
            except MediaError:
                logger.exception("Rollback of uploaded file failed", extra={"file_url": url})
        raise

    return stored


class MediaLibraryView(MediaErrorMixin, APIView):
    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(tags=["Admin"], responses={200: MediaFileSerializer(many=True)})
    def get(self, request):
        files = storage.list_files()
        for entry in files:
            entry["url"] = _absolute(request, entry["url"])
        return Response(MediaFileSerializer(files, many=True).data, status=status.HTTP_200_OK)

    @extend_schema(
        tags=["Admin"],
        request={"multipart/form-data": MediaUploadInputSerializer},
        responses={
            201: MediaFileSerializer(many=True),
            400: OpenApiResponse(description="Not an image/video, or too large"),
            502: OpenApiResponse(description="Failed to upload"),
        },
    )
    def post(self, request):
        urls = _store_all(
            _uploaded_files(request),
            max_bytes=settings.MEDIA_LIBRARY_MAX_BYTES,
            allowed_prefixes=storage.LIBRARY_MIME_PREFIXES,
        )
        entries = [
            {
                "name": storage.file_name_from_reference(url),
                "url": _absolute(request, url),
                "created_at": None,
            }
            for url in urls
        ]
        return Response(entries, status=status.HTTP_201_CREATED)


class MediaFileView(MediaErrorMixin, APIView):
    @extend_schema(tags=["Admin"], responses={204: None, 502: OpenApiResponse(description="Failed to delete")})
    def delete(self, request, name: str):
        storage.delete_file(name)
        return Response(status=status.HTTP_204_NO_CONTENT)


class ProductImageUploadView(MediaErrorMixin, APIView):
    """
    Inline product-form uploads: image/* only, smaller ceiling than the library.
    """

    parser_classes = [MultiPartParser, FormParser]

    @extend_schema(
        tags=["Admin"],
        request={"multipart/form-data": MediaUploadInputSerializer},
        responses={
            201: OpenApiResponse(description='{"urls": [...]}'),
            400: OpenApiResponse(description="Not an image, or larger than 5MB"),
            502: OpenApiResponse(description="Failed to upload"),
        },
    )
    def post(self, request):
        urls = _store_all(
            _uploaded_files(request),
            max_bytes=settings.PRODUCT_IMAGE_MAX_BYTES,
            allowed_prefixes=storage.PRODUCT_IMAGE_MIME_PREFIXES,
        )
        return Response(
            {"urls": [_absolute(request, url) for url in urls]},
            status=status.HTTP_201_CREATED,
        )
