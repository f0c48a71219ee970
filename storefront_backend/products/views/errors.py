# products/views/errors.py

"""
CATALOG ERROR -> HTTP MAPPING

Services raise products.services.exceptions.*; views never build error
payloads by hand. Mix CatalogErrorMixin into any APIView / ViewSet that
calls catalog services.

Payloads:
- {"detail": "<message>"}
- validation adds {"errors": {field: message}}
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.response import Response

from products.services.exceptions import (
    AdminValidationError,
    AdminWriteError,
    CatalogError,
    CatalogUnavailableError,
    CategoryInUseError,
    CategoryNotFoundError,
    ProductNotFoundError,
)

CATALOG_ERROR_STATUS = {
    AdminValidationError: status.HTTP_400_BAD_REQUEST,
    ProductNotFoundError: status.HTTP_404_NOT_FOUND,
    CategoryNotFoundError: status.HTTP_404_NOT_FOUND,
    CategoryInUseError: status.HTTP_409_CONFLICT,
    CatalogUnavailableError: status.HTTP_503_SERVICE_UNAVAILABLE,
    AdminWriteError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def catalog_error_response(exc: CatalogError) -> Response:
    http_status = status.HTTP_503_SERVICE_UNAVAILABLE
    for exc_type, mapped in CATALOG_ERROR_STATUS.items():
        if isinstance(exc, exc_type):
            http_status = mapped
            break

    if isinstance(exc, AdminValidationError):
        return Response(
            {"detail": "Validation failed", "errors": exc.errors},
            status=http_status,
        )

    return Response({"detail": str(exc)}, status=http_status)


class CatalogErrorMixin:
    def handle_exception(self, exc):
        if isinstance(exc, CatalogError):
            return catalog_error_response(exc)
        return super().handle_exception(exc)
