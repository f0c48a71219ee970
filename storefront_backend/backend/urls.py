# backend/urls.py
"""
PROJECT URLS

Everything the storefront and admin console call lives under /api/:

- /api/public/...      storefront (AllowAny): catalog, shop, session cart
- /api/admin/auth/...  admin console gate: login / logout / session
- /api/admin/media/... admin console media library
- /api/admin/...       admin console catalog: products, categories, dashboard

Also:
- /api/health/ reports database reachability (503 when it is down)
- the Django admin is mounted at settings.ADMIN_PATH
- uploaded media is served by Django only when DEBUG is on
"""

from __future__ import annotations

from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.db import connection
from django.db.utils import DatabaseError
from django.urls import include, path
from django.views.generic import RedirectView
from drf_spectacular.utils import extend_schema, inline_serializer
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView
from rest_framework import serializers, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

API_SECTIONS = {
    "public": "/api/public/",
    "admin_auth": "/api/admin/auth/",
    "admin_catalog": "/api/admin/",
    "admin_media": "/api/admin/media/",
    "docs": "/api/docs/",
    "schema": "/api/schema/",
}


@extend_schema(
    tags=["Meta"],
    responses=inline_serializer(
        "ApiRoot",
        fields={"message": serializers.CharField(), "sections": serializers.DictField()},
    ),
)
@api_view(["GET"])
@permission_classes([AllowAny])
def api_root(request):
    return Response({"message": "Stacko Storefront API is running", "sections": API_SECTIONS})


@extend_schema(
    tags=["Meta"],
    responses=inline_serializer(
        "HealthStatus",
        fields={
            "status": serializers.CharField(),
            "db": serializers.CharField(),
            "error": serializers.CharField(required=False),
        },
    ),
)
@api_view(["GET"])
@permission_classes([AllowAny])
def health_check(request):
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
    except DatabaseError as exc:
        return Response(
            {"status": "degraded", "db": "down", "error": str(exc)},
            status=status.HTTP_503_SERVICE_UNAVAILABLE,
        )
    return Response({"status": "ok", "db": "ok"})


# Trailing slash required by include(); keep the real path out of public docs.
DJANGO_ADMIN_PATH = settings.ADMIN_PATH.rstrip("/") + "/"

api_urlpatterns = [
    path("", api_root, name="api-root"),
    path("health/", health_check, name="health-check"),
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("public/", include("public.urls")),
    path("admin/auth/", include("permissions.urls")),
    path("admin/media/", include("media_library.urls")),
    path("admin/", include("products.urls")),
]

urlpatterns = [
    path(DJANGO_ADMIN_PATH, admin.site.urls),
    path("", RedirectView.as_view(url="/api/docs/", permanent=False), name="root"),
    path("api/", include(api_urlpatterns)),
]

if settings.DEBUG:
    urlpatterns += static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
