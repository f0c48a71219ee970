# permissions/views.py

"""
ADMIN CONSOLE SESSION ENDPOINTS

POST /api/admin/auth/login/    {"password": "..."} -> 200 | 401
POST /api/admin/auth/logout/   -> 200 (always)
GET  /api/admin/auth/session/  -> {"authenticated": bool}

Login and session also set the csrftoken cookie and return the same token
in the X-CSRFToken response header (the cookie is HttpOnly in production).
Unsafe admin requests must echo it in the X-CSRFToken request header.

All AllowAny: these endpoints are how a client gets past the gate.
"""

from __future__ import annotations

from django.middleware.csrf import get_token
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import ensure_csrf_cookie
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import serializers, status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from permissions.gate import AdminGate

CSRF_HEADER = "X-CSRFToken"


def _with_csrf_token(request, response):
    response[CSRF_HEADER] = get_token(request)
    return response


class AdminLoginInputSerializer(serializers.Serializer):
    password = serializers.CharField(allow_blank=True, trim_whitespace=False)


class AdminSessionSerializer(serializers.Serializer):
    authenticated = serializers.BooleanField()


@method_decorator(ensure_csrf_cookie, name="post")
class AdminLoginView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(
        tags=["Admin"],
        request=AdminLoginInputSerializer,
        responses={
            200: AdminSessionSerializer,
            401: OpenApiResponse(description="Invalid password"),
        },
    )
    def post(self, request):
        payload = AdminLoginInputSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        gate = AdminGate(request.session)
        if not gate.login(payload.validated_data["password"]):
            return Response(
                {"detail": "Invalid password"}, status=status.HTTP_401_UNAUTHORIZED
            )

        # New session key on privilege change; session data (cart) is kept.
        request.session.cycle_key()
        return _with_csrf_token(
            request, Response({"authenticated": True}, status=status.HTTP_200_OK)
        )


class AdminLogoutView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(tags=["Admin"], request=None, responses={200: AdminSessionSerializer})
    def post(self, request):
        AdminGate(request.session).logout()
        return Response({"authenticated": False}, status=status.HTTP_200_OK)


@method_decorator(ensure_csrf_cookie, name="get")
class AdminSessionView(APIView):
    permission_classes = [AllowAny]

    @extend_schema(tags=["Admin"], responses={200: AdminSessionSerializer})
    def get(self, request):
        response = Response(
            {"authenticated": AdminGate(request.session).is_authenticated},
            status=status.HTTP_200_OK,
        )
        return _with_csrf_token(request, response)
