# permissions/gate.py

"""
ADMIN ACCESS GATE

Purpose:
- Keep casual visitors out of the admin console.

What this is NOT:
- Not an identity system: there are no admin users, only one shared password
  (settings.ADMIN_PASSWORD) and a boolean flag in the client's session.
- No expiry beyond the session itself, no lockout.

Unsafe admin requests must also pass Django's CSRF check: the flag rides on
the session cookie, and API views are otherwise CSRF-exempt. The token is
handed out as the csrftoken cookie by the login and session endpoints.

States:
- unauthenticated (flag absent/false) -> login(correct password) -> authenticated
- authenticated -> logout() -> unauthenticated
"""

from __future__ import annotations

import logging

from django.conf import settings
from django.utils.crypto import constant_time_compare
from rest_framework import exceptions
from rest_framework.authentication import CSRFCheck
from rest_framework.permissions import SAFE_METHODS, BasePermission

logger = logging.getLogger(__name__)


class AdminGate:
    """Session-flag gate. Construct per request: AdminGate(request.session)."""

    def __init__(self, session, key: str | None = None):
        self._session = session
        self._key = key or settings.ADMIN_SESSION_KEY

    @property
    def is_authenticated(self) -> bool:
        return self._session.get(self._key) is True

    def login(self, password) -> bool:
        expected = settings.ADMIN_PASSWORD or ""
        supplied = password if isinstance(password, str) else ""

        if not expected or not constant_time_compare(supplied, expected):
            logger.warning("Admin console login rejected")
            return False

        self._session[self._key] = True
        logger.info("Admin console login accepted")
        return True

    def logout(self) -> None:
        self._session.pop(self._key, None)


def enforce_csrf(request) -> None:
    """Run Django's CSRF check on a DRF request; raise 403 on failure."""

    def dummy_get_response(request):  # pragma: no cover
        return None

    check = CSRFCheck(dummy_get_response)
    check.process_request(request)
    reason = check.process_view(request, None, (), {})
    if reason:
        raise exceptions.PermissionDenied(f"CSRF Failed: {reason}")


class IsAdminSession(BasePermission):
    """
    Allow only requests whose session passed the admin gate.

    Project-wide default permission; storefront views opt out with AllowAny.
    """

    message = "Admin login required"

    def has_permission(self, request, view):
        session = getattr(request, "session", None)
        if session is None:
            return False
        if not AdminGate(session).is_authenticated:
            return False
        if request.method not in SAFE_METHODS:
            enforce_csrf(request)
        return True
