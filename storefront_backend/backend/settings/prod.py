# backend/settings/prod.py
"""
PRODUCTION SETTINGS

Starts from base.py and refuses to boot on anything that is only safe locally:
- SECRET_KEY and ADMIN_PASSWORD must be real values (the base defaults are public)
- DATABASE_URL must point at Postgres
- hosts, CORS and CSRF origins must be explicit https origins

The storefront runs on another origin and relies on the session cookie for
both the cart and the admin flag, so CORS credentials stay on and the cookie
SameSite policy is configurable.
"""

from __future__ import annotations

from django.core.exceptions import ImproperlyConfigured

from .base import *  # noqa: F403
from .base import BASE_DIR, MIDDLEWARE, STORAGES, env

_PUBLIC_DEFAULTS = {
    "SECRET_KEY": "dev-insecure-change-me",
    "ADMIN_PASSWORD": "stacko2024",
}


def _required(name: str) -> str:
    value = (env(name, default="") or "").strip()
    if not value or value == _PUBLIC_DEFAULTS.get(name):
        raise ImproperlyConfigured(f"{name} must be set in production.")
    return value


def _https_origins(name: str) -> list[str]:
    origins = env.list(name, default=[])
    if not origins:
        raise ImproperlyConfigured(f"{name} must be set in production.")
    for origin in origins:
        if not origin.startswith("https://") or "localhost" in origin or "127.0.0.1" in origin:
            raise ImproperlyConfigured(f"{name} must only list public https:// origins ({origin}).")
    return origins


DEBUG = False

SECRET_KEY = _required("SECRET_KEY")
ADMIN_PASSWORD = _required("ADMIN_PASSWORD")

ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=[])
if not ALLOWED_HOSTS:
    raise ImproperlyConfigured("ALLOWED_HOSTS must be set in production.")

# -----------------------------------------
# DATABASE (Postgres only)
# -----------------------------------------
if not _required("DATABASE_URL").startswith(("postgres://", "postgresql://", "pgsql://")):
    raise ImproperlyConfigured("DATABASE_URL must point at Postgres in production.")

DATABASES = {"default": env.db("DATABASE_URL")}
DATABASES["default"]["CONN_MAX_AGE"] = env.int("DB_CONN_MAX_AGE", default=60)

# -----------------------------------------
# STATIC (WhiteNoise) + MEDIA
# -----------------------------------------
STATIC_ROOT = env("STATIC_ROOT", default=str(BASE_DIR / "staticfiles"))
MEDIA_ROOT = env("MEDIA_ROOT", default=str(BASE_DIR / "media"))

MIDDLEWARE.insert(1, "whitenoise.middleware.WhiteNoiseMiddleware")
STORAGES = {
    **STORAGES,
    "staticfiles": {"BACKEND": "whitenoise.storage.CompressedManifestStaticFilesStorage"},
}

# -----------------------------------------
# TLS behind a proxy
# -----------------------------------------
SECURE_PROXY_SSL_HEADER = ("HTTP_X_FORWARDED_PROTO", "https")
SECURE_SSL_REDIRECT = env.bool("SECURE_SSL_REDIRECT", default=True)
SECURE_HSTS_SECONDS = env.int("SECURE_HSTS_SECONDS", default=3600)
SECURE_HSTS_INCLUDE_SUBDOMAINS = env.bool("SECURE_HSTS_INCLUDE_SUBDOMAINS", default=True)
SECURE_HSTS_PRELOAD = env.bool("SECURE_HSTS_PRELOAD", default=False)

SECURE_CONTENT_TYPE_NOSNIFF = True
SECURE_REFERRER_POLICY = "same-origin"
SECURE_CROSS_ORIGIN_OPENER_POLICY = "same-origin"
X_FRAME_OPTIONS = "DENY"

# -----------------------------------------
# COOKIES
# -----------------------------------------
SESSION_COOKIE_SECURE = True
SESSION_COOKIE_HTTPONLY = True
# Set to "None" when the storefront is served from a different site.
SESSION_COOKIE_SAMESITE = env("SESSION_COOKIE_SAMESITE", default="Lax")

CSRF_COOKIE_SECURE = True
CSRF_COOKIE_HTTPONLY = True
CSRF_COOKIE_SAMESITE = SESSION_COOKIE_SAMESITE

# -----------------------------------------
# CORS / CSRF
# -----------------------------------------
CORS_ALLOWED_ORIGINS = _https_origins("CORS_ALLOWED_ORIGINS")
CSRF_TRUSTED_ORIGINS = _https_origins("CSRF_TRUSTED_ORIGINS")
CORS_ALLOW_CREDENTIALS = True
