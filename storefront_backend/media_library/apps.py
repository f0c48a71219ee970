# media_library/apps.py

"""
MEDIA LIBRARY APP CONFIG

Admin console uploads (product images, videos) kept in one storage "bucket":
a sub-directory of the default Django storage. No models.
"""

from django.apps import AppConfig


class MediaLibraryConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "media_library"
    verbose_name = "Media Library"
