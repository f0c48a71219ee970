# media_library/urls.py
"""
Mounted in backend/urls.py under /api/admin/media/
"""

from django.urls import path

from media_library.views import MediaFileView, MediaLibraryView, ProductImageUploadView

urlpatterns = [
    path("", MediaLibraryView.as_view(), name="admin-media"),
    path("product-images/", ProductImageUploadView.as_view(), name="admin-media-product-images"),
    path("<str:name>/", MediaFileView.as_view(), name="admin-media-file"),
]
