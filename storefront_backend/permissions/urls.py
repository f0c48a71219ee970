# permissions/urls.py
"""
Mounted in backend/urls.py under /api/admin/auth/
"""

from django.urls import path

from permissions.views import AdminLoginView, AdminLogoutView, AdminSessionView

urlpatterns = [
    path("login/", AdminLoginView.as_view(), name="admin-login"),
    path("logout/", AdminLogoutView.as_view(), name="admin-logout"),
    path("session/", AdminSessionView.as_view(), name="admin-session"),
]
