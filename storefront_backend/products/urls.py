# products/urls.py

"""
ADMIN CATALOG URLS

Mounted in backend/urls.py under /api/admin/:
- /api/admin/products/        (+ <uuid>/)
- /api/admin/categories/      (+ <uuid>/)
- /api/admin/dashboard/
"""

from django.urls import include, path
from rest_framework.routers import SimpleRouter

from products.views import AdminCategoryViewSet, AdminDashboardView, AdminProductViewSet

router = SimpleRouter()

router.register(r"categories", AdminCategoryViewSet, basename="admin-categories")
router.register(r"products", AdminProductViewSet, basename="admin-products")

urlpatterns = [
    path("dashboard/", AdminDashboardView.as_view(), name="admin-dashboard"),
    path("", include(router.urls)),
]
