# products/views/__init__.py

"""
Products views package exports (admin console routes).
"""

from .category import AdminCategoryViewSet
from .dashboard import AdminDashboardView
from .product import AdminProductViewSet

__all__ = [
    "AdminCategoryViewSet",
    "AdminDashboardView",
    "AdminProductViewSet",
]
