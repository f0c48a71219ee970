# products/serializers/__init__.py

from .category import CategoryInputSerializer, CategorySerializer
from .product import ProductInputSerializer, ProductSerializer

__all__ = [
    "CategoryInputSerializer",
    "CategorySerializer",
    "ProductInputSerializer",
    "ProductSerializer",
]
