# public/views/__init__.py

from .cart import AddCartItemView, CartItemView, CartView
from .catalog import (
    PublicCategoryListView,
    PublicCategoryProductsView,
    PublicFeaturedProductsView,
    PublicProductDetailView,
    PublicProductListView,
    PublicProductSearchView,
)
from .shop import ShopView

__all__ = [
    "AddCartItemView",
    "CartItemView",
    "CartView",
    "PublicCategoryListView",
    "PublicCategoryProductsView",
    "PublicFeaturedProductsView",
    "PublicProductDetailView",
    "PublicProductListView",
    "PublicProductSearchView",
    "ShopView",
]
