# public/urls.py
"""
PUBLIC API URLS (ONLINE STORE)

Base path (mounted in backend/urls.py):
    /api/public/

Catalog:
- GET /api/public/products/
- GET /api/public/products/featured/
- GET /api/public/products/search/?q=
- GET /api/public/products/<uuid>/
- GET /api/public/categories/
- GET /api/public/categories/<slug>/products/
- GET /api/public/shop/

Cart (session):
- GET|DELETE  /api/public/cart/
- POST        /api/public/cart/items/
- PATCH|DELETE /api/public/cart/items/<uuid>/
"""

from __future__ import annotations

from django.urls import path

from public.views import (
    AddCartItemView,
    CartItemView,
    CartView,
    PublicCategoryListView,
    PublicCategoryProductsView,
    PublicFeaturedProductsView,
    PublicProductDetailView,
    PublicProductListView,
    PublicProductSearchView,
    ShopView,
)

app_name = "public"

urlpatterns = [
    # Catalog
    path("products/", PublicProductListView.as_view(), name="product-list"),
    path("products/featured/", PublicFeaturedProductsView.as_view(), name="product-featured"),
    path("products/search/", PublicProductSearchView.as_view(), name="product-search"),
    path("products/<uuid:product_id>/", PublicProductDetailView.as_view(), name="product-detail"),
    path("categories/", PublicCategoryListView.as_view(), name="category-list"),
    path(
        "categories/<slug:slug>/products/",
        PublicCategoryProductsView.as_view(),
        name="category-products",
    ),
    path("shop/", ShopView.as_view(), name="shop"),

    # Cart
    path("cart/", CartView.as_view(), name="cart"),
    path("cart/items/", AddCartItemView.as_view(), name="cart-items"),
    path("cart/items/<uuid:product_id>/", CartItemView.as_view(), name="cart-item"),
]
