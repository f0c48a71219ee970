# products/services/catalog.py

"""
CATALOG READER

Purpose:
- Read-only queries backing the storefront pages.

Rules:
- Every query hits the database (no caching layer).
- Not-found is a value (None / empty list), never an exception.
- Database failures are logged and re-raised as CatalogUnavailableError so
  views can answer 503 without leaking driver errors.
"""

from __future__ import annotations

import logging
import uuid

from django.conf import settings
from django.db import DatabaseError

from products.models import Category, Product
from products.services.exceptions import CatalogUnavailableError

logger = logging.getLogger(__name__)


def _evaluate(queryset, *, what: str) -> list:
    try:
        return list(queryset)
    except DatabaseError as exc:
        logger.exception("Catalog read failed", extra={"query": what})
        raise CatalogUnavailableError(f"Failed to load {what}") from exc


def _products():
    return Product.objects.select_related("category")


def list_products() -> list[Product]:
    """All products, newest first."""
    return _evaluate(_products().order_by("-created_at"), what="products")


def get_product(product_id) -> Product | None:
    """
    Single product by id.

    Returns None for unknown ids and for values that are not UUIDs at all
    (those can never match a row).
    """
    try:
        pk = uuid.UUID(str(product_id))
    except (TypeError, ValueError):
        return None

    rows = _evaluate(_products().filter(pk=pk)[:1], what="product")
    return rows[0] if rows else None


def products_by_category(slug: str) -> list[Product]:
    return _evaluate(
        _products().filter(category_id=slug).order_by("-created_at"),
        what="products",
    )


def featured_products(limit: int | None = None) -> list[Product]:
    """Newest featured products, capped at FEATURED_PRODUCTS_LIMIT by default."""
    if limit is None:
        limit = settings.FEATURED_PRODUCTS_LIMIT
    return _evaluate(
        _products().filter(is_featured=True).order_by("-created_at")[:limit],
        what="featured products",
    )


def list_categories() -> list[Category]:
    return _evaluate(Category.objects.order_by("name"), what="categories")


def search_products(query: str) -> list[Product]:
    """Case-insensitive substring match on name. Blank query matches everything."""
    query = (query or "").strip()
    qs = _products()
    if query:
        qs = qs.filter(name__icontains=query)
    return _evaluate(qs.order_by("-created_at"), what="products")


def related_products(product: Product, limit: int | None = None) -> list[Product]:
    """Other products in the same category, newest first."""
    if limit is None:
        limit = settings.RELATED_PRODUCTS_LIMIT
    return _evaluate(
        _products()
        .filter(category_id=product.category_id)
        .exclude(pk=product.pk)
        .order_by("-created_at")[:limit],
        what="related products",
    )
