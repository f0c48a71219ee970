# products/services/admin_gateway.py

"""
ADMIN CRUD GATEWAY

Purpose:
- The only write path for products and categories used by the admin console.

Rules:
- Input is validated before anything touches the database; a failed
  validation raises AdminValidationError and writes nothing.
- Each write runs in its own atomic block.
- Category.product_count is recomputed AFTER the product write, outside the
  write's transaction. If the recount fails the write stands, the count is
  stale, and the failure is logged (repair: `manage.py sync_category_counts`).
- Category writes are pass-through. Deleting a category that products still
  reference is refused by the FK (PROTECT) and surfaced as CategoryInUseError.
"""

from __future__ import annotations

import logging
import uuid
from decimal import Decimal

from django.db import DatabaseError, IntegrityError, transaction
from django.db.models import ProtectedError

from products.models import Category, Product
from products.services.catalog import get_product
from products.services.category_counts import sync_category_product_count
from products.services.exceptions import (
    AdminValidationError,
    AdminWriteError,
    CatalogUnavailableError,
    CategoryInUseError,
    CategoryNotFoundError,
    ProductNotFoundError,
)
from products.services.images import parse_product_images
from products.services.slugs import generate_slug

logger = logging.getLogger(__name__)

CATEGORY_IN_USE_MESSAGE = "Make sure no products are using this category"

_TRUE_STRINGS = {"1", "true", "yes", "on"}


# =====================================================
# INPUT COERCION
# =====================================================

def _to_int(value) -> int | None:
    """None/blank -> None; integral numbers or digit strings -> int; else ValueError."""
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise ValueError("boolean is not a number")
    if isinstance(value, int):
        return value
    if isinstance(value, (float, Decimal)):
        if value != int(value):
            raise ValueError("not a whole number")
        return int(value)
    return int(str(value).strip())


def _to_bool(value, *, default: bool) -> bool:
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUE_STRINGS


def validate_product_input(data) -> dict:
    """
    Validate + normalize an admin product payload.

    Required: name (non-blank), price (> 0), category (slug).
    Returns the cleaned field dict; raises AdminValidationError otherwise.
    """
    errors = {}

    name = str(data.get("name") or "").strip()
    if not name:
        errors["name"] = "Product name is required"

    price = None
    try:
        price = _to_int(data.get("price"))
    except (TypeError, ValueError):
        errors["price"] = "Price must be a whole number"
    else:
        if price is None or price <= 0:
            errors["price"] = "Price must be greater than 0"

    original_price = None
    try:
        # 0 means "no original price" in the console form.
        original_price = _to_int(data.get("original_price")) or None
    except (TypeError, ValueError):
        errors["original_price"] = "Original price must be a whole number"
    else:
        if original_price is not None and original_price < 0:
            errors["original_price"] = "Original price cannot be negative"

    category = str(data.get("category") or "").strip()
    if not category:
        errors["category"] = "Category is required"

    if errors:
        raise AdminValidationError(errors)

    return {
        "name": name,
        "description": str(data.get("description") or "").strip(),
        "price": price,
        "original_price": original_price,
        "category": category,
        "images": parse_product_images(data.get("images")),
        "video_url": str(data.get("video_url") or "").strip() or None,
        "in_stock": _to_bool(data.get("in_stock"), default=True),
        "is_new": _to_bool(data.get("is_new"), default=False),
        "is_featured": _to_bool(data.get("is_featured"), default=False),
    }


def validate_category_input(data) -> dict:
    """Name required; slug defaults to one generated from the name."""
    errors = {}

    name = str(data.get("name") or "").strip()
    if not name:
        errors["name"] = "Category name is required"

    slug = generate_slug(str(data.get("slug") or "") or name)
    if not slug:
        errors["slug"] = "Slug is required"

    if errors:
        raise AdminValidationError(errors)

    return {"name": name, "slug": slug}


# =====================================================
# HELPERS
# =====================================================

def _atomic_write(fn, *, failure: str, context: dict, conflict: dict | None = None):
    """
    Run one ORM write in its own savepoint and translate DB errors.

    conflict: field errors to raise (as AdminValidationError) on IntegrityError.
    """
    try:
        with transaction.atomic():
            return fn()
    except IntegrityError as exc:
        if conflict:
            raise AdminValidationError(conflict) from exc
        logger.exception(failure, extra=context)
        raise AdminWriteError(failure) from exc
    except DatabaseError as exc:
        logger.exception(failure, extra=context)
        raise AdminWriteError(failure) from exc


def _sync_counts(*slugs: str) -> None:
    for slug in dict.fromkeys(s for s in slugs if s):
        try:
            sync_category_product_count(slug)
        except DatabaseError:
            logger.exception(
                "Category product count sync failed; cached count is stale",
                extra={"category_slug": slug},
            )


def _resolve_category(slug: str) -> Category:
    try:
        return Category.objects.get(slug=slug)
    except Category.DoesNotExist:
        raise AdminValidationError({"category": f"Unknown category '{slug}'"}) from None
    except DatabaseError as exc:
        logger.exception("Category lookup failed", extra={"category_slug": slug})
        raise CatalogUnavailableError("Failed to load categories") from exc


def _get_product_or_raise(product_id) -> Product:
    product = get_product(product_id)
    if product is None:
        raise ProductNotFoundError("Product not found")
    return product


def _get_category_or_raise(category_id) -> Category:
    try:
        pk = uuid.UUID(str(category_id))
    except (TypeError, ValueError):
        raise CategoryNotFoundError("Category not found") from None

    try:
        return Category.objects.get(pk=pk)
    except Category.DoesNotExist:
        raise CategoryNotFoundError("Category not found") from None
    except DatabaseError as exc:
        logger.exception("Category lookup failed", extra={"category_id": str(pk)})
        raise CatalogUnavailableError("Failed to load categories") from exc


def _product_state(product: Product) -> dict:
    return {
        "name": product.name,
        "description": product.description,
        "price": product.price,
        "original_price": product.original_price,
        "category": product.category_id,
        "images": product.images,
        "video_url": product.video_url,
        "in_stock": product.in_stock,
        "is_new": product.is_new,
        "is_featured": product.is_featured,
    }


# =====================================================
# PRODUCTS
# =====================================================

def create_product(data) -> Product:
    """
    Create a product (rating 5.0, no reviews) and recount its category.
    """
    cleaned = validate_product_input(data)
    category = _resolve_category(cleaned.pop("category"))

    product = Product(
        category=category,
        rating=Decimal("5.0"),
        reviews=0,
        **cleaned,
    )
    _atomic_write(
        product.save,
        failure="Failed to save product",
        context={"category_slug": category.slug},
    )

    _sync_counts(category.slug)

    logger.info(
        "Product created",
        extra={"product_id": str(product.id), "category_slug": category.slug},
    )
    return product


def update_product(product_id, data) -> Product:
    """
    Partial update: fields missing from `data` keep their current value.

    When the category changes, both the old and new category are recounted.
    """
    product = _get_product_or_raise(product_id)
    previous_slug = product.category_id

    merged = _product_state(product)
    merged.update(data)
    cleaned = validate_product_input(merged)
    category = _resolve_category(cleaned.pop("category"))

    for field, value in cleaned.items():
        setattr(product, field, value)
    product.category = category

    _atomic_write(
        product.save,
        failure="Failed to save product",
        context={"product_id": str(product.id)},
    )

    if previous_slug != category.slug:
        _sync_counts(previous_slug, category.slug)

    logger.info("Product updated", extra={"product_id": str(product.id)})
    return product


def delete_product(product_id) -> None:
    product = _get_product_or_raise(product_id)
    slug = product.category_id
    pk = str(product.pk)

    _atomic_write(
        product.delete,
        failure="Failed to delete product",
        context={"product_id": pk},
    )

    _sync_counts(slug)

    logger.info("Product deleted", extra={"product_id": pk, "category_slug": slug})


# =====================================================
# CATEGORIES
# =====================================================

def create_category(data) -> Category:
    cleaned = validate_category_input(data)
    category = Category(product_count=0, **cleaned)

    _atomic_write(
        category.save,
        failure="Failed to save category",
        context={"category_slug": category.slug},
        conflict={"slug": "A category with this slug already exists"},
    )

    logger.info("Category created", extra={"category_slug": category.slug})
    return category


def update_category(category_id, data) -> Category:
    category = _get_category_or_raise(category_id)

    merged = {"name": category.name, "slug": category.slug}
    merged.update(data)
    cleaned = validate_category_input(merged)

    # Products point at the slug; renaming it would orphan them.
    if cleaned["slug"] != category.slug and category.products.exists():
        raise CategoryInUseError(CATEGORY_IN_USE_MESSAGE)

    category.name = cleaned["name"]
    category.slug = cleaned["slug"]

    _atomic_write(
        category.save,
        failure="Failed to save category",
        context={"category_id": str(category.id)},
        conflict={"slug": "A category with this slug already exists"},
    )

    logger.info("Category updated", extra={"category_slug": category.slug})
    return category


def delete_category(category_id) -> None:
    category = _get_category_or_raise(category_id)
    slug = category.slug

    try:
        with transaction.atomic():
            category.delete()
    except ProtectedError as exc:
        logger.warning("Category delete refused: still referenced", extra={"category_slug": slug})
        raise CategoryInUseError(CATEGORY_IN_USE_MESSAGE) from exc
    except DatabaseError as exc:
        logger.exception("Failed to delete category", extra={"category_slug": slug})
        raise AdminWriteError("Failed to delete category") from exc

    logger.info("Category deleted", extra={"category_slug": slug})


# =====================================================
# DASHBOARD
# =====================================================

def dashboard_stats() -> dict:
    try:
        return {
            "total_products": Product.objects.count(),
            "total_categories": Category.objects.count(),
            "featured_products": Product.objects.filter(is_featured=True).count(),
        }
    except DatabaseError as exc:
        logger.exception("Dashboard stats read failed")
        raise CatalogUnavailableError("Failed to load dashboard stats") from exc
