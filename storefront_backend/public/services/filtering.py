# public/services/filtering.py

"""
SHOP FILTER / SORT ENGINE

Purpose:
- Narrow and order an in-memory product list for the shop page.

Rules:
- Pure: no I/O, input list is never mutated.
- Filters compose with AND, so their order never changes the result set:
    search    case-insensitive substring over name, description, category slug
    category  exact slug; "all" (or blank) disables it
    price     inclusive [min_price, max_price]; a None bound is open
    stock     in_stock_only drops out-of-stock products
- Sort runs last. Python's sort is stable, so "featured" / "newest" keep the
  incoming relative order inside each partition.
- Products may be model instances or plain mappings (e.g. serialized rows).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

ALL_CATEGORIES = "all"

SORT_FEATURED = "featured"
SORT_NEWEST = "newest"
SORT_PRICE_LOW = "price-low"
SORT_PRICE_HIGH = "price-high"
SORT_RATING = "rating"

SORT_KEYS = (SORT_FEATURED, SORT_NEWEST, SORT_PRICE_LOW, SORT_PRICE_HIGH, SORT_RATING)


@dataclass(frozen=True)
class ShopCriteria:
    search_text: str | None = None
    category: str | None = ALL_CATEGORIES
    min_price: int | None = None
    max_price: int | None = None
    in_stock_only: bool = False
    sort_key: str = SORT_FEATURED


def _value(product, field: str):
    if isinstance(product, Mapping):
        return product.get(field)
    if field == "category":
        # Model instances: the FK column holds the slug.
        return getattr(product, "category_id", None)
    return getattr(product, field, None)


def _number(value) -> Decimal:
    if value is None or isinstance(value, bool):
        return Decimal("0")
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal("0")


def _matches_search(product, needle: str) -> bool:
    for field in ("name", "description", "category"):
        text = _value(product, field)
        if text and needle in str(text).lower():
            return True
    return False


def _matches(product, criteria: ShopCriteria, needle: str) -> bool:
    if needle and not _matches_search(product, needle):
        return False

    category = criteria.category
    if category and category != ALL_CATEGORIES and _value(product, "category") != category:
        return False

    price = _number(_value(product, "price"))
    if criteria.min_price is not None and price < criteria.min_price:
        return False
    if criteria.max_price is not None and price > criteria.max_price:
        return False

    if criteria.in_stock_only and not _value(product, "in_stock"):
        return False

    return True


def sort_products(products, sort_key: str) -> list:
    if sort_key == SORT_PRICE_LOW:
        return sorted(products, key=lambda p: _number(_value(p, "price")))
    if sort_key == SORT_PRICE_HIGH:
        return sorted(products, key=lambda p: _number(_value(p, "price")), reverse=True)
    if sort_key == SORT_RATING:
        return sorted(products, key=lambda p: _number(_value(p, "rating")), reverse=True)
    if sort_key == SORT_NEWEST:
        return sorted(products, key=lambda p: not _value(p, "is_new"))
    # featured, and anything unrecognised
    return sorted(products, key=lambda p: not _value(p, "is_featured"))


def filter_and_sort(products, criteria: ShopCriteria | None = None) -> list:
    criteria = criteria or ShopCriteria()
    needle = (criteria.search_text or "").strip().lower()

    matched = [p for p in products if _matches(p, criteria, needle)]
    return sort_products(matched, criteria.sort_key)
