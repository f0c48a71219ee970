# products/services/category_counts.py

"""
CATEGORY PRODUCT COUNT SYNC

Category.product_count is a cache. It is recomputed from the products table
(never incremented/decremented) so a single call always converges to the
true value, whatever happened before.

Callers: products.services.admin_gateway after product writes,
the Django admin, and `manage.py sync_category_counts`.
"""

from __future__ import annotations

import logging

from products.models import Category, Product

logger = logging.getLogger(__name__)


def sync_category_product_count(slug: str) -> int:
    """
    Recount products referencing `slug` and store the result on the category.

    Returns the computed count. A slug with no category row is a no-op
    (the count is still returned).
    """
    count = Product.objects.filter(category_id=slug).count()
    updated = Category.objects.filter(slug=slug).update(product_count=count)

    if not updated:
        logger.warning(
            "Product count computed for unknown category slug",
            extra={"category_slug": slug, "product_count": count},
        )
    return count


def resync_all_category_counts() -> dict[str, int]:
    """
    Repair every category's cached count. Returns {slug: count}.
    """
    results = {}
    for slug in Category.objects.values_list("slug", flat=True):
        results[slug] = sync_category_product_count(slug)

    logger.info("Category product counts resynced", extra={"categories": len(results)})
    return results
