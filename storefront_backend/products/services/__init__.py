# products/services/__init__.py

from .admin_gateway import (
    create_category,
    create_product,
    dashboard_stats,
    delete_category,
    delete_product,
    update_category,
    update_product,
    validate_product_input,
)
from .catalog import (
    featured_products,
    get_product,
    list_categories,
    list_products,
    products_by_category,
    related_products,
    search_products,
)
from .category_counts import resync_all_category_counts, sync_category_product_count

__all__ = [
    "create_category",
    "create_product",
    "dashboard_stats",
    "delete_category",
    "delete_product",
    "update_category",
    "update_product",
    "validate_product_input",
    "featured_products",
    "get_product",
    "list_categories",
    "list_products",
    "products_by_category",
    "related_products",
    "search_products",
    "resync_all_category_counts",
    "sync_category_product_count",
]
