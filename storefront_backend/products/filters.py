# products/filters.py

"""
ADMIN PRODUCT LIST FILTERS

GET /api/admin/products/?q=<name>&category=<slug|all>&filter=<featured|new|outofstock>

- q: case-insensitive substring of the product NAME only
- category: exact slug, "all" or blank disables it
- filter: single flag narrowing (featured / new / out of stock)
"""

import django_filters

from products.models import Product

FLAG_FEATURED = "featured"
FLAG_NEW = "new"
FLAG_OUT_OF_STOCK = "outofstock"

FLAG_CHOICES = (
    (FLAG_FEATURED, "Featured"),
    (FLAG_NEW, "New"),
    (FLAG_OUT_OF_STOCK, "Out of stock"),
)


class AdminProductFilter(django_filters.FilterSet):
    q = django_filters.CharFilter(method="filter_name")
    category = django_filters.CharFilter(method="filter_category")
    filter = django_filters.ChoiceFilter(choices=FLAG_CHOICES, method="filter_flag")

    class Meta:
        model = Product
        fields = []

    def filter_name(self, queryset, name, value):
        value = (value or "").strip()
        if not value:
            return queryset
        return queryset.filter(name__icontains=value)

    def filter_category(self, queryset, name, value):
        value = (value or "").strip()
        if not value or value == "all":
            return queryset
        return queryset.filter(category_id=value)

    def filter_flag(self, queryset, name, value):
        if value == FLAG_FEATURED:
            return queryset.filter(is_featured=True)
        if value == FLAG_NEW:
            return queryset.filter(is_new=True)
        if value == FLAG_OUT_OF_STOCK:
            return queryset.filter(in_stock=False)
        return queryset
