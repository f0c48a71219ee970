# products/admin.py
"""
=====================================================
PATH: products/admin.py
=====================================================

Django admin for the catalog (operator back office, separate from the
password-gated admin console API).

Rules:
- product_count is never edited by hand; it is read-only here.
- Any product save/delete made through this admin recounts the affected
  categories, same as the admin console gateway.
- Categories get a bulk "resync product counts" action for repairs.
"""

from __future__ import annotations

from django.contrib import admin, messages

from products.models import Category, Product
from products.services.category_counts import sync_category_product_count


# =====================================================
# CATEGORY
# =====================================================

@admin.register(Category)
class CategoryAdmin(admin.ModelAdmin):
    list_display = ("name", "slug", "product_count", "created_at")
    search_fields = ("name", "slug")
    ordering = ("name",)
    readonly_fields = ("product_count", "created_at")
    prepopulated_fields = {"slug": ("name",)}
    actions = ("resync_product_counts",)

    @admin.action(description="Resync product counts")
    def resync_product_counts(self, request, queryset):
        for slug in queryset.values_list("slug", flat=True):
            sync_category_product_count(slug)
        self.message_user(
            request,
            f"Product counts resynced for {queryset.count()} categories.",
            messages.SUCCESS,
        )


# =====================================================
# PRODUCT
# =====================================================

@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = (
        "name",
        "category",
        "price",
        "original_price",
        "in_stock",
        "is_new",
        "is_featured",
        "created_at",
    )
    list_filter = ("in_stock", "is_new", "is_featured", "category")
    search_fields = ("name", "description")
    ordering = ("-created_at",)
    readonly_fields = ("rating", "reviews", "created_at", "updated_at")

    def save_model(self, request, obj, form, change):
        previous_slug = None
        if change:
            previous_slug = (
                Product.objects.filter(pk=obj.pk)
                .values_list("category_id", flat=True)
                .first()
            )

        super().save_model(request, obj, form, change)

        for slug in {previous_slug, obj.category_id} - {None}:
            sync_category_product_count(slug)

    def delete_model(self, request, obj):
        slug = obj.category_id
        super().delete_model(request, obj)
        sync_category_product_count(slug)

    def delete_queryset(self, request, queryset):
        slugs = set(queryset.values_list("category_id", flat=True))
        super().delete_queryset(request, queryset)
        for slug in slugs:
            sync_category_product_count(slug)
