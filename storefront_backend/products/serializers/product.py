# products/serializers/product.py

"""
PRODUCT SERIALIZERS

Purpose:
- ProductSerializer: canonical read shape for storefront and admin console.
- ProductInputSerializer: admin form payload (types only).

Rules:
- category is exposed as the slug (the stored reference), plus its name.
- images is always a list; image is the primary (first) one.
- discount_percent is derived, never stored.
- Business validation (required fields, price > 0) happens in the admin
  gateway so every write path shares it.
"""

from rest_framework import serializers
from rest_framework.fields import empty

from products.models import Product
from public.services.pricing import calculate_discount


class ProductSerializer(serializers.ModelSerializer):
    category = serializers.CharField(source="category_id", read_only=True)
    category_name = serializers.CharField(source="category.name", read_only=True)

    image = serializers.CharField(source="primary_image", read_only=True, allow_null=True)
    discount_percent = serializers.SerializerMethodField()

    rating = serializers.DecimalField(
        max_digits=2, decimal_places=1, coerce_to_string=False, read_only=True
    )

    class Meta:
        model = Product
        fields = [
            "id",
            "name",
            "description",
            "price",
            "original_price",
            "discount_percent",
            "category",
            "category_name",
            "images",
            "image",
            "video_url",
            "in_stock",
            "is_new",
            "is_featured",
            "rating",
            "reviews",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields

    def get_discount_percent(self, obj) -> int:
        return calculate_discount(obj.original_price, obj.price)


class OptionalBooleanField(serializers.BooleanField):
    # Form posts omit unchecked flags; leave them absent so the gateway default applies.
    default_empty_html = empty


class ProductInputSerializer(serializers.Serializer):
    """
    Admin product form.

    images accepts a list of URLs or a legacy string (bare URL / JSON array).
    """

    name = serializers.CharField(required=False, allow_blank=True, max_length=255)
    description = serializers.CharField(required=False, allow_blank=True)
    price = serializers.IntegerField(required=False, allow_null=True)
    original_price = serializers.IntegerField(required=False, allow_null=True)
    category = serializers.CharField(required=False, allow_blank=True)
    images = serializers.JSONField(required=False)
    video_url = serializers.CharField(
        required=False, allow_blank=True, allow_null=True, max_length=500
    )
    in_stock = OptionalBooleanField(required=False)
    is_new = OptionalBooleanField(required=False)
    is_featured = OptionalBooleanField(required=False)
