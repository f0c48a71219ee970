# products/serializers/category.py

from rest_framework import serializers

from products.models import Category


class CategorySerializer(serializers.ModelSerializer):
    """
    Category read shape (storefront + admin).

    product_count is the cached value; it is never written through the API.
    """

    class Meta:
        model = Category
        fields = ["id", "name", "slug", "product_count", "created_at"]
        read_only_fields = fields


class CategoryInputSerializer(serializers.Serializer):
    """
    Admin category form.

    Shape only. Required-ness and slug generation live in
    products.services.admin_gateway.validate_category_input.
    """

    name = serializers.CharField(required=False, allow_blank=True, max_length=255)
    slug = serializers.CharField(required=False, allow_blank=True, max_length=255)
