# PATH: public/serializers.py

"""
PUBLIC SERIALIZERS (ONLINE STORE)

Purpose:
- Shared request/response shapes for the storefront endpoints.

Used by:
- public/views/catalog.py  (product detail)
- public/views/shop.py     (shop query params)
- public/views/cart.py     (cart mutations + summary)

Notes:
- Transport layer only: shapes, not business rules.
"""

from __future__ import annotations

from rest_framework import serializers

from products.serializers import ProductSerializer
from public.services.filtering import SORT_FEATURED, SORT_KEYS


# =====================================================
# CATALOG
# =====================================================

class PublicProductDetailSerializer(serializers.Serializer):
    product = ProductSerializer()
    related = ProductSerializer(many=True)
    whatsapp_url = serializers.CharField()


# =====================================================
# SHOP
# =====================================================

class ShopQuerySerializer(serializers.Serializer):
    q = serializers.CharField(required=False, allow_blank=True, default="")
    category = serializers.CharField(required=False, allow_blank=True, default="all")
    min_price = serializers.IntegerField(required=False, min_value=0)
    max_price = serializers.IntegerField(required=False, min_value=0)
    in_stock = serializers.BooleanField(required=False, default=False)
    # Unknown sort keys are accepted and treated as "featured".
    sort = serializers.CharField(required=False, allow_blank=True, default=SORT_FEATURED)

    def validate_sort(self, value):
        return value if value in SORT_KEYS else SORT_FEATURED


class ShopResultSerializer(serializers.Serializer):
    count = serializers.IntegerField()
    results = ProductSerializer(many=True)


# =====================================================
# CART
# =====================================================

class AddCartItemInputSerializer(serializers.Serializer):
    product_id = serializers.UUIDField()
    quantity = serializers.IntegerField(min_value=1, default=1)


class UpdateCartItemInputSerializer(serializers.Serializer):
    # 0 or less removes the line.
    quantity = serializers.IntegerField()


class CartProductSnapshotSerializer(serializers.Serializer):
    id = serializers.CharField()
    name = serializers.CharField()
    price = serializers.IntegerField()
    original_price = serializers.IntegerField(allow_null=True)
    category = serializers.CharField(allow_null=True)
    image = serializers.CharField(allow_null=True)
    in_stock = serializers.BooleanField(allow_null=True)


class CartLineSerializer(serializers.Serializer):
    product = CartProductSnapshotSerializer()
    quantity = serializers.IntegerField()
    line_total = serializers.IntegerField()


class CartSummarySerializer(serializers.Serializer):
    items = CartLineSerializer(many=True)
    total_items = serializers.IntegerField()
    total_price = serializers.IntegerField()
    shipping = serializers.IntegerField()
    order_total = serializers.IntegerField()
    free_shipping_threshold = serializers.IntegerField()
