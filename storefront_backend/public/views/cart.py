# public/views/cart.py

"""
PUBLIC CART API (session-scoped)

GET    /api/public/cart/                    cart summary
DELETE /api/public/cart/                    clear
POST   /api/public/cart/items/              {product_id, quantity=1}; increments if present
PATCH  /api/public/cart/items/<uuid>/       {quantity}; 0 or less removes
DELETE /api/public/cart/items/<uuid>/       remove (no-op if absent)

Rules:
- AllowAny; the cart belongs to the client's session cookie.
- Price is snapshotted from the catalog on first add.
- Every response is the full cart summary (totals + shipping).
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework.views import APIView

from products.services import catalog
from products.views.errors import CatalogErrorMixin
from public.serializers import (
    AddCartItemInputSerializer,
    CartSummarySerializer,
    UpdateCartItemInputSerializer,
)
from public.services.cart import Cart


class PublicWriteThrottle(AnonRateThrottle):
    scope = "public_write"


class PublicCartView(CatalogErrorMixin, APIView):
    permission_classes = [AllowAny]

    def get_throttles(self):
        if self.request.method in ("GET", "HEAD", "OPTIONS"):
            return super().get_throttles()
        return [PublicWriteThrottle()]

    def cart_response(self, cart: Cart) -> Response:
        return Response(cart.summary(), status=status.HTTP_200_OK)


class CartView(PublicCartView):
    @extend_schema(tags=["Public"], responses={200: CartSummarySerializer})
    def get(self, request):
        return self.cart_response(Cart(request.session))

    @extend_schema(tags=["Public"], responses={200: CartSummarySerializer})
    def delete(self, request):
        cart = Cart(request.session)
        cart.clear()
        return self.cart_response(cart)


class AddCartItemView(PublicCartView):
    @extend_schema(
        tags=["Public"],
        request=AddCartItemInputSerializer,
        responses={
            200: CartSummarySerializer,
            404: OpenApiResponse(description="Product not found"),
        },
        description="Add a product to the session cart (increments quantity if present).",
    )
    def post(self, request):
        payload = AddCartItemInputSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        product = catalog.get_product(payload.validated_data["product_id"])
        if product is None:
            return Response({"detail": "Product not found"}, status=status.HTTP_404_NOT_FOUND)

        cart = Cart(request.session)
        cart.add(product, payload.validated_data["quantity"])
        return self.cart_response(cart)


class CartItemView(PublicCartView):
    @extend_schema(
        tags=["Public"],
        request=UpdateCartItemInputSerializer,
        responses={200: CartSummarySerializer},
    )
    def patch(self, request, product_id):
        payload = UpdateCartItemInputSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        cart = Cart(request.session)
        cart.update_quantity(product_id, payload.validated_data["quantity"])
        return self.cart_response(cart)

    @extend_schema(tags=["Public"], responses={200: CartSummarySerializer})
    def delete(self, request, product_id):
        cart = Cart(request.session)
        cart.remove(product_id)
        return self.cart_response(cart)
