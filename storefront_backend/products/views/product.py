# products/views/product.py

"""
ADMIN PRODUCT VIEWSET

Purpose:
- Admin console product management (list/create/retrieve/update/delete).

Rules:
- Guarded by the admin session gate (project default permission).
- Writes go through products.services.admin_gateway so validation and the
  category count recount always run.
- List supports ?q= / ?category= / ?filter= (see products/filters.py).
- PUT and PATCH both merge: fields left out keep their stored value.
"""

from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status, viewsets
from rest_framework.response import Response

from products.filters import AdminProductFilter
from products.models import Product
from products.serializers import ProductInputSerializer, ProductSerializer
from products.services import admin_gateway
from products.views.errors import CatalogErrorMixin


class AdminProductViewSet(CatalogErrorMixin, viewsets.ModelViewSet):
    serializer_class = ProductSerializer
    filterset_class = AdminProductFilter
    queryset = Product.objects.select_related("category").order_by("-created_at")

    @extend_schema(
        request=ProductInputSerializer,
        responses={
            201: ProductSerializer,
            400: OpenApiResponse(description="Validation error"),
            503: OpenApiResponse(description="Failed to save product"),
        },
        description="Create a product and refresh its category's product_count.",
    )
    def create(self, request, *args, **kwargs):
        payload = ProductInputSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        product = admin_gateway.create_product(payload.validated_data)
        return Response(ProductSerializer(product).data, status=status.HTTP_201_CREATED)

    @extend_schema(
        request=ProductInputSerializer,
        responses={
            200: ProductSerializer,
            400: OpenApiResponse(description="Validation error"),
            404: OpenApiResponse(description="Product not found"),
        },
        description=(
            "Update a product (PUT and PATCH both merge into the stored product). "
            "Moving it to another category recounts both."
        ),
    )
    def update(self, request, *args, **kwargs):
        partial = kwargs.pop("partial", False)
        payload = ProductInputSerializer(data=request.data, partial=partial)
        payload.is_valid(raise_exception=True)

        product = admin_gateway.update_product(kwargs[self.lookup_field], payload.validated_data)
        return Response(ProductSerializer(product).data, status=status.HTTP_200_OK)

    def destroy(self, request, *args, **kwargs):
        admin_gateway.delete_product(kwargs[self.lookup_field])
        return Response(status=status.HTTP_204_NO_CONTENT)
