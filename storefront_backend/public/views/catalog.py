# public/views/catalog.py
"""
PUBLIC CATALOG (ONLINE STORE)

GET /api/public/products/                      all products, newest first
GET /api/public/products/featured/             up to 8 featured products
GET /api/public/products/search/?q=<text>      name search
GET /api/public/products/<uuid>/               product + related + WhatsApp link
GET /api/public/categories/                    categories by name
GET /api/public/categories/<slug>/products/    products in one category

Rules:
- AllowAny (public), read-only
- Throttled to reduce scraping/abuse
- Unknown product -> 404 {"detail": "Product not found"}
- Database trouble -> 503 {"detail": "Failed to load ..."}
"""

from __future__ import annotations

from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle
from rest_framework.views import APIView

from products.serializers import CategorySerializer, ProductSerializer
from products.services import catalog
from products.views.errors import CatalogErrorMixin
from public.serializers import PublicProductDetailSerializer
from public.services.whatsapp import build_order_inquiry_url


class PublicCatalogThrottle(AnonRateThrottle):
    scope = "public_catalog"


class PublicCatalogView(CatalogErrorMixin, APIView):
    """Base for storefront read endpoints."""

    permission_classes = [AllowAny]
    throttle_classes = [PublicCatalogThrottle]


def _products_response(products) -> Response:
    return Response(ProductSerializer(products, many=True).data, status=status.HTTP_200_OK)


class PublicProductListView(PublicCatalogView):
    @extend_schema(tags=["Public"], responses={200: ProductSerializer(many=True)})
    def get(self, request):
        return _products_response(catalog.list_products())


class PublicFeaturedProductsView(PublicCatalogView):
    @extend_schema(tags=["Public"], responses={200: ProductSerializer(many=True)})
    def get(self, request):
        return _products_response(catalog.featured_products())


class PublicProductSearchView(PublicCatalogView):
    @extend_schema(
        tags=["Public"],
        parameters=[
            OpenApiParameter(
                name="q",
                type=str,
                location=OpenApiParameter.QUERY,
                required=False,
                description="Case-insensitive product name fragment.",
            ),
        ],
        responses={200: ProductSerializer(many=True)},
    )
    def get(self, request):
        return _products_response(catalog.search_products(request.query_params.get("q", "")))


class PublicProductDetailView(PublicCatalogView):
    @extend_schema(
        tags=["Public"],
        responses={
            200: PublicProductDetailSerializer,
            404: OpenApiResponse(description="Product not found"),
        },
    )
    def get(self, request, product_id):
        product = catalog.get_product(product_id)
        if product is None:
            return Response({"detail": "Product not found"}, status=status.HTTP_404_NOT_FOUND)

        related = catalog.related_products(product)
        return Response(
            {
                "product": ProductSerializer(product).data,
                "related": ProductSerializer(related, many=True).data,
                "whatsapp_url": build_order_inquiry_url(product.name, product.price),
            },
            status=status.HTTP_200_OK,
        )


class PublicCategoryListView(PublicCatalogView):
    @extend_schema(tags=["Public"], responses={200: CategorySerializer(many=True)})
    def get(self, request):
        categories = catalog.list_categories()
        return Response(CategorySerializer(categories, many=True).data, status=status.HTTP_200_OK)


class PublicCategoryProductsView(PublicCatalogView):
    @extend_schema(tags=["Public"], responses={200: ProductSerializer(many=True)})
    def get(self, request, slug):
        return _products_response(catalog.products_by_category(slug))
