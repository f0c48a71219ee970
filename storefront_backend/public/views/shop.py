# public/views/shop.py
"""
SHOP PAGE QUERY

GET /api/public/shop/?q=&category=&min_price=&max_price=&in_stock=&sort=

Loads the whole catalog and narrows it in memory with the shop engine
(public/services/filtering.py). Price bounds left out fall back to
settings.SHOP_DEFAULT_PRICE_RANGE, the range the shop sidebar opens with.
"""

from __future__ import annotations

from django.conf import settings
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.response import Response

from products.serializers import ProductSerializer
from products.services import catalog
from public.serializers import ShopQuerySerializer, ShopResultSerializer
from public.services.filtering import ShopCriteria, filter_and_sort
from public.views.catalog import PublicCatalogView


class ShopView(PublicCatalogView):
    @extend_schema(
        tags=["Public"],
        parameters=[ShopQuerySerializer],
        responses={
            200: ShopResultSerializer,
            400: OpenApiResponse(description="Invalid query parameter"),
        },
    )
    def get(self, request):
        query = ShopQuerySerializer(data=request.query_params)
        query.is_valid(raise_exception=True)
        params = query.validated_data

        default_min, default_max = settings.SHOP_DEFAULT_PRICE_RANGE
        criteria = ShopCriteria(
            search_text=params["q"],
            category=params["category"] or "all",
            min_price=params.get("min_price", default_min),
            max_price=params.get("max_price", default_max),
            in_stock_only=params["in_stock"],
            sort_key=params["sort"] or "featured",
        )

        results = filter_and_sort(catalog.list_products(), criteria)
        return Response(
            {
                "count": len(results),
                "results": ProductSerializer(results, many=True).data,
            },
            status=status.HTTP_200_OK,
        )
