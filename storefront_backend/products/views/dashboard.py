# products/views/dashboard.py

from drf_spectacular.utils import extend_schema
from rest_framework import serializers, status
from rest_framework.response import Response
from rest_framework.views import APIView

from products.services import admin_gateway
from products.views.errors import CatalogErrorMixin


class DashboardStatsSerializer(serializers.Serializer):
    total_products = serializers.IntegerField()
    total_categories = serializers.IntegerField()
    featured_products = serializers.IntegerField()


class AdminDashboardView(CatalogErrorMixin, APIView):
    """
    GET /api/admin/dashboard/
    Headline counts for the admin console landing page.
    """

    @extend_schema(responses={200: DashboardStatsSerializer}, tags=["Admin"])
    def get(self, request):
        return Response(admin_gateway.dashboard_stats(), status=status.HTTP_200_OK)
