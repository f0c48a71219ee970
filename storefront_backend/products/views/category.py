# products/views/category.py

from rest_framework import status, viewsets
from rest_framework.response import Response

from products.models import Category
from products.serializers import CategoryInputSerializer, CategorySerializer
from products.services import admin_gateway
from products.views.errors import CatalogErrorMixin


class AdminCategoryViewSet(CatalogErrorMixin, viewsets.ModelViewSet):
    """
    Category API (admin console)

    Policy:
    - Admin session required for every action.
    - Delete answers 409 while products still use the category.
    - product_count is read-only here; it follows product writes.
    - PUT and PATCH both merge: a missing name or slug keeps the stored one.
    """

    queryset = Category.objects.all().order_by("name")
    serializer_class = CategorySerializer

    def create(self, request, *args, **kwargs):
        payload = CategoryInputSerializer(data=request.data)
        payload.is_valid(raise_exception=True)

        category = admin_gateway.create_category(payload.validated_data)
        return Response(CategorySerializer(category).data, status=status.HTTP_201_CREATED)

    def update(self, request, *args, **kwargs):
        partial = kwargs.pop("partial", False)
        payload = CategoryInputSerializer(data=request.data, partial=partial)
        payload.is_valid(raise_exception=True)

        category = admin_gateway.update_category(kwargs[self.lookup_field], payload.validated_data)
        return Response(CategorySerializer(category).data, status=status.HTTP_200_OK)

    def destroy(self, request, *args, **kwargs):
        admin_gateway.delete_category(kwargs[self.lookup_field])
        return Response(status=status.HTTP_204_NO_CONTENT)
