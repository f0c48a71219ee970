# products/models/product.py

import uuid
from decimal import Decimal

from django.core.exceptions import ValidationError
from django.db import models

from .category import Category


class Product(models.Model):
    """
    A collectible listed in the storefront.

    PRICING:
    - price / original_price are whole rupees (no paise)
    - original_price, when set and greater than price, marks a discount

    IMAGES:
    - images is an ordered list of URLs; the first one is the primary image
    - legacy single-URL / JSON-string payloads are normalized at the edge
      by products.services.images.parse_product_images

    CATEGORY:
    - referenced by slug (column "category"), not by id
    - PROTECT: a category with products cannot be deleted
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255, db_index=True)
    description = models.TextField(blank=True, default="")

    price = models.PositiveIntegerField()
    original_price = models.PositiveIntegerField(null=True, blank=True)

    category = models.ForeignKey(
        Category,
        to_field="slug",
        db_column="category",
        on_delete=models.PROTECT,
        related_name="products",
    )

    images = models.JSONField(default=list, blank=True)
    video_url = models.URLField(max_length=500, null=True, blank=True)

    in_stock = models.BooleanField(default=True)
    is_new = models.BooleanField(default=False)
    is_featured = models.BooleanField(default=False)

    rating = models.DecimalField(
        max_digits=2, decimal_places=1, default=Decimal("5.0")
    )
    reviews = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "products"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.name} ({self.category_id})"

    def clean(self):
        if self.price is None or int(self.price) <= 0:
            raise ValidationError("Price must be greater than 0")

        if not isinstance(self.images, list):
            raise ValidationError("images must be a list of URLs")

    @property
    def primary_image(self):
        return self.images[0] if self.images else None
