# products/models/category.py

import uuid

from django.db import models


class Category(models.Model):
    """
    A product grouping addressed by its slug.

    product_count is a cached denormalization of the number of products
    pointing at this slug. It is refreshed by the admin gateway after every
    product write that can change it (see products/services/category_counts.py),
    not maintained by the database.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True)

    product_count = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "categories"
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self):
        return f"{self.name} ({self.slug})"
