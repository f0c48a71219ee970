# products/tests/utils.py

"""
Shared catalog fixtures for tests across apps.

created_at is auto_now_add, so "age" is applied with a follow-up UPDATE to
get a deterministic newest-first order.
"""

from __future__ import annotations

from datetime import timedelta

from django.conf import settings
from django.utils import timezone

from products.models import Category, Product
from permissions.gate import AdminGate


def make_category(name: str = "Figurines", slug: str | None = None, **extra) -> Category:
    return Category.objects.create(
        name=name,
        slug=slug or name.lower().replace(" ", "-"),
        **extra,
    )


def make_product(category: Category, name: str = "Mini'Me Figurine", *, age_minutes: int = 0, **extra) -> Product:
    fields = {
        "name": name,
        "price": 1499,
        "description": "",
        "images": [],
    }
    fields.update(extra)
    product = Product.objects.create(category=category, **fields)

    if age_minutes:
        created_at = timezone.now() - timedelta(minutes=age_minutes)
        Product.objects.filter(pk=product.pk).update(created_at=created_at)
        product.refresh_from_db()
    return product


def login_admin(client) -> None:
    """Mark an APIClient's session as past the admin gate."""
    session = client.session
    AdminGate(session).login(settings.ADMIN_PASSWORD)
    session.save()
