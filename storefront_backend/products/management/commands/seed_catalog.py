# products/management/commands/seed_catalog.py

from django.core.management.base import BaseCommand
from django.db import transaction

from products.models import Category, Product
from products.services.category_counts import resync_all_category_counts
from products.services.slugs import generate_slug

CATEGORIES = [
    "Figurines",
    "Lamps",
    "Accessories",
]

# (name, category, price, original_price, is_new, is_featured, in_stock)
PRODUCTS = [
    ("Mini'Me Figurine", "Figurines", 1499, 1999, True, True, True),
    ("Couple Mini'Me", "Figurines", 2799, 3499, False, True, True),
    ("Custom Moon Lamp", "Lamps", 1299, None, True, False, True),
    ("Photo Crystal Lamp", "Lamps", 2199, 2599, False, True, False),
    ("Name Keychain", "Accessories", 299, 399, False, False, True),
]


class Command(BaseCommand):
    help = "Seed storefront categories and sample products (idempotent)"

    @transaction.atomic
    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING("Seeding catalog..."))

        # -------------------------------
        # CATEGORIES
        # -------------------------------
        category_objs = {}
        for name in CATEGORIES:
            obj, _ = Category.objects.get_or_create(
                slug=generate_slug(name),
                defaults={"name": name},
            )
            category_objs[name] = obj

        # -------------------------------
        # PRODUCTS
        # -------------------------------
        created = 0
        for name, cat, price, original, is_new, featured, in_stock in PRODUCTS:
            _, was_created = Product.objects.get_or_create(
                name=name,
                defaults={
                    "category": category_objs[cat],
                    "price": price,
                    "original_price": original,
                    "is_new": is_new,
                    "is_featured": featured,
                    "in_stock": in_stock,
                    "description": f"Handcrafted {name.lower()}, made to order.",
                },
            )
            created += int(was_created)

        # -------------------------------
        # CACHED COUNTS
        # -------------------------------
        resync_all_category_counts()

        self.stdout.write(
            self.style.SUCCESS(f"Catalog seeded ({created} new products).")
        )
