# products/tests/test_admin_api.py

from __future__ import annotations

import uuid

from django.test import TestCase
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from products.models import Category, Product
from products.tests.utils import login_admin, make_category, make_product


class AdminGateEnforcementTests(TestCase):
    """
    GUARANTEES:
    - Every admin catalog route answers 403 without the admin session flag
    - The same routes work once the gate is passed
    """

    def setUp(self):
        self.client = APIClient()
        self.category = make_category("Lamps", "lamps")

    def test_admin_routes_require_login(self):
        urls = [
            reverse("admin-products-list"),
            reverse("admin-categories-list"),
            reverse("admin-dashboard"),
        ]
        for url in urls:
            res = self.client.get(url)
            self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN, url)

        res = self.client.post(
            reverse("admin-products-list"),
            {"name": "Sneaky", "price": 10, "category": "lamps"},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_403_FORBIDDEN)
        self.assertFalse(Product.objects.exists())

    def test_admin_routes_open_after_login(self):
        login_admin(self.client)

        res = self.client.get(reverse("admin-dashboard"))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["total_categories"], 1)


class AdminProductApiTests(TestCase):
    """
    GUARANTEES:
    - Create/update/delete run through the gateway (validation + count sync)
    - Validation failures are 400 with per-field errors
    - List filters: q (name), category, filter flag
    """

    def setUp(self):
        self.client = APIClient()
        login_admin(self.client)
        self.figurines = make_category("Figurines", "figurines")
        self.lamps = make_category("Lamps", "lamps")

    def _detail(self, product_id):
        return reverse("admin-products-detail", args=[product_id])

    def test_create_product(self):
        res = self.client.post(
            reverse("admin-products-list"),
            {
                "name": "Mini'Me Figurine",
                "price": 1499,
                "original_price": 1999,
                "category": "figurines",
                "images": ["https://cdn.example.com/a.jpg"],
                "is_featured": True,
            },
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_201_CREATED, res.data)
        self.assertEqual(res.data["category"], "figurines")
        self.assertEqual(res.data["category_name"], "Figurines")
        self.assertEqual(res.data["discount_percent"], 25)
        self.assertEqual(res.data["image"], "https://cdn.example.com/a.jpg")
        self.assertEqual(res.data["rating"], 5.0)
        self.assertEqual(res.data["reviews"], 0)

        self.figurines.refresh_from_db()
        self.assertEqual(self.figurines.product_count, 1)

    def test_multipart_create_keeps_flag_defaults(self):
        res = self.client.post(
            reverse("admin-products-list"),
            {"name": "Moon Lamp", "price": 1299, "category": "lamps"},
            format="multipart",
        )

        self.assertEqual(res.status_code, status.HTTP_201_CREATED, res.data)
        product = Product.objects.get()
        self.assertTrue(product.in_stock)
        self.assertFalse(product.is_new)
        self.assertFalse(product.is_featured)

    def test_multipart_create_reads_explicit_flags(self):
        res = self.client.post(
            reverse("admin-products-list"),
            {
                "name": "Moon Lamp",
                "price": 1299,
                "category": "lamps",
                "in_stock": "false",
                "is_featured": "true",
            },
            format="multipart",
        )

        self.assertEqual(res.status_code, status.HTTP_201_CREATED, res.data)
        product = Product.objects.get()
        self.assertFalse(product.in_stock)
        self.assertTrue(product.is_featured)

    def test_create_product_validation_errors(self):
        res = self.client.post(
            reverse("admin-products-list"),
            {"name": "", "price": 0},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(set(res.data["errors"]), {"name", "price", "category"})
        self.assertFalse(Product.objects.exists())

    def test_create_product_rejects_non_numeric_price(self):
        res = self.client.post(
            reverse("admin-products-list"),
            {"name": "Lamp", "price": "cheap", "category": "lamps"},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_patch_moves_product_between_categories(self):
        product = make_product(self.figurines, "Figure")
        Category.objects.filter(pk=self.figurines.pk).update(product_count=1)

        res = self.client.patch(self._detail(product.id), {"category": "lamps"}, format="json")

        self.assertEqual(res.status_code, status.HTTP_200_OK, res.data)
        self.figurines.refresh_from_db()
        self.lamps.refresh_from_db()
        self.assertEqual(self.figurines.product_count, 0)
        self.assertEqual(self.lamps.product_count, 1)

    def test_put_unknown_product_is_404(self):
        res = self.client.put(
            self._detail(uuid.uuid4()),
            {"name": "x", "price": 1, "category": "lamps"},
            format="json",
        )
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["detail"], "Product not found")

    def test_put_merges_like_patch(self):
        product = make_product(self.lamps, "Moon Lamp", description="Glows", is_featured=True)

        res = self.client.put(self._detail(product.id), {"price": 999}, format="json")

        self.assertEqual(res.status_code, status.HTTP_200_OK, res.data)
        product.refresh_from_db()
        self.assertEqual(product.price, 999)
        self.assertEqual(product.name, "Moon Lamp")
        self.assertEqual(product.description, "Glows")
        self.assertTrue(product.is_featured)

    def test_delete_product(self):
        product = make_product(self.lamps, "Lamp")

        res = self.client.delete(self._detail(product.id))

        self.assertEqual(res.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Product.objects.filter(pk=product.pk).exists())
        self.lamps.refresh_from_db()
        self.assertEqual(self.lamps.product_count, 0)

    def test_retrieve_product(self):
        product = make_product(self.lamps, "Lamp")
        res = self.client.get(self._detail(product.id))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["name"], "Lamp")

    def test_list_filters(self):
        make_product(self.figurines, "Featured Figure", is_featured=True)
        make_product(self.figurines, "New Figure", is_new=True)
        make_product(self.lamps, "Moon Lamp", in_stock=False)

        def names(params):
            res = self.client.get(reverse("admin-products-list"), params)
            self.assertEqual(res.status_code, status.HTTP_200_OK)
            return sorted(p["name"] for p in res.data)

        self.assertEqual(len(names({})), 3)
        self.assertEqual(names({"q": "moon"}), ["Moon Lamp"])
        self.assertEqual(names({"category": "figurines"}), ["Featured Figure", "New Figure"])
        self.assertEqual(len(names({"category": "all"})), 3)
        self.assertEqual(names({"filter": "featured"}), ["Featured Figure"])
        self.assertEqual(names({"filter": "new"}), ["New Figure"])
        self.assertEqual(names({"filter": "outofstock"}), ["Moon Lamp"])

    def test_list_rejects_unknown_flag(self):
        res = self.client.get(reverse("admin-products-list"), {"filter": "bogus"})
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)


class AdminCategoryApiTests(TestCase):
    """
    GUARANTEES:
    - Category CRUD works behind the gate
    - Deleting a category still in use is a 409 and keeps the category
    """

    def setUp(self):
        self.client = APIClient()
        login_admin(self.client)

    def test_create_category(self):
        res = self.client.post(
            reverse("admin-categories-list"), {"name": "Action Figures"}, format="json"
        )

        self.assertEqual(res.status_code, status.HTTP_201_CREATED, res.data)
        self.assertEqual(res.data["slug"], "action-figures")
        self.assertEqual(res.data["product_count"], 0)

    def test_update_category(self):
        category = make_category("Lamps", "lamps")
        res = self.client.patch(
            reverse("admin-categories-detail", args=[category.id]),
            {"name": "Night Lamps"},
            format="json",
        )

        self.assertEqual(res.status_code, status.HTTP_200_OK, res.data)
        self.assertEqual(res.data["name"], "Night Lamps")

    def test_delete_category_in_use_is_conflict(self):
        category = make_category("Lamps", "lamps")
        make_product(category, "Moon Lamp")

        res = self.client.delete(reverse("admin-categories-detail", args=[category.id]))

        self.assertEqual(res.status_code, status.HTTP_409_CONFLICT)
        self.assertIn("no products are using this category", res.data["detail"])
        self.assertTrue(Category.objects.filter(pk=category.pk).exists())

    def test_delete_unused_category(self):
        category = make_category("Lamps", "lamps")
        res = self.client.delete(reverse("admin-categories-detail", args=[category.id]))

        self.assertEqual(res.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(Category.objects.exists())
