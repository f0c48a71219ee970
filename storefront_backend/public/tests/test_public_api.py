# public/tests/test_public_api.py

from __future__ import annotations

import uuid
from unittest.mock import patch

from django.test import TestCase, override_settings
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APIClient

from products.services.exceptions import CatalogUnavailableError
from products.tests.utils import make_category, make_product


class PublicCatalogApiTests(TestCase):
    """
    Storefront catalog endpoints.

    GUARANTEES:
    - Public (no admin session needed)
    - Unknown product -> 404, database trouble -> 503
    - Product detail carries related products and a WhatsApp link
    """

    def setUp(self):
        self.client = APIClient()
        self.figurines = make_category("Figurines", "figurines")
        self.lamps = make_category("Lamps", "lamps")
        self.figure = make_product(
            self.figurines, "Mini'Me Figurine", is_featured=True, age_minutes=10
        )
        self.couple = make_product(self.figurines, "Couple Mini'Me", age_minutes=5)
        self.lamp = make_product(self.lamps, "Custom Moon Lamp", price=1299)

    def test_product_list_newest_first(self):
        res = self.client.get(reverse("public:product-list"))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(
            [p["name"] for p in res.data],
            ["Custom Moon Lamp", "Couple Mini'Me", "Mini'Me Figurine"],
        )

    def test_featured(self):
        res = self.client.get(reverse("public:product-featured"))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([p["name"] for p in res.data], ["Mini'Me Figurine"])

    def test_search(self):
        res = self.client.get(reverse("public:product-search"), {"q": "moon"})

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([p["name"] for p in res.data], ["Custom Moon Lamp"])

    def test_product_detail(self):
        res = self.client.get(reverse("public:product-detail", args=[self.figure.id]))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["product"]["name"], "Mini'Me Figurine")
        self.assertEqual([p["name"] for p in res.data["related"]], ["Couple Mini'Me"])
        self.assertTrue(res.data["whatsapp_url"].startswith("https://wa.me/"))
        self.assertIn("Mini'Me%20Figurine", res.data["whatsapp_url"])

    def test_unknown_product_is_404(self):
        res = self.client.get(reverse("public:product-detail", args=[uuid.uuid4()]))

        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(res.data["detail"], "Product not found")

    def test_categories(self):
        res = self.client.get(reverse("public:category-list"))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([c["slug"] for c in res.data], ["figurines", "lamps"])

    def test_category_products(self):
        res = self.client.get(reverse("public:category-products", args=["lamps"]))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual([p["name"] for p in res.data], ["Custom Moon Lamp"])

    def test_database_failure_is_503(self):
        with patch(
            "products.services.catalog.list_products",
            side_effect=CatalogUnavailableError("Failed to load products"),
        ):
            res = self.client.get(reverse("public:product-list"))

        self.assertEqual(res.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(res.data, {"detail": "Failed to load products"})


@override_settings(SHOP_DEFAULT_PRICE_RANGE=(0, 5000))
class ShopApiTests(TestCase):
    def setUp(self):
        self.client = APIClient()
        figurines = make_category("Figurines", "figurines")
        lamps = make_category("Lamps", "lamps")
        make_product(figurines, "Figure", price=1499, is_featured=True)
        make_product(lamps, "Lamp", price=1299, in_stock=False)
        make_product(figurines, "Statue", price=7500)

    def _names(self, params=None):
        res = self.client.get(reverse("public:shop"), params or {})
        self.assertEqual(res.status_code, status.HTTP_200_OK, res.data)
        self.assertEqual(res.data["count"], len(res.data["results"]))
        return [p["name"] for p in res.data["results"]]

    def test_default_price_range_applies(self):
        self.assertEqual(sorted(self._names()), ["Figure", "Lamp"])

    def test_explicit_bounds_override_default(self):
        self.assertEqual(self._names({"max_price": 10000, "min_price": 5000}), ["Statue"])

    def test_filters_and_sort(self):
        self.assertEqual(self._names({"sort": "price-low"}), ["Lamp", "Figure"])
        self.assertEqual(self._names({"in_stock": "true"}), ["Figure"])
        self.assertEqual(self._names({"category": "lamps"}), ["Lamp"])
        self.assertEqual(self._names({"q": "fig"}), ["Figure"])

    def test_unknown_sort_falls_back_to_featured(self):
        self.assertEqual(self._names({"sort": "bogus"})[0], "Figure")

    def test_invalid_price_is_400(self):
        res = self.client.get(reverse("public:shop"), {"min_price": "cheap"})
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)


@override_settings(FREE_SHIPPING_THRESHOLD=2000, SHIPPING_FLAT_RATE=99)
class CartApiTests(TestCase):
    """
    GUARANTEES:
    - The cart follows the client's session cookie
    - Every response is the full summary
    - Unknown products cannot be added
    """

    def setUp(self):
        self.client = APIClient()
        category = make_category("Figurines", "figurines")
        self.product = make_product(category, "Mini'Me Figurine", price=1499)
        self.cheap = make_product(category, "Keychain", price=299)

    def _add(self, product_id, quantity=None):
        payload = {"product_id": str(product_id)}
        if quantity is not None:
            payload["quantity"] = quantity
        return self.client.post(reverse("public:cart-items"), payload, format="json")

    def _item_url(self, product):
        return reverse("public:cart-item", args=[product.id])

    def test_empty_cart(self):
        res = self.client.get(reverse("public:cart"))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["items"], [])
        self.assertEqual(res.data["shipping"], 0)

    def test_add_and_increment(self):
        self._add(self.product.id)
        res = self._add(self.product.id, 2)

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(len(res.data["items"]), 1)
        self.assertEqual(res.data["items"][0]["quantity"], 3)
        self.assertEqual(res.data["total_price"], 4497)
        self.assertEqual(res.data["shipping"], 0)

        # Persists across requests.
        res = self.client.get(reverse("public:cart"))
        self.assertEqual(res.data["total_items"], 3)

    def test_small_order_pays_shipping(self):
        res = self._add(self.cheap.id)

        self.assertEqual(res.data["shipping"], 99)
        self.assertEqual(res.data["order_total"], 398)

    def test_add_unknown_product_is_404(self):
        res = self._add(uuid.uuid4())
        self.assertEqual(res.status_code, status.HTTP_404_NOT_FOUND)

    def test_add_rejects_bad_quantity(self):
        res = self._add(self.product.id, 0)
        self.assertEqual(res.status_code, status.HTTP_400_BAD_REQUEST)

    def test_update_quantity_and_remove_by_zero(self):
        self._add(self.product.id)
        self._add(self.cheap.id)

        res = self.client.patch(self._item_url(self.product), {"quantity": 3}, format="json")
        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["total_items"], 4)

        res = self.client.patch(self._item_url(self.cheap), {"quantity": 0}, format="json")
        self.assertEqual([i["product"]["name"] for i in res.data["items"]], ["Mini'Me Figurine"])

    def test_remove_item(self):
        self._add(self.product.id)

        res = self.client.delete(self._item_url(self.product))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["items"], [])

    def test_clear_cart(self):
        self._add(self.product.id)
        self._add(self.cheap.id)

        res = self.client.delete(reverse("public:cart"))

        self.assertEqual(res.status_code, status.HTTP_200_OK)
        self.assertEqual(res.data["total_items"], 0)

    def test_carts_are_per_session(self):
        self._add(self.product.id)

        other = APIClient()
        res = other.get(reverse("public:cart"))

        self.assertEqual(res.data["items"], [])
