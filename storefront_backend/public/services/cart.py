# public/services/cart.py

"""
SESSION CART

Purpose:
- Shopper cart kept per client, stored in the Django session.

Rules:
- One entry per product id; adding an existing product increments quantity.
- Quantities below 1 remove the entry.
- Entries hold a product SNAPSHOT taken when first added (name, price, image).
  Later catalog edits do not reprice items already in the cart.
- Totals are recomputed from the entries on every read.
- Every mutation writes the full snapshot back under the fixed session key.
- An unreadable snapshot (bad JSON, wrong shape, bad quantity) loads as an
  empty cart instead of failing the request.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass

from django.conf import settings

from public.services.pricing import shipping_cost

logger = logging.getLogger(__name__)

SNAPSHOT_FIELDS = ("id", "name", "price", "original_price", "category", "image", "in_stock")


class CartSnapshotError(ValueError):
    """Raised when a stored cart entry cannot be read back."""


@dataclass
class CartItem:
    product: dict
    quantity: int

    @property
    def product_id(self) -> str:
        return self.product["id"]

    @property
    def line_total(self) -> int:
        return self.product["price"] * self.quantity

    def as_dict(self) -> dict:
        return {
            "product": dict(self.product),
            "quantity": self.quantity,
            "line_total": self.line_total,
        }


def product_snapshot(product) -> dict:
    """
    Freeze the cart-relevant fields of a Product (or an already-built mapping).
    """
    if isinstance(product, dict):
        source = product
    else:
        source = {
            "id": product.id,
            "name": product.name,
            "price": product.price,
            "original_price": product.original_price,
            "category": product.category_id,
            "image": product.primary_image,
            "in_stock": product.in_stock,
        }

    snapshot = {field: source.get(field) for field in SNAPSHOT_FIELDS}
    snapshot["id"] = str(snapshot["id"])
    snapshot["price"] = int(snapshot["price"])
    return snapshot


def _parse_item(entry) -> CartItem:
    product = entry["product"]
    quantity = entry["quantity"]

    if not isinstance(product, dict) or not product.get("id"):
        raise CartSnapshotError("cart entry has no product id")
    if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
        raise CartSnapshotError("cart entry quantity must be a positive integer")
    if isinstance(product.get("price"), bool) or not isinstance(product.get("price"), int):
        raise CartSnapshotError("cart entry price must be an integer")

    return CartItem(product=product, quantity=quantity)


class Cart:
    """
    Cart over a mutable mapping (normally `request.session`).

    Construct one per request: Cart(request.session).
    """

    def __init__(self, storage, key: str | None = None):
        self._storage = storage
        self._key = key or settings.CART_SESSION_KEY
        self._items: list[CartItem] = self._load()

    # -----------------------------
    # persistence
    # -----------------------------
    def _load(self) -> list[CartItem]:
        raw = self._storage.get(self._key)
        if raw is None:
            return []

        try:
            entries = json.loads(raw) if isinstance(raw, str) else raw
            if not isinstance(entries, list):
                raise CartSnapshotError("cart snapshot is not a list")
            items = [_parse_item(entry) for entry in entries]
        except (ValueError, TypeError, KeyError) as exc:
            logger.warning("Discarding unreadable cart snapshot", extra={"error": str(exc)})
            return []

        # Collapse duplicate ids a hand-edited snapshot might carry.
        merged: dict[str, CartItem] = {}
        for item in items:
            if item.product_id in merged:
                merged[item.product_id].quantity += item.quantity
            else:
                merged[item.product_id] = item
        return list(merged.values())

    def _save(self) -> None:
        self._storage[self._key] = json.dumps(
            [{"product": item.product, "quantity": item.quantity} for item in self._items]
        )

    # -----------------------------
    # reads
    # -----------------------------
    def __iter__(self):
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def get(self, product_id) -> CartItem | None:
        product_id = str(product_id)
        for item in self._items:
            if item.product_id == product_id:
                return item
        return None

    @property
    def items(self) -> list[CartItem]:
        return list(self._items)

    @property
    def total_items(self) -> int:
        return sum(item.quantity for item in self._items)

    @property
    def total_price(self) -> int:
        return sum(item.line_total for item in self._items)

    def summary(self) -> dict:
        subtotal = self.total_price
        # An empty cart has no order to ship.
        shipping = shipping_cost(subtotal) if self._items else 0
        return {
            "items": [item.as_dict() for item in self._items],
            "total_items": self.total_items,
            "total_price": subtotal,
            "shipping": shipping,
            "order_total": subtotal + shipping,
            "free_shipping_threshold": settings.FREE_SHIPPING_THRESHOLD,
        }

    # -----------------------------
    # mutations
    # -----------------------------
    def add(self, product, quantity: int = 1) -> CartItem:
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValueError("quantity must be a positive integer")

        snapshot = product_snapshot(product)
        item = self.get(snapshot["id"])
        if item is not None:
            item.quantity += quantity
        else:
            item = CartItem(product=snapshot, quantity=quantity)
            self._items.append(item)

        self._save()
        return item

    def update_quantity(self, product_id, quantity: int) -> None:
        if quantity < 1:
            self.remove(product_id)
            return

        item = self.get(product_id)
        if item is None:
            return
        item.quantity = quantity
        self._save()

    def remove(self, product_id) -> None:
        product_id = str(product_id)
        remaining = [item for item in self._items if item.product_id != product_id]
        if len(remaining) == len(self._items):
            return
        self._items = remaining
        self._save()

    def clear(self) -> None:
        self._items = []
        self._save()
