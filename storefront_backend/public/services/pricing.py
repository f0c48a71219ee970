# public/services/pricing.py

"""
PRICING HELPERS

Purpose:
- Discount badge percentage, shipping surcharge, INR display formatting.

Rules:
- Prices are whole rupees.
- Shipping is free once the subtotal reaches FREE_SHIPPING_THRESHOLD,
  otherwise a flat SHIPPING_FLAT_RATE applies.
- Percentages round half up (12.5 -> 13).
"""

from __future__ import annotations

from decimal import ROUND_FLOOR, ROUND_HALF_UP, Decimal, InvalidOperation

from django.conf import settings


def _to_decimal(value) -> Decimal | None:
    if value is None or value == "" or isinstance(value, bool):
        return None
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return None


def calculate_discount(original_price, current_price) -> int:
    """
    Percentage off the original price, as shown on product badges.

    calculate_discount(1000, 750) == 25
    Returns 0 when there is no usable original price.
    """
    original = _to_decimal(original_price)
    current = _to_decimal(current_price)
    if original is None or current is None or original <= 0:
        return 0

    pct = (original - current) / original * Decimal("100")
    # Half toward +inf, so -12.5 -> -12 like the storefront badge.
    return int((pct + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR))


def shipping_cost(subtotal) -> int:
    subtotal = _to_decimal(subtotal) or Decimal("0")
    if subtotal >= settings.FREE_SHIPPING_THRESHOLD:
        return 0
    return int(settings.SHIPPING_FLAT_RATE)


def _group_indian(digits: str) -> str:
    # Last three digits, then pairs: 1234567 -> 12,34,567
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_price(amount) -> str:
    """
    format_price(100000) == "₹1,00,000"
    """
    value = _to_decimal(amount) or Decimal("0")
    rupees = int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    sign = "-" if rupees < 0 else ""
    return f"{sign}₹{_group_indian(str(abs(rupees)))}"
