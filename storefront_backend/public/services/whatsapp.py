# public/services/whatsapp.py

"""
WHATSAPP ORDER HANDOFF

Orders are not placed server-side. The storefront opens a wa.me deep link
with a prefilled inquiry message; this module only builds that link.
"""

from __future__ import annotations

from urllib.parse import quote

from django.conf import settings

WHATSAPP_BASE_URL = "https://wa.me"

ORDER_INQUIRY_TEMPLATE = (
    "Hi! I'm interested in buying *{name}* (Rs. {price}). "
    "Please let me know the availability and next steps."
)

# Characters a browser's encodeURIComponent leaves alone.
_URI_COMPONENT_SAFE = "!'()*"


def build_order_inquiry_url(name: str, price, number: str | None = None) -> str:
    number = number or settings.WHATSAPP_NUMBER
    message = ORDER_INQUIRY_TEMPLATE.format(name=name, price=price)
    return f"{WHATSAPP_BASE_URL}/{number}?text={quote(message, safe=_URI_COMPONENT_SAFE)}"
