# products/services/images.py

"""
PRODUCT IMAGE FIELD NORMALIZATION

Products store images as a JSON list. Older rows and older clients sent one of:
- a JSON array encoded as a string: '["https://a", "https://b"]'
- a single bare URL string:        "https://a"
- nothing / garbage

parse_product_images() is the only place that knows about those shapes.
"""

from __future__ import annotations

import json


def _clean_urls(values) -> list[str]:
    urls = []
    for value in values:
        if not isinstance(value, str):
            continue
        url = value.strip()
        if url:
            urls.append(url)
    return urls


def parse_product_images(value) -> list[str]:
    """
    Normalize any stored/submitted images value into an ordered list of URLs.

    Never raises: unreadable input yields an empty list.
    """
    if not value:
        return []

    if isinstance(value, (list, tuple)):
        return _clean_urls(value)

    if not isinstance(value, str):
        return []

    raw = value.strip()
    try:
        parsed = json.loads(raw)
    except ValueError:
        # Not JSON: accept a lone absolute URL, reject anything else.
        return [raw] if raw.startswith("http") else []

    if isinstance(parsed, list):
        return _clean_urls(parsed)
    return []

