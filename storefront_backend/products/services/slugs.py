# products/services/slugs.py

import re

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]+")


def generate_slug(name: str) -> str:
    """
    "Action Figures & Toys" -> "action-figures-toys"

    Lowercase, collapse every run of non [a-z0-9] into one dash, trim dashes.
    Non-ASCII letters are dropped, not transliterated.
    """
    slug = _NON_SLUG_CHARS.sub("-", (name or "").lower())
    return slug.strip("-")
