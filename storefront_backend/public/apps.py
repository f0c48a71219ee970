# public/apps.py

"""
PUBLIC APP CONFIG

Public Online Store (AllowAny) module:
- Product catalog + shop filtering
- Session cart
- WhatsApp order handoff (link only)
"""

from django.apps import AppConfig


class PublicConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "public"
    verbose_name = "Public Online Store"
