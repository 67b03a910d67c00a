"""
Body serializers, keyed by media type.

    ┌──────────────────────────────────────┬─────────────────────────┐
    │ Media type                           │ Serializer              │
    ├──────────────────────────────────────┼─────────────────────────┤
    │ application/json                     │ JsonSerializer          │
    │ text/plain (and fallback)            │ PlainTextSerializer     │
    │ application/x-www-form-urlencoded    │ UrlEncodedSerializer    │
    └──────────────────────────────────────┴─────────────────────────┘
"""

from .base import Serializer
from .json_serializer import JsonSerializer
from .plain_text import PlainTextSerializer
from .registry import SerializerRegistry
from .url_encoded import UrlEncodedSerializer

__all__ = [
    "Serializer",
    "SerializerRegistry",
    "JsonSerializer",
    "PlainTextSerializer",
    "UrlEncodedSerializer",
]
