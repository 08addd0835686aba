"""User-friendly messages for leaf errors."""

from .catalog import DEFAULT_CATALOG, CatalogError, MessageCatalog, load_catalog
from .resolver import MessageResolver, default_resolver, fallback_message, user_friendly_message

__all__ = [
    "CatalogError",
    "DEFAULT_CATALOG",
    "MessageCatalog",
    "MessageResolver",
    "default_resolver",
    "fallback_message",
    "load_catalog",
    "user_friendly_message",
]
