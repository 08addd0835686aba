"""Friendly message resolution for leaf errors."""

from __future__ import annotations

import errno
from dataclasses import dataclass, field
from functools import cache

from errkit.chain.throwable import Throwable

from .catalog import DEFAULT_CATALOG, MessageCatalog, errno_key, type_key

__all__ = ["MessageResolver", "default_resolver", "user_friendly_message", "fallback_message"]


@dataclass(frozen=True, slots=True)
class MessageResolver:
    """Turns a leaf error into a message an end user can act on.

    Lookup order:
    1. `Throwable` errors speak for themselves.
    2. OS errors by errno name ("errno.ENOENT").
    3. Exception type keys, most specific class first.
    4. `fallback_message`.
    """

    catalog: MessageCatalog = field(default_factory=lambda: DEFAULT_CATALOG)

    def __call__(self, error: object) -> str:
        return self.resolve(error)

    def resolve(self, error: object) -> str:
        if isinstance(error, Throwable):
            message = error.user_friendly_message
            if message:
                return message

        code = getattr(error, "errno", None)
        if isinstance(code, int) and code in errno.errorcode:
            message = self.catalog.get(errno_key(errno.errorcode[code]))
            if message:
                return message

        for klass in type(error).__mro__:
            if klass is object:
                break
            message = self.catalog.get(type_key(klass))
            if message:
                return message

        return fallback_message(error)


def fallback_message(error: object) -> str:
    """Generic "[domain: code] description" message.

    The domain is the error's type name (module-qualified outside builtins),
    the code its errno or integer `code` attribute, else 0.
    """
    error_type = type(error)
    if error_type.__module__ == "builtins":
        domain = error_type.__qualname__
    else:
        domain = type_key(error_type)

    code = 0
    for attr in ("errno", "code"):
        value = getattr(error, attr, None)
        if isinstance(value, int) and not isinstance(value, bool):
            code = value
            break

    description = str(error).strip() or error_type.__name__
    return f"[{domain}: {code}] {description}"


@cache
def default_resolver() -> MessageResolver:
    """Resolver over the built-in catalog, shared process-wide."""
    return MessageResolver()


def user_friendly_message(error: object, catalog: MessageCatalog | None = None) -> str:
    if catalog is None:
        return default_resolver().resolve(error)
    return MessageResolver(catalog).resolve(error)
