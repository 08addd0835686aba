"""A plain error for one-off failures that need no family of their own."""

from __future__ import annotations

from dataclasses import dataclass

from errkit.chain.throwable import Throwable

__all__ = ["GenericError"]


@dataclass(eq=False)
class GenericError(Throwable):
    """Error carrying nothing but a message.

    Renders as "GenericError [Struct]"; the message never affects grouping.
    """

    message: str

    @property
    def user_friendly_message(self) -> str:
        return self.message
