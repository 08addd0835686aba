"""Errors raised while talking to a remote service."""

from __future__ import annotations

from dataclasses import dataclass

from errkit.chain.throwable import Catching, Throwable

__all__ = [
    "NetworkError",
    "NoInternet",
    "NetworkTimeout",
    "BadRequest",
    "ServerError",
    "NetworkGenericError",
]


class NetworkError(Throwable, Catching):
    """Base of the network error family."""


@dataclass(eq=False)
class NoInternet(NetworkError, case="no_internet"):
    @property
    def user_friendly_message(self) -> str:
        return "Unable to connect to the server. Please check your internet connection and try again."


@dataclass(eq=False)
class NetworkTimeout(NetworkError, case="timeout"):
    @property
    def user_friendly_message(self) -> str:
        return "The network request took too long to complete. Please check your connection and try again."


@dataclass(eq=False)
class BadRequest(NetworkError, case="bad_request"):
    """The server rejected the request (4xx)."""

    code: int
    message: str

    @property
    def user_friendly_message(self) -> str:
        return f"There was an issue with the request (Code: {self.code}). {self.message}. Please review and retry."


@dataclass(eq=False)
class ServerError(NetworkError, case="server_error"):
    """The server failed to handle the request (5xx)."""

    code: int
    message: str | None = None

    @property
    def user_friendly_message(self) -> str:
        text = f"The server encountered an error (Code: {self.code})."
        if self.message:
            text += f" {self.message}"
        return text


@dataclass(eq=False)
class NetworkGenericError(NetworkError, case="generic"):
    message: str

    @property
    def user_friendly_message(self) -> str:
        return self.message
