"""Errors raised by persistence layers."""

from __future__ import annotations

from dataclasses import dataclass

from errkit.chain.throwable import Catching, Throwable

__all__ = [
    "DatabaseError",
    "ConnectionFailed",
    "OperationFailed",
    "RecordNotFound",
    "DatabaseGenericError",
]


class DatabaseError(Throwable, Catching):
    """Base of the database error family."""


@dataclass(eq=False)
class ConnectionFailed(DatabaseError, case="connection_failed"):
    @property
    def user_friendly_message(self) -> str:
        return "Unable to establish a connection to the database. Check your network settings and try again."


@dataclass(eq=False)
class OperationFailed(DatabaseError, case="operation_failed"):
    """A query or write did not complete."""

    context: str

    @property
    def user_friendly_message(self) -> str:
        return f"The database operation for {self.context} could not be completed. Please retry the action."


@dataclass(eq=False)
class RecordNotFound(DatabaseError, case="record_not_found"):
    entity: str
    identifier: str | None = None

    @property
    def user_friendly_message(self) -> str:
        if self.identifier:
            return f"The {self.entity} with ID {self.identifier} was not found."
        return f"The {self.entity} was not found."


@dataclass(eq=False)
class DatabaseGenericError(DatabaseError, case="generic"):
    message: str

    @property
    def user_friendly_message(self) -> str:
        return self.message
