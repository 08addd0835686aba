"""How an opaque error value is turned into a chain node.

Two capabilities are consulted, both optional:

- `Describable`: the value knows its kind descriptor and parameters. This is
  opt-in: subclass it or call `Describable.register(cls)`. A `describe`
  method on an unregistered type is ignored.
- `WrapsCause`: the value wraps exactly one other error.

Values implementing neither are still accepted. They are described by their
type name and walked through Python's explicit exception chaining
(`raise ... from ...`).
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from enum import Enum
from typing import Protocol, runtime_checkable

from .model import ErrorDescription

__all__ = [
    "Describable",
    "WrapsCause",
    "aggregate_kind",
    "describe_error",
    "is_value_type",
    "render_value",
    "wrapped_cause",
]


class Describable(ABC):
    """An error that reports its own kind descriptor and parameters."""

    __slots__ = ()

    @abstractmethod
    def describe(self) -> ErrorDescription: ...


@runtime_checkable
class WrapsCause(Protocol):
    """An error that explicitly wraps another error."""

    @property
    def wrapped_cause(self) -> object | None: ...


def is_value_type(value: object) -> bool:
    """Return True for struct-like values (dataclasses, named tuples)."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return True
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def aggregate_kind(value: object) -> str:
    """Kind descriptor for a value without case structure.

    "SocketError [Struct]" for dataclasses and named tuples,
    "TimeoutError [Class]" for everything else.
    """
    flavor = "Struct" if is_value_type(value) else "Class"
    return f"{type(value).__name__} [{flavor}]"


def render_value(value: object) -> str:
    """Textual form of an associated parameter."""
    return str(value)


def describe_error(error: object) -> ErrorDescription:
    """Describe a single error value, ignoring anything it wraps.

    A registered `Describable` whose `describe()` returns anything other than
    an ErrorDescription is described like a plain aggregate.
    """
    if isinstance(error, Describable):
        description = error.describe()
        if isinstance(description, ErrorDescription):
            return description
        return ErrorDescription(kind=aggregate_kind(error))
    if isinstance(error, Enum):
        return ErrorDescription(kind=f"{type(error).__name__}.{error.name}", is_variant=True)
    return ErrorDescription(kind=aggregate_kind(error))


def wrapped_cause(error: object) -> object | None:
    """Default wrapped-cause accessor.

    The explicit `wrapped_cause` capability wins. Otherwise an exception's
    `__cause__` is followed; implicit context (`__context__`) never is.
    """
    if isinstance(error, WrapsCause):
        cause = error.wrapped_cause
        if cause is not None:
            return cause
    if isinstance(error, BaseException):
        return error.__cause__
    return None
