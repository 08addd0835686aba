"""Declaring errors that describe themselves.

A family is a plain `Throwable` subclass. Its cases are subclasses declared
with a `case=` name, usually as dataclasses so their parameters are labeled:

    class FileError(Throwable):
        \"\"\"Errors that occur during file operations.\"\"\"

    @dataclass(eq=False)
    class FileNotFound(FileError, case="file_not_found"):
        file_name: str

`FileNotFound("/a").describe()` yields kind "FileError.file_not_found" with
associated data (("file_name", "/a"),). A case wraps another error through a
field declared with `cause()`:

    @dataclass(eq=False)
    class LoadFailed(DatabaseError, case="load_failed"):
        table: str
        error: BaseException = cause()

Families mixing in `Catching` get a `caught` case for free, plus helpers that
wrap foreign errors into it.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import Any, ClassVar

from .describe import Describable, aggregate_kind, render_value
from .model import AssociatedData, ErrorDescription

__all__ = ["Throwable", "Catching", "cause", "CAUSE_METADATA_KEY"]

CAUSE_METADATA_KEY = "errkit.cause"


def cause() -> Any:
    """Dataclass field marking the wrapped cause of a case.

    The field is excluded from the case's associated data.
    """
    return dataclasses.field(metadata={CAUSE_METADATA_KEY: True})


@Describable.register
class Throwable(Exception):
    """Base class for errors that carry a user-facing message."""

    case_name: ClassVar[str | None] = None
    family_name: ClassVar[str | None] = None

    def __init_subclass__(cls, case: str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if case is not None:
            cls.case_name = case
            cls.family_name = _family_of(cls).__name__
        elif cls.case_name is None and issubclass(cls, Catching) and "Caught" not in vars(cls):
            cls.Caught = _make_caught_case(cls)

    @property
    def is_variant(self) -> bool:
        return type(self).case_name is not None

    @property
    def wrapped_cause(self) -> BaseException | None:
        """The error wrapped by this one, taken from its `cause()` field."""
        if not dataclasses.is_dataclass(self):
            return None
        for f in dataclasses.fields(self):
            if f.metadata.get(CAUSE_METADATA_KEY):
                return getattr(self, f.name)
        return None

    def describe(self) -> ErrorDescription:
        cls = type(self)
        if cls.case_name is None:
            return ErrorDescription(kind=aggregate_kind(self))
        return ErrorDescription(
            kind=f"{cls.family_name}.{cls.case_name}",
            associated_data=self._associated_data(),
            is_variant=True,
        )

    def _associated_data(self) -> AssociatedData:
        if dataclasses.is_dataclass(self):
            return tuple(
                (f.name, render_value(getattr(self, f.name)))
                for f in dataclasses.fields(self)
                if f.repr and not f.metadata.get(CAUSE_METADATA_KEY)
            )
        inner = self.wrapped_cause
        return tuple(
            (str(index), render_value(arg))
            for index, arg in enumerate(self.args)
            if arg is not inner
        )

    @property
    def user_friendly_message(self) -> str:
        """Message suitable for end users.

        Subclasses override this. The default is the exception's own text,
        or the rendered case for cases without one.
        """
        if self.args and not dataclasses.is_dataclass(self):
            return Exception.__str__(self)
        description = self.describe()
        if description.associated_data:
            params = ", ".join(f"{k}: {v}" for k, v in description.associated_data)
            return f"{description.kind}({params})"
        return description.kind

    def __str__(self) -> str:
        return self.user_friendly_message


class Catching:
    """Mixin for families that wrap foreign errors in a `caught` case.

    Errors that already belong to the family pass through untouched, so
    nesting `catch` calls never double-wraps.
    """

    Caught: ClassVar[type[Throwable]]

    @classmethod
    def caught(cls, error: BaseException) -> Throwable:
        return cls.Caught(error)

    @classmethod
    def catch[T](cls, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Call fn, re-raising foreign exceptions as `cls.caught(...)`."""
        try:
            return fn(*args, **kwargs)
        except Exception as e:
            if isinstance(e, cls):
                raise
            raise cls.caught(e) from e

    @classmethod
    @contextmanager
    def catching(cls) -> Iterator[None]:
        """Context manager form of `catch`."""
        try:
            yield
        except Exception as e:
            if isinstance(e, cls):
                raise
            raise cls.caught(e) from e


def _family_of(cls: type) -> type:
    for base in cls.__mro__[1:]:
        if issubclass(base, Throwable) and base.case_name is None:
            return base
    return Throwable


def _make_caught_case(family: type[Throwable]) -> type[Throwable]:
    def __init__(self: Any, error: BaseException) -> None:
        Exception.__init__(self, error)
        self.error = error

    def __repr__(self: Any) -> str:
        return f"{family.__qualname__}.Caught({self.error!r})"

    def user_friendly_message(self: Any) -> str:
        inner = self.error
        if isinstance(inner, Throwable):
            return inner.user_friendly_message
        return str(inner) or type(inner).__name__

    namespace = {
        "__init__": __init__,
        "__repr__": __repr__,
        "__module__": family.__module__,
        "__qualname__": f"{family.__qualname__}.Caught",
        "__doc__": f"A foreign error caught while running {family.__name__} code.",
        "wrapped_cause": property(lambda self: self.error),
        "user_friendly_message": property(user_friendly_message),
    }
    return type("Caught", (family,), namespace, case="caught")
