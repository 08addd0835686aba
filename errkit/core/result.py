"""Result values for failures that belong to the caller.

Config and catalog loading report problems as values instead of raising, so
callers decide whether a broken file is fatal:

    match load_config(path):
        case Ok(config):
            ...
        case Err(error):
            console.error(error.message)

`capture` is the bridge from raising code: it runs a callable and turns a
raised error of the requested type into an `Err`, leaving every other
exception alone.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TypeGuard

__all__ = ["Ok", "Err", "Result", "is_ok", "is_err", "capture"]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    value: T

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        return Ok(f(self.value))

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"


@dataclass(frozen=True, slots=True)
class Err[E]:
    """A failure, usually a frozen dataclass describing it."""

    error: E

    def unwrap(self) -> None:
        """Raise ValueError carrying the error.

        An exception error becomes the cause, so the original failure still
        shows up in an error chain description.
        """
        cause = self.error if isinstance(self.error, BaseException) else None
        raise ValueError(f"called unwrap on Err: {self.error}") from cause

    def unwrap_or[T](self, default: T) -> T:
        return default

    def map(self, f: Callable[..., object]) -> Err[E]:
        return self

    def __repr__(self) -> str:
        return f"Err({self.error!r})"


type Result[T, E] = Ok[T] | Err[E]


def is_ok[T, E](result: Result[T, E]) -> TypeGuard[Ok[T]]:
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> TypeGuard[Err[E]]:
    return isinstance(result, Err)


def capture[T, X: BaseException](
    fn: Callable[..., T],
    *args: object,
    error_type: type[X],
    **kwargs: object,
) -> Result[T, X]:
    """Call fn and return its value as Ok, or a raised `error_type` as Err.

    Exceptions that are not instances of `error_type` propagate unchanged.

    Example:
        result = capture(pick_movies, database, Genre.ACTION, 3, error_type=MovieError)
        if is_err(result):
            log_error(result.error)
    """
    try:
        return Ok(fn(*args, **kwargs))
    except error_type as e:
        return Err(e)
