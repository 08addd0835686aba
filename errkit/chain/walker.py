"""Chain walker: unwrap an error into an ErrorChain."""

from __future__ import annotations

from collections.abc import Callable

from errkit.core.config import DEFAULT_MAX_DEPTH

from .describe import describe_error, wrapped_cause
from .model import ErrorChain, ErrorNode

__all__ = [
    "CauseAccessor",
    "MessageFunc",
    "ChainWalkError",
    "CycleDetected",
    "MaxDepthExceeded",
    "walk",
]

CauseAccessor = Callable[[object], object | None]
MessageFunc = Callable[[object], str]


class ChainWalkError(Exception):
    """An error chain could not be walked to its leaf."""

    def __init__(self, message: str, *, depth: int, kinds: tuple[str, ...]) -> None:
        super().__init__(message)
        self.depth = depth
        self.kinds = kinds


class CycleDetected(ChainWalkError):
    """The chain wraps an error that already appeared higher up."""


class MaxDepthExceeded(ChainWalkError):
    """The chain is deeper than the configured limit."""


def _default_message(error: object) -> str:
    from errkit.messages.resolver import default_resolver

    return default_resolver().resolve(error)


def _fallback_message(error: object) -> str:
    from errkit.messages.resolver import fallback_message

    return fallback_message(error)


def walk(
    error: object,
    *,
    resolver: MessageFunc | None = None,
    cause_of: CauseAccessor | None = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> ErrorChain:
    """Unwrap `error` into a chain ordered from outermost to innermost.

    Args:
        error: Any error value. Nothing is assumed about its type.
        resolver: Produces the leaf's friendly message. Defaults to the
            built-in message catalog. An empty result falls back to the
            generic "[domain: code] description" message.
        cause_of: Returns the error wrapped by a value, or None for a leaf.
            Defaults to `describe.wrapped_cause`.
        max_depth: Maximum number of nodes in the chain.

    Raises:
        CycleDetected: If an error wraps one of its own ancestors.
        MaxDepthExceeded: If the chain has more than `max_depth` nodes.
    """
    if max_depth < 1:
        raise ValueError(f"max_depth must be >= 1, got {max_depth}")
    resolve = resolver or _default_message
    next_cause = cause_of or wrapped_cause

    nodes: list[ErrorNode] = []
    # visited values stay referenced so their ids cannot be reused mid-walk
    visited: list[object] = []
    seen: set[int] = set()
    current = error

    while True:
        if id(current) in seen:
            raise CycleDetected(
                f"error chain revisits {type(current).__name__} at depth {len(nodes)}",
                depth=len(nodes),
                kinds=tuple(node.kind for node in nodes),
            )
        if len(nodes) >= max_depth:
            raise MaxDepthExceeded(
                f"error chain is deeper than {max_depth} nodes",
                depth=len(nodes),
                kinds=tuple(node.kind for node in nodes),
            )
        seen.add(id(current))
        visited.append(current)

        description = describe_error(current)
        inner = next_cause(current)
        if inner is None:
            message = resolve(current) or _fallback_message(current)
            nodes.append(ErrorNode.leaf(description, message))
            return ErrorChain(tuple(nodes))

        nodes.append(ErrorNode.wrapper(description))
        current = inner
