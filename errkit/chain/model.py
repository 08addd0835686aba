"""Error chain data model.

An `ErrorChain` is the flattened view of a wrapped error: the outermost
context first, the original failure last. Chains are built fresh by the
walker and never mutated.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

__all__ = ["AssociatedData", "ErrorDescription", "ErrorNode", "ErrorChain"]

AssociatedData = tuple[tuple[str, str], ...]


@dataclass(frozen=True, slots=True)
class ErrorDescription:
    """What a single error value says about itself.

    Attributes:
        kind: Stable kind descriptor, e.g. "FileError.not_found" or
            "SocketError [Struct]". Must not depend on carried data.
        associated_data: (label, rendered value) pairs of a variant's
            parameters, in declaration order.
        is_variant: True for tagged cases; their parameters render inline.
    """

    kind: str
    associated_data: AssociatedData = ()
    is_variant: bool = False


@dataclass(frozen=True, slots=True)
class ErrorNode:
    """One link in an error chain."""

    kind: str
    associated_data: AssociatedData = ()
    is_variant: bool = False
    is_leaf: bool = False
    leaf_message: str | None = None

    def __post_init__(self) -> None:
        if self.is_leaf and not self.leaf_message:
            raise ValueError(f"leaf node {self.kind!r} requires a non-empty leaf_message")
        if not self.is_leaf and self.leaf_message is not None:
            raise ValueError(f"non-leaf node {self.kind!r} cannot carry a leaf_message")

    @classmethod
    def wrapper(cls, description: ErrorDescription) -> ErrorNode:
        return cls(
            kind=description.kind,
            associated_data=description.associated_data,
            is_variant=description.is_variant,
        )

    @classmethod
    def leaf(cls, description: ErrorDescription, message: str) -> ErrorNode:
        return cls(
            kind=description.kind,
            associated_data=description.associated_data,
            is_variant=description.is_variant,
            is_leaf=True,
            leaf_message=message,
        )

    @property
    def label(self) -> str:
        """Kind plus inline parameters, as shown in a rendered tree."""
        if not self.is_variant or not self.associated_data:
            return self.kind
        params = ", ".join(f"{name}: {value}" for name, value in self.associated_data)
        return f"{self.kind}({params})"


@dataclass(frozen=True, slots=True)
class ErrorChain:
    """Ordered nodes from root (index 0) to leaf (last index).

    Invariant: at least one node, exactly one leaf, and the leaf is last.
    """

    nodes: tuple[ErrorNode, ...]

    def __post_init__(self) -> None:
        if not self.nodes:
            raise ValueError("an error chain needs at least one node")
        leaves = [i for i, node in enumerate(self.nodes) if node.is_leaf]
        if leaves != [len(self.nodes) - 1]:
            raise ValueError("an error chain needs exactly one leaf, in last position")

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[ErrorNode]:
        return iter(self.nodes)

    def __getitem__(self, index: int) -> ErrorNode:
        return self.nodes[index]

    @property
    def root(self) -> ErrorNode:
        return self.nodes[0]

    @property
    def leaf(self) -> ErrorNode:
        return self.nodes[-1]

    @property
    def kinds(self) -> tuple[str, ...]:
        """Kind descriptors in chain order; the only input to grouping."""
        return tuple(node.kind for node in self.nodes)
