"""Composition of walker, renderer and hasher.

`error_chain_description` and `grouping_id` are the two outputs callers use;
`ErrorDiagnostics` binds them to a config and a message catalog, and
`ChainReport` carries everything one walk produces.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from errkit.chain.grouping import grouping_id as chain_grouping_id
from errkit.chain.grouping import skeleton
from errkit.chain.model import ErrorChain
from errkit.chain.render import render
from errkit.chain.walker import CauseAccessor, walk
from errkit.core.config import Config
from errkit.messages.catalog import DEFAULT_CATALOG, MessageCatalog
from errkit.messages.resolver import MessageResolver

__all__ = [
    "ChainReport",
    "ErrorDiagnostics",
    "error_chain_description",
    "grouping_id",
    "chain_report",
]


@dataclass(frozen=True, slots=True)
class ChainReport:
    """Everything derived from one error chain."""

    chain: ErrorChain
    description: str
    skeleton: str
    grouping_id: str

    @property
    def user_friendly_message(self) -> str:
        # the walker always sets a message on the leaf
        return self.chain.leaf.leaf_message or ""


@dataclass(frozen=True, slots=True)
class ErrorDiagnostics:
    """Walks, renders and groups errors with one config and catalog."""

    config: Config = field(default_factory=Config)
    catalog: MessageCatalog = field(default_factory=lambda: DEFAULT_CATALOG)
    cause_of: CauseAccessor | None = None

    def chain(self, error: object) -> ErrorChain:
        return walk(
            error,
            resolver=MessageResolver(self.catalog),
            cause_of=self.cause_of,
            max_depth=self.config.walker.max_depth,
        )

    def describe_chain(self, chain: ErrorChain) -> str:
        return render(chain, indent=self.config.render.indent, connector=self.config.render.connector)

    def group_chain(self, chain: ErrorChain) -> str:
        grouping = self.config.grouping
        return chain_grouping_id(
            chain,
            length=grouping.id_length,
            algorithm=grouping.algorithm,
            separator=grouping.separator,
        )

    def error_chain_description(self, error: object) -> str:
        return self.describe_chain(self.chain(error))

    def grouping_id(self, error: object) -> str:
        return self.group_chain(self.chain(error))

    def report(self, error: object) -> ChainReport:
        """Walk once and derive both outputs from the same chain."""
        chain = self.chain(error)
        return ChainReport(
            chain=chain,
            description=self.describe_chain(chain),
            skeleton=skeleton(chain, separator=self.config.grouping.separator),
            grouping_id=self.group_chain(chain),
        )


_DEFAULT = ErrorDiagnostics()


def error_chain_description(error: object) -> str:
    """Render the full wrapping chain of `error` as an indented tree.

    Raises:
        ChainWalkError: If the chain is cyclic or too deep.
    """
    return _DEFAULT.error_chain_description(error)


def grouping_id(error: object) -> str:
    """Six hex characters identifying the wrapping structure of `error`.

    Errors differing only in parameters or messages share an ID.

    Raises:
        ChainWalkError: If the chain is cyclic or too deep.
    """
    return _DEFAULT.grouping_id(error)


def chain_report(error: object) -> ChainReport:
    return _DEFAULT.report(error)
