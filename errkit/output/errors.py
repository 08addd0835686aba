"""Error presentation utilities.

Centralized formatting and exit code mapping for everything the CLI can
report: error chains, walk failures, config and catalog problems.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from errkit.chain.walker import ChainWalkError, CycleDetected, MaxDepthExceeded
from errkit.core.config import ConfigError
from errkit.core.errors import ErrorCode
from errkit.messages.catalog import CatalogError
from errkit.output.console import Style
from errkit.services.diagnostics import ChainReport

if TYPE_CHECKING:
    from errkit.output.console import ConsoleProtocol

__all__ = [
    "print_chain_report",
    "print_walk_error",
    "print_load_error",
    "walk_error_exit_code",
    "load_error_exit_code",
]


def print_chain_report(report: ChainReport, console: ConsoleProtocol) -> None:
    """Print the chain tree followed by its grouping ID."""
    console.header(report.user_friendly_message)
    for line in report.description.splitlines():
        console.print(line)
    console.print(f"grouping id: {report.grouping_id}", Style.DIM)
    console.print(f"skeleton: {report.skeleton}", Style.DIM)


def print_walk_error(error: ChainWalkError, console: ConsoleProtocol) -> None:
    match error:
        case CycleDetected(depth=depth):
            console.error(f"error chain is cyclic (revisited at depth {depth})")
        case MaxDepthExceeded(depth=depth):
            console.error(f"error chain exceeds the depth limit ({depth} nodes)")
        case _:
            console.error(str(error))
    if error.kinds:
        console.print(f"walked: {' > '.join(error.kinds)}", Style.DIM)


def print_load_error(error: ConfigError | CatalogError, console: ConsoleProtocol) -> None:
    match error:
        case ConfigError(message=message):
            console.error(f"config: {message}")
        case CatalogError(message=message):
            console.error(f"catalog: {message}")
    if error.path is not None:
        console.print(f"file: {error.path}", Style.DIM)


def walk_error_exit_code(error: ChainWalkError) -> int:
    return int(ErrorCode.CHAIN_ERROR)


def load_error_exit_code(error: ConfigError | CatalogError) -> int:
    """Missing files are I/O errors; anything else is a config error."""
    if error.path is not None and not error.path.exists():
        return int(ErrorCode.IO_ERROR)
    return int(ErrorCode.CONFIG_ERROR)
