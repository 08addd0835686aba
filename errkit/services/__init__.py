"""Service layer: the public operations built on top of the chain core."""

from .diagnostics import (
    ChainReport,
    ErrorDiagnostics,
    chain_report,
    error_chain_description,
    grouping_id,
)

__all__ = [
    "ChainReport",
    "ErrorDiagnostics",
    "chain_report",
    "error_chain_description",
    "grouping_id",
]
