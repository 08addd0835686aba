"""Logging and occurrence tracking keyed by grouping ID."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import IO, Any

from loguru import logger

from errkit.chain.walker import ChainWalkError
from errkit.services.diagnostics import ChainReport, ErrorDiagnostics

__all__ = ["configure_logging", "log_error", "GroupingTracker", "GroupStats"]

LOG_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level}</level> | {message}"


def configure_logging(level: str = "WARNING", *, sink: IO[str] | None = None, serialize: bool = False) -> None:
    """Replace loguru handlers with a single stream handler.

    With `serialize=True` records are written as JSON lines, which keeps the
    bound `grouping_id` and `error_chain` fields machine-readable.
    """
    logger.remove()
    logger.add(
        sink or sys.stderr,
        level=level.upper(),
        format=LOG_FORMAT,
        serialize=serialize,
        colorize=False if serialize else None,
        backtrace=False,
        diagnose=False,
    )


def log_error(
    error: BaseException,
    message: str = "Unhandled error",
    *,
    level: str = "ERROR",
    diagnostics: ErrorDiagnostics | None = None,
    **context: Any,
) -> ChainReport | None:
    """Log `error` with its chain description and grouping ID attached.

    The record's extra fields carry `grouping_id`, `error_chain` and
    `user_friendly_message`; the chain is also appended to the message.
    Returns the report, or None when the chain could not be walked (the
    walk failure is logged instead).
    """
    diag = diagnostics or ErrorDiagnostics()
    try:
        report = diag.report(error)
    except ChainWalkError as e:
        logger.opt(depth=1).bind(error_type=type(error).__name__, **context).log(
            level,
            "{summary} (error chain unavailable: {reason})",
            summary=message,
            reason=str(e),
        )
        return None

    logger.opt(depth=1).bind(
        grouping_id=report.grouping_id,
        error_chain=report.description,
        user_friendly_message=report.user_friendly_message,
        **context,
    ).log(
        level,
        "{summary} [{group}]\n{chain}",
        summary=message,
        group=report.grouping_id,
        chain=report.description,
    )
    return report


@dataclass(frozen=True, slots=True)
class GroupStats:
    """Occurrences seen for one grouping ID."""

    grouping_id: str
    skeleton: str
    count: int
    last_seen: datetime
    last_description: str


class GroupingTracker:
    """In-memory occurrence counts per grouping ID.

    Safe to share between threads.
    """

    def __init__(self, diagnostics: ErrorDiagnostics | None = None) -> None:
        self._diagnostics = diagnostics or ErrorDiagnostics()
        self._lock = threading.Lock()
        self._groups: dict[str, GroupStats] = {}

    def record(self, error: object) -> GroupStats:
        """Record one occurrence and return the updated group."""
        report = self._diagnostics.report(error)
        now = datetime.now(UTC)
        with self._lock:
            previous = self._groups.get(report.grouping_id)
            stats = GroupStats(
                grouping_id=report.grouping_id,
                skeleton=report.skeleton,
                count=(previous.count if previous else 0) + 1,
                last_seen=now,
                last_description=report.description,
            )
            self._groups[report.grouping_id] = stats
        if previous is None:
            logger.debug("New error group {} ({})", report.grouping_id, report.skeleton)
        return stats

    def get(self, grouping_id: str) -> GroupStats | None:
        with self._lock:
            return self._groups.get(grouping_id)

    def groups(self) -> list[GroupStats]:
        """All groups, most frequent first."""
        with self._lock:
            return sorted(self._groups.values(), key=lambda g: (-g.count, g.grouping_id))

    @property
    def total(self) -> int:
        with self._lock:
            return sum(g.count for g in self._groups.values())

    def clear(self) -> None:
        with self._lock:
            self._groups.clear()
