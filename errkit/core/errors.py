"""Exit codes for the errkit command line.

The values are process exit codes and should remain stable:
- 0: Success
- 1: User error (bad arguments, unknown catalog key)
- 2: Config error (config or catalog file missing or invalid)
- 3: Chain error (an error chain could not be walked)
- 5: I/O error (file could not be read)
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands."""

    OK = 0
    USER_ERROR = 1
    CONFIG_ERROR = 2
    CHAIN_ERROR = 3
    IO_ERROR = 5

    def __str__(self) -> str:
        """Return human-readable name."""
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        return self == ErrorCode.OK

    @property
    def is_error(self) -> bool:
        return self != ErrorCode.OK
