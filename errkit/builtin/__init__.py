"""Ready-made error families."""

from .database_error import (
    ConnectionFailed,
    DatabaseError,
    DatabaseGenericError,
    OperationFailed,
    RecordNotFound,
)
from .file_error import FileError, FileGenericError, FileNotFound, FileReadFailed, FileWriteFailed
from .generic_error import GenericError
from .network_error import (
    BadRequest,
    NetworkError,
    NetworkGenericError,
    NetworkTimeout,
    NoInternet,
    ServerError,
)

__all__ = [
    # database
    "DatabaseError",
    "ConnectionFailed",
    "OperationFailed",
    "RecordNotFound",
    "DatabaseGenericError",
    # file
    "FileError",
    "FileNotFound",
    "FileReadFailed",
    "FileWriteFailed",
    "FileGenericError",
    # generic
    "GenericError",
    # network
    "NetworkError",
    "NoInternet",
    "NetworkTimeout",
    "BadRequest",
    "ServerError",
    "NetworkGenericError",
]
