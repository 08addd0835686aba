"""Read-only lookup of user-friendly messages.

Keys come in two shapes:
- "errno.<NAME>" for operating system errors, e.g. "errno.ECONNREFUSED"
- "<module>.<QualName>" for exception types, e.g. "socket.gaierror"

Extra entries can be loaded from a TOML file:

    [messages]
    "errno.ENOSPC" = "Your disk is full."
    "myapp.errors.QuotaError" = "You have reached your storage quota."
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from errkit.core.result import Err, Ok, Result
from errkit.core.structured import StrDict, as_str_dict, get_str_map

__all__ = [
    "MessageCatalog",
    "CatalogError",
    "DEFAULT_CATALOG",
    "errno_key",
    "type_key",
    "load_catalog",
]


def errno_key(name: str) -> str:
    return f"errno.{name}"


def type_key(error_type: type) -> str:
    return f"{error_type.__module__}.{error_type.__qualname__}"


@dataclass(frozen=True, slots=True)
class CatalogError:
    """Error when a message catalog cannot be loaded."""

    message: str
    path: Path | None = None


class MessageCatalog(Mapping[str, str]):
    """Immutable mapping from lookup key to message."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        self._entries: Mapping[str, str] = MappingProxyType(dict(entries or {}))

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MessageCatalog({len(self)} entries)"

    def merged(self, overrides: Mapping[str, str]) -> MessageCatalog:
        """Return a new catalog where `overrides` win over existing entries."""
        return MessageCatalog({**self._entries, **overrides})


DEFAULT_CATALOG = MessageCatalog(
    {
        # Operating system errors
        errno_key("ENOENT"): "The file or folder could not be found.",
        errno_key("EACCES"): "You don't have permission to access this item.",
        errno_key("EPERM"): "This operation is not permitted.",
        errno_key("EEXIST"): "An item with the same name already exists.",
        errno_key("EISDIR"): "A folder was found where a file was expected.",
        errno_key("ENOTDIR"): "A file was found where a folder was expected.",
        errno_key("ENOSPC"): "There is not enough disk space to complete the operation.",
        errno_key("EROFS"): "The item is on a read-only volume and cannot be changed.",
        errno_key("ECONNREFUSED"): "The server refused the connection. Please try again later.",
        errno_key("ECONNRESET"): "The connection was reset. Please try again.",
        errno_key("ETIMEDOUT"): "The request timed out. Please check your connection and try again.",
        errno_key("ENETUNREACH"): "You are not connected to the Internet. Please check your connection.",
        errno_key("EHOSTUNREACH"): "The server could not be reached. Please check your connection.",
        errno_key("EPIPE"): "The connection was closed unexpectedly.",
        # Builtin exception types
        "builtins.TimeoutError": "The operation timed out. Please try again.",
        "builtins.ConnectionRefusedError": "The server refused the connection. Please try again later.",
        "builtins.ConnectionResetError": "The connection was reset. Please try again.",
        "builtins.ConnectionError": "A network connection problem occurred. Please check your connection.",
        "builtins.FileNotFoundError": "The file or folder could not be found.",
        "builtins.PermissionError": "You don't have permission to access this item.",
        "builtins.IsADirectoryError": "A folder was found where a file was expected.",
        "builtins.MemoryError": "The system ran out of memory while completing the operation.",
        "builtins.UnicodeDecodeError": "The data could not be read because it is not valid text.",
        # Standard library modules
        "socket.gaierror": "The server address could not be resolved. Please check your connection.",
        "ssl.SSLCertVerificationError": "A secure connection could not be established because the server's certificate is not trusted.",
        "ssl.SSLError": "A secure connection to the server could not be established.",
        "json.decoder.JSONDecodeError": "The data is not in the expected format.",
        "sqlite3.OperationalError": "The database could not complete the operation.",
        "sqlite3.IntegrityError": "The change conflicts with data that already exists.",
        "urllib.error.HTTPError": "The server returned an error. Please try again later.",
        "urllib.error.URLError": "The server could not be reached. Please check your connection.",
    }
)


def _parse_toml(path: Path) -> Result[StrDict, CatalogError]:
    import tomllib

    try:
        data = as_str_dict(tomllib.loads(path.read_bytes().decode("utf-8")))
    except FileNotFoundError:
        return Err(CatalogError(f"Catalog file not found: {path}", path=path))
    except PermissionError:
        return Err(CatalogError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(CatalogError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(CatalogError(f"Error reading catalog: {e}", path=path))
    if data is None:
        return Err(CatalogError("Catalog root must be a TOML table", path=path))
    return Ok(data)


def load_catalog(path: Path, *, base: MessageCatalog | None = None) -> Result[MessageCatalog, CatalogError]:
    """Load a `[messages]` table from a TOML file.

    Entries from the file override those of `base` (the default catalog
    unless given).
    """
    parsed = _parse_toml(path)
    if isinstance(parsed, Err):
        return parsed

    if "messages" not in parsed.value:
        return Err(CatalogError("Catalog has no [messages] table", path=path))
    entries = get_str_map(parsed.value, "messages")
    if entries is None:
        return Err(CatalogError("[messages] values must all be strings", path=path))

    empty = sorted(key for key, message in entries.items() if not message.strip())
    if empty:
        return Err(CatalogError(f"Empty message for: {', '.join(empty)}", path=path))

    return Ok((base if base is not None else DEFAULT_CATALOG).merged(entries))
