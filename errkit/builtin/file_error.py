"""Errors that occur during file operations.

    def load_document(name: str) -> Document:
        path = find_file(name)
        if path is None:
            raise FileNotFound(file_name=name)
        with FileError.catching():
            return Document.parse(path.read_text())
"""

from __future__ import annotations

from dataclasses import dataclass

from errkit.chain.throwable import Catching, Throwable

__all__ = [
    "FileError",
    "FileNotFound",
    "FileReadFailed",
    "FileWriteFailed",
    "FileGenericError",
]


class FileError(Throwable, Catching):
    """Base of the file error family."""


@dataclass(eq=False)
class FileNotFound(FileError, case="file_not_found"):
    """The file could not be found."""

    file_name: str

    @property
    def user_friendly_message(self) -> str:
        return (
            f"The file {self.file_name} could not be located. "
            "Please verify the file path and try again."
        )


@dataclass(eq=False)
class FileReadFailed(FileError, case="read_failed"):
    """There was an issue reading the file."""

    file_name: str

    @property
    def user_friendly_message(self) -> str:
        return (
            f"An error occurred while attempting to read the file {self.file_name}. "
            "Please check file permissions and try again."
        )


@dataclass(eq=False)
class FileWriteFailed(FileError, case="write_failed"):
    """There was an issue writing to the file."""

    file_name: str

    @property
    def user_friendly_message(self) -> str:
        return (
            f"Unable to write to the file {self.file_name}. "
            "Ensure you have the necessary permissions and try again."
        )


@dataclass(eq=False)
class FileGenericError(FileError, case="generic"):
    """Catch-all when no other case carries the right details."""

    message: str

    @property
    def user_friendly_message(self) -> str:
        return self.message
