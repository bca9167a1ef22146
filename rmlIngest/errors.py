"""Exceptions raised by the mapping ingestion front-end."""
from __future__ import annotations


class RMLIngestError(Exception):
    """Base class for all rmlIngest failures."""


class ReadError(RMLIngestError):
    """Raised when a mapping resource cannot be read or released.

    ``body_error`` holds the failure of the consuming body when releasing the
    resource failed as well.
    """

    def __init__(self, message: str, *, body_error: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.body_error = body_error


class ResourceNotFoundError(ReadError):
    """Raised when a path or URI token resolves to nothing."""

    def __init__(self, token: str, message: str | None = None) -> None:
        super().__init__(message or f"{token} can't be found.")
        self.token = token


class MappingParseError(RMLIngestError):
    """Raised when a mapping document is rejected by the parser or normalizer."""

    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.source = source

    def __str__(self) -> str:
        if self.source:
            return f"{self.source}: {self.message}"
        return self.message


__all__ = [
    "RMLIngestError",
    "ReadError",
    "ResourceNotFoundError",
    "MappingParseError",
]
