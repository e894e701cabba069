"""Exception types raised by the definition service."""

from __future__ import annotations


class DefinitionServiceError(Exception):
    """Base class for errors raised by this package."""


class DefinitionNotFoundError(DefinitionServiceError, KeyError):
    """Raised by a definition store when no definition exists for a key."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Definition not found: {self.key}"


class InvalidCoordinatesError(DefinitionServiceError, ValueError):
    """Raised when a coordinates string cannot be parsed."""


__all__ = [
    "DefinitionServiceError",
    "DefinitionNotFoundError",
    "InvalidCoordinatesError",
]
