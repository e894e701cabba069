"""Compute, curate and cache component definitions."""

from .config import ServiceSettings
from .coordinates import EntityCoordinates, ResultCoordinates
from .errors import DefinitionNotFoundError, DefinitionServiceError, InvalidCoordinatesError
from .orchestration import DefinitionService
from .store import MemoryDefinitionStore, RedisDefinitionStore

__all__ = [
    "DefinitionService",
    "EntityCoordinates",
    "ResultCoordinates",
    "ServiceSettings",
    "MemoryDefinitionStore",
    "RedisDefinitionStore",
    "DefinitionServiceError",
    "DefinitionNotFoundError",
    "InvalidCoordinatesError",
]
