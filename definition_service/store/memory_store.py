from __future__ import annotations

import json
from typing import Any, BinaryIO, Dict

from ..coordinates import ResultCoordinates
from ..errors import DefinitionNotFoundError


class MemoryDefinitionStore:
    """In-process definition store keyed by rendered coordinates."""

    def __init__(self) -> None:
        self.definitions: Dict[str, bytes] = {}

    async def get(self, coordinates: ResultCoordinates) -> dict[str, Any]:
        key = str(coordinates)
        payload = self.definitions.get(key)
        if payload is None:
            raise DefinitionNotFoundError(key)
        return json.loads(payload)

    async def store(self, coordinates: ResultCoordinates, stream: BinaryIO) -> None:
        self.definitions[str(coordinates)] = stream.read()

    def __len__(self) -> int:
        return len(self.definitions)


__all__ = ["MemoryDefinitionStore"]
