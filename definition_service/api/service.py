"""Service-layer helpers for definition lookups."""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from fastapi import HTTPException

from ..coordinates import EntityCoordinates
from ..errors import InvalidCoordinatesError
from ..orchestration import DefinitionService
from .model import DefinitionBatchRequest, DefinitionBatchResponse

logger = logging.getLogger("definition_service")


def parse_coordinates(value: str, *, require_revision: bool = True) -> EntityCoordinates:
    try:
        coordinates = EntityCoordinates.from_string(value)
    except InvalidCoordinatesError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    if require_revision and not coordinates.revision:
        raise HTTPException(
            status_code=400,
            detail=f"Coordinates must include a revision: {value}",
        )
    return coordinates


async def get_definition_service(
    coordinates: EntityCoordinates,
    definitions: DefinitionService,
    *,
    pr: str | None = None,
) -> Dict[str, Any]:
    try:
        return await definitions.get(coordinates, pr)
    except Exception as exc:
        logger.exception("Failed to compute definition for %s", coordinates)
        raise HTTPException(
            status_code=500,
            detail=f"Failed to compute definition for {coordinates}",
        ) from exc


async def get_definitions_service(
    payload: DefinitionBatchRequest,
    definitions: DefinitionService,
) -> DefinitionBatchResponse:
    coordinates_list: List[EntityCoordinates] = [
        parse_coordinates(value) for value in payload.coordinates
    ]
    try:
        result = await definitions.get_all(coordinates_list)
    except Exception as exc:
        logger.exception("Failed to compute definitions for %d coordinates", len(coordinates_list))
        raise HTTPException(status_code=500, detail="Failed to compute definitions") from exc
    return DefinitionBatchResponse(definitions=result)


__all__ = [
    "parse_coordinates",
    "get_definition_service",
    "get_definitions_service",
]
