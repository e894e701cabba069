"""FastAPI routes for definition lookups."""

from __future__ import annotations

from typing import Any, Dict

from fastapi import APIRouter, Depends, Query, Request

from ..orchestration import DefinitionService
from .model import DefinitionBatchRequest, DefinitionBatchResponse
from .service import get_definition_service, get_definitions_service, parse_coordinates


def get_definitions(request: Request) -> DefinitionService:
    definitions = getattr(request.app.state, "definition_service", None)
    if not isinstance(definitions, DefinitionService):
        raise RuntimeError("Definition service has not been initialised")
    return definitions


router = APIRouter()


@router.get(
    "/definitions/{type}/{provider}/{namespace}/{name}/{revision}",
    response_model=Dict[str, Any],
)
async def get_definition(
    type: str,
    provider: str,
    namespace: str,
    name: str,
    revision: str,
    pr: str | None = Query(None, description="Pull request number of a proposed curation"),
    definitions: DefinitionService = Depends(get_definitions),
) -> Dict[str, Any]:
    coordinates = parse_coordinates(f"{type}/{provider}/{namespace}/{name}/{revision}")
    return await get_definition_service(coordinates, definitions, pr=pr)


@router.post("/definitions", response_model=DefinitionBatchResponse)
async def get_definitions_batch(
    payload: DefinitionBatchRequest,
    definitions: DefinitionService = Depends(get_definitions),
) -> DefinitionBatchResponse:
    return await get_definitions_service(payload, definitions)


__all__ = ["router", "get_definitions"]
