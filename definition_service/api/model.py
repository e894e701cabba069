"""Pydantic models for the public API surface."""

from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field


class DefinitionBatchRequest(BaseModel):
    coordinates: List[str] = Field(
        ...,
        description="Coordinates down to the revision, e.g. npm/npmjs/-/lodash/4.17.4",
    )


class DefinitionBatchResponse(BaseModel):
    definitions: Dict[str, Dict[str, Any]]


__all__ = ["DefinitionBatchRequest", "DefinitionBatchResponse"]
