"""Orchestration components for computing component definitions."""

from .contracts import (
    AggregationService,
    CurationService,
    DefinitionStore,
    HarvestService,
    SummaryService,
)
from .definition import DEFINITION_TOOL, DEFINITION_TOOL_VERSION, DefinitionService
from .source_location import SOURCE_LOCATION_INFERRERS, infer_source_location

__all__ = [
    "DefinitionService",
    "DEFINITION_TOOL",
    "DEFINITION_TOOL_VERSION",
    "HarvestService",
    "SummaryService",
    "AggregationService",
    "CurationService",
    "DefinitionStore",
    "SOURCE_LOCATION_INFERRERS",
    "infer_source_location",
]
