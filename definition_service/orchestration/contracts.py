"""Interfaces of the services the definition coordinator depends on."""

from __future__ import annotations

from typing import Any, BinaryIO, Mapping, Protocol, Union

from ..coordinates import EntityCoordinates, ResultCoordinates

Definition = dict[str, Any]
Curation = Mapping[str, Any]
CurationRef = Union[int, str, Curation, None]


class HarvestService(Protocol):
    """Source of raw per-tool harvest output."""

    async def get_all(self, coordinates: EntityCoordinates) -> dict[str, Any]:
        """Return every tool's harvested output for the coordinates."""


class SummaryService(Protocol):
    async def summarize_all(
        self, coordinates: EntityCoordinates, raw: dict[str, Any]
    ) -> dict[str, Any]:
        """Normalize each tool's raw output into a summary."""


class AggregationService(Protocol):
    async def process(
        self, coordinates: EntityCoordinates, summarized: dict[str, Any]
    ) -> Definition:
        """Merge the per-tool summaries into one view."""


class CurationService(Protocol):
    """Resolves curation references and applies curations."""

    async def get(
        self, coordinates: EntityCoordinates, curation_ref: CurationRef = None
    ) -> Curation | None:
        """Resolve a pull request number or curation object to a curation."""

    async def apply(
        self,
        coordinates: EntityCoordinates,
        curation: Curation | None,
        aggregated: Definition,
    ) -> Definition:
        """Apply the curation to the aggregated view; a no-op when absent."""


class DefinitionStore(Protocol):
    """Persistent cache of computed definitions."""

    async def get(self, coordinates: ResultCoordinates) -> Definition:
        """Return the stored definition or raise when there is none."""

    async def store(self, coordinates: ResultCoordinates, stream: BinaryIO) -> None:
        """Persist a JSON-encoded definition read from ``stream``."""


__all__ = [
    "Definition",
    "Curation",
    "CurationRef",
    "HarvestService",
    "SummaryService",
    "AggregationService",
    "CurationService",
    "DefinitionStore",
]
