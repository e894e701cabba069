import asyncio
import io
import json
import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Set

from ..coordinates import EntityCoordinates, ResultCoordinates
from ..errors import DefinitionNotFoundError
from .contracts import (
    AggregationService,
    Curation,
    CurationRef,
    CurationService,
    Definition,
    DefinitionStore,
    HarvestService,
    SummaryService,
)
from .source_location import infer_source_location


logger = logging.getLogger("definition_service")

DEFINITION_TOOL = "definition"
DEFINITION_TOOL_VERSION = 1


class DefinitionService:
    """Compute component definitions from harvested data, caching them in a store."""

    def __init__(
        self,
        harvest: HarvestService,
        summary: SummaryService,
        aggregator: AggregationService,
        curation: CurationService,
        store: DefinitionStore,
        *,
        max_concurrency: int = 10,
        strict_store_reads: bool = False,
    ) -> None:
        if max_concurrency <= 0:
            raise ValueError("max_concurrency must be a positive integer")
        self.harvest_service = harvest
        self.summary_service = summary
        self.aggregation_service = aggregator
        self.curation_service = curation
        self.definition_store = store
        self.max_concurrency = max_concurrency
        self.strict_store_reads = strict_store_reads
        self._pending_writes: Set[asyncio.Task] = set()

    async def get(
        self,
        coordinates: EntityCoordinates,
        curation_ref: CurationRef = None,
    ) -> Definition:
        """Return the definition for the coordinates.

        A curation reference always recomputes and bypasses the store so that
        proposed curations never leak into the shared cache.
        """
        if _is_present(curation_ref):
            return await self.compute(coordinates, curation_ref)

        store_coordinates = ResultCoordinates.from_entity(
            coordinates,
            tool=DEFINITION_TOOL,
            tool_version=DEFINITION_TOOL_VERSION,
        )
        try:
            definition = await self.definition_store.get(store_coordinates)
        except DefinitionNotFoundError:
            logger.debug("Definition cache miss for %s", store_coordinates)
        except Exception:
            if self.strict_store_reads:
                raise
            logger.warning(
                "Definition store read failed for %s; recomputing",
                store_coordinates,
                exc_info=True,
            )
        else:
            logger.debug("Definition cache hit for %s", store_coordinates)
            return definition

        return await self.compute_and_store(coordinates, store_coordinates)

    async def get_all(
        self,
        coordinates_list: Iterable[EntityCoordinates],
    ) -> Dict[str, Definition]:
        """Get definitions for every coordinate, keyed by entity coordinates.

        At most ``max_concurrency`` lookups run at once. Any failure fails the
        whole batch.
        """
        semaphore = asyncio.Semaphore(self.max_concurrency)
        result: Dict[str, Definition] = {}

        async def get_one(coordinates: EntityCoordinates) -> None:
            async with semaphore:
                definition = await self.get(coordinates)
            result[str(coordinates.as_entity_coordinates())] = definition

        coordinates_list = list(coordinates_list)
        await asyncio.gather(*(get_one(coordinates) for coordinates in coordinates_list))

        logger.info(
            "Resolved %d definitions for %d coordinates",
            len(result),
            len(coordinates_list),
        )
        return result

    async def compute_and_store(
        self,
        coordinates: EntityCoordinates,
        store_coordinates: ResultCoordinates,
    ) -> Definition:
        definition = await self.compute(coordinates)
        stream = io.BytesIO(json.dumps(definition, indent=2).encode("utf-8"))
        # The write runs in the background; flush() waits for it.
        task = asyncio.create_task(self._store(store_coordinates, stream))
        self._pending_writes.add(task)
        task.add_done_callback(self._pending_writes.discard)
        return definition

    async def compute(
        self,
        coordinates: EntityCoordinates,
        curation_ref: CurationRef = None,
    ) -> Definition:
        """Build the fully rendered definition, applying the referenced curation if any.

        ``curation_ref`` may be a pull request number (int or str) of a proposed
        curation or an actual curation object.
        """
        curation = await self.curation_service.get(coordinates, curation_ref)
        raw = await self.harvest_service.get_all(coordinates)
        # Summarize without any filters so every dimension stays available.
        summarized = await self.summary_service.summarize_all(coordinates, raw)
        aggregated = await self.aggregation_service.process(coordinates, summarized)
        definition = await self.curation_service.apply(coordinates, curation, aggregated)
        self._ensure_curation_info(definition, curation)
        self._ensure_source_location(coordinates, definition)
        return definition

    async def flush(self) -> None:
        """Wait for all background store writes to finish."""
        while self._pending_writes:
            await asyncio.gather(*list(self._pending_writes), return_exceptions=True)

    @property
    def pending_writes(self) -> int:
        return len(self._pending_writes)

    async def _store(self, store_coordinates: ResultCoordinates, stream: io.BytesIO) -> None:
        try:
            await self.definition_store.store(store_coordinates, stream)
        except Exception:
            logger.exception("Failed to store definition for %s", store_coordinates)
        else:
            logger.debug("Stored definition for %s", store_coordinates)

    @staticmethod
    def _ensure_described(definition: Definition) -> dict:
        if not definition.get("described"):
            definition["described"] = {}
        return definition["described"]

    def _ensure_curation_info(self, definition: Definition, curation: Optional[Curation]) -> None:
        if not _is_present(curation):
            return
        described = self._ensure_described(definition)
        if not described.get("tools"):
            described["tools"] = []
        origin = curation.get("_origin")
        described["tools"].append(f"curation/{origin}" if origin else "curation")

    def _ensure_source_location(self, coordinates: EntityCoordinates, definition: Definition) -> None:
        described = definition.get("described")
        if described and described.get("sourceLocation"):
            return
        # Source components rarely carry a harvested location; it is implied by the coordinates.
        location = infer_source_location(coordinates)
        if location is None:
            return
        self._ensure_described(definition)["sourceLocation"] = location


def _is_present(value: Any) -> bool:
    # A curation mapping counts even when empty; other references must be non-empty.
    if value is None:
        return False
    return isinstance(value, Mapping) or bool(value)


__all__ = ["DefinitionService", "DEFINITION_TOOL", "DEFINITION_TOOL_VERSION"]
