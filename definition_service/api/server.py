"""FastAPI application factory for the definition service."""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

from ..config import ServiceSettings
from ..logging_setup import configure_logging
from ..orchestration import (
    AggregationService,
    CurationService,
    DefinitionService,
    DefinitionStore,
    HarvestService,
    SummaryService,
)
from ..store import create_definition_store
from .route import router


def create_app(
    *,
    harvest: HarvestService,
    summary: SummaryService,
    aggregator: AggregationService,
    curation: CurationService,
    store: DefinitionStore | None = None,
    settings: ServiceSettings | None = None,
) -> FastAPI:
    """Create the FastAPI application around the given collaborators."""

    settings = settings or ServiceSettings.from_env()
    configure_logging(settings.log_level)

    definitions = DefinitionService(
        harvest,
        summary,
        aggregator,
        curation,
        store if store is not None else create_definition_store(settings),
        max_concurrency=settings.max_concurrency,
        strict_store_reads=settings.strict_store_reads,
    )

    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        yield
        await definitions.flush()

    app = FastAPI(
        title="Definition API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.definition_service = definitions
    app.include_router(router)

    return app


__all__ = ["create_app"]
