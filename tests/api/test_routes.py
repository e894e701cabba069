import pytest
from fastapi import HTTPException

from definition_service.api.model import DefinitionBatchRequest
from definition_service.api.route import get_definition, get_definitions_batch
from definition_service.api.server import create_app
from definition_service.config import ServiceSettings
from definition_service.coordinates import EntityCoordinates
from definition_service.orchestration import DefinitionService
from definition_service.store import MemoryDefinitionStore


class _StubDefinitionService:
    def __init__(self, *, error=None):
        self.error = error
        self.get_calls = []
        self.get_all_calls = []

    async def get(self, coordinates, curation_ref=None):
        self.get_calls.append((coordinates, curation_ref))
        if self.error:
            raise self.error
        return {"coordinates": str(coordinates)}

    async def get_all(self, coordinates_list):
        self.get_all_calls.append(list(coordinates_list))
        if self.error:
            raise self.error
        return {str(coordinates): {"coordinates": str(coordinates)} for coordinates in coordinates_list}


class _Passthrough:
    async def get_all(self, coordinates):
        return {}

    async def summarize_all(self, coordinates, raw):
        return raw

    async def process(self, coordinates, summarized):
        return dict(summarized)

    async def get(self, coordinates, curation_ref=None):
        return None

    async def apply(self, coordinates, curation, aggregated):
        return aggregated


@pytest.mark.asyncio
async def test_get_definition_forwards_coordinates_and_pr():
    definitions = _StubDefinitionService()

    result = await get_definition(
        type="npm",
        provider="npmjs",
        namespace="-",
        name="lodash",
        revision="4.17.4",
        pr="12",
        definitions=definitions,
    )

    expected = EntityCoordinates(type="npm", provider="npmjs", namespace=None, name="lodash", revision="4.17.4")
    assert result == {"coordinates": "npm/npmjs/-/lodash/4.17.4"}
    assert definitions.get_calls == [(expected, "12")]


@pytest.mark.asyncio
async def test_get_definition_maps_failures_to_server_error():
    definitions = _StubDefinitionService(error=RuntimeError("harvest unavailable"))

    with pytest.raises(HTTPException) as excinfo:
        await get_definition(
            type="git",
            provider="github",
            namespace="foo",
            name="bar",
            revision="abc123",
            pr=None,
            definitions=definitions,
        )

    assert excinfo.value.status_code == 500


@pytest.mark.asyncio
async def test_batch_lookup_returns_mapping():
    definitions = _StubDefinitionService()
    payload = DefinitionBatchRequest(coordinates=["npm/npmjs/-/lodash/4.17.4", "git/github/foo/bar/abc123"])

    response = await get_definitions_batch(payload=payload, definitions=definitions)

    assert set(response.definitions) == {"npm/npmjs/-/lodash/4.17.4", "git/github/foo/bar/abc123"}
    assert len(definitions.get_all_calls) == 1


@pytest.mark.asyncio
@pytest.mark.parametrize("value", ["npm/npmjs/-", "npm/npmjs/-/lodash"])
async def test_batch_lookup_rejects_bad_coordinates(value):
    definitions = _StubDefinitionService()
    payload = DefinitionBatchRequest(coordinates=[value])

    with pytest.raises(HTTPException) as excinfo:
        await get_definitions_batch(payload=payload, definitions=definitions)

    assert excinfo.value.status_code == 400
    assert definitions.get_all_calls == []


@pytest.mark.asyncio
async def test_batch_lookup_is_all_or_nothing():
    definitions = _StubDefinitionService(error=RuntimeError("boom"))
    payload = DefinitionBatchRequest(coordinates=["npm/npmjs/-/lodash/4.17.4"])

    with pytest.raises(HTTPException) as excinfo:
        await get_definitions_batch(payload=payload, definitions=definitions)

    assert excinfo.value.status_code == 500


def test_create_app_wires_definition_service():
    passthrough = _Passthrough()
    store = MemoryDefinitionStore()
    settings = ServiceSettings(store_backend="memory", max_concurrency=4, strict_store_reads=True)

    app = create_app(
        harvest=passthrough,
        summary=passthrough,
        aggregator=passthrough,
        curation=passthrough,
        store=store,
        settings=settings,
    )

    definitions = app.state.definition_service
    assert isinstance(definitions, DefinitionService)
    assert definitions.definition_store is store
    assert definitions.max_concurrency == 4
    assert definitions.strict_store_reads is True
    paths = {route.path for route in app.routes}
    assert "/definitions" in paths
    assert "/definitions/{type}/{provider}/{namespace}/{name}/{revision}" in paths


@pytest.mark.asyncio
async def test_empty_batch_returns_empty_mapping():
    store = MemoryDefinitionStore()
    passthrough = _Passthrough()
    definitions = DefinitionService(passthrough, passthrough, passthrough, passthrough, store)

    response = await get_definitions_batch(payload=DefinitionBatchRequest(coordinates=[]), definitions=definitions)

    assert response.definitions == {}
