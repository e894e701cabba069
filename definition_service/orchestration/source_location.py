"""Source location inference for components that are their own source."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from ..coordinates import EntityCoordinates

SourceLocationInferrer = Callable[[EntityCoordinates], Optional[Dict[str, Any]]]


def github_source_location(coordinates: EntityCoordinates) -> Optional[Dict[str, Any]]:
    if not coordinates.namespace:
        return None
    return {
        "type": "git",
        "provider": "github",
        "url": f"https://github.com/{coordinates.namespace}/{coordinates.name}",
        "revision": coordinates.revision,
    }


SOURCE_LOCATION_INFERRERS: Dict[str, SourceLocationInferrer] = {
    "github": github_source_location,
}


def infer_source_location(coordinates: EntityCoordinates) -> Dict[str, Any] | None:
    """Return the implied source location for the provider, or None if there is none."""
    inferrer = SOURCE_LOCATION_INFERRERS.get(coordinates.provider)
    if inferrer is None:
        return None
    return inferrer(coordinates)


__all__ = [
    "SOURCE_LOCATION_INFERRERS",
    "SourceLocationInferrer",
    "github_source_location",
    "infer_source_location",
]
