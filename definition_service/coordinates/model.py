from __future__ import annotations

from dataclasses import dataclass

from ..errors import InvalidCoordinatesError

EMPTY_NAMESPACE = "-"


@dataclass(frozen=True, slots=True)
class EntityCoordinates:
    """Identity of a component revision: ``type/provider/namespace/name/revision``."""

    type: str
    provider: str
    namespace: str | None
    name: str
    revision: str | None = None

    @classmethod
    def from_string(cls, value: str) -> "EntityCoordinates":
        segments = _split_path(value)
        if len(segments) < 4 or len(segments) > 5:
            raise InvalidCoordinatesError(
                f"Coordinates must look like type/provider/namespace/name[/revision]: {value!r}"
            )
        type_, provider, namespace, name = segments[:4]
        if not type_ or not provider or not name:
            raise InvalidCoordinatesError(f"Coordinates are missing a required segment: {value!r}")
        revision = segments[4] if len(segments) == 5 else None
        return cls(
            type=type_.lower(),
            provider=provider.lower(),
            namespace=None if namespace == EMPTY_NAMESPACE else namespace,
            name=name,
            revision=revision,
        )

    def as_entity_coordinates(self) -> "EntityCoordinates":
        return EntityCoordinates(
            type=self.type,
            provider=self.provider,
            namespace=self.namespace,
            name=self.name,
            revision=self.revision,
        )

    def _segments(self) -> list[str]:
        segments = [self.type, self.provider, self.namespace or EMPTY_NAMESPACE, self.name]
        if self.revision:
            segments.append(self.revision)
        return segments

    def __str__(self) -> str:
        return "/".join(self._segments())


@dataclass(frozen=True, slots=True)
class ResultCoordinates(EntityCoordinates):
    """Entity coordinates qualified by the tool that produced a stored result."""

    tool: str | None = None
    tool_version: int | str | None = None

    @classmethod
    def from_entity(
        cls,
        coordinates: EntityCoordinates,
        *,
        tool: str,
        tool_version: int | str,
    ) -> "ResultCoordinates":
        return cls(
            type=coordinates.type,
            provider=coordinates.provider,
            namespace=coordinates.namespace,
            name=coordinates.name,
            revision=coordinates.revision,
            tool=tool,
            tool_version=tool_version,
        )

    def __str__(self) -> str:
        segments = self._segments()
        if self.tool:
            segments.append(self.tool)
            if self.tool_version is not None:
                segments.append(str(self.tool_version))
        return "/".join(segments)


def _split_path(value: str) -> list[str]:
    if not value:
        return []
    return [segment.strip() for segment in value.strip().strip("/").split("/")]


__all__ = ["EntityCoordinates", "ResultCoordinates", "EMPTY_NAMESPACE"]
