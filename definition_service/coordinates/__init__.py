"""Component coordinate value types."""

from .model import EMPTY_NAMESPACE, EntityCoordinates, ResultCoordinates

__all__ = ["EntityCoordinates", "ResultCoordinates", "EMPTY_NAMESPACE"]
