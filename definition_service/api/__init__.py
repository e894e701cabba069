"""HTTP surface of the definition service."""

from .route import router
from .server import create_app

__all__ = ["router", "create_app"]
