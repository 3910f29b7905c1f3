"""
API v1 endpoints.
"""

from .health import router as health_router
from .components import router as components_router
from .export import router as export_router

__all__ = ["health_router", "components_router", "export_router"]
