"""
API Routes.
"""

from .health_routes import create_health_routes
from .note_routes import router as note_router

__all__ = [
    "create_health_routes",
    "note_router",
]
