"""
API Schemas (Request/Response Models).
"""

from .common_schemas import (
    StandardResponse,
    HealthResponse,
)
from .note_schemas import (
    NoteCreateRequest,
    NoteUpdateRequest,
)

__all__ = [
    # Common schemas
    "StandardResponse",
    "HealthResponse",
    # Note schemas
    "NoteCreateRequest",
    "NoteUpdateRequest",
]
