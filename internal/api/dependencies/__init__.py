"""
API Dependencies.
"""

from .note_dependencies import get_note_repository

__all__ = [
    "get_note_repository",
]
