"""
Repository Interfaces.
"""

from .note_repository_interface import INoteRepository

__all__ = [
    "INoteRepository",
]
