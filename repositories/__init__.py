"""
Repository layer for data access.
Implements Repository Pattern and follows Single Responsibility Principle.
"""

from .note_repository import NoteRepository, create_note_repository

__all__ = [
    "NoteRepository",
    "create_note_repository",
]
