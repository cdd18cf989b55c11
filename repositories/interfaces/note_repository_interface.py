"""
Interface for Note Repository.
Defines the contract that all note repositories must implement.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from repositories.models import NoteModel, NoteStats


class INoteRepository(ABC):
    """Interface for note repository operations."""

    @abstractmethod
    async def create(
        self, title: str, content: str, expires_at: Optional[datetime] = None
    ) -> NoteModel:
        """
        Create a new note.

        Args:
            title: Unique note title
            content: Note body
            expires_at: Optional TTL expiry time

        Returns:
            NoteModel: Created note with its store-assigned id
        """
        pass

    @abstractmethod
    async def get_by_id(self, note_id: str) -> NoteModel:
        """
        Get a note by ID.

        Raises:
            NoteNotFoundError: If the id is malformed or no note matches
        """
        pass

    @abstractmethod
    async def list(self, query: str = "", limit: int = 20, skip: int = 0) -> List[NoteModel]:
        """
        List notes with offset pagination.

        Args:
            query: Full-text search terms, empty for all notes
            limit: Maximum number of notes to return
            skip: Number of notes to skip (negative is treated as 0)

        Returns:
            List[NoteModel]: Newest first, or most relevant first when searching
        """
        pass

    @abstractmethod
    async def list_after(
        self, query: str = "", after_id: str = "", limit: int = 20
    ) -> List[NoteModel]:
        """
        List notes with cursor pagination, descending by id.

        Args:
            query: Full-text search terms, empty for all notes
            after_id: Only notes with a smaller id are returned; ignored if malformed
            limit: Maximum number of notes to return
        """
        pass

    @abstractmethod
    async def stats(self) -> NoteStats:
        """Get note count and average content length."""
        pass

    @abstractmethod
    async def update(
        self,
        note_id: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> NoteModel:
        """
        Partially update a note.

        Raises:
            NoteNotFoundError: If the id is malformed or no note matches
        """
        pass

    @abstractmethod
    async def delete(self, note_id: str) -> None:
        """
        Delete a note.

        Raises:
            NoteNotFoundError: If the id is malformed or no note matches
        """
        pass
