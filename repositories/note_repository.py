"""
Note repository for MongoDB operations.
Includes comprehensive logging and error handling for all CRUD operations.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING, TEXT, ReturnDocument
from pymongo.errors import DuplicateKeyError

from core.config import get_settings
from core.exceptions import NoteNotFoundError
from core.logger import logger
from repositories.interfaces import INoteRepository
from repositories.models import (
    NOTES_COLLECTION,
    NoteModel,
    NoteStats,
    NoteUpdate,
    utcnow,
)
from repositories.objectid_utils import (
    is_valid_objectid,
    objectid_to_str,
    str_to_objectid,
)

TEXT_SCORE = {"$meta": "textScore"}


class NoteRepository(INoteRepository):
    """Repository for note database operations with detailed logging."""

    def __init__(
        self,
        db: AsyncIOMotorDatabase,
        collection_name: str = NOTES_COLLECTION,
        text_language: str = "russian",
    ):
        """
        Initialize note repository.

        Indexes are not touched here, see ensure_indexes() and
        create_note_repository().

        Args:
            db: Motor database handle
            collection_name: Name of the notes collection
            text_language: default_language of the full-text index
        """
        self.collection_name = collection_name
        self.text_language = text_language
        self.collection = db[collection_name]
        logger.debug(
            f"NoteRepository initialized for collection: {self.collection_name}"
        )

    async def ensure_indexes(self) -> None:
        """
        Create the unique title, full-text and TTL indexes.

        Idempotent: MongoDB skips an index that already exists with the same keys and options.

        Raises:
            Exception: If any index cannot be created
        """
        try:
            logger.info(f"📝 Ensuring indexes on {self.collection_name}...")

            await self.collection.create_index([("title", ASCENDING)], unique=True)
            logger.debug("✅ Ensured unique index on title")

            await self.collection.create_index(
                [("title", TEXT), ("content", TEXT)],
                default_language=self.text_language,
            )
            logger.debug(
                f"✅ Ensured text index on title + content (language={self.text_language})"
            )

            # Notes are removed as soon as expiresAt is reached
            await self.collection.create_index(
                [("expiresAt", ASCENDING)], expireAfterSeconds=0
            )
            logger.debug("✅ Ensured TTL index on expiresAt")

            logger.info(f"✅ Indexes ready on {self.collection_name}")

        except Exception as e:
            logger.error(f"❌ Failed to create indexes on {self.collection_name}: {e}")
            logger.exception("Index creation error details:")
            raise

    def _parse_id(self, note_id: str) -> ObjectId:
        """Parse a note id, treating a malformed id as a missing note."""
        try:
            oid = str_to_objectid(note_id)
        except (ValueError, TypeError):
            oid = None

        if oid is None:
            logger.warning(f"⚠️ Malformed note id: {note_id!r}")
            raise NoteNotFoundError(note_id)
        return oid

    async def _collect(self, cursor) -> List[NoteModel]:
        """Drain a cursor into notes, always closing it."""
        notes = []
        try:
            async for doc in cursor:
                notes.append(NoteModel.from_dict(doc))
        finally:
            await cursor.close()
        return notes

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
            Created NoteModel with its MongoDB id

        Raises:
            DuplicateKeyError: If the title is already taken
            Exception: If the insert fails
        """
        try:
            logger.info(f"📝 Creating note: title={title!r}")

            now = utcnow()
            note = NoteModel(
                title=title,
                content=content,
                created_at=now,
                updated_at=now,
                expires_at=expires_at,
            )

            result = await self.collection.insert_one(note.to_dict())
            note.id = objectid_to_str(result.inserted_id)

            logger.info(f"✅ Note created: id={note.id}")
            return note

        except DuplicateKeyError:
            logger.warning(f"⚠️ Note title already exists: title={title!r}")
            raise

        except Exception as e:
            logger.error(f"❌ Failed to create note: {e}")
            logger.exception("Note creation error details:")
            raise

    async def get_by_id(self, note_id: str) -> NoteModel:
        """
        Get note by ID.

        Raises:
            NoteNotFoundError: If the id is malformed or no note matches
            Exception: If the query fails
        """
        oid = self._parse_id(note_id)

        try:
            logger.debug(f"🔍 Fetching note: id={note_id}")

            doc = await self.collection.find_one({"_id": oid})

        except Exception as e:
            logger.error(f"❌ Failed to get note {note_id}: {e}")
            logger.exception("Get note error details:")
            raise

        if doc is None:
            logger.warning(f"⚠️ Note not found: id={note_id}")
            raise NoteNotFoundError(note_id)

        return NoteModel.from_dict(doc)

    async def list(self, query: str = "", limit: int = 20, skip: int = 0) -> List[NoteModel]:
        """
        List notes with offset pagination.

        Without a query notes are ordered newest first. With a query only
        full-text matches are returned, most relevant first, each carrying
        its relevance score.

        Args:
            query: Full-text search terms, empty for all notes
            limit: Maximum number of notes to return
            skip: Number of notes to skip (negative is treated as 0)

        Returns:
            List of notes
        """
        skip = max(skip, 0)

        filter_dict: Dict[str, Any] = {}
        projection = None
        sort = [("createdAt", DESCENDING)]

        if query:
            filter_dict["$text"] = {"$search": query}
            projection = {"score": TEXT_SCORE}
            sort = [("score", TEXT_SCORE)]

        try:
            logger.debug(f"🔍 Listing notes: query={query!r}, limit={limit}, skip={skip}")

            cursor = self.collection.find(
                filter_dict, projection, sort=sort, skip=skip, limit=limit
            )
            notes = await self._collect(cursor)

            logger.info(f"✅ Found {len(notes)} notes")
            return notes

        except Exception as e:
            logger.error(f"❌ Failed to list notes: {e}")
            logger.exception("List notes error details:")
            raise

    async def list_after(
        self, query: str = "", after_id: str = "", limit: int = 20
    ) -> List[NoteModel]:
        """
        List notes with cursor pagination, newest id first.

        Args:
            query: Full-text search terms, empty for all notes
            after_id: Only notes with a smaller id are returned.
                A malformed id is ignored and no cursor filter is applied.
            limit: Maximum number of notes to return

        Returns:
            List of notes
        """
        filter_dict: Dict[str, Any] = {}

        if query:
            filter_dict["$text"] = {"$search": query}

        if after_id:
            if is_valid_objectid(after_id):
                filter_dict["_id"] = {"$lt": str_to_objectid(after_id)}
            else:
                logger.debug(f"Ignoring malformed cursor: after_id={after_id!r}")

        try:
            logger.debug(
                f"🔍 Listing notes after cursor: query={query!r}, after_id={after_id!r}, limit={limit}"
            )

            cursor = self.collection.find(
                filter_dict, sort=[("_id", DESCENDING)], limit=limit
            )
            notes = await self._collect(cursor)

            logger.info(f"✅ Found {len(notes)} notes after cursor")
            return notes

        except Exception as e:
            logger.error(f"❌ Failed to list notes after cursor: {e}")
            logger.exception("List notes after cursor error details:")
            raise

    async def stats(self) -> NoteStats:
        """
        Get note count and average content length.

        Content length is counted in Unicode code points. An empty
        collection yields zero stats rather than an error.
        """
        pipeline = [
            {"$project": {"contentLen": {"$strLenCP": "$content"}}},
            {
                "$group": {
                    "_id": None,
                    "count": {"$sum": 1},
                    "avgContentLen": {"$avg": "$contentLen"},
                }
            },
        ]

        try:
            logger.debug(f"🔍 Aggregating stats for {self.collection_name}")

            cursor = self.collection.aggregate(pipeline)
            try:
                async for doc in cursor:
                    return NoteStats(
                        count=doc.get("count", 0),
                        avg_content_len=doc.get("avgContentLen") or 0.0,
                    )
            finally:
                await cursor.close()

            logger.debug("Notes collection is empty, returning zero stats")
            return NoteStats()

        except Exception as e:
            logger.error(f"❌ Failed to aggregate note stats: {e}")
            logger.exception("Stats aggregation error details:")
            raise

    async def update(
        self,
        note_id: str,
        title: Optional[str] = None,
        content: Optional[str] = None,
    ) -> NoteModel:
        """
        Partially update a note.

        Args:
            note_id: Note identifier
            title: New title, None to keep the current one
            content: New content, None to keep the current one

        Returns:
            The note as stored after the update

        Raises:
            NoteNotFoundError: If the id is malformed or no note matches
            DuplicateKeyError: If the new title is already taken
        """
        oid = self._parse_id(note_id)
        update_dict = NoteUpdate(title=title, content=content).to_set_document()

        try:
            logger.info(f"📝 Updating note: id={note_id}")
            logger.debug(f"Update document: {update_dict}")

            doc = await self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": update_dict},
                return_document=ReturnDocument.AFTER,
            )

        except DuplicateKeyError:
            logger.warning(f"⚠️ Note title already exists: title={title!r}")
            raise

        except Exception as e:
            logger.error(f"❌ Failed to update note {note_id}: {e}")
            logger.exception("Update note error details:")
            raise

        if doc is None:
            logger.warning(f"⚠️ Note not found for update: id={note_id}")
            raise NoteNotFoundError(note_id)

        logger.info(f"✅ Note updated: id={note_id}")
        return NoteModel.from_dict(doc)

    async def delete(self, note_id: str) -> None:
        """
        Delete note.

        Raises:
            NoteNotFoundError: If the id is malformed or no note matches
        """
        oid = self._parse_id(note_id)

        try:
            logger.warning(f"🗑️ Deleting note: id={note_id}")

            result = await self.collection.delete_one({"_id": oid})

        except Exception as e:
            logger.error(f"❌ Failed to delete note {note_id}: {e}")
            logger.exception("Note deletion error details:")
            raise

        if result.deleted_count == 0:
            logger.warning(f"⚠️ Note not found for deletion: id={note_id}")
            raise NoteNotFoundError(note_id)

        logger.info(f"✅ Note deleted: id={note_id}")


async def create_note_repository(
    db: AsyncIOMotorDatabase,
    collection_name: Optional[str] = None,
    text_language: Optional[str] = None,
) -> NoteRepository:
    """
    Build a NoteRepository and provision its indexes.

    Args:
        db: Motor database handle
        collection_name: Defaults to NOTES_COLLECTION setting
        text_language: Defaults to NOTES_TEXT_LANGUAGE setting

    Returns:
        Ready-to-use NoteRepository

    Raises:
        Exception: If any index cannot be created
    """
    settings = get_settings()
    repository = NoteRepository(
        db,
        collection_name=collection_name or settings.notes_collection,
        text_language=text_language or settings.notes_text_language,
    )
    await repository.ensure_indexes()
    return repository
