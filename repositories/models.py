"""
MongoDB document models using Pydantic.
Stored field names are camelCase; Python attributes are snake_case aliases of them.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from core.logger import logger


def utcnow() -> datetime:
    """Current time in UTC, truncated to the millisecond precision BSON stores."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class NoteModel(BaseModel):
    """Model for a note (MongoDB document)."""

    id: Optional[str] = Field(None, description="MongoDB _id as string")

    title: str = Field(..., description="Note title, unique across all notes")
    content: str = Field(..., description="Note body")

    # Timestamps
    created_at: datetime = Field(
        default_factory=utcnow, alias="createdAt", description="Creation time"
    )
    updated_at: datetime = Field(
        default_factory=utcnow, alias="updatedAt", description="Last update time"
    )
    expires_at: Optional[datetime] = Field(
        None, alias="expiresAt", description="TTL expiry time, removed by MongoDB"
    )

    # Only present on full-text search results
    score: Optional[float] = Field(None, description="Text relevance score")

    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a MongoDB document.

        'id' is stored as '_id' by MongoDB and 'score' is never persisted.
        'expiresAt' is only written when set, so the TTL index ignores the note.
        """
        data = self.model_dump(by_alias=True, exclude={"id", "score"})
        if data.get("expiresAt") is None:
            data.pop("expiresAt", None)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NoteModel":
        """
        Create from MongoDB document.
        Converts MongoDB _id (ObjectId) to string 'id' field.

        Raises:
            pydantic.ValidationError: If the document does not match the model
        """
        data = dict(data)
        if "_id" in data:
            from repositories.objectid_utils import objectid_to_str

            data["id"] = objectid_to_str(data.pop("_id"))

        try:
            return cls(**data)
        except Exception as e:
            logger.error(f"❌ Failed to decode note document {data.get('id')}: {e}")
            raise


class NoteUpdate(BaseModel):
    """
    Model for a partial note update.

    None means "leave unchanged"; an empty string is a real value.
    """

    title: Optional[str] = None
    content: Optional[str] = None

    def to_set_document(self, now: Optional[datetime] = None) -> Dict[str, Any]:
        """Build the $set body; updatedAt is always refreshed."""
        update: Dict[str, Any] = {"updatedAt": now or utcnow()}
        if self.title is not None:
            update["title"] = self.title
        if self.content is not None:
            update["content"] = self.content
        return update


class NoteStats(BaseModel):
    """Aggregate statistics over the notes collection (not persisted)."""

    count: int = 0
    avg_content_len: float = Field(0.0, alias="avgContentLen")

    model_config = ConfigDict(populate_by_name=True)


# MongoDB collection names
NOTES_COLLECTION = "notes"
