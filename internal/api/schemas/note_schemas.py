"""
Pydantic schemas for Notes API.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class NoteCreateRequest(BaseModel):
    """Request model for creating a note."""

    title: str = Field(..., min_length=1, description="Note title, must be unique")
    content: str = Field(..., description="Note body")
    expires_at: Optional[datetime] = Field(
        None, description="Optional expiry time, the note is removed after it"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"title": "Groceries", "content": "milk, bread, eggs"},
                {
                    "title": "Meeting link",
                    "content": "https://meet.example.com/abc",
                    "expires_at": "2026-12-31T23:59:59Z",
                },
            ]
        }
    )


class NoteUpdateRequest(BaseModel):
    """Request model for a partial note update. Omitted fields are left unchanged."""

    title: Optional[str] = Field(None, min_length=1, description="New title")
    content: Optional[str] = Field(None, description="New content")

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"title": "Groceries (weekend)"},
                {"content": "milk, bread, eggs, coffee"},
            ]
        }
    )

