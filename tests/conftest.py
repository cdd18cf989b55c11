import os

# Keep test runs from writing logs/app.log and logs/error.log
os.environ.setdefault("LOG_TO_FILE", "false")

from datetime import datetime, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId

from repositories.note_repository import NoteRepository


class FakeCursor:
    """Stands in for a Motor cursor: async iterable with an awaitable close()."""

    def __init__(self, docs=(), error=None):
        self._docs = list(docs)
        self._error = error
        self.close = AsyncMock()

    def __aiter__(self):
        return self._iterate()

    async def _iterate(self):
        for doc in self._docs:
            yield doc
        if self._error is not None:
            raise self._error


def make_note_doc(title="Groceries", content="milk", oid=None, **extra):
    """Build a note document the way MongoDB returns it."""
    created = datetime(2026, 10, 18, 9, 0, 0, tzinfo=timezone.utc)
    doc = {
        "_id": oid or ObjectId(),
        "title": title,
        "content": content,
        "createdAt": created,
        "updatedAt": created,
    }
    doc.update(extra)
    return doc


@pytest.fixture
def collection():
    col = MagicMock()
    col.create_index = AsyncMock()
    col.insert_one = AsyncMock()
    col.find_one = AsyncMock()
    col.find_one_and_update = AsyncMock()
    col.delete_one = AsyncMock()
    col.find = MagicMock(return_value=FakeCursor())
    col.aggregate = MagicMock(return_value=FakeCursor())
    return col


@pytest.fixture
def db(collection):
    database = MagicMock()
    database.__getitem__.return_value = collection
    return database


@pytest.fixture
def repository(db):
    return NoteRepository(db)
