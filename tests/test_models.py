from datetime import datetime, timezone

from bson import ObjectId

from repositories.models import NoteModel, NoteStats, NoteUpdate, utcnow


CREATED = datetime(2026, 10, 18, 9, 0, 0, tzinfo=timezone.utc)


def test_to_dict_uses_stored_field_names():
    note = NoteModel(
        id=str(ObjectId()),
        title="Groceries",
        content="milk",
        created_at=CREATED,
        updated_at=CREATED,
        score=2.0,
    )

    assert note.to_dict() == {
        "title": "Groceries",
        "content": "milk",
        "createdAt": CREATED,
        "updatedAt": CREATED,
    }


def test_to_dict_keeps_expiry_when_set():
    expires = datetime(2026, 12, 31, tzinfo=timezone.utc)
    note = NoteModel(title="t", content="c", expires_at=expires)

    assert note.to_dict()["expiresAt"] == expires


def test_from_dict_converts_object_id():
    oid = ObjectId()
    doc = {
        "_id": oid,
        "title": "Groceries",
        "content": "milk",
        "createdAt": CREATED,
        "updatedAt": CREATED,
    }

    note = NoteModel.from_dict(doc)

    assert note.id == str(oid)
    assert note.created_at == CREATED
    assert note.score is None
    assert "_id" in doc  # input document is left untouched


def test_update_sets_only_given_fields():
    now = datetime(2026, 10, 18, 10, 0, 0, tzinfo=timezone.utc)

    assert NoteUpdate(title="New").to_set_document(now) == {
        "updatedAt": now,
        "title": "New",
    }
    assert NoteUpdate(content="").to_set_document(now) == {
        "updatedAt": now,
        "content": "",
    }
    assert NoteUpdate().to_set_document(now) == {"updatedAt": now}


def test_stats_defaults_and_alias():
    assert NoteStats() == NoteStats(count=0, avg_content_len=0.0)
    assert NoteStats(count=2, avgContentLen=4).model_dump(by_alias=True) == {
        "count": 2,
        "avgContentLen": 4.0,
    }


def test_utcnow_matches_stored_precision():
    now = utcnow()

    assert now.tzinfo == timezone.utc
    assert now.microsecond % 1000 == 0
