import pytest
from bson import ObjectId

from repositories.objectid_utils import (
    is_valid_objectid,
    objectid_to_str,
    str_to_objectid,
)

HEX_ID = "507f1f77bcf86cd799439011"


def test_objectid_to_str():
    assert objectid_to_str(ObjectId(HEX_ID)) == HEX_ID
    assert objectid_to_str(HEX_ID) == HEX_ID
    assert objectid_to_str(None) is None


def test_objectid_to_str_rejects_bad_input():
    with pytest.raises(ValueError):
        objectid_to_str("invalid")
    with pytest.raises(TypeError):
        objectid_to_str(42)


def test_str_to_objectid():
    assert str_to_objectid(HEX_ID) == ObjectId(HEX_ID)
    oid = ObjectId()
    assert str_to_objectid(oid) is oid
    assert str_to_objectid(None) is None


@pytest.mark.parametrize("value", ["", "invalid", "507f1f77bcf86cd79943901", "g" * 24])
def test_str_to_objectid_rejects_malformed(value):
    with pytest.raises(ValueError):
        str_to_objectid(value)


def test_is_valid_objectid():
    assert is_valid_objectid(HEX_ID)
    assert is_valid_objectid(ObjectId())
    assert not is_valid_objectid("invalid")
    assert not is_valid_objectid("")
    assert not is_valid_objectid(None)
    assert not is_valid_objectid(12345)
