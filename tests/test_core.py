"""
Tests for configuration, logging setup and the MongoDB connection manager.
"""

from datetime import timezone
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from core.config import Settings
from core.database import MongoDB, mask_mongodb_url
from core.logger import resolve_log_level


class TestSettings:
    def test_plain_url_is_used_as_is(self):
        settings = Settings(MONGODB_URL="mongodb://db:27017")

        assert settings.mongodb_connection_url == "mongodb://db:27017"

    def test_root_credentials_build_auth_url(self):
        settings = Settings(
            MONGODB_URL="mongodb://db:27017",
            MONGODB_DATABASE="notes_db",
            MONGODB_ROOT_USER="admin",
            MONGODB_ROOT_PASSWORD="secret",
        )

        assert (
            settings.mongodb_connection_url
            == "mongodb://admin:secret@db:27017/notes_db?authSource=notes_db"
        )

    def test_url_with_credentials_wins(self):
        settings = Settings(
            MONGODB_URL="mongodb://u:p@db:27017",
            MONGODB_ROOT_USER="admin",
            MONGODB_ROOT_PASSWORD="secret",
        )

        assert settings.mongodb_connection_url == "mongodb://u:p@db:27017"

    def test_notes_defaults(self):
        settings = Settings()

        assert settings.notes_collection == "notes"
        assert settings.notes_text_language == "russian"
        assert settings.default_page_limit <= settings.max_page_limit


@pytest.mark.parametrize(
    "log_level, debug, expected",
    [
        ("debug", False, "DEBUG"),
        ("WARNING", True, "WARNING"),
        ("verbose", False, "INFO"),
        ("", True, "DEBUG"),
        (None, False, "INFO"),
    ],
)
def test_resolve_log_level(log_level, debug, expected):
    assert resolve_log_level(log_level, debug) == expected


class TestMongoDB:
    def test_mask_url_hides_password(self):
        assert (
            mask_mongodb_url("mongodb://admin:secret@db:27017/notes")
            == "mongodb://admin:****@db:27017/notes"
        )
        assert mask_mongodb_url("mongodb://db:27017") == "mongodb://db:27017"

    @pytest.mark.asyncio
    async def test_health_check_without_client(self):
        assert await MongoDB().health_check() is False

    @pytest.mark.asyncio
    async def test_health_check_pings(self):
        mongodb = MongoDB()
        mongodb.client = MagicMock()
        mongodb.client.admin.command = AsyncMock(return_value={"ok": 1})

        assert await mongodb.health_check() is True
        mongodb.client.admin.command.assert_awaited_once_with("ping")

    @pytest.mark.asyncio
    async def test_health_check_reports_failure(self):
        mongodb = MongoDB()
        mongodb.client = MagicMock()
        mongodb.client.admin.command = AsyncMock(side_effect=ConnectionError("down"))

        assert await mongodb.health_check() is False

    @pytest.mark.asyncio
    async def test_disconnect_closes_client(self):
        mongodb = MongoDB()
        client = MagicMock()
        mongodb.client = client
        mongodb.db = MagicMock()

        await mongodb.disconnect()

        client.close.assert_called_once()
        assert mongodb.client is None
        assert mongodb.db is None

    @pytest.mark.asyncio
    async def test_failed_ping_closes_client(self):
        client = MagicMock()
        client.admin.command = AsyncMock(side_effect=ConnectionError("refused"))

        with patch("core.database.AsyncIOMotorClient", return_value=client):
            mongodb = MongoDB()
            with pytest.raises(ConnectionError):
                await mongodb.connect()

        client.close.assert_called_once()
        assert mongodb.client is None
        assert mongodb.db is None

    @pytest.mark.asyncio
    async def test_client_decodes_datetimes_as_utc(self):
        client = MagicMock()
        client.admin.command = AsyncMock(return_value={"ok": 1})

        with patch(
            "core.database.AsyncIOMotorClient", return_value=client
        ) as client_cls:
            mongodb = MongoDB()
            await mongodb.connect()

        options = client_cls.call_args.kwargs
        assert options["tz_aware"] is True
        assert options["tzinfo"] == timezone.utc
        assert mongodb.db is client.__getitem__.return_value
