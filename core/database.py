"""
MongoDB connection using Motor (async driver).
Includes detailed logging and comprehensive error handling.
"""

from datetime import timezone
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from core.config import get_settings
from core.logger import logger


def mask_mongodb_url(url: str) -> str:
    """Hide the password part of a MongoDB URL for logging."""
    if "@" not in url:
        return url

    credentials, host = url.rsplit("@", 1)
    if "://" not in credentials:
        return url

    protocol, user_info = credentials.split("://", 1)
    if ":" not in user_info:
        return url

    user = user_info.split(":", 1)[0]
    return f"{protocol}://{user}:****@{host}"


class MongoDB:
    """MongoDB connection manager with async support."""

    def __init__(self):
        """Initialize MongoDB connection manager."""
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Optional[AsyncIOMotorDatabase] = None
        logger.debug("MongoDB connection manager initialized")

    async def connect(self) -> None:
        """
        Establish connection to MongoDB.

        Raises:
            Exception: If connection fails
        """
        settings = get_settings()
        url = settings.mongodb_connection_url

        try:
            logger.info(f"📝 Connecting to MongoDB: {mask_mongodb_url(url)}")
            logger.debug(f"Database name: {settings.mongodb_database}")

            self.client = AsyncIOMotorClient(
                url,
                maxPoolSize=settings.mongodb_max_pool_size,
                minPoolSize=settings.mongodb_min_pool_size,
                serverSelectionTimeoutMS=settings.mongodb_server_selection_timeout_ms,
                connectTimeoutMS=settings.mongodb_connect_timeout_ms,
                socketTimeoutMS=settings.mongodb_socket_timeout_ms,
                tz_aware=True,
                tzinfo=timezone.utc,
            )

            # Test connection with ping
            await self.client.admin.command("ping")

            self.db = self.client[settings.mongodb_database]

            logger.info(
                f"✅ Connected to MongoDB database: {settings.mongodb_database}"
            )
            logger.debug(
                f"Connection pool: min={settings.mongodb_min_pool_size}, "
                f"max={settings.mongodb_max_pool_size}"
            )

        except Exception as e:
            logger.error(f"❌ Failed to connect to MongoDB: {e}")
            logger.exception("MongoDB connection error details:")
            if self.client is not None:
                self.client.close()
                self.client = None
            raise

    async def disconnect(self) -> None:
        """
        Close MongoDB connection.

        Safe to call even if not connected.
        """
        if self.client is None:
            logger.debug("MongoDB client not initialized, nothing to disconnect")
            return

        logger.info("📝 Disconnecting from MongoDB...")
        self.client.close()
        self.client = None
        self.db = None
        logger.info("✅ Disconnected from MongoDB")

    async def health_check(self) -> bool:
        """
        Check if MongoDB connection is healthy.

        Returns:
            True if connection is healthy, False otherwise
        """
        if self.client is None:
            logger.warning("⚠️ MongoDB client not initialized")
            return False

        try:
            await self.client.admin.command("ping")
            logger.debug("✅ MongoDB health check passed")
            return True

        except Exception as e:
            logger.error(f"❌ MongoDB health check failed: {e}")
            return False


# Global instance
_mongodb: Optional[MongoDB] = None


async def get_database() -> MongoDB:
    """
    Get or create global MongoDB instance.

    Returns:
        Connected MongoDB instance

    Raises:
        Exception: If database initialization fails
    """
    global _mongodb

    if _mongodb is None:
        logger.info("📝 Initializing MongoDB connection...")
        mongodb = MongoDB()
        await mongodb.connect()
        _mongodb = mongodb

    return _mongodb


async def close_database() -> None:
    """
    Close global MongoDB connection.

    This should be called during application shutdown.
    """
    global _mongodb

    if _mongodb is None:
        logger.debug("No global MongoDB connection to close")
        return

    logger.info("📝 Closing global MongoDB connection...")
    await _mongodb.disconnect()
    _mongodb = None
    logger.info("✅ Global MongoDB connection closed")
