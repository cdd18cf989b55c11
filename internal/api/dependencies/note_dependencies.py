"""
Note Dependencies.
"""

from fastapi import HTTPException, Request, status

from core.logger import logger
from repositories.interfaces import INoteRepository


def get_note_repository(request: Request) -> INoteRepository:
    """
    Get the note repository built during application startup.

    Raises:
        HTTPException: 503 if the repository is not initialized yet
    """
    repository = getattr(request.app.state, "note_repository", None)
    if repository is None:
        logger.error("❌ Note repository requested before startup completed")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Note repository not initialized",
        )
    return repository
