"""
Notes API Routes.
Includes detailed logging and comprehensive error handling.
"""

from fastapi import APIRouter, Depends, HTTPException, Query, status
from pymongo.errors import DuplicateKeyError

from core.config import get_settings
from core.exceptions import NoteNotFoundError
from core.logger import logger
from internal.api.dependencies import get_note_repository
from internal.api.schemas import (
    NoteCreateRequest,
    NoteUpdateRequest,
    StandardResponse,
)
from internal.api.utils import note_to_dict, success_response
from repositories.interfaces import INoteRepository

settings = get_settings()

router = APIRouter(prefix="/api/v1/notes", tags=["Notes"])


def _not_found(note_id: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Note {note_id} not found",
    )


def _conflict(title) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail=f"Note with title {title!r} already exists",
    )


def _internal_error(action: str, e: Exception) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}: {str(e)}",
    )


@router.post(
    "",
    response_model=StandardResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create Note",
    description="Create a new note with a unique title",
    responses={
        201: {
            "description": "Note created successfully",
            "content": {
                "application/json": {
                    "example": {
                        "error_code": 0,
                        "message": "Note created successfully",
                        "data": {
                            "id": "69073cc61dc7aa422463d537",
                            "title": "Groceries",
                            "content": "milk, bread, eggs",
                            "createdAt": "2026-10-18T09:00:00Z",
                            "updatedAt": "2026-10-18T09:00:00Z",
                        },
                    }
                }
            },
        },
        409: {"description": "A note with this title already exists"},
        500: {"description": "Internal server error"},
    },
)
async def create_note(
    request: NoteCreateRequest,
    repository: INoteRepository = Depends(get_note_repository),
):
    """
    Create a note.

    **Parameters:**
    - **title**: Unique note title (required)
    - **content**: Note body (required, may be empty)
    - **expires_at**: Optional expiry time; MongoDB removes the note once it passes
    """
    try:
        note = await repository.create(
            request.title, request.content, expires_at=request.expires_at
        )
        return success_response(
            message="Note created successfully", data=note_to_dict(note)
        )

    except DuplicateKeyError:
        raise _conflict(request.title)

    except Exception as e:
        logger.error(f"❌ API: Create note failed: {e}")
        raise _internal_error("create note", e)


@router.get(
    "",
    response_model=StandardResponse,
    summary="List Notes",
    description="List notes with offset pagination, optionally filtered by full-text search",
    responses={
        200: {"description": "Page of notes"},
        500: {"description": "Internal server error"},
    },
)
async def list_notes(
    q: str = Query(default="", description="Full-text search terms"),
    limit: int = Query(
        default=settings.default_page_limit,
        ge=1,
        le=settings.max_page_limit,
        description="Maximum number of notes to return",
    ),
    skip: int = Query(default=0, description="Number of notes to skip"),
    repository: INoteRepository = Depends(get_note_repository),
):
    """
    List notes.

    Without **q** notes are sorted newest first. With **q** only matching
    notes are returned, most relevant first, each with its relevance `score`.
    """
    try:
        notes = await repository.list(q, limit=limit, skip=skip)
        return success_response(
            data={
                "items": [note_to_dict(note) for note in notes],
                "count": len(notes),
                "limit": limit,
                "skip": max(skip, 0),
            }
        )

    except Exception as e:
        logger.error(f"❌ API: List notes failed: {e}")
        raise _internal_error("list notes", e)


@router.get(
    "/cursor",
    response_model=StandardResponse,
    summary="List Notes After Cursor",
    description="List notes with cursor pagination, newest id first",
    responses={
        200: {
            "description": "Page of notes",
            "content": {
                "application/json": {
                    "example": {
                        "error_code": 0,
                        "message": "Success",
                        "data": {
                            "items": [],
                            "count": 0,
                            "limit": 20,
                            "next_cursor": None,
                        },
                    }
                }
            },
        },
        500: {"description": "Internal server error"},
    },
)
async def list_notes_after(
    q: str = Query(default="", description="Full-text search terms"),
    after: str = Query(
        default="", description="Return notes older than this note id"
    ),
    limit: int = Query(
        default=settings.default_page_limit,
        ge=1,
        le=settings.max_page_limit,
        description="Maximum number of notes to return",
    ),
    repository: INoteRepository = Depends(get_note_repository),
):
    """
    List notes page by page.

    Pass the previous page's **next_cursor** as **after** to fetch the next
    page. **next_cursor** is null once a page comes back short.
    """
    try:
        notes = await repository.list_after(q, after_id=after, limit=limit)
        next_cursor = notes[-1].id if len(notes) == limit else None
        return success_response(
            data={
                "items": [note_to_dict(note) for note in notes],
                "count": len(notes),
                "limit": limit,
                "next_cursor": next_cursor,
            }
        )

    except Exception as e:
        logger.error(f"❌ API: List notes after cursor failed: {e}")
        raise _internal_error("list notes", e)


@router.get(
    "/stats",
    response_model=StandardResponse,
    summary="Get Note Statistics",
    description="Number of notes and their average content length",
    responses={
        200: {
            "description": "Statistics retrieved successfully",
            "content": {
                "application/json": {
                    "example": {
                        "error_code": 0,
                        "message": "Success",
                        "data": {"count": 2, "avgContentLen": 4.0},
                    }
                }
            },
        },
        500: {"description": "Internal server error"},
    },
)
async def get_note_stats(
    repository: INoteRepository = Depends(get_note_repository),
):
    """Content length is counted in characters, not bytes."""
    try:
        stats = await repository.stats()
        return success_response(data=stats.model_dump(by_alias=True))

    except Exception as e:
        logger.error(f"❌ API: Note stats failed: {e}")
        raise _internal_error("get note statistics", e)


@router.get(
    "/{note_id}",
    response_model=StandardResponse,
    summary="Get Note",
    description="Get a note by its id",
    responses={
        200: {"description": "Note found"},
        404: {"description": "Note not found"},
        500: {"description": "Internal server error"},
    },
)
async def get_note(
    note_id: str,
    repository: INoteRepository = Depends(get_note_repository),
):
    try:
        note = await repository.get_by_id(note_id)
        return success_response(data=note_to_dict(note))

    except NoteNotFoundError:
        raise _not_found(note_id)

    except Exception as e:
        logger.error(f"❌ API: Get note {note_id} failed: {e}")
        raise _internal_error("get note", e)


@router.patch(
    "/{note_id}",
    response_model=StandardResponse,
    summary="Update Note",
    description="Update a note's title and/or content",
    responses={
        200: {"description": "Note updated"},
        404: {"description": "Note not found"},
        409: {"description": "A note with this title already exists"},
        500: {"description": "Internal server error"},
    },
)
async def update_note(
    note_id: str,
    request: NoteUpdateRequest,
    repository: INoteRepository = Depends(get_note_repository),
):
    """
    Partially update a note.

    Fields left out of the body keep their current value. `updatedAt` is
    refreshed on every call.
    """
    try:
        note = await repository.update(
            note_id, title=request.title, content=request.content
        )
        return success_response(
            message="Note updated successfully", data=note_to_dict(note)
        )

    except NoteNotFoundError:
        raise _not_found(note_id)

    except DuplicateKeyError:
        raise _conflict(request.title)

    except Exception as e:
        logger.error(f"❌ API: Update note {note_id} failed: {e}")
        raise _internal_error("update note", e)


@router.delete(
    "/{note_id}",
    response_model=StandardResponse,
    summary="Delete Note",
    description="Delete a note by its id",
    responses={
        200: {"description": "Note deleted"},
        404: {"description": "Note not found"},
        500: {"description": "Internal server error"},
    },
)
async def delete_note(
    note_id: str,
    repository: INoteRepository = Depends(get_note_repository),
):
    try:
        await repository.delete(note_id)
        return success_response(message="Note deleted successfully")

    except NoteNotFoundError:
        raise _not_found(note_id)

    except Exception as e:
        logger.error(f"❌ API: Delete note {note_id} failed: {e}")
        raise _internal_error("delete note", e)
