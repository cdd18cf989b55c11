"""
FastAPI Service - Main entry point for the Notes API.
- Routes are separated into modules
- MongoDB (Motor) for data persistence
- Comprehensive logging for all operations
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request
from fastapi import status as http_status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from core.config import get_settings
from core.database import close_database, get_database
from core.logger import logger
from internal.api.routes import create_health_routes, note_router
from internal.api.utils import error_response
from repositories import create_note_repository


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan - startup and shutdown.
    Connects to MongoDB and provisions the notes indexes on startup.
    """
    settings = get_settings()
    logger.info(
        f"========== Starting {settings.app_name} v{settings.app_version} API service =========="
    )
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"API: {settings.api_host}:{settings.api_port}")

    try:
        logger.info("Initializing MongoDB connection...")
        mongodb = await get_database()
        app.state.mongodb = mongodb

        # Index provisioning failure is fatal
        app.state.note_repository = await create_note_repository(mongodb.db)
        logger.info("Note repository initialized")

    except Exception as e:
        logger.error(f"Failed to initialize MongoDB: {e}")
        logger.exception("MongoDB initialization error details:")
        await close_database()
        raise

    logger.info(
        f"========== {settings.app_name} API service started successfully =========="
    )

    yield

    logger.info("========== Shutting down API service ==========")
    try:
        await close_database()
    except Exception as e:
        logger.error(f"Error disconnecting from MongoDB: {e}")
        logger.exception("MongoDB disconnect error details:")

    logger.info("========== API service stopped successfully ==========")


def create_app() -> FastAPI:
    """
    Factory function to create and configure the FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    logger.info("Creating FastAPI application...")
    settings = get_settings()

    description = """
## Notes API

Create, search, page through and edit short text notes stored in MongoDB.

### Key Features

* **Unique titles** - enforced by a unique index
* **Full-text search** - relevance-ranked search over title and content
* **Two pagination styles** - offset (`skip`) and cursor (`after`)
* **Expiry** - notes with `expires_at` are removed by MongoDB once it passes
* **Statistics** - note count and average content length
    """

    tags_metadata = [
        {
            "name": "Notes",
            "description": "Note lifecycle: create, get, list, search, update, delete and statistics.",
        },
        {
            "name": "Health",
            "description": "Health check endpoints for monitoring API status and MongoDB.",
        },
    ]

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description=description,
        lifespan=lifespan,
        openapi_tags=tags_metadata,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Configure appropriately for production
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(note_router)
    logger.info("✅ Note routes registered")

    app.include_router(create_health_routes())
    logger.info("✅ Health routes registered")

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        """Handle validation errors with standard response format."""
        errors = exc.errors()
        error_msg = "; ".join([f"{e['loc'][-1]}: {e['msg']}" for e in errors])
        logger.warning(f"Validation error: {error_msg}")
        return JSONResponse(
            status_code=http_status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=error_response(message=f"Validation error: {error_msg}"),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with standard response format."""
        logger.warning(f"HTTP error {exc.status_code}: {exc.detail}")
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(message=str(exc.detail)),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Handle all other exceptions with standard response format."""
        logger.error(f"Unhandled exception: {str(exc)}")
        logger.exception("Exception details:")
        return JSONResponse(
            status_code=http_status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=error_response(message=f"Internal server error: {str(exc)}"),
        )

    logger.info("FastAPI application created successfully")
    return app


app = create_app()


# Run with: uvicorn cmd.api.main:app --host 0.0.0.0 --port 8000 --reload
if __name__ == "__main__":
    import os
    import sys

    import uvicorn

    settings = get_settings()

    logger.info("========== Starting Uvicorn Server ==========")
    logger.info(f"Host: {settings.api_host}")
    logger.info(f"Port: {settings.api_port}")
    logger.info(f"Reload: {settings.api_reload}")
    logger.info(f"Workers: {settings.api_workers}")

    # The uvicorn subprocess must import this package's "cmd", not the stdlib one
    project_root = os.path.dirname(
        os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    )
    if project_root not in sys.path:
        sys.path.insert(0, project_root)

    current_pythonpath = os.environ.get("PYTHONPATH", "")
    if project_root not in current_pythonpath.split(os.pathsep):
        os.environ["PYTHONPATH"] = (
            f"{project_root}{os.pathsep}{current_pythonpath}"
            if current_pythonpath
            else project_root
        )

    uvicorn.run(
        "cmd.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_reload,
        workers=None if settings.api_reload else settings.api_workers,
        log_level="info" if settings.debug else "warning",
    )
