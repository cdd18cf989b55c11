"""
Health Check API Routes.
"""

from fastapi import APIRouter, Request

from core import get_settings
from internal.api.schemas import HealthResponse
from internal.api.schemas.common_schemas import StandardResponse
from internal.api.utils import success_response


def create_health_routes() -> APIRouter:
    """
    Factory function to create health routes.

    Returns:
        APIRouter: Configured router with health endpoints
    """
    router = APIRouter(tags=["Health"])

    @router.get(
        "/",
        response_model=StandardResponse,
        summary="Root Endpoint",
        description="Get basic API information",
        operation_id="get_root",
    )
    async def root():
        """Service name, version and status."""
        settings = get_settings()
        return success_response(
            message="API service is running",
            data={
                "service": settings.app_name,
                "version": settings.app_version,
                "status": "running",
            },
        )

    @router.get(
        "/health",
        response_model=StandardResponse,
        summary="Health Check",
        description="Check service and MongoDB health",
        operation_id="health_check",
        responses={
            200: {
                "description": "Health status",
                "content": {
                    "application/json": {
                        "example": {
                            "error_code": 0,
                            "message": "Service is healthy",
                            "data": {
                                "status": "healthy",
                                "service": "Notes Service",
                                "version": "1.0.0",
                                "database": "connected",
                            },
                        }
                    }
                },
            }
        },
    )
    async def health_check(request: Request):
        """
        Health check endpoint.

        **Returns:**
        - Overall status: healthy, or degraded when MongoDB does not answer a ping
        - Service name and version
        - Database connection state
        """
        settings = get_settings()

        mongodb = getattr(request.app.state, "mongodb", None)
        db_healthy = mongodb is not None and await mongodb.health_check()

        health_data = HealthResponse(
            status="healthy" if db_healthy else "degraded",
            service=settings.app_name,
            version=settings.app_version,
            database="connected" if db_healthy else "disconnected",
        )

        message = "Service is healthy" if db_healthy else "Service is degraded"
        return success_response(message=message, data=health_data.model_dump())

    return router
