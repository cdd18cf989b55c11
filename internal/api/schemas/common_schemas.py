"""
Common API schemas shared across different endpoints.
"""

from pydantic import BaseModel, ConfigDict
from typing import Optional, Any


class StandardResponse(BaseModel):
    """
    Standard API response format for all endpoints.

    - error_code: 0 = success, 1 = error
    - message: Success or error message
    - data: Response data (optional, only present on success)
    """

    error_code: int = 0
    message: str
    data: Optional[Any] = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "error_code": 0,
                    "message": "Success",
                    "data": {"id": "69073cc61dc7aa422463d537", "title": "Groceries"},
                },
                {"error_code": 1, "message": "Note not found", "data": None},
            ]
        }
    )


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    service: str
    version: str
    database: str

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "status": "healthy",
                    "service": "Notes Service",
                    "version": "1.0.0",
                    "database": "connected",
                }
            ]
        }
    )
