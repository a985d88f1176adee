"""
API models and schemas for the FastAPI application.
"""

from datetime import datetime

from pydantic import BaseModel, Field


class BookNameResponse(BaseModel):
    """Book entry returned by ``GET /api/books``."""
    name: str = Field(..., description="Book title")


class ErrorResponse(BaseModel):
    """Error response model."""
    error: str = Field(..., description="Error message")


class HealthResponse(BaseModel):
    """Health check response model."""
    status: str = Field(..., description="Service status")
    timestamp: datetime = Field(..., description="Current timestamp")
    version: str = Field(..., description="API version")
    upstream_url: str = Field(..., description="Upstream book catalog URL")
