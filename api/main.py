"""
FastAPI main application for the Middle-earth Books API.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import List

import httpx
import structlog
from fastapi import FastAPI, HTTPException, Depends, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.config import config as api_config
from api.models import BookNameResponse, ErrorResponse, HealthResponse
from api.pages import router as pages_router
from catalog.book_service import BookProjectionService
from catalog.exceptions import BookServiceError
from utilities.config import config
from utilities.logger import setup_logging

# Setup logging
logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    setup_logging(
        log_level=config.log_level,
        log_format=config.log_format,
        log_file=config.get_log_file_path(),
        debug=config.debug
    )
    logger.info("Starting Middle-earth Books API", upstream_url=config.upstream_url)

    client = httpx.AsyncClient(**config.get_client_options())
    app.state.book_service = BookProjectionService(
        client,
        upstream_url=config.upstream_url,
        expose_transport_errors=config.expose_transport_errors
    )

    yield

    # Shutdown
    logger.info("Shutting down Middle-earth Books API")
    await client.aclose()


# Create FastAPI application
app = FastAPI(
    title=api_config.api_title,
    description=api_config.api_description,
    version=api_config.api_version,
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=api_config.cors_origins,
    allow_credentials=api_config.cors_allow_credentials,
    allow_methods=api_config.cors_allow_methods,
    allow_headers=api_config.cors_allow_headers,
)

app.include_router(pages_router)


def get_book_service(request: Request) -> BookProjectionService:
    """Resolve the book service created at startup."""
    service = getattr(request.app.state, "book_service", None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Book service not available"
        )
    return service


# Exception handlers
@app.exception_handler(BookServiceError)
async def book_service_exception_handler(request: Request, exc: BookServiceError):
    """Turn upstream failures into a 500 with the error message."""
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error=exc.message).dict()
    )


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    """Handle HTTP exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).dict(),
        headers=exc.headers
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle general exceptions."""
    logger.error("Unhandled exception", error=str(exc), path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error="Internal server error").dict()
    )


# Health check endpoint
@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Health check endpoint. Does not contact the upstream API."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=api_config.api_version,
        upstream_url=config.upstream_url
    )


# Books endpoint
@app.get(
    "/api/books",
    response_model=List[BookNameResponse],
    responses={500: {"model": ErrorResponse}},
    tags=["Books"]
)
async def get_books(service: BookProjectionService = Depends(get_book_service)):
    """
    Get the titles of the Lord of the Rings books.

    Every upstream record is reduced to its `name`, in upstream order.
    Any upstream failure yields a 500 with an `error` message.
    """
    books = await service.fetch_books()
    return JSONResponse(content=[book.dict() for book in books])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "api.main:app",
        host=api_config.host,
        port=api_config.port,
        reload=api_config.debug,
        log_level=api_config.log_level.lower()
    )
