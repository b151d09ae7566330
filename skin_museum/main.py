"""
Winamp Skin Museum catalog API

FastAPI application entry point.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from skin_museum.config import get_settings
from skin_museum.database import init_db, close_db
from skin_museum.api.v1 import router as api_v1_router
from skin_museum.api.middleware.request_id import RequestIdMiddleware
from skin_museum.errors import (
    CatalogError,
    ConsistencyFault,
    NotFoundError,
    StoreError,
    ValidationError,
)
from skin_museum.schemas.common import ErrorResponse, HealthResponse
from skin_museum.logging_config import configure_logging, get_logger

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan handler.

    Runs startup and shutdown tasks.
    """
    configure_logging(
        log_level=settings.log_level,
        environment=settings.environment,
        debug=settings.debug,
    )

    logger.info("Starting %s v%s", settings.project_name, settings.version)
    await init_db()
    logger.info("Database initialized")

    yield

    logger.info("Shutting down...")
    await close_db()
    logger.info("Database connections closed")


app = FastAPI(
    title=settings.project_name,
    description="""
    Read API over the Winamp Skin Museum archive.

    - **Lookup**: fetch a skin by the MD5 hash of its file
    - **Listing**: page through all classic skins
    - **Museum order**: classic defaults, tweeted skins by engagement, approved,
      unreviewed, rejected, NSFW
    - **Filtering**: approved skins only (cannot be combined with sorting)
    """,
    version=settings.version,
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

app.add_middleware(RequestIdMiddleware)


# Catalog error kind -> HTTP status. First match wins, so subclasses go first.
_ERROR_STATUS = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConsistencyFault, status.HTTP_500_INTERNAL_SERVER_ERROR),
    (StoreError, status.HTTP_503_SERVICE_UNAVAILABLE),
)


def _status_for(exc: CatalogError) -> int:
    for error_type, status_code in _ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


@app.exception_handler(CatalogError)
async def catalog_exception_handler(request: Request, exc: CatalogError):
    """Map catalog error kinds to status codes, keeping the kind in the body."""
    status_code = _status_for(exc)
    req_id = getattr(request.state, "request_id", None)
    if status_code >= 500 and not settings.debug:
        detail = "Internal server error"
    else:
        detail = str(exc)
    body = ErrorResponse(detail=detail, code=exc.code, request_id=req_id)
    headers = {"X-Request-ID": req_id} if req_id else None
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


@app.exception_handler(Exception)
async def general_exception_handler(
    request: Request,
    exc: Exception,
):
    """Handle unexpected exceptions."""
    logger.exception("Unhandled exception: %s", exc)
    req_id = getattr(request.state, "request_id", None)
    if settings.debug:
        content = {
            "detail": str(exc),
            "type": type(exc).__name__,
            "request_id": req_id,
        }
    else:
        content = {"detail": "Internal server error", "request_id": req_id}
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=content,
    )


@app.get("/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    """Check application health."""
    return HealthResponse(
        status="ok",
        version=settings.version,
        database="connected",
    )


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint with API information."""
    return {
        "name": settings.project_name,
        "version": settings.version,
        "docs": "/docs" if settings.debug else "disabled",
        "api": {
            "v1": settings.api_v1_prefix,
        },
    }


app.include_router(
    api_v1_router,
    prefix=settings.api_v1_prefix,
)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "skin_museum.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
