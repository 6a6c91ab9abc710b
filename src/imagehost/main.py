"""FastAPI application entry point for the image host."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from imagehost import __version__
from imagehost.api import router
from imagehost.api.dependencies import ImageServiceDep
from imagehost.api.schemas import HealthResponse
from imagehost.config import get_settings
from imagehost.exceptions import ImageHostError, StoreUnavailableError
from imagehost.models.errors import ErrorCode, ErrorResponse
from imagehost.services import ImageCache, ImageService
from imagehost.storage import MongoImageStore
from imagehost.utils.logging import setup_logging

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup/shutdown events."""
    settings = get_settings()
    setup_logging(level=settings.log_level, json_format=settings.log_json)

    store = MongoImageStore.from_settings(settings)
    cache = ImageCache(store, ttl_seconds=settings.cache_ttl_seconds)
    app.state.image_service = ImageService(store, cache)

    try:
        await store.ensure_indexes()
    except StoreUnavailableError:
        logger.warning("Could not create indexes, continuing without them")

    logger.info(
        "Starting image host",
        version=__version__,
        database=settings.mongo_database,
        cache_ttl_seconds=settings.cache_ttl_seconds,
    )
    yield

    logger.info("Shutting down image host")
    cache.clear()
    store.close()


app = FastAPI(
    title="Image Host API",
    description="Upload, list, view, rename and delete images",
    version=__version__,
    lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router)


# Exception handlers
@app.exception_handler(ImageHostError)
async def image_host_exception_handler(
    request: Request,
    exc: ImageHostError,
) -> JSONResponse:
    """Handle all ImageHostError subclasses with the unified error body."""
    if exc.status_code >= 500:
        # Driver details stay in the logs, clients get a generic message
        logger.error(
            "Request failed",
            path=request.url.path,
            code=exc.error_code.value,
            error=exc.message,
        )
        message = "Server error"
    else:
        logger.warning(
            "Request rejected",
            path=request.url.path,
            code=exc.error_code.value,
            error=exc.message,
        )
        message = exc.message

    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=message, code=exc.error_code).model_dump(mode="json"),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Report malformed request bodies as 400 like other validation failures."""
    first = exc.errors()[0] if exc.errors() else {}
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=ErrorResponse(
            error=str(first.get("msg", "Invalid request")),
            code=ErrorCode.VALIDATION_ERROR,
        ).model_dump(mode="json"),
    )


@app.get("/health", tags=["health"], response_model=HealthResponse)
async def health_check(service: ImageServiceDep) -> JSONResponse:
    """Health check endpoint, including store reachability."""
    try:
        await service.store.ping()
    except StoreUnavailableError:
        body = HealthResponse(status="degraded", version=__version__, store="unavailable")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content=body.model_dump(),
        )

    body = HealthResponse(status="healthy", version=__version__, store="ok")
    return JSONResponse(content=body.model_dump())
