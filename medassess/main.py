"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from medassess import __version__
from medassess.api.v1.router import api_router
from medassess.core.config import settings
from medassess.core.exceptions import (
    FormStateError,
    NotFoundError,
    PartialWriteFailure,
    ServiceError,
    ValidationError,
)
from medassess.core.logging import setup_logging
from medassess.db.init_db import init_db
from medassess.db.session import AsyncSessionLocal, engine
from medassess.services.notifications import NotificationFeed

# Setup logging
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info(f"Starting MedAssess API (env={settings.env})")

    if settings.init_db_on_startup:
        logger.info("Initializing database...")
        async with AsyncSessionLocal() as session:
            await init_db(engine, session, seed=settings.seed_library_on_startup)

    yield

    logger.info("Shutting down MedAssess API")
    await engine.dispose()


app = FastAPI(
    title="MedAssess API",
    description="Clinical assessments, protocols and reference tools",
    version=__version__,
    docs_url="/docs" if not settings.is_prod else None,
    redoc_url="/redoc" if not settings.is_prod else None,
    openapi_url="/openapi.json" if not settings.is_prod else None,
    lifespan=lifespan,
)

app.state.notification_feed = NotificationFeed(maxlen=settings.notification_feed_size)

if settings.is_dev:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


@app.exception_handler(NotFoundError)
async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": exc.message},
    )


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": exc.message, "fields": exc.fields},
    )


@app.exception_handler(FormStateError)
async def form_state_handler(request: Request, exc: FormStateError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_409_CONFLICT,
        content={"detail": exc.message},
    )


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    """Store failures; partial batch writes report what was saved."""
    if isinstance(exc, PartialWriteFailure):
        return JSONResponse(
            status_code=status.HTTP_207_MULTI_STATUS,
            content={
                "detail": exc.message,
                "saved_ids": [record.id for record in exc.saved],
                "failures": exc.failures,
            },
        )

    logger.warning(f"Record store failure on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"detail": exc.message},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle unhandled exceptions."""
    logger.exception(f"Unhandled exception: {exc}")

    if settings.is_prod:
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


app.include_router(api_router, prefix="/api/v1")


@app.get("/", include_in_schema=False)
async def root() -> dict:
    """Service info."""
    return {
        "service": "MedAssess API",
        "version": __version__,
        "docs": "/docs" if not settings.is_prod else "Disabled in production",
    }
