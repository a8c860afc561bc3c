import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .core.config import settings
from .core.structured_logging import setup_logging
from .middleware.request_response import RequestResponseMiddleware, cors_origins
from .models.exceptions import BrandKitException, UnexpectedError, to_error_response
from .routers import brand_kit, health

setup_logging(settings.log_level)

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.service_name,
    description="Brand Kit Generator API - AI-generated palettes, font pairings and brand personality",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(RequestResponseMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(settings.cors_allow_origins, settings.is_production),
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "X-Request-ID"],
    expose_headers=["X-Request-ID", "X-Processing-Time"],
)


@app.exception_handler(BrandKitException)
async def brand_kit_exception_handler(request: Request, exc: BrandKitException):
    """Render a classified failure as its fixed client message."""
    return to_error_response(exc)


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """An unreadable request body is reported like any other unexpected failure."""
    logger.error(
        "Rejected request body",
        extra={
            "path": request.url.path,
            "errors": [str(e.get("msg")) for e in exc.errors()],
        },
    )
    return to_error_response(UnexpectedError())


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions without leaking details."""
    logger.error(
        "Unhandled exception occurred",
        extra={
            "method": request.method,
            "path": request.url.path,
            "error_type": type(exc).__name__,
        },
        exc_info=(type(exc), exc, exc.__traceback__),
    )
    return to_error_response(UnexpectedError())


app.include_router(brand_kit.router)
app.include_router(health.router)
