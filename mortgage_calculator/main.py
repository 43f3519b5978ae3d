# This project was developed with assistance from AI tools.
"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .core.config import settings
from .core.errors import build_error, get_request_id
from .routes import health, public
from .services.converters import InvalidPaymentScheduleError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Application startup/shutdown lifecycle."""
    logger.info(
        "Starting %s (debug=%s, allowed origins: %s)",
        settings.APP_NAME,
        settings.DEBUG,
        ", ".join(settings.ALLOWED_HOSTS),
    )
    yield


app = FastAPI(
    title="Mortgage Calculator API",
    description="Periodic mortgage payments with default insurance",
    version="0.1.0",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Convert HTTPException to RFC 7807 Problem Details."""
    body = build_error(exc.status_code, str(exc.detail), get_request_id(request))
    return JSONResponse(
        status_code=exc.status_code,
        content=body.model_dump(),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Convert Pydantic validation errors to RFC 7807 Problem Details."""
    body = build_error(422, str(exc.errors()), get_request_id(request))
    return JSONResponse(status_code=422, content=body.model_dump())


@app.exception_handler(InvalidPaymentScheduleError)
async def payment_schedule_exception_handler(
    request: Request, exc: InvalidPaymentScheduleError
):
    """A schedule outside the supported set got past validation -- report a 500."""
    request_id = get_request_id(request)
    logger.exception("Invalid payment schedule %r (request_id=%s)", exc.schedule, request_id)
    body = build_error(500, str(exc), request_id)
    return JSONResponse(status_code=500, content=body.model_dump())


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    """Catch-all for unhandled exceptions -- log and return 500."""
    request_id = get_request_id(request)
    logger.exception("Unhandled exception (request_id=%s)", request_id)
    body = build_error(500, "An unexpected error occurred.", request_id)
    return JSONResponse(status_code=500, content=body.model_dump())


# Include routers
app.include_router(health.router, prefix="/health", tags=["health"])
app.include_router(public.router, prefix="/api/public", tags=["public"])


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint"""
    return {"message": "Welcome to the Mortgage Calculator API"}
