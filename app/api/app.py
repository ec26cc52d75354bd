"""
FastAPI application for the YouTube summary API.
"""

import time
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import config
from app.api.routes import router
from app.utils.error_handling import InvalidRequestError, SummaryServiceError, log_exception
from app.utils.logger import logging

# FastAPI application
app = FastAPI(
    title=config.APP_NAME,
    version=config.APP_VERSION,
    description="An API for summarizing YouTube videos",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
async def startup_event():
    """Validate configuration on application startup."""
    config.initialize()
    logging.info(f"{config.APP_NAME} v{config.APP_VERSION} started")


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    """Middleware to add processing time header to responses."""
    start_time = time.time()
    try:
        response = await call_next(request)
    except Exception as exc:
        # Unhandled errors are rendered here so they get timed too
        response = await global_exception_handler(request, exc)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    return response


@app.exception_handler(SummaryServiceError)
async def summary_error_handler(request: Request, exc: SummaryServiceError):
    """Render expected failures as ``{"error": ...}`` bodies."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed or mistyped request bodies."""
    logging.error(f"Invalid request body: {exc.errors()}")
    error = InvalidRequestError()
    return JSONResponse(status_code=error.status_code, content=error.to_payload())


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Global exception handler for unhandled exceptions."""
    log_exception("General error", exc, with_traceback=True)
    return JSONResponse(
        status_code=500,
        content={"error": "An unexpected error occurred"},
    )


# Include API router
app.include_router(router)


# Root
@app.get("/")
async def root():
    """Root endpoint returning basic API information."""
    return {
        "name": config.APP_NAME,
        "version": config.APP_VERSION,
        "description": "YouTube Video Summary API",
    }
