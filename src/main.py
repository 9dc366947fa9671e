"""
Counsel Connect - Main Application Entry Point

JSON API matching clients with lawyers.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from src.config import settings
from src.database import init_db, close_db
from src.errors import CounselConnectError, ValidationError, InternalError
from src.logging_config import setup_logging
from src.routes.auth_routes import router as auth_router
from src.routes.lawyer_routes import router as lawyer_router
from src.routes.case_routes import router as case_router

logger = logging.getLogger(__name__)


# =============================================================================
# STARTUP & SHUTDOWN
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the database on startup and close it on shutdown."""
    setup_logging(settings.LOG_LEVEL)
    await init_db(settings.DATABASE_URL, echo=settings.DEBUG)
    logger.info(f"{settings.APP_NAME} {settings.APP_VERSION} running on port {settings.PORT}")
    yield
    await close_db()
    logger.info(f"{settings.APP_NAME} is shutting down")


# Create FastAPI application
app = FastAPI(
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(auth_router)
app.include_router(lawyer_router)
app.include_router(case_router)


# =============================================================================
# ERROR HANDLERS
# =============================================================================

@app.exception_handler(CounselConnectError)
async def counsel_connect_error_handler(request: Request, exc: CounselConnectError):
    """Render domain errors with their status code."""
    if exc.http_status >= 500:
        logger.error(f"{exc.code} on {request.url.path}: {exc.message}")
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed JSON or wrongly typed fields are a 400, not FastAPI's 422."""
    logger.warning(f"Invalid request on {request.url.path}: {exc.errors()}")
    error = ValidationError("Invalid request data", "INVALID_REQUEST")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error.to_response())


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    """Storage failures are surfaced as 500 without retry."""
    logger.error(f"Database error on {request.url.path}: {exc}")
    error = InternalError("Database error", "DATABASE_ERROR")
    return JSONResponse(status_code=error.http_status, content=error.to_response())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Catch-all, never leaks internal details."""
    logger.exception(f"Unhandled error on {request.url.path}")
    error = InternalError("Server error", "INTERNAL_ERROR")
    return JSONResponse(status_code=error.http_status, content=error.to_response())


# =============================================================================
# ROUTES
# =============================================================================

@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"ok": True}


# =============================================================================
# RUN (for development)
# =============================================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "src.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
