"""
FastAPI Application Entry Point
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from sqlalchemy.exc import IntegrityError

from app.core.config import settings
from app.core.database import init_db
from app.core.exceptions import JoblyError
from app.core.logging import logger
from app.api.v1 import auth, companies, jobs, users
from app.schemas.common import ERROR_RESPONSES, ErrorDetail, ErrorResponse
from app.utils.validators import format_validation_errors


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events"""
    # Startup
    logger.info(f"Starting {settings.APP_NAME} backend...")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    if settings.DB_AUTO_CREATE:
        init_db()

    yield

    # Shutdown
    logger.info(f"Shutting down {settings.APP_NAME} backend...")


# Create FastAPI app
app = FastAPI(
    title="Jobly API",
    description="Job board: companies, jobs, users and applications",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error_response(message: str, status_code: int) -> JSONResponse:
    body = ErrorResponse(error=ErrorDetail(message=message, status=status_code))
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(JoblyError)
async def jobly_error_handler(request: Request, exc: JoblyError):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return _error_response(exc.message, exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return _error_response(format_validation_errors(exc.errors()), 400)


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError):
    logger.warning(f"{request.method} {request.url.path} violated a constraint: {exc.orig}")
    return _error_response("Database constraint violated", 400)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    # only reached with DEBUG off; debug mode renders the traceback instead
    logger.exception(f"{request.method} {request.url.path} failed")
    return _error_response("Internal Server Error", 500)


# Routers
app.include_router(
    auth.router, prefix="/api/v1/auth", tags=["Auth"], responses=ERROR_RESPONSES
)
app.include_router(
    companies.router, prefix="/api/v1/companies", tags=["Companies"], responses=ERROR_RESPONSES
)
app.include_router(
    jobs.router, prefix="/api/v1/jobs", tags=["Jobs"], responses=ERROR_RESPONSES
)
app.include_router(
    users.router, prefix="/api/v1/users", tags=["Users"], responses=ERROR_RESPONSES
)


@app.get("/", tags=["Root"])
async def root():
    """Root endpoint"""
    return {
        "message": "Welcome to Jobly API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint"""
    return {
        "status": "healthy",
        "environment": settings.ENVIRONMENT,
    }
