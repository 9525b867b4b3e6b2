"""
FastAPI main application module for the Refined Stack data service

Serves the multi-tenant table API (organizations, members, projects,
documents) plus password auth under /api/v1. Row-level access rules live
in app.services.policies; this module only wires the app together.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
import time
import logging

from app.core.config import settings, DATABASE_URL
from app.core.database_utils import create_all_tables, check_database_connection
from app.api.api_v1.api import api_router

API_PREFIX = "/api/v1"
SERVICE_NAME = "Refined Stack API"
SERVICE_VERSION = "1.0.0"

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Create FastAPI application
app = FastAPI(
    title=SERVICE_NAME,
    description="Multi-tenant organization, project and document service",
    version=SERVICE_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (the Streamlit client origin)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_HOSTS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Request timing middleware
@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)
    logger.debug(
        f"{request.method} {request.url.path} -> {response.status_code} "
        f"({process_time * 1000:.1f} ms)"
    )
    return response

# Include API routes
app.include_router(api_router, prefix=API_PREFIX)

# Health check endpoint
@app.get("/health")
async def health_check():
    """Liveness probe; see /api/v1/database/health for the database"""
    return {
        "status": "healthy",
        "timestamp": time.time(),
        "version": SERVICE_VERSION,
    }

# Root endpoint
@app.get("/")
async def root():
    """Service information"""
    return {
        "message": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "api": API_PREFIX,
        "docs": "/docs",
        "health": "/health",
    }

# Database errors that escaped an endpoint
@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"Database error on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=503,
        content={
            "error": "Database error",
            "message": "The data service could not complete the request"
        }
    )

# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Global exception on {request.method} {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "message": "An unexpected error occurred"
        }
    )

# Startup event
@app.on_event("startup")
async def startup_event():
    """Verify the database and, in development, create the schema"""
    dialect = DATABASE_URL.split(":", 1)[0]
    logger.info(f"Starting {SERVICE_NAME} ({settings.ENVIRONMENT}, {dialect})...")

    if check_database_connection() is False:
        logger.error("Failed to connect to database")
        raise RuntimeError("Database connection failed")

    # In production the schema is managed by migrations
    if settings.ENVIRONMENT == "development":
        create_all_tables()
        logger.info("Database tables created/verified successfully")

    logger.info("Application startup complete")

# Shutdown event
@app.on_event("shutdown")
async def shutdown_event():
    logger.info(f"Shutting down {SERVICE_NAME}...")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.RELOAD,
        log_level=settings.LOG_LEVEL.lower()
    )
