"""
Database health endpoints
"""

from fastapi import APIRouter, HTTPException, status
import logging

from app.core.database_utils import DatabaseHealthCheck, check_database_connection

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/health")
def database_health():
    """
    Database health check (connection, query latency, schema presence)
    """
    health_status = DatabaseHealthCheck.check_connection()

    if health_status["status"] in ("healthy", "degraded"):
        return health_status

    raise HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail=health_status
    )

@router.get("/connection")
def test_connection():
    """
    Test basic database connection
    """
    if check_database_connection():
        return {
            "status": "connected",
            "message": "Database connection successful"
        }
    raise HTTPException(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        detail={"status": "disconnected", "message": "Database connection failed"}
    )
