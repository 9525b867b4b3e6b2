"""
Schema bootstrap and health probes for the data service

The tenant tables (users, auth_sessions, organizations,
organization_members, projects, documents) are registered on Base.metadata
by importing app.models.
"""

from sqlalchemy.orm import Session
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import inspect, text
from contextlib import contextmanager
from typing import Generator, Any, Dict, List
import logging
import time

from app.core.database import SessionLocal, engine
from app.models.base import Base

logger = logging.getLogger(__name__)

@contextmanager
def get_db_session() -> Generator[Session, None, None]:
    """
    Session outside a request (startup, health probes); commits on success
    """
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except SQLAlchemyError as e:
        logger.error(f"Database error: {e}")
        db.rollback()
        raise
    finally:
        db.close()

def expected_tables() -> List[str]:
    # Registers every model on the metadata
    import app.models  # noqa: F401

    return sorted(Base.metadata.tables.keys())

def missing_tables() -> List[str]:
    """Tenant tables not present in the connected database"""
    existing = set(inspect(engine).get_table_names())
    return [name for name in expected_tables() if name not in existing]

def create_all_tables() -> None:
    """
    Create any missing tenant tables (development only; production runs migrations)
    """
    missing = missing_tables()
    Base.metadata.create_all(bind=engine)
    if missing:
        logger.info(f"Created tables: {', '.join(missing)}")

def check_database_connection() -> bool:
    """
    Round-trip a trivial query
    """
    try:
        with get_db_session() as db:
            db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error(f"Database connection failed ({engine.dialect.name}): {e}")
        return False
    logger.info(f"Database connection successful ({engine.dialect.name})")
    return True

class DatabaseHealthCheck:
    """
    Database health check utilities
    """

    @staticmethod
    def check_connection() -> Dict[str, Any]:
        """
        healthy: query works and every tenant table exists
        degraded: query works, some tables missing
        unhealthy: no connection
        """
        health_status = {
            "status": "unknown",
            "dialect": engine.dialect.name,
            "connection": False,
            "tables_exist": False,
            "details": {}
        }

        try:
            with get_db_session() as db:
                start_time = time.time()
                db.execute(text("SELECT 1"))
                health_status["details"]["query_time_ms"] = round((time.time() - start_time) * 1000, 2)
            health_status["connection"] = True

            missing = missing_tables()
            health_status["tables_exist"] = not missing
            health_status["details"]["table_count"] = len(expected_tables()) - len(missing)
            if missing:
                health_status["details"]["missing_tables"] = missing
            health_status["status"] = "degraded" if missing else "healthy"

        except SQLAlchemyError as e:
            health_status["status"] = "unhealthy"
            health_status["details"]["error"] = str(e)
            logger.error(f"Database health check failed: {e}")

        return health_status
