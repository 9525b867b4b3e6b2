from app.core.database import engine
from app.core.database_utils import missing_tables
from app.models import Base


def test_health_reports_dialect_and_tables(api):
    body = api.get("/api/v1/database/health").json()
    assert body["status"] == "healthy"
    assert body["dialect"] == "sqlite"
    assert body["details"]["table_count"] == len(Base.metadata.tables)


def test_missing_table_degrades_health(api):
    Base.metadata.tables["documents"].drop(bind=engine)
    assert missing_tables() == ["documents"]

    body = api.get("/api/v1/database/health").json()
    assert body["status"] == "degraded"
    assert body["details"]["missing_tables"] == ["documents"]


def test_connection_endpoint(api):
    assert api.get("/api/v1/database/connection").json()["status"] == "connected"
