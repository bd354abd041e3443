from unittest.mock import AsyncMock

from video_translator.boundary.db import get_async_db


def test_health_counts_jobs(client):
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "total_jobs": 0, "active_jobs": 0}


def test_health_echoes_correlation_id(client):
    response = client.get("/api/v1/health", headers={"X-Correlation-ID": "abc-123"})

    assert response.headers["X-Correlation-ID"] == "abc-123"


def test_health_db_ok(client):
    session = AsyncMock()
    client.app.dependency_overrides[get_async_db] = lambda: session

    response = client.get("/api/v1/health/db")

    assert response.status_code == 200
    session.execute.assert_awaited_once()
    assert response.json()["database"] == "reachable"


def test_health_db_unavailable(client):
    session = AsyncMock()
    session.execute.side_effect = ConnectionRefusedError("db down")
    client.app.dependency_overrides[get_async_db] = lambda: session

    response = client.get("/api/v1/health/db")

    assert response.status_code == 503
