from unittest.mock import MagicMock

import redis
from fastapi.testclient import TestClient

from pastebin.database import RedisRecordStore
from pastebin.main import create_app


def test_health_ok(client):
    response = client.get("/api/healthz")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_health_reports_store_failure(settings):
    redis_client = MagicMock(spec=redis.Redis)
    redis_client.ping.side_effect = redis.exceptions.ConnectionError("down")
    app = create_app(settings=settings, store=RedisRecordStore(redis_client))

    response = TestClient(app).get("/api/healthz")

    assert response.status_code == 200
    assert response.json() == {"ok": False, "error": "Database connection failed"}
