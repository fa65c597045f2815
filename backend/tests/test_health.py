"""
Tests for health and root endpoints
"""


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["service"] == "Metadata JSON API"
    assert "timestamp" in body


def test_detailed_health_with_metadata_directory(client, write_json):
    write_json("one", "{}")
    write_json("two", "{}")

    response = client.get("/health/detailed")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    component = body["components"]["metadata_directory"]
    assert component["status"] == "healthy"
    assert component["json_files"] == 2


def test_detailed_health_missing_metadata_directory(client, workdir):
    response = client.get("/health/detailed")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "degraded"
    assert body["components"]["metadata_directory"]["status"] == "missing"


def test_root(client):
    response = client.get("/api")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "running"
    assert body["version"] == "0.1.0"
