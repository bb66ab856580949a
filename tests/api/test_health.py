"""
Tests for the health check endpoint.
"""


def test_health_check_returns_200(client):
    response = client.get("/health")
    assert response.status_code == 200


def test_health_check_identifies_service(client):
    data = client.get("/health").json()
    assert data["service"] == "account-ledger"


def test_health_check_reports_database_status(client):
    """Monitoring relies on the database field being present."""
    data = client.get("/health").json()
    assert data["database"] == "healthy"
    assert data["status"] == "healthy"
