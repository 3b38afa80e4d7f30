"""
Tests for health endpoints.
"""


class TestHealth:
    """Tests for /health and /health/detailed"""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_detailed_health_checks_database(self, client):
        response = client.get("/health/detailed")

        assert response.status_code == 200
        assert response.json()["checks"]["database"]["status"] == "healthy"

    def test_root(self, client):
        assert client.get("/").json()["message"] == "Jobly API"
