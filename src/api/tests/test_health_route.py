"""Tests for the health check endpoint."""

import unittest
from unittest.mock import MagicMock, patch
from fastapi.testclient import TestClient

from api.main import app


class TestHealth(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)

    @patch('api.routes.health.get_engine')
    def test_healthy_when_database_responds(self, mock_get_engine):
        mock_get_engine.return_value = MagicMock()

        response = self.client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["services"]["database"]["status"] == "healthy"
        assert data["timestamp"].endswith("Z")

    @patch('api.routes.health.get_engine')
    def test_degraded_when_database_fails(self, mock_get_engine):
        mock_get_engine.return_value.connect.side_effect = Exception("connection refused")

        response = self.client.get("/health")

        assert response.status_code == 503
        data = response.json()
        assert data["status"] == "degraded"
        assert data["services"]["database"]["status"] == "unhealthy"
        assert "connection refused" in data["services"]["database"]["message"]


if __name__ == '__main__':
    unittest.main()
