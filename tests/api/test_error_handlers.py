"""Tests for the global exception handlers."""

import pytest
from fastapi.testclient import TestClient

from ats_api.main import create_app
from ats_api.schemas.positions import PositionResponse


@pytest.fixture
def broken_client():
    """App with a route whose response model cannot be built."""
    app = create_app()

    @app.get("/broken-response")
    def broken_response():
        return PositionResponse.model_validate({"id": "not-an-int"})

    return TestClient(app, raise_server_exceptions=False)


def test_response_building_failure_is_a_server_error(broken_client):
    response = broken_client.get("/broken-response")

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "INTERNAL_ERROR"


def test_request_body_failure_is_still_a_client_error(client):
    response = client.post("/candidates", json={"firstName": "Only"})

    assert response.status_code == 422
    assert response.json()["error"]["details"]["field"].startswith("body.")
