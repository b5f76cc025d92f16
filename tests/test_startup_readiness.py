from __future__ import annotations

from fastapi.testclient import TestClient

from app.main import app


def test_health_reports_ready_after_startup() -> None:
    with TestClient(app) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_snippets_route_is_mounted_under_api_prefix() -> None:
    with TestClient(app) as client:
        response = client.post(
            "/api/v1/snippets",
            json={"steps": [{"keyword": "Then", "name": "I am happy"}], "variant": "javascript"},
        )

    assert response.status_code == 200
    assert response.json()["snippets"] == [
        "Then(/^I am happy$/, function I_am_happy() {\n"
        "  // Express the Regexp above with the code you wish you had\n"
        "});\n"
    ]
