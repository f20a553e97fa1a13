"""Tests for FastAPI app entry point."""
from fastapi.testclient import TestClient


def test_health_endpoint_returns_200() -> None:
    """Health check endpoint should return HTTP 200."""
    from emojigen.main import app
    client = TestClient(app)
    response = client.get("/health")
    assert response.status_code == 200


def test_health_endpoint_returns_status_ok() -> None:
    """Health check response should contain status=ok."""
    from emojigen.main import app
    client = TestClient(app)
    data = client.get("/health").json()
    assert data["status"] == "ok"
    assert "version" in data


def test_health_reports_service_after_startup() -> None:
    """Lifespan should wire the emoji service from settings."""
    from emojigen.main import app
    with TestClient(app) as client:
        data = client.get("/health").json()
        assert data["services"]["emoji_generation"] == "ok"
        assert app.state.emoji_service.client.endpoint_url == "https://proxy.test/api/gemini-generate-emoji"
    # Service created by the lifespan is released at shutdown
    assert getattr(app.state, "emoji_service", None) is None


def test_app_has_correct_title() -> None:
    from emojigen.main import app
    assert app.title == "Emoji Generator API"


def test_app_has_cors_middleware() -> None:
    """App should allow requests from frontend origin."""
    from emojigen.main import app
    from starlette.middleware.cors import CORSMiddleware
    middleware_classes = [m.cls for m in app.user_middleware]
    assert CORSMiddleware in middleware_classes
