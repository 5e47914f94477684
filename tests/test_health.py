import pytest

from app.platform.config import settings


@pytest.mark.asyncio
async def test_health_check(client):
    response = await client.get("/health")
    assert response.status_code == 200

    payload = response.json()
    assert payload["status_code"] == 200
    assert payload["status"] == "success"
    assert payload["message"] == "Service is healthy"
    assert payload["data"] == {"status": "ok", "service": settings.APP_NAME}


@pytest.mark.asyncio
async def test_root_info(client):
    response = await client.get("/")
    assert response.status_code == 200
    payload = response.json()
    assert payload["app_name"] == f"{settings.APP_NAME} API"
    assert payload["version"] == "1.0.0"
    assert payload["docs_url"] == "/docs"
    assert payload["api_base"] == "/api"


@pytest.mark.asyncio
async def test_unknown_route_uses_error_envelope(client):
    response = await client.get("/api/nope")
    assert response.status_code == 404
    assert response.json()["status"] == "error"


def test_debug_is_off_by_default():
    from app.main import app
    from app.platform.config import Settings

    assert Settings.model_fields["DEBUG"].default is False
    # Debug mode would answer unexpected errors with a plain-text traceback.
    assert app.debug is False
