from __future__ import annotations

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient

from garment_forecast.main import app as module_app
from garment_forecast.main.app import create_app
from garment_forecast.main.config import AppSettings, ServiceSettings
from garment_forecast.main.container import get_container


class _StubMongoDatabase:
    def close(self) -> None:
        pass


@pytest.mark.asyncio
async def test_create_app_initializes_lifespan() -> None:
    app = create_app()
    get_container().mongo_database.override(providers.Object(_StubMongoDatabase()))
    assert app.title

    async with app.router.lifespan_context(app):
        assert app.state.started_at is not None
        assert app.state.container is get_container()

    assert isinstance(module_app.app, type(app))


def test_routes_are_registered() -> None:
    app = create_app()
    paths = app.openapi()["paths"]

    assert "/health" in paths
    assert "/predictions" in paths


def test_cors_policy_follows_settings() -> None:
    settings = AppSettings(
        service=ServiceSettings(cors_origins=["https://erp.example"])
    )
    app = create_app(settings)
    client = TestClient(app)
    preflight = {"Access-Control-Request-Method": "POST"}

    allowed = client.options(
        "/predictions", headers={"Origin": "https://erp.example", **preflight}
    )
    denied = client.options(
        "/predictions", headers={"Origin": "https://other.example", **preflight}
    )

    assert app.state.settings is settings
    assert allowed.status_code == 200
    assert allowed.headers["access-control-allow-origin"] == "https://erp.example"
    assert allowed.headers["access-control-allow-credentials"] == "true"
    assert denied.status_code == 400
