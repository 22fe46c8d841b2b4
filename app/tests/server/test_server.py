import asyncio
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from server import server
from server.lifespan import lifespan


def test_api_router_loaded(app):
    paths = {route.path for route in app.routes}
    assert "/api/v1/member-groups/" in paths
    assert "/api/v1/member-groups/save" in paths
    assert "/health" in paths


def test_server_cors_configuration(app):
    middleware_classes = [m.cls.__name__ for m in app.user_middleware]
    assert "CORSMiddleware" in middleware_classes


def test_server_404_for_unmapped_routes(client):
    response = client.get("/some/unmapped/path")
    assert response.status_code == 404


def test_request_id_is_generated(client):
    response = client.get("/health")
    assert len(response.headers["x-request-id"]) == 32


def test_lifespan_builds_context():
    app = server.create_app()

    with TestClient(app) as client:
        assert client.get("/health").json() == {"status": "ok"}
        assert app.state.locale_resolver is not None
        assert client.get("/api/v1/member-groups/").json() == []


def test_lifespan_keeps_existing_context(context):
    app = server.create_app(context=context)

    with TestClient(app):
        assert app.state.member_groups is context


@patch("server.lifespan.build_context", side_effect=ValueError("bad seed"))
def test_lifespan_fails_fast(_mock_build_context):
    app = server.create_app()

    async def start():
        async with lifespan(app):
            pass

    with pytest.raises(ValueError, match="bad seed"):
        asyncio.run(start())
