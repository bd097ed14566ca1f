"""Tests for servnt.router — the aiohttp adapter."""

import logging

import pytest

from servnt.dispatch import Dispatcher
from servnt.libs.content_types import ContentTypeTable
from servnt.libs.resolver import PathResolver
from servnt.router import create_app


@pytest.fixture
def make_client(site, aiohttp_client):
    async def make(overrides=None):
        dispatcher = Dispatcher(
            PathResolver(site, "src", {"/static": "assets"}),
            ContentTypeTable(overrides),
        )
        return await aiohttp_client(create_app(dispatcher))

    return make


class TestRoutes:
    async def test_root_serves_index(self, make_client) -> None:
        client = await make_client()

        response = await client.get("/")
        assert response.status == 200
        assert response.headers["Content-Type"] == "text/html"
        assert await response.read() == b"<h1>Home</h1>"

    async def test_base_file(self, make_client) -> None:
        client = await make_client()

        response = await client.get("/docs/page.html")
        assert response.status == 200
        assert await response.text() == "<h1>Docs</h1>"

    async def test_mapped_file(self, make_client) -> None:
        client = await make_client()

        response = await client.get("/static/logo.png")
        assert response.status == 200
        assert response.headers["Content-Type"] == "image/png"
        assert await response.read() == b"\x89PNG\r\n\x1a\n"


class TestFailures:
    """Every failure is a bare 500, details only go to the log."""

    async def test_missing_file(self, make_client, caplog) -> None:
        client = await make_client()

        with caplog.at_level(logging.WARNING, logger="servnt.router"):
            response = await client.get("/missing.html")

        assert response.status == 500
        assert await response.read() == b""
        assert "NotFoundException" in caplog.text
        assert "missing.html" in caplog.text

    async def test_null_byte(self, make_client, caplog) -> None:
        client = await make_client()

        with caplog.at_level(logging.WARNING, logger="servnt.router"):
            response = await client.get("/index%00.html")

        assert response.status == 500
        assert await response.read() == b""
        assert "NotFoundException" in caplog.text

    async def test_unknown_extension(self, make_client, caplog) -> None:
        client = await make_client()

        with caplog.at_level(logging.WARNING, logger="servnt.router"):
            response = await client.get("/data.json")

        assert response.status == 500
        assert await response.read() == b""
        assert "UnknownExtensionException" in caplog.text

    async def test_extension_override(self, make_client) -> None:
        client = await make_client({"json": "application/json"})

        response = await client.get("/data.json")
        assert response.status == 200
        assert response.headers["Content-Type"] == "application/json"
        assert await response.read() == b'{"ok": true}'

    async def test_mapped_directory(self, make_client) -> None:
        client = await make_client()

        response = await client.get("/static")
        assert response.status == 500
        assert await response.read() == b""

    async def test_symlink_escape(self, make_client, site, caplog) -> None:
        (site / "src" / "link.html").symlink_to(site / "secret.html")
        client = await make_client()

        with caplog.at_level(logging.WARNING, logger="servnt.router"):
            response = await client.get("/link.html")

        assert response.status == 500
        assert await response.read() == b""
        assert "ForbiddenException" in caplog.text
