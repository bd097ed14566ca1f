"""Shared fixtures: a working root with a base and a mapped directory."""

import pytest


@pytest.fixture
def site(tmp_path):
    """Create a working root laid out like a small served app."""
    base = tmp_path / "src"
    base.mkdir()
    (base / "index.html").write_text("<h1>Home</h1>")
    (base / "data.json").write_text('{"ok": true}')
    (base / "README").write_text("no extension")
    (base / "docs").mkdir()
    (base / "docs" / "page.html").write_text("<h1>Docs</h1>")

    assets = tmp_path / "assets"
    assets.mkdir()
    (assets / "logo.png").write_bytes(b"\x89PNG\r\n\x1a\n")
    (assets / "favicon.ico").write_bytes(b"\x00\x00\x01\x00")

    (tmp_path / "secret.html").write_text("<h1>Secret</h1>")

    return tmp_path
