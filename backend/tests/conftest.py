"""
QuickNotes — Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, fresh per test):
    ├── store:          Empty NoteStore
    ├── renderer:       TemplateRenderer over the packaged templates
    ├── app:            FastAPI app serving `store`
    ├── test_client:    HTTPX AsyncClient bound to `app` (redirects not followed)
    └── make_templates: Builds a throwaway templates directory from strings
"""

import os
from pathlib import Path
from typing import Callable, Dict

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

# Keep test output quiet; must happen before quicknotes.config is imported
os.environ["LOG_LEVEL"] = "WARNING"

from quicknotes.config import DEFAULT_TEMPLATES_DIR, Settings  # noqa: E402
from quicknotes.main import create_app  # noqa: E402
from quicknotes.services.note_store import NoteStore  # noqa: E402
from quicknotes.services.templating import TemplateRenderer  # noqa: E402


@pytest.fixture
def store():
    """A fresh, empty NoteStore."""
    return NoteStore()


@pytest.fixture
def renderer():
    return TemplateRenderer(DEFAULT_TEMPLATES_DIR)


@pytest.fixture
def app(store):
    """Application wired to the `store` fixture, so tests can inspect state."""
    return create_app(Settings(log_level="WARNING"), store=store)


@pytest_asyncio.fixture
async def test_client(app):
    """
    Async HTTP test client for endpoint testing.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/notes")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def make_templates(tmp_path) -> Callable[[Dict[str, str]], Path]:
    """
    Factory for a templates directory holding exactly the given files.

    Usage:
        directory = make_templates({"error.html": "<p>{{ error }}</p>"})
    """

    def _make(files: Dict[str, str]) -> Path:
        directory = tmp_path / "templates"
        directory.mkdir(exist_ok=True)
        for name, body in files.items():
            (directory / name).write_text(body, encoding="utf-8")
        return directory

    return _make
