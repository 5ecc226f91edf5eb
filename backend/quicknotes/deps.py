"""
QuickNotes — Route Dependencies
================================

What:  FastAPI dependencies that hand the app-wide NoteStore and
       TemplateRenderer to route handlers.
How:   Both objects are built once in create_app() and attached to
       app.state; these getters read them back per request. Tests that need
       a different store use app.dependency_overrides or build a fresh app.
"""

from fastapi import Request

from quicknotes.services.note_store import NoteStore
from quicknotes.services.templating import TemplateRenderer


def get_store(request: Request) -> NoteStore:
    return request.app.state.store


def get_renderer(request: Request) -> TemplateRenderer:
    return request.app.state.renderer


__all__ = ["get_store", "get_renderer"]
