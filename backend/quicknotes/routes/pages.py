"""
QuickNotes — Index Page
========================

What:  GET / — the landing page: a create form plus every note.
Who:   Where POST /notes redirects after creating a note.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from quicknotes.deps import get_renderer, get_store
from quicknotes.routes.notes import newest_first
from quicknotes.services.note_store import NoteStore
from quicknotes.services.templating import TemplateRenderer

router = APIRouter(tags=["Pages"])


@router.get("/", response_class=HTMLResponse, summary="Index page")
async def index(
    store: NoteStore = Depends(get_store),
    renderer: TemplateRenderer = Depends(get_renderer),
) -> HTMLResponse:
    return renderer.render("index", {"notes": newest_first(store.list())})
