"""
QuickNotes — Notes Route Handlers
==================================

What:  The /notes and /notes/{id} route families.
How:   One handler per (path, method). Each family also registers a catch-all
       for every other method that raises UnsupportedMethodError, which the
       exception handlers in main.py turn into a 405 page.

Route Inventory:
    GET    /notes              list all notes
    POST   /notes              create a note, 302 → /
    GET    /notes/{id}         view a note (404 when missing)
    PUT    /notes/{id}         update a note, 302 → /notes/{id}
    POST   /notes/{id}         same as PUT (HTML forms can only POST)
    DELETE /notes/{id}         delete a note, 302 → /notes
    GET    /notes/{id}/edit    edit form

ID extraction:
    The note ID is the second path segment. /notes/ with nothing after it
    yields the empty ID, which is simply not found (404). Anything after a
    further slash is ignored.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.formparsers import MultiPartException

from quicknotes.deps import get_renderer, get_store
from quicknotes.exceptions import FormParseError, NotFoundError, UnsupportedMethodError
from quicknotes.models.note import Note
from quicknotes.schemas.note import NoteForm
from quicknotes.services.note_store import NoteStore
from quicknotes.services.templating import TemplateRenderer

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Notes"])

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]
NOTES_METHODS = ["GET", "POST"]
NOTE_METHODS = ["GET", "PUT", "POST", "DELETE"]


def extract_id(note_path: str) -> str:
    """Return the first segment of the path remainder after /notes/."""
    return note_path.split("/", 1)[0]


def newest_first(notes: List[Note]) -> List[Note]:
    return sorted(notes, key=lambda n: (n.created, n.id), reverse=True)


async def read_note_form(request: Request) -> NoteForm:
    """
    Parse the submitted title/content fields.

    Raises:
        FormParseError: The body could not be parsed as a form
    """
    try:
        form = await request.form()
    except (MultiPartException, StarletteHTTPException) as exc:
        detail = getattr(exc, "message", None) or getattr(exc, "detail", "")
        logger.warning("Form parse failed on %s: %s", request.url.path, detail)
        raise FormParseError(context={"reason": str(detail)}) from exc
    return NoteForm.from_form(form)


# ══════════════════════════════════════════════════════════════════════════
# /notes
# ══════════════════════════════════════════════════════════════════════════


@router.get("/notes", response_class=HTMLResponse, summary="List notes")
async def list_notes(
    store: NoteStore = Depends(get_store),
    renderer: TemplateRenderer = Depends(get_renderer),
) -> HTMLResponse:
    # Snapshot first; the store lock is released before rendering
    notes = newest_first(store.list())
    return renderer.render("list", {"notes": notes})


@router.post("/notes", summary="Create a note")
async def create_note(
    request: Request,
    store: NoteStore = Depends(get_store),
) -> RedirectResponse:
    """
    Create a note from form fields `title` and `content`.

    Responds 302 → / with the new ID in the X-Note-ID header.
    """
    form = await read_note_form(request)
    note = store.create(title=form.title, content=form.content)
    return RedirectResponse(
        url="/",
        status_code=status.HTTP_302_FOUND,
        headers={"X-Note-ID": note.id},
    )


@router.api_route(
    "/notes",
    methods=[m for m in ALL_METHODS if m not in NOTES_METHODS],
    include_in_schema=False,
)
async def notes_unsupported(request: Request) -> None:
    raise UnsupportedMethodError(request.method, allowed=NOTES_METHODS)


# ══════════════════════════════════════════════════════════════════════════
# /notes/{id}
# ══════════════════════════════════════════════════════════════════════════


@router.get("/notes/{note_id}/edit", response_class=HTMLResponse, summary="Edit form")
async def edit_note(
    note_id: str,
    store: NoteStore = Depends(get_store),
    renderer: TemplateRenderer = Depends(get_renderer),
) -> HTMLResponse:
    note = store.get(note_id)
    return renderer.render("edit", {"note": note})


@router.get("/notes/{note_path:path}", response_class=HTMLResponse, summary="View a note")
async def view_note(
    note_path: str,
    store: NoteStore = Depends(get_store),
    renderer: TemplateRenderer = Depends(get_renderer),
) -> HTMLResponse:
    note = store.get(extract_id(note_path))
    return renderer.render("view", {"note": note})


@router.api_route("/notes/{note_path:path}", methods=["PUT", "POST"], summary="Update a note")
async def update_note(
    note_path: str,
    request: Request,
    store: NoteStore = Depends(get_store),
) -> RedirectResponse:
    """
    Replace title and content of an existing note.

    Order of checks:
        1. Unknown ID → 404, before the body is read
        2. Unparseable body → FormParseError (500)
        3. store.update() does lookup and replace under one lock hold,
           so a delete that lands between 1 and 3 still yields 404
    """
    note_id = extract_id(note_path)
    if not store.contains(note_id):
        raise NotFoundError(resource="Note", resource_id=note_id)

    form = await read_note_form(request)
    store.update(note_id, title=form.title, content=form.content)
    return RedirectResponse(url=f"/notes/{note_id}", status_code=status.HTTP_302_FOUND)


@router.delete("/notes/{note_path:path}", summary="Delete a note")
async def delete_note(
    note_path: str,
    store: NoteStore = Depends(get_store),
) -> RedirectResponse:
    store.delete(extract_id(note_path))
    return RedirectResponse(url="/notes", status_code=status.HTTP_302_FOUND)


@router.api_route(
    "/notes/{note_path:path}",
    methods=[m for m in ALL_METHODS if m not in NOTE_METHODS],
    include_in_schema=False,
)
async def note_unsupported(note_path: str, request: Request) -> None:
    raise UnsupportedMethodError(request.method, allowed=NOTE_METHODS)
