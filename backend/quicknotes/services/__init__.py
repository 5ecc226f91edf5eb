# Services package init
"""
QuickNotes — Services Layer
============================

What:  State and rendering used by the routes, free of HTTP routing concerns.

Service Inventory:
    - NoteIdGenerator:  Unique, timestamp-derived note IDs
    - NoteStore:        In-memory notes guarded by a single lock
    - TemplateRenderer: Named Jinja2 templates → HTMLResponse
"""

from quicknotes.services.id_generator import NoteIdGenerator
from quicknotes.services.note_store import NoteStore
from quicknotes.services.templating import TemplateRenderer

__all__ = ["NoteIdGenerator", "NoteStore", "TemplateRenderer"]
