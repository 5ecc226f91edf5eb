"""
QuickNotes — Application Package Initializer
=============================================

What: Marks the `quicknotes` directory as a Python package.
Who:  Imported by uvicorn (quicknotes.main:app), the server entrypoint and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │      Routes (HTTP + templates)      │  ← method dispatch, redirects
    ├─────────────────────────────────────┤
    │   Services (store, ids, renderer)   │  ← locking, rendering
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← pydantic records and forms
    └─────────────────────────────────────┘

    There is no persistence layer: the NoteStore lives in process memory
    and is discarded when the process exits.
"""

__version__ = "1.0.0"
