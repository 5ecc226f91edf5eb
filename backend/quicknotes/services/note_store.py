"""
QuickNotes — In-Memory Note Store
==================================

What:  Process-local mapping of note ID → Note guarded by one mutex.
How:   Every operation takes the lock for the whole map access, including
       the read-then-write sequences of update and delete, so no caller ever
       observes a half-applied change. The lock is never held while a
       template renders: list() hands back a snapshot instead.
Who:   Built once by create_app() and injected into route handlers.

Concurrency model:
    uvicorn runs each request as its own task, and the store is also safe
    to call from worker threads. The lock is a threading.Lock and the
    critical sections contain no awaits.
"""

import logging
import threading
from typing import Callable, Dict, List, Optional

from quicknotes.exceptions import NotFoundError
from quicknotes.models.note import Note, utc_now
from quicknotes.services.id_generator import NoteIdGenerator

logger = logging.getLogger(__name__)


class NoteStore:
    """
    In-memory note repository.

    Responsibilities:
        - get() / contains(): lookups
        - list(): snapshot of all notes (no ordering guarantee)
        - put(): insert or overwrite
        - create(): new note with generated ID and creation timestamp
        - update(): lookup-and-replace that keeps `created`
        - delete(): lookup-and-remove
    """

    def __init__(self, id_generator: Optional[Callable[[], str]] = None):
        self._notes: Dict[str, Note] = {}
        self._lock = threading.Lock()
        self._next_id = id_generator or NoteIdGenerator()

    def __len__(self) -> int:
        with self._lock:
            return len(self._notes)

    def contains(self, note_id: str) -> bool:
        with self._lock:
            return note_id in self._notes

    def get(self, note_id: str) -> Note:
        """
        Fetch a single note.

        Raises:
            NotFoundError: No note with this ID (an empty ID never matches)
        """
        with self._lock:
            note = self._notes.get(note_id)
        if note is None:
            raise NotFoundError(resource="Note", resource_id=note_id)
        return note

    def list(self) -> List[Note]:
        """Copy of every stored note, taken under the lock."""
        with self._lock:
            return list(self._notes.values())

    def put(self, note: Note) -> None:
        with self._lock:
            self._notes[note.id] = note

    def create(self, title: str, content: str) -> Note:
        note = Note(
            id=self._next_id(),
            title=title,
            content=content,
            created=utc_now(),
        )
        with self._lock:
            self._notes[note.id] = note
        logger.info("Note %s created", note.id)
        return note

    def update(self, note_id: str, title: str, content: str) -> Note:
        """
        Replace title and content of an existing note.

        Lookup and replacement happen under one continuous hold of the lock;
        the stored `created` timestamp is carried over unchanged.

        Raises:
            NotFoundError: The note does not exist (or was deleted meanwhile)
        """
        with self._lock:
            current = self._notes.get(note_id)
            if current is None:
                raise NotFoundError(resource="Note", resource_id=note_id)
            updated = current.revise(title=title, content=content)
            self._notes[note_id] = updated
        logger.info("Note %s updated", note_id)
        return updated

    def delete(self, note_id: str) -> Note:
        """
        Remove a note and return it.

        Raises:
            NotFoundError: The note does not exist
        """
        with self._lock:
            removed = self._notes.pop(note_id, None)
        if removed is None:
            raise NotFoundError(resource="Note", resource_id=note_id)
        logger.info("Note %s deleted", note_id)
        return removed
