"""
QuickNotes — Note Store Unit Tests
===================================

What:  Tests for NoteStore lookups, writes and their error paths.
How:   Plain synchronous tests against a fresh store; no HTTP involved.
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from quicknotes.exceptions import NotFoundError
from quicknotes.models.note import Note
from quicknotes.services.note_store import NoteStore


class TestNoteStoreReads:
    """Tests for get(), list(), contains() and len()."""

    def setup_method(self):
        self.store = NoteStore()

    def test_new_store_is_empty(self):
        assert len(self.store) == 0
        assert self.store.list() == []

    def test_get_missing_raises_not_found(self):
        with pytest.raises(NotFoundError) as exc_info:
            self.store.get("does-not-exist")
        assert exc_info.value.resource_id == "does-not-exist"
        assert exc_info.value.message == "Note not found"

    def test_empty_id_is_not_found(self):
        self.store.create("Hi", "World")
        with pytest.raises(NotFoundError):
            self.store.get("")

    def test_get_returns_created_note(self):
        note = self.store.create("Hi", "World")
        fetched = self.store.get(note.id)
        assert fetched.title == "Hi"
        assert fetched.content == "World"
        assert fetched.id == note.id

    def test_list_is_a_snapshot(self):
        self.store.create("one", "1")
        snapshot = self.store.list()
        self.store.create("two", "2")
        assert len(snapshot) == 1
        assert len(self.store.list()) == 2

    def test_contains(self):
        note = self.store.create("a", "b")
        assert self.store.contains(note.id)
        assert not self.store.contains("nope")


class TestNoteStoreWrites:
    """Tests for put(), create(), update() and delete()."""

    def setup_method(self):
        self.store = NoteStore()

    def test_put_inserts_and_overwrites(self):
        created = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
        self.store.put(Note(id="n1", title="first", content="x", created=created))
        self.store.put(Note(id="n1", title="second", content="y", created=created))

        assert len(self.store) == 1
        assert self.store.get("n1").title == "second"

    def test_create_assigns_distinct_ids(self):
        ids = {self.store.create(f"t{i}", "c").id for i in range(200)}
        assert len(ids) == 200

    def test_create_stamps_created_now(self):
        before = datetime.now(timezone.utc)
        note = self.store.create("t", "c")
        after = datetime.now(timezone.utc)
        assert before <= note.created <= after

    def test_create_uses_injected_id_generator(self):
        store = NoteStore(id_generator=iter(["a", "b"]).__next__)
        assert store.create("t", "c").id == "a"
        assert store.create("t", "c").id == "b"

    def test_update_preserves_created_and_id(self):
        created = datetime.now(timezone.utc) - timedelta(days=3)
        self.store.put(Note(id="n1", title="old", content="old", created=created))

        updated = self.store.update("n1", title="new", content="body")

        assert updated.id == "n1"
        assert updated.title == "new"
        assert updated.content == "body"
        assert updated.created == created
        assert self.store.get("n1").created == created

    def test_update_missing_raises_and_leaves_store_unchanged(self):
        self.store.create("keep", "me")
        before = self.store.list()

        with pytest.raises(NotFoundError):
            self.store.update("ghost", title="x", content="y")

        assert self.store.list() == before

    def test_delete_returns_removed_note(self):
        note = self.store.create("bye", "now")
        removed = self.store.delete(note.id)
        assert removed == note
        assert not self.store.contains(note.id)

    def test_delete_missing_raises_every_time(self):
        for _ in range(2):
            with pytest.raises(NotFoundError):
                self.store.delete("ghost")

    def test_notes_are_immutable(self):
        note = self.store.create("t", "c")
        with pytest.raises(ValidationError):
            note.title = "changed"
        assert self.store.get(note.id).title == "t"
