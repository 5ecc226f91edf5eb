"""
QuickNotes — Notes Route Tests
===============================

What:  End-to-end HTTP tests for the /, /notes and /notes/{id} routes.
How:   HTTPX AsyncClient over ASGITransport against an app wired to a fresh
       store; redirects are not followed so their targets can be checked.
"""

from datetime import datetime, timedelta, timezone

import pytest

from quicknotes.models.note import Note


async def create_note(client, title="Hi", content="World") -> str:
    response = await client.post("/notes", data={"title": title, "content": content})
    assert response.status_code == 302
    return response.headers["x-note-id"]


class TestCreateAndView:
    """POST /notes and GET /notes/{id}."""

    @pytest.mark.asyncio
    async def test_create_redirects_to_index(self, test_client, store):
        response = await test_client.post("/notes", data={"title": "Hi", "content": "World"})

        assert response.status_code == 302
        assert response.headers["location"] == "/"
        note_id = response.headers["x-note-id"]
        assert store.get(note_id).title == "Hi"

    @pytest.mark.asyncio
    async def test_create_then_view_round_trip(self, test_client):
        note_id = await create_note(test_client, "Hi", "World")

        response = await test_client.get(f"/notes/{note_id}")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "Hi" in response.text
        assert "World" in response.text

    @pytest.mark.asyncio
    async def test_create_with_missing_fields_uses_empty_strings(self, test_client, store):
        response = await test_client.post("/notes", data={})
        note = store.get(response.headers["x-note-id"])
        assert note.title == ""
        assert note.content == ""

    @pytest.mark.asyncio
    async def test_create_accepts_multipart_form(self, test_client, store):
        response = await test_client.post(
            "/notes",
            data={"title": "multi", "content": "part"},
            files={"attachment": ("a.txt", b"ignored", "text/plain")},
        )
        assert response.status_code == 302
        assert store.get(response.headers["x-note-id"]).content == "part"

    @pytest.mark.asyncio
    async def test_created_ids_are_unique(self, test_client):
        ids = [await create_note(test_client, f"t{i}") for i in range(20)]
        assert len(set(ids)) == 20

    @pytest.mark.asyncio
    async def test_view_missing_note_is_404(self, test_client):
        response = await test_client.get("/notes/doesnotexist")
        assert response.status_code == 404
        assert "Note not found" in response.text

    @pytest.mark.asyncio
    async def test_empty_id_is_404(self, test_client):
        await create_note(test_client)
        response = await test_client.get("/notes/")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_extra_segments_after_id_are_ignored(self, test_client):
        note_id = await create_note(test_client, "Deep", "path")
        response = await test_client.get(f"/notes/{note_id}/extra/bits")
        assert response.status_code == 200
        assert "Deep" in response.text


class TestListAndIndex:
    """GET /notes and GET /."""

    @pytest.mark.asyncio
    async def test_list_empty(self, test_client):
        response = await test_client.get("/notes")
        assert response.status_code == 200
        assert "No notes yet" in response.text

    @pytest.mark.asyncio
    async def test_list_shows_all_notes(self, test_client):
        for i in range(3):
            await create_note(test_client, f"title-{i}", f"content-{i}")

        response = await test_client.get("/notes")

        assert response.status_code == 200
        for i in range(3):
            assert f"title-{i}" in response.text

    @pytest.mark.asyncio
    async def test_index_page(self, test_client):
        note_id = await create_note(test_client, "Indexed")
        response = await test_client.get("/")
        assert response.status_code == 200
        assert 'action="/notes"' in response.text
        assert f"/notes/{note_id}" in response.text


class TestEditAndUpdate:
    """GET /notes/{id}/edit and PUT/POST /notes/{id}."""

    @pytest.mark.asyncio
    async def test_edit_form_prefilled(self, test_client):
        note_id = await create_note(test_client, "Draft", "text")
        response = await test_client.get(f"/notes/{note_id}/edit")
        assert response.status_code == 200
        assert 'value="Draft"' in response.text
        assert f'action="/notes/{note_id}"' in response.text

    @pytest.mark.asyncio
    async def test_edit_missing_note_is_404(self, test_client):
        response = await test_client.get("/notes/ghost/edit")
        assert response.status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["PUT", "POST"])
    async def test_update_redirects_to_note(self, test_client, store, method):
        note_id = await create_note(test_client, "old", "old")

        response = await test_client.request(
            method, f"/notes/{note_id}", data={"title": "new", "content": "body"}
        )

        assert response.status_code == 302
        assert response.headers["location"] == f"/notes/{note_id}"
        note = store.get(note_id)
        assert (note.title, note.content) == ("new", "body")

    @pytest.mark.asyncio
    async def test_update_preserves_created(self, test_client, store):
        created = datetime.now(timezone.utc) - timedelta(hours=5)
        store.put(Note(id="n1", title="t", content="c", created=created))

        await test_client.put("/notes/n1", data={"title": "t2", "content": "c2"})

        assert store.get("n1").created == created
        assert store.get("n1").title == "t2"

    @pytest.mark.asyncio
    async def test_update_missing_note_is_404(self, test_client, store):
        response = await test_client.put("/notes/ghost", data={"title": "x", "content": "y"})
        assert response.status_code == 404
        assert len(store) == 0

    @pytest.mark.asyncio
    async def test_update_missing_with_unsupported_body_is_404(self, test_client, store):
        """The existence check runs before the body is parsed."""
        await create_note(test_client, "keep", "me")
        before = store.list()

        response = await test_client.put(
            "/notes/ghost",
            content=b"\x00\x01 not a form",
            headers={"Content-Type": "multipart/form-data"},
        )

        assert response.status_code == 404
        assert store.list() == before

    @pytest.mark.asyncio
    async def test_update_with_unparseable_form_is_500(self, test_client, store):
        note_id = await create_note(test_client, "keep", "me")

        response = await test_client.put(
            f"/notes/{note_id}",
            content=b"garbage",
            # multipart without a boundary cannot be parsed
            headers={"Content-Type": "multipart/form-data"},
        )

        assert response.status_code == 500
        assert "Error parsing form" in response.text
        assert store.get(note_id).title == "keep"


class TestDelete:
    """DELETE /notes/{id}."""

    @pytest.mark.asyncio
    async def test_delete_redirects_to_list_then_404(self, test_client):
        note_id = await create_note(test_client)

        response = await test_client.delete(f"/notes/{note_id}")
        assert response.status_code == 302
        assert response.headers["location"] == "/notes"

        response = await test_client.get(f"/notes/{note_id}")
        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_missing_is_404_every_time(self, test_client):
        for _ in range(2):
            response = await test_client.delete("/notes/ghost")
            assert response.status_code == 404


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_reports_note_count(self, test_client):
        await create_note(test_client)
        response = await test_client.get("/health")
        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["notes"] == 1

    @pytest.mark.asyncio
    async def test_request_id_header(self, test_client):
        response = await test_client.get("/notes", headers={"X-Request-ID": "abc123"})
        assert response.headers["x-request-id"] == "abc123"

        response = await test_client.get("/notes")
        assert len(response.headers["x-request-id"]) == 8
