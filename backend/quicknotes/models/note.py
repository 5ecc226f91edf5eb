"""
QuickNotes — Note Model
========================

What:  The Note record held by the NoteStore.
How:   Frozen pydantic model; updates produce a new instance through revise(),
       so a Note already handed to a template can never change underneath it.

Lifecycle:
    1. Created by NoteStore.create() with a generated ID and `created` stamp
    2. Replaced in place by NoteStore.update() (same id, same `created`)
    3. Removed by NoteStore.delete()
    4. Gone when the process exits (no persistence)
"""

from datetime import datetime, timezone

from pydantic import BaseModel, Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Note(BaseModel):
    """A short text note. `id` and `created` never change after creation."""

    id: str = Field(description="Opaque identifier, unique within the store")
    title: str = Field(default="", description="Note title as submitted")
    content: str = Field(default="", description="Note body as submitted")
    created: datetime = Field(
        default_factory=utc_now,
        description="When the note was created (UTC)",
    )

    model_config = {"frozen": True}

    def revise(self, title: str, content: str) -> "Note":
        """Return a copy with new title/content, keeping id and created."""
        return self.model_copy(update={"title": title, "content": content})
