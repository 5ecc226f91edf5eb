"""
QuickNotes — Pydantic Request/Response Schemas
===============================================

What:  Pydantic models for what the browser submits (NoteForm) and for the
       JSON bodies the service returns (errors, health).
How:   NoteForm is built from Starlette's FormData; the JSON schemas back the
       JSON error fallback and the /health endpoint.
"""

from typing import Optional

from pydantic import BaseModel, Field
from starlette.datastructures import FormData


# ══════════════════════════════════════════════════════════════════════════
# Request Models — What the browser submits
# ══════════════════════════════════════════════════════════════════════════


class NoteForm(BaseModel):
    """
    Form fields accepted by create and update.

    Missing fields become empty strings; no other validation is applied.
    """

    title: str = Field(default="", description="Note title")
    content: str = Field(default="", description="Note body")

    @classmethod
    def from_form(cls, form: FormData) -> "NoteForm":
        # Uploaded files are not note fields; only plain strings are taken
        values = {}
        for name in ("title", "content"):
            value = form.get(name, "")
            if isinstance(value, str):
                values[name] = value
        return cls(**values)


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    Error body returned to clients that prefer JSON over HTML.

    Example:
        {
            "error": "not_found",
            "message": "Note not found",
            "request_id": "a1b2c3d4"
        }
    """

    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Health check response for monitoring probes."""

    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    notes: int = Field(description="Number of notes currently held in memory")
    uptime_seconds: float = Field(description="Seconds since service started")
