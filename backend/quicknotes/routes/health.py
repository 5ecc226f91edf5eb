"""
QuickNotes — Health Check Route
================================

What:  Health check endpoint for monitoring and container probes.
How:   Reports version, uptime and how many notes are in memory. There are
       no external dependencies to probe, so the service is healthy whenever
       it can answer.
"""

import time

from fastapi import APIRouter, Depends

from quicknotes import __version__
from quicknotes.deps import get_store
from quicknotes.schemas.note import HealthResponse
from quicknotes.services.note_store import NoteStore

router = APIRouter(tags=["Health"])

_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(store: NoteStore = Depends(get_store)) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        notes=len(store),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
