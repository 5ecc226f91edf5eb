# Middleware package init
"""
QuickNotes — Middleware Package
================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain:
    Request → [Request ID] → [Logging] → Route Handler

    Request ID runs first so the access log line of the same request can
    carry the ID. The response passes back through in reverse order.
"""
