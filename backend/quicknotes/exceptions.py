"""
QuickNotes — Custom Exception Hierarchy
========================================

What:  Application-specific exceptions for the failure kinds a request can hit.
How:   Each exception carries a message and optional context dict.
       Exception handlers registered in main.py translate them into rendered
       error pages (or JSON for clients that ask for it) with the right status.
Who:   Raised by the store, renderer, routes and server entrypoint.

Exception Hierarchy:
    QuickNotesError (base)
    ├── NotFoundError            → 404 Not Found
    ├── UnsupportedMethodError   → 405 Method Not Allowed
    ├── FormParseError           → 500 Internal Server Error
    ├── RenderError              → 500 Internal Server Error
    └── BindError                → fatal, process exits at startup
"""

from typing import Any, Dict, Iterable, Optional


class QuickNotesError(Exception):
    """
    Base exception for all QuickNotes errors.

    Attributes:
        message:  User-facing error description (rendered on the error page)
        context:  Additional debug info (logged, never rendered)
    """

    status_code = 500
    error_code = "server_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(QuickNotesError):
    """
    Raised when a requested note does not exist.

    An empty ID (request to /notes/ with no second segment) is also reported
    as not found rather than as a routing error.
    """

    status_code = 404
    error_code = "not_found"

    def __init__(
        self,
        resource: str = "Note",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"{resource} not found"
        ctx = dict(context or {})
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)
        self.resource_id = resource_id


class UnsupportedMethodError(QuickNotesError):
    """
    Raised when a route receives an HTTP method it does not handle.

    The Allow header of the 405 response is built from `allowed`.
    """

    status_code = 405
    error_code = "unsupported_method"

    def __init__(
        self,
        method: str,
        allowed: Iterable[str] = (),
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        ctx["method"] = method
        super().__init__(message=f"unsupported method: {method}", context=ctx)
        self.method = method
        self.allowed = sorted(set(allowed))


class FormParseError(QuickNotesError):
    """Raised when a submitted form body cannot be parsed."""

    error_code = "form_parse_error"

    def __init__(
        self,
        message: str = "Error parsing form",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class RenderError(QuickNotesError):
    """
    Raised when a template is missing or fails while executing.

    Typical causes: a template name with no file behind it, or a variable
    the template uses that the caller did not supply.
    """

    error_code = "render_error"

    def __init__(
        self,
        template: str,
        message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        ctx["template"] = template
        super().__init__(
            message=message or f"Could not render template '{template}'",
            context=ctx,
        )
        self.template = template


class BindError(QuickNotesError):
    """Raised when the HTTP listener cannot bind to its configured address."""

    def __init__(
        self,
        host: str,
        port: int,
        reason: str = "",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = dict(context or {})
        ctx.update({"host": host, "port": port})
        message = f"Cannot listen on {host}:{port}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message=message, context=ctx)
        self.host = host
        self.port = port
