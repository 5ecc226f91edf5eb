"""
QuickNotes — Template Renderer
===============================

What:  Renders named Jinja2 templates into HTML responses.
How:   A Jinja2 Environment over the templates directory with HTML
       autoescaping and StrictUndefined, so a variable the template expects
       but the caller did not pass fails loudly instead of rendering blank.
Who:   Route handlers and the error fallback in main.py.

Commit semantics:
    The template is rendered to a string before any Response object exists.
    A failed render therefore never leaves a partially written body; the
    caller gets a RenderError and can still choose a different response.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from jinja2 import (
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateNotFound,
    select_autoescape,
)
from starlette.responses import HTMLResponse

from quicknotes.exceptions import RenderError

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".html"


def format_timestamp(value: datetime, fmt: str = "%Y-%m-%d %H:%M:%S %Z") -> str:
    return value.strftime(fmt).strip()


class TemplateRenderer:
    """
    Turns a template name plus data into an HTMLResponse.

    Template names are given bare ("list", "view") and resolve to files
    with the .html suffix inside `directory`.
    """

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)
        self.env = Environment(
            loader=FileSystemLoader(str(self.directory)),
            autoescape=select_autoescape(["html"]),
            undefined=StrictUndefined,
        )
        self.env.filters["timestamp"] = format_timestamp

    @staticmethod
    def template_file(name: str) -> str:
        return name if name.endswith(TEMPLATE_SUFFIX) else f"{name}{TEMPLATE_SUFFIX}"

    def has_template(self, name: str) -> bool:
        return (self.directory / self.template_file(name)).is_file()

    def render_text(self, name: str, context: Optional[Mapping[str, Any]] = None) -> str:
        """
        Execute a template and return the markup.

        Raises:
            RenderError: Template missing, or execution failed
        """
        filename = self.template_file(name)
        try:
            template = self.env.get_template(filename)
            return template.render(**dict(context or {}))
        except TemplateNotFound as exc:
            raise RenderError(
                template=filename,
                message=f"Template '{filename}' does not exist",
            ) from exc
        except Exception as exc:
            logger.error("Template %s failed: %s", filename, exc)
            raise RenderError(
                template=filename,
                message=f"Template '{filename}' failed: {exc}",
            ) from exc

    def render(
        self,
        name: str,
        context: Optional[Mapping[str, Any]] = None,
        status_code: int = 200,
        headers: Optional[Mapping[str, str]] = None,
    ) -> HTMLResponse:
        """
        Render `name` against `context` with the given status.

        The response carries Content-Type: text/html; charset=utf-8.
        """
        body = self.render_text(name, context)
        return HTMLResponse(
            content=body,
            status_code=status_code,
            headers=dict(headers) if headers else None,
        )
