"""Site service.

:class:`Site` is the render helper of the application: it owns the page
template loaded at startup and turns per-route body fragments into complete
HTML responses.  The template is injected at construction so handlers never
reach for module-level state.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from fastapi.responses import HTMLResponse

from lib.contracts.template import PageTemplate

from .pages import PAGES


@dataclass(frozen=True)
class Site:
    """Bind a :class:`PageTemplate` to the page builders in :mod:`.pages`."""

    template: PageTemplate
    escape_echo: bool = True

    def render(self, body: str) -> str:
        return self.template.render(body)

    def respond(self, body: str) -> HTMLResponse:
        """Render ``body`` into the template and wrap it in a 200 response."""

        return HTMLResponse(content=self.render(body), status_code=200)

    def page(self, path: str, query: Mapping[str, str]) -> HTMLResponse:
        """Build the fragment for ``path`` and respond with the full page."""

        return self.respond(PAGES[path](query, self.escape_echo))


__all__ = ["Site"]
