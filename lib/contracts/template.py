"""PageTemplate model shared by the template store and the site service."""
from pydantic import BaseModel, ConfigDict


class PageTemplate(BaseModel):
    """HTML page shell with a single substitution marker.

    The model is frozen: once loaded at startup it is shared read-only by every
    request handler.
    """

    model_config = ConfigDict(frozen=True)

    text: str
    marker: str = "{{{cuerpo}}}"

    @property
    def has_marker(self) -> bool:
        return self.marker in self.text

    def render(self, body: str) -> str:
        """Return the shell with every marker occurrence replaced by ``body``.

        ``body`` is inserted verbatim, without HTML escaping.  A shell without
        the marker is returned unchanged.
        """

        return self.text.replace(self.marker, body)
