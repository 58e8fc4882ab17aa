"""Template store: reads the page shell once at startup."""

from __future__ import annotations

from pathlib import Path
from typing import Union

from lib.config.server_loader import DEFAULT_MARKER
from lib.contracts.template import PageTemplate
from lib.telemetry.logger import get_logger
from lib.utils.validation import ensure


_logger = get_logger(__name__)


def load_template(
    path: Union[str, Path],
    marker: str = DEFAULT_MARKER,
    require_marker: bool = False,
) -> PageTemplate:
    """Read ``path`` as UTF-8 and wrap it in a :class:`PageTemplate`.

    ``OSError`` from the read is logged and re-raised; there is no fallback
    shell.  With ``require_marker`` a template that lacks ``marker`` is
    rejected with ``ValueError``, otherwise it is accepted and renders as-is.
    """

    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError:
        _logger.error("Could not read page template %s", path)
        raise

    template = PageTemplate(text=text, marker=marker)
    if require_marker:
        ensure(template.has_marker, f"template {path} does not contain marker {marker!r}")
    elif not template.has_marker:
        _logger.warning("Template %s has no %s marker; pages will render the bare shell", path, marker)
    _logger.debug("Loaded page template %s (%d chars)", path, len(text))
    return template


__all__ = ["load_template"]
