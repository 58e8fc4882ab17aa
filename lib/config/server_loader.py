from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from lib.utils.validation import ensure, ensure_int_in_range

from .yaml_loader import load_yaml


PROJECT_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "server.yaml"
DEFAULT_TEMPLATE_PATH = PROJECT_ROOT / "public" / "plantilla.html"
DEFAULT_MARKER = "{{{cuerpo}}}"


@dataclass(frozen=True)
class ServerConfig:
    """Typed view over ``server.yaml``.

    Every field has a default so the site starts without any configuration
    file at all.  Relative template paths are resolved against the project
    root rather than the working directory, which keeps ``python -m`` and the
    test-suite pointing at the same asset.
    """

    host: str = "127.0.0.1"
    port: int = 3000
    template_path: Path = DEFAULT_TEMPLATE_PATH
    marker: str = DEFAULT_MARKER
    require_marker: bool = False
    escape_echo: bool = True
    log_level: str = "INFO"
    raw: Dict[str, Any] = field(default_factory=dict)


def _resolve(path: str) -> Path:
    candidate = Path(path)
    if not candidate.is_absolute():
        candidate = PROJECT_ROOT / candidate
    return candidate


def load_server_config(path: Optional[str] = None) -> ServerConfig:
    """Load ``server.yaml`` and return a :class:`ServerConfig`.

    Parameters
    ----------
    path:
        File system path to the YAML configuration file.  When omitted the
        bundled ``config/server.yaml`` is used if it exists; a missing default
        file simply yields the built-in defaults.
    """

    if path is None:
        raw = load_yaml(str(DEFAULT_CONFIG_PATH)) if DEFAULT_CONFIG_PATH.exists() else {}
    else:
        raw = load_yaml(path)

    server = raw.get("server", {}) or {}
    template = raw.get("template", {}) or {}
    logging_cfg = raw.get("logging", {}) or {}
    defaults = ServerConfig()

    port = ensure_int_in_range(server.get("port", defaults.port), "server.port", 1, 65535)
    marker = template.get("marker", defaults.marker)
    ensure(isinstance(marker, str) and marker != "", "template.marker must be a non-empty string")

    template_path = template.get("path")
    return ServerConfig(
        host=str(server.get("host", defaults.host)),
        port=port,
        template_path=_resolve(template_path) if template_path else defaults.template_path,
        marker=marker,
        require_marker=bool(template.get("require_marker", defaults.require_marker)),
        escape_echo=bool(template.get("escape_echo", defaults.escape_echo)),
        log_level=str(logging_cfg.get("level", defaults.log_level)),
        raw=raw,
    )
