"""HTTP entry point for the site.

:func:`create_app` loads the configuration and the page template, then
registers one GET route per entry of :data:`apps.site.pages.PAGES`.  A
template that cannot be read aborts application creation.
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse

from apps.site import Site
from apps.site.pages import PAGES
from lib.config.server_loader import ServerConfig, load_server_config
from lib.telemetry.logger import configure_logging, get_logger
from lib.templating.store import load_template


_logger = get_logger(__name__)


def _endpoint(site: Site, path: str):
    def endpoint(request: Request) -> HTMLResponse:
        return site.page(path, request.query_params)

    endpoint.__name__ = PAGES[path].__name__
    return endpoint


def create_app(config: Optional[ServerConfig] = None) -> FastAPI:
    """Return a FastAPI application serving the site pages."""

    config = config or load_server_config()
    configure_logging(config.log_level)
    template = load_template(
        config.template_path,
        marker=config.marker,
        require_marker=config.require_marker,
    )
    site = Site(template, escape_echo=config.escape_echo)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _logger.info("Example app listening on port %s!", config.port)
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.site = site
    app.state.config = config
    for path in PAGES:
        app.add_api_route(
            path,
            _endpoint(site, path),
            methods=["GET"],
            response_class=HTMLResponse,
        )
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=app.state.config.host, port=app.state.config.port)
