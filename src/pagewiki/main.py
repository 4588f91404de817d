"""PageWiki FastAPI application."""

import logging

import uvicorn
from fastapi import FastAPI

from pagewiki.config import Settings
from pagewiki.core.handlers import WikiHandlers
from pagewiki.core.routes import build_route_table, build_router
from pagewiki.core.storage import FileStorage
from pagewiki.core.templates import TemplateRegistry

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application and everything it depends on."""
    settings = settings or Settings()

    storage = FileStorage(settings.data_dir, placeholder=settings.placeholder)
    templates = TemplateRegistry(settings.templates_dir)
    handlers = WikiHandlers(storage, templates, default_title=settings.default_title)
    table = build_route_table(handlers)

    app = FastAPI(
        title=settings.app_title,
        debug=settings.debug,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.include_router(build_router(table, handlers))
    app.state.settings = settings
    logger.info("Serving pages from %s", settings.data_dir)
    return app


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    settings = Settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "pagewiki.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
    )


if __name__ == "__main__":
    run()
