"""FastAPI application factory and server entry point."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from admin.views import router as admin_router

from .config import APIConfig, load_config
from .routes import router

logger = logging.getLogger(__name__)


def configure_logging(debug: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app(config: APIConfig | None = None) -> FastAPI:
    """Create the storefront application.

    Serves the JSON API under /api and the admin pages under /admin.

    Args:
        config: API configuration (default: load_config()).

    Returns:
        Configured FastAPI instance.
    """
    config = config or load_config()
    configure_logging(config.debug)

    app = FastAPI(title="Brantech Storefront", debug=config.debug)
    app.state.config = config

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router)
    app.include_router(admin_router)

    logger.debug("Storefront app created (debug=%s)", config.debug)
    return app


app = create_app()


def main() -> None:
    """Run the server with uvicorn (console script: storefront-api)."""
    config = load_config()
    logger.info("Starting storefront on %s:%d", config.host, config.port)
    uvicorn.run(create_app(config), host=config.host, port=config.port)
