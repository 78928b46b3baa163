"""Quart app factory for the health-check backend."""

import asyncio

import structlog
from quart import Quart
from quart_cors import cors
from config.logging_config import setup_logging
from config.settings import settings
from storage.kv import close_kv_store

log = structlog.get_logger(__name__)


def create_app() -> Quart:
    """Create and configure the Quart web application."""
    app = Quart(__name__)

    @app.route("/health")
    async def health():
        return {"status": "OK", "message": settings.health_message}, 200

    @app.after_serving
    async def shutdown():
        await close_kv_store()

    return cors(
        app,
        allow_origin=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
    )


async def start_web() -> None:
    """Start the health-check server."""
    app = create_app()
    log.info("starting_web", host=settings.web_host, port=settings.web_port)
    await app.run_task(host=settings.web_host, port=settings.web_port)


def main() -> None:
    setup_logging()
    asyncio.run(start_web())


if __name__ == "__main__":
    main()
