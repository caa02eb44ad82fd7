"""API server: runs uvicorn inside the existing asyncio event loop."""

from __future__ import annotations

import uvicorn
from fastapi import FastAPI
from loguru import logger

from config.settings import settings


def build_server(
    app: FastAPI | None = None,
    *,
    host: str | None = None,
    port: int | None = None,
) -> uvicorn.Server:
    """Wrap the app in a uvicorn server bound to the configured address.

    uvicorn's own logging config is disabled; its records reach loguru
    through the forwarder installed by ``setup_logger``.
    """
    if app is None:
        from src.api.app import create_app

        app = create_app()

    config = uvicorn.Config(
        app=app,
        host=host or settings.api_host,
        port=port or settings.api_port,
        log_config=None,
        access_log=settings.api_debug,
        loop="none",
    )
    return uvicorn.Server(config)


async def run_api_server(host: str | None = None, port: int | None = None) -> None:
    server = build_server(host=host, port=port)
    cfg = server.config
    logger.info(f"Rugscan API listening on http://{cfg.host}:{cfg.port} (access log: {cfg.access_log})")
    await server.serve()
