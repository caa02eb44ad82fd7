"""Entry point for the rugscan API."""

import asyncio

from loguru import logger

from config.settings import settings
from src.api.server import run_api_server
from src.utils.logger import setup_logger


async def main() -> None:
    setup_logger(json_logs=settings.json_logs, level=settings.log_level, log_dir=settings.log_dir)
    logger.info("Starting rugscan...")

    if not settings.openrouter_api_key:
        logger.warning("OPENROUTER_API_KEY is not set, /api/analyze will fail at the narrative step")

    await run_api_server()
    logger.info("Shutdown complete")


if __name__ == "__main__":
    asyncio.run(main())
