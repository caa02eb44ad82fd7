"""Loguru setup shared by the API server and the CLI scanner."""

import logging
import sys
from pathlib import Path

from loguru import logger

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
    "<level>{message}</level>"
)

# stdlib loggers that third-party code writes to (uvicorn, httpx)
FORWARDED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access", "httpx")


class _LoguruForwarder(logging.Handler):
    """Re-emit stdlib log records through loguru so all output shares one sink set."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def setup_logger(
    *,
    json_logs: bool = False,
    level: str = "INFO",
    log_dir: str | Path | None = "logs",
    forward_stdlib: bool = True,
) -> list[int]:
    """Replace loguru's default sink with the scanner's console and file sinks.

    The console follows ``level``; the daily file under ``log_dir`` always
    captures DEBUG so a failed upstream call can be traced after the fact.
    Returns the ids of the added sinks.
    """
    logger.remove()
    sink_ids: list[int] = []

    if json_logs:
        sink_ids.append(logger.add(sys.stdout, serialize=True, level=level.upper()))
    else:
        sink_ids.append(
            logger.add(sys.stdout, format=CONSOLE_FORMAT, level=level.upper(), colorize=True)
        )

    if log_dir:
        path = Path(log_dir) / "rugscan_{time:YYYY-MM-DD}.log"
        sink_ids.append(
            logger.add(
                str(path),
                rotation="20 MB",
                retention="7 days",
                compression="gz",
                level="DEBUG",
                serialize=json_logs,
            )
        )

    if forward_stdlib:
        forwarder = _LoguruForwarder()
        for name in FORWARDED_LOGGERS:
            std_logger = logging.getLogger(name)
            std_logger.handlers = [forwarder]
            std_logger.propagate = False

    return sink_ids
