import logging
import sys
from typing import Optional

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)


class InterceptHandler(logging.Handler):
    """Route stdlib logging records (uvicorn, sqlalchemy) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def configure(log_level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    if log_level is None:
        from skipsave.services.deps import get_settings_service

        settings = get_settings_service().settings
        log_level = settings.log_level
        log_file = log_file or settings.log_file

    log_level = log_level.upper()
    logger.remove()
    logger.add(sys.stderr, level=log_level, format=LOG_FORMAT, enqueue=True)
    if log_file:
        logger.add(log_file, level=log_level, rotation="10 MB", retention="7 days", enqueue=True)

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "sqlalchemy.engine"):
        std_logger = logging.getLogger(name)
        std_logger.handlers = [InterceptHandler()]
        std_logger.propagate = False

    logger.debug(f"Logger configured with level {log_level}")


__all__ = ["configure", "logger"]
