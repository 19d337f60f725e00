import sys

from loguru import logger
from abc_logistics.config import get_config

_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[name]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


class AppLogger:
    """Process-wide loguru setup for the dashboard, the seed CLI and tests.

    Logs go to stderr so the seed CLI's printed summary stays clean on stdout.
    Level comes from get_config().log_level; with get_config().log_serialize
    each record is written as one JSON line instead.
    """
    def __init__(self) -> None:
        config = get_config()
        logger.remove()
        logger.configure(extra={"name": "abc_logistics"})
        logger.add(
            sink=sys.stderr,
            level=config.log_level.upper(),
            format=_FORMAT,
            serialize=config.log_serialize,
        )
        self.logger = logger

    def get_logger(self, name: str = None):
        """Return the logger, bound to ``name`` (usually the calling module) when given."""
        if name:
            return self.logger.bind(name=name)
        return self.logger


def get_logger(name: str = None):
    """Get a new application logger using the latest config."""
    return AppLogger().get_logger(name)
