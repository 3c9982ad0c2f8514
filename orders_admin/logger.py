import sys

from loguru import logger
from orders_admin.config import get_config

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[source]}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)

class OrdersLogger:
    """Loguru setup for the orders admin, rebuilt from the current config.

    Local runs get a colorized console sink; any other ``app_env`` gets
    JSON lines on stderr. ``log_file`` adds a rotating file sink.
    """
    def __init__(self) -> None:
        config = get_config()
        level = config.log_level.upper()
        logger.remove()
        logger.configure(extra={"source": "orders_admin"})
        if config.app_env == "local":
            logger.add(sink=sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)
        else:
            logger.add(sink=sys.stderr, level=level, serialize=True)
        if config.log_file:
            logger.add(config.log_file, level=level, rotation="10 MB", retention=5, format=CONSOLE_FORMAT)
        self.logger = logger

    def get_logger(self, name: str = None):
        """Return the logger, tagged with ``name`` as its source when given."""
        if name:
            return self.logger.bind(source=name)
        return self.logger

def get_logger(name: str = None):
    """Get a logger configured from the latest config."""
    return OrdersLogger().get_logger(name)
