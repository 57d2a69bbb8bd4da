import logging
import sys
from logging import StreamHandler

from src.config.settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Libraries that log every request or statement at INFO
QUIET_LOGGERS = ("httpx", "PIL", "multipart")


def setup_logging() -> None:
    """Log to stdout; DEBUG in debug mode. SQL statements only when LOG_DB is set."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=[StreamHandler(sys.stdout)],
    )

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.LOG_DB else logging.WARNING
    )
