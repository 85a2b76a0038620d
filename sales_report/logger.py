import logging
import sys
from typing import Optional

from sales_report.config import settings

_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger with a single console handler.

    The library modules only ever call ``get_logger``; scripts call this once
    at start-up.
    """
    level_name = (level or settings.LOG_LEVEL).upper()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level_name, logging.INFO))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(logging.Formatter(_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    root_logger.addHandler(console_handler)

    root_logger.debug("Logging initialized (level=%s)", level_name)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
