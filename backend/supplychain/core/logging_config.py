"""
Logging setup shared by the API and the command line scripts.
"""

import logging
import os
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_configured = False


def setup_logging(level: Optional[str] = None, fmt: str = DEFAULT_FORMAT) -> None:
    """
    Configure the root logger once.

    Args:
        level: Log level name; falls back to LOG_LEVEL, then INFO
        fmt: Format string for the console handler
    """
    global _configured

    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level_name, logging.INFO))

    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(fmt))
    root_logger.addHandler(handler)

    # third-party noise
    logging.getLogger("uvicorn").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    _configured = True
    root_logger.info("Logging initialized (level=%s)", level_name)
