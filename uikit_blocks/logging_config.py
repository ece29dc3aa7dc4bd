import logging
import sys
from typing import Optional

from .config import get_settings


def setup_logging(level: Optional[str] = None):
    """Configure logging for applications embedding the builder"""
    log_level = (level or get_settings().log_level).upper()

    handler = logging.StreamHandler(sys.stdout)
    formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )
    handler.setFormatter(formatter)

    logging.basicConfig(
        level=getattr(logging, log_level, logging.INFO),
        handlers=[handler]
    )

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured with level: {log_level}")
