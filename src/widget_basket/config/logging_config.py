"""Logging setup for scripts and the API."""
import logging
from typing import Optional

from .settings import get_settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


def setup_logging(level: Optional[str] = None):
    """Configure root logging; the level defaults to Settings.log_level."""
    level = (level or get_settings().log_level).upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("widget_basket").setLevel(level)
