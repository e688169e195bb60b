import logging
from typing import Optional

from .config.settings import Settings, get_settings


def setup_logging(settings: Optional[Settings] = None) -> None:
    settings = settings or get_settings()
    level_name = "DEBUG" if settings.DEBUG else settings.CODETRAIL_LOG_LEVEL.upper()
    level = getattr(logging, level_name, logging.INFO)
    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    logging.basicConfig(level=level, format=fmt)
