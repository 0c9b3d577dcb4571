# app/core/logging_config.py
import logging

from app.core.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging():
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL.upper(), format=LOG_FORMAT)
