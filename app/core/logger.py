# app/core/logger.py
from loguru import logger

from app.core.config import settings
from app.core.logging_config import setup_logging

# One sink for the whole process; create_app() may reconfigure the level.
setup_logging(settings.LOG_LEVEL)

__all__ = ["logger"]
