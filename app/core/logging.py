# app/core/logging.py
# -----------------------------------------------------------------------------
# Loguru logging setup
# - rotation/backtrace/level from settings
# - engine modules import `logger` from here so the sink is configured once
# -----------------------------------------------------------------------------
from loguru import logger
from pathlib import Path

from app.core.config import settings

LOG_DIR = Path(settings.LOG_DIR)
LOG_DIR.mkdir(exist_ok=True, parents=True)

logger.remove()  # drop the default stderr handler
logger.add(
    LOG_DIR / "app.log",
    rotation="10 MB",
    retention=10,  # keep the 10 most recent rotated files
    enqueue=True,  # multiprocess safe
    backtrace=True,
    diagnose=True,
    level=settings.LOG_LEVEL,
)

__all__ = ["logger"]
