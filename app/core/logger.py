import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional
import sys

from app.core.config import settings

LOG_DIR = Path(settings.LOG_DIR)
LOG_DIR.mkdir(parents=True, exist_ok=True)

LOG_FILE = LOG_DIR / "quote_mailer.log"
LOG_FORMAT = "%(levelname)s | %(asctime)s | %(name)s | %(message)s"


def resolve_level(level: Optional[str]) -> int:
    value = logging.getLevelName(str(level or settings.LOG_LEVEL).strip().upper())
    return value if isinstance(value, int) else logging.INFO


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    logger = logging.getLogger(name)

    if not logger.handlers:
        formatter = logging.Formatter(LOG_FORMAT)

        file_handler = RotatingFileHandler(
            LOG_FILE, maxBytes=2_000_000, backupCount=3, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)

        # Email copy is French, keep the console UTF-8
        try:
            console_stream = open(sys.stdout.fileno(), mode="w", encoding="utf-8", closefd=False)
        except (AttributeError, OSError, ValueError):
            console_stream = sys.stdout

        console_handler = logging.StreamHandler(console_stream)
        console_handler.setFormatter(formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        logger.propagate = False

    # Handlers stay at NOTSET, the logger level decides
    logger.setLevel(resolve_level(level))
    return logger
