"""Configuration de la journalisation (console, format texte)."""

import logging
import logging.config
from typing import Optional

from attendance_backend.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(log_level: Optional[str] = None) -> None:
    """
    Configure le logger racine.
    Niveau par défaut : LOG_LEVEL des settings.
    """
    level = (log_level or settings.LOG_LEVEL).upper()

    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "text": {"format": LOG_FORMAT},
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "text",
                "stream": "ext://sys.stderr",
            },
        },
        "root": {
            "level": level,
            "handlers": ["console"],
        },
    })
