from __future__ import annotations

import logging
import logging.config
from pathlib import Path

from rapporto_cassette.core.config import settings

LOG_FILENAME = "report.log"


def configure_logging(log_dir: Path | None = None, *, debug: bool | None = None) -> Path:
    """Configure report logging with a console handler and a rotating file handler."""

    target_dir = Path(log_dir) if log_dir is not None else settings.LOG_DIR
    target_dir.mkdir(parents=True, exist_ok=True)
    verbose = settings.REPORT_DEBUG if debug is None else debug
    log_file = target_dir / LOG_FILENAME

    logging.captureWarnings(True)

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "verbose": {
                "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": "INFO" if verbose else "WARNING",
                "formatter": "verbose",
            },
            "report_file": {
                "class": "logging.handlers.RotatingFileHandler",
                "level": "DEBUG",
                "formatter": "verbose",
                "filename": str(log_file),
                "maxBytes": 5 * 1024 * 1024,
                "backupCount": 5,
                "encoding": "utf-8",
            },
        },
        "loggers": {
            "": {
                "handlers": ["console", "report_file"],
                "level": "DEBUG",
            },
            "PIL": {
                "handlers": ["report_file"],
                "level": "INFO",
                "propagate": False,
            },
        },
    }

    logging.config.dictConfig(logging_config)
    return log_file


__all__ = ["configure_logging", "LOG_FILENAME"]
