import logging
import logging.config
import os
from pathlib import Path


def setup_logging(log_level: str | None = None, log_dir: Path | None = None) -> None:
    """Configure console logging, plus a file handler when ``log_dir`` is given."""
    level = (log_level or os.getenv("LOG_LEVEL", "INFO")).upper()

    handlers: dict[str, dict] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        },
    }
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "default",
            "filename": str(log_dir / "app.log"),
            "encoding": "utf-8",
        }

    logging_config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
            }
        },
        "handlers": handlers,
        "root": {
            "handlers": list(handlers),
            "level": level,
        },
    }

    logging.config.dictConfig(logging_config)
