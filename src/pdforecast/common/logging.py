"""src/pdforecast/common/logging.py"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from pdforecast.common.config import AppConfig

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Third-party loggers that are chatty at INFO
QUIET_LOGGERS = ("matplotlib", "PIL", "urllib3", "streamlit")


def setup_logging(cfg: AppConfig, *, level: str | None = None) -> Path | None:
    """
    Console logging plus an optional rotating file from the ``logging``
    section. Safe to call again (Streamlit reruns): handlers are replaced.
    Returns the log file path, if any.
    """
    section = cfg.logging
    level_name = str(level or section.get("level", "INFO")).upper()
    lvl = getattr(logging, level_name, logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler()]

    log_path: Path | None = None
    if section.get("file"):
        log_path = cfg.resolve(section["file"])
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_path,
                maxBytes=int(section.get("max_bytes", 2_000_000)),
                backupCount=int(section.get("backup_count", 3)),
                encoding="utf-8",
            )
        )

    for h in handlers:
        h.setLevel(lvl)
    logging.basicConfig(level=lvl, format=LOG_FORMAT, handlers=handlers, force=True)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(lvl, logging.WARNING))
    return log_path
