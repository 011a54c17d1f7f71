import logging
import sys

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Lowered to WARNING
NOISY_LOGGERS = ("uvicorn.access", "urllib3", "sqlalchemy.engine")


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        try:
            from jobtracker.config import settings
            level = settings.log_level
        except Exception:
            return logging.INFO
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def setup_logging(level: int | str | None = None) -> None:
    """Send every log record to stdout. Used by the API and the scripts."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(_resolve_level(level))
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
