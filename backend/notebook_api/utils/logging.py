from __future__ import annotations

import logging
import sys

from notebook_api.config import settings

# Libraries used by the Supabase client log every HTTP exchange at INFO
_CHATTY_LOGGERS = ("httpx", "httpcore", "hpack", "postgrest")


def _resolve_level() -> int:
    if settings.debug:
        return logging.DEBUG
    return getattr(logging, settings.log_level.upper(), logging.INFO)


def setup_logging() -> None:
    """Configure root logging to stdout for the notebook service."""
    level = _resolve_level()

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout
    )

    logging.getLogger("notebook_api").setLevel(level)
    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info(
        "Logging configured", extra={"level": logging.getLevelName(level)}
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
