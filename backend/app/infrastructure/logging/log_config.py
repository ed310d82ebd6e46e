"""Logging setup for the shipment service.

Every service and repository logs through ``logging.getLogger(__name__)``;
this module only decides levels and, outside uvicorn, where records go.
Levels come from Settings, one field per logger family.
"""

import logging
import sys

from app.config import get_settings

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s — %(message)s"

# Settings field -> logger names it governs.
_LEVEL_FIELDS: dict[str, tuple[str, ...]] = {
    "log_level_sql": ("sqlalchemy.engine", "sqlalchemy.pool", "aiosqlite", "asyncpg"),
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_services": ("app.application.services", "app.infrastructure.database.repositories"),
}


def setup_logging() -> None:
    """Apply configured log levels. Called from the FastAPI lifespan."""
    settings = get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(handler)

    levels = {
        field: _parse_level(getattr(settings, field)) for field in _LEVEL_FIELDS
    }
    for field, logger_names in _LEVEL_FIELDS.items():
        for name in logger_names:
            logging.getLogger(name).setLevel(levels[field])

    logging.getLogger(__name__).debug(
        "Log levels: root=%s %s",
        settings.log_level,
        " ".join(f"{field}={getattr(settings, field)}" for field in _LEVEL_FIELDS),
    )


def _parse_level(raw: str) -> int:
    """Level name -> logging constant; unknown names fall back to INFO."""
    numeric = logging.getLevelName(raw.upper())
    return numeric if isinstance(numeric, int) else logging.INFO
