"""structlog wiring for dfconfig.

Library loggers hand their events to stdlib ``logging`` under the
``dfconfig`` logger, which carries a ``NullHandler``. Nothing is emitted
until the embedding application configures logging, for example with
``configure_logging``.
"""

from __future__ import annotations

import logging

import structlog

from dfconfig.settings import get_settings

PACKAGE_LOGGER = "dfconfig"


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger bound to the stdlib logger ``name``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(log_level: str | None = None) -> None:
    """Render dfconfig events as JSON through stdlib logging at ``log_level``.

    Falls back to ``Settings.log_level`` when no level is given, and to
    INFO when the level name is unknown.
    """

    if log_level is None:
        log_level = get_settings().log_level
    numeric_level = logging.getLevelName(log_level.upper())
    if isinstance(numeric_level, str):
        numeric_level = logging.INFO

    logging.basicConfig(level=numeric_level, format="%(message)s")
    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )
