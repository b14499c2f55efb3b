"""Structured logging for the gateway.

Modules log through ``structlog.get_logger(__name__)`` with an event name plus
key/value fields. Request-scoped values bound with structlog contextvars (see
``riot_kernel.middleware``) are merged into every entry.
"""

import logging
from typing import List

import structlog
from structlog import contextvars as structlog_contextvars
from structlog.typing import Processor

SHARED_PROCESSORS: List[Processor] = [
    structlog.stdlib.filter_by_level,
    structlog_contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
]


def render_processors(json_logs: bool) -> List[Processor]:
    """Final processors: one JSON object per line, or readable console lines."""
    if json_logs:
        return [
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ]
    return [structlog.dev.ConsoleRenderer(colors=False)]


def setup_logging(log_level: str = "INFO", json_logs: bool = True) -> None:
    """
    Configure stdlib logging and structlog.

    :param log_level: Level name; unknown names fall back to INFO
    :param json_logs: Render JSON lines, otherwise console output
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(format="%(message)s", level=level)

    structlog.configure(
        processors=[*SHARED_PROCESSORS, *render_processors(json_logs)],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
