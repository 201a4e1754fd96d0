"""Structured logging configuration with structlog.

structlog events and plain ``logging`` records (uvicorn, Pillow) both end up
in one stdout handler whose ``ProcessorFormatter`` renders them the same way:
a colored console line in development, one JSON object per line elsewhere.
"""

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from glimpse.config import Settings

# Third-party loggers that are too chatty below WARNING
_QUIET_LOGGERS = ("PIL", "multipart")


def setup_logging(settings: "Settings") -> None:
    """Configure structlog and the root logger for the application.

    ``GLIMPSE_DEBUG`` forces DEBUG regardless of ``GLIMPSE_LOG_LEVEL``.
    """
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level)
    is_dev = settings.env == "development"

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    render: list[structlog.types.Processor]
    if is_dev:
        render = [structlog.dev.ConsoleRenderer(colors=True)]
    else:
        render = [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, *render],
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance."""
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
