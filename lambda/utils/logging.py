import logging as _logging
import os
import sys
import uuid

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
# "json" for CloudWatch, "console" for local runs
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").lower()


def configure_logging(log_level: str = LOG_LEVEL, log_format: str = LOG_FORMAT) -> None:
    if log_format == "console":
        renderer = structlog.dev.ConsoleRenderer(colors=False)
    else:
        renderer = structlog.processors.JSONRenderer()

    _logging.basicConfig(
        format="%(message)s",
        handlers=[_logging.StreamHandler(sys.stdout)],
        level=getattr(_logging, log_level, _logging.INFO),
        force=True,
    )

    structlog.configure(
        processors=[
            merge_contextvars,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


configure_logging()
logger = structlog.get_logger("oghmai_examples")


def set_request_id(request_id: str | None = None) -> str:
    request_id = request_id or uuid.uuid4().hex[:12]
    clear_contextvars()
    bind_contextvars(request_id=request_id)
    return request_id


def clear_request_id():
    clear_contextvars()


def debug(msg: str, *args, **kwargs):
    logger.debug(msg, *args, **kwargs)


def info(msg: str, *args, **kwargs):
    logger.info(msg, *args, **kwargs)


def warning(msg: str, *args, **kwargs):
    logger.warning(msg, *args, **kwargs)


def error(msg: str, *args, **kwargs):
    logger.error(msg, *args, **kwargs)


def exception(msg: str, *args, **kwargs):
    logger.exception(msg, *args, **kwargs)
