"""
Structlog logging configuration

structlog and stdlib logging share one processor chain, rendered to the
console in DEBUG and to JSON lines otherwise. Credentials and signatures
are masked before rendering.
"""
import logging
import json
from typing import Any, List, Optional

import structlog
from structlog.contextvars import merge_contextvars
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer, TimeStamper, add_log_level
from structlog.stdlib import ProcessorFormatter
from structlog.typing import EventDict, WrappedLogger

from checkout_gateway.core.config import settings


SENSITIVE_KEYS = frozenset({"secret", "signature", "authorization"})

# httpx logs every request line at INFO
NOISY_LOGGERS = ("httpx", "httpcore")


def mask_sensitive(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    for key in SENSITIVE_KEYS.intersection(event_dict):
        event_dict[key] = "***"
    return event_dict


def resolve_level(level: Optional[str] = None) -> int:
    """DEBUG forces debug level; otherwise ``level`` or LOG_LEVEL."""
    if settings.DEBUG:
        return logging.DEBUG
    name = (level or settings.LOG_LEVEL).upper()
    resolved = logging.getLevelName(name)
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {name}")
    return resolved


def _json_dumps(obj, default=None, **kwargs):
    # structlog forwards default/sort_keys to the serializer
    return json.dumps(obj, ensure_ascii=False, default=default, **kwargs)


def _processor_chain() -> List[Any]:
    return [
        merge_contextvars,
        add_log_level,
        TimeStamper(fmt="iso", utc=True),
        structlog.stdlib.PositionalArgumentsFormatter(),
        mask_sensitive,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def configure_logging(level: Optional[str] = None) -> None:
    """Configure structlog and route stdlib logging through the same chain."""
    chain = _processor_chain()
    structlog.configure(
        processors=[*chain, ProcessorFormatter.wrap_for_formatter],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    renderer = ConsoleRenderer(colors=True) if settings.DEBUG else JSONRenderer(serializer=_json_dumps)
    handler = logging.StreamHandler()
    handler.setFormatter(ProcessorFormatter(
        foreign_pre_chain=chain,
        processors=[ProcessorFormatter.remove_processors_meta, renderer],
    ))

    root_level = resolve_level(level)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(root_level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(root_level, logging.WARNING))


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger."""
    return structlog.get_logger(name)
