"""
Structured logging for the bloglist backend.

structlog renders through the standard library root logger, so uvicorn,
SQLAlchemy and application records share one format: a coloured console
in development and one JSON object per line everywhere else. Every record
passes through :func:`sanitize_event_dict`, which escapes control
characters and keeps credentials out of the logs (bearer tokens, password
hashes, login passwords and the sensitive request headers).

Examples
--------
>>> from bloglist.monitoring import configure_logging, get_logger
>>> configure_logging()
>>> get_logger(__name__).info("Blog created", blog_id="123")
"""

from logging import INFO, Handler, StreamHandler, root
from logging.handlers import RotatingFileHandler
from pathlib import Path
from re import Pattern
from re import compile as re_compile
from typing import Any

import orjson
from structlog import configure
from structlog import get_logger as struct_logger
from structlog.contextvars import (
    bind_contextvars,
    clear_contextvars,
    get_contextvars,
    merge_contextvars,
)
from structlog.dev import ConsoleRenderer
from structlog.processors import (
    JSONRenderer,
    StackInfoRenderer,
    UnicodeDecoder,
    add_log_level,
    format_exc_info,
)
from structlog.stdlib import (
    BoundLogger,
    LoggerFactory,
    PositionalArgumentsFormatter,
    ProcessorFormatter,
    add_logger_name,
    filter_by_level,
)
from structlog.types import EventDict, Processor, WrappedLogger

from bloglist.configs import settings
from bloglist.utils.helpers import today_str

REDACTED = "[REDACTED]"

# Matched case-insensitively against event keys and header names
SENSITIVE_KEYS: frozenset[str] = frozenset(
    {
        "authorization",
        "cookie",
        "proxy-authorization",
        "x-api-key",
        "password",
        "password_hash",
        "access_token",
        "token",
    },
)

# JWTs contain dots and must be caught before emails
PII_PATTERNS: list[tuple[Pattern, str]] = [
    (re_compile(r"eyJ[\w-]*\.eyJ[\w-]*\.[\w-]*"), "[REDACTED_JWT]"),
    (re_compile(r"\$argon2id?\$[^\s'\"]+"), "[REDACTED_HASH]"),
    (re_compile(r"[\w.%+-]+@[\w-]+(?:\.[\w-]+)*\.[a-zA-Z]{2,}"), "[REDACTED_EMAIL]"),
]

CONTROL_CHARS = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": ""})

LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 5


def sanitize_log_message(message: str) -> str:
    r"""
    Escape line breaks and drop NUL bytes so one call is one log line.

    >>> sanitize_log_message("Hello\nWorld")
    'Hello\\nWorld'
    """
    return message.translate(CONTROL_CHARS)


def sanitize_headers(headers: dict[str, Any]) -> dict[str, Any]:
    """
    >>> sanitize_headers({"Authorization": "Bearer abc", "Content-Type": "json"})
    {'Authorization': '[REDACTED]', 'Content-Type': 'json'}
    """
    return {k: REDACTED if k.lower() in SENSITIVE_KEYS else v for k, v in headers.items()}


def redact_pii(message: str) -> str:
    for pattern, replacement in PII_PATTERNS:
        message = pattern.sub(replacement, message)
    return message


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    event_dict["timestamp"] = today_str()
    return event_dict


def sanitize_event_dict(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """
    Scrub an event before it is rendered.

    Values under sensitive keys are replaced outright, ``headers`` mappings
    are filtered by name, and every other string is escaped and stripped of
    tokens, hashes and email addresses.
    """
    for key, value in event_dict.items():
        if key.lower() in SENSITIVE_KEYS:
            event_dict[key] = REDACTED
        elif isinstance(value, str):
            event_dict[key] = redact_pii(sanitize_log_message(value))
        elif key.lower() == "headers" and isinstance(value, dict):
            event_dict[key] = sanitize_headers(value)
    return event_dict


def _json_dumps(event_dict: EventDict, **kwargs: Any) -> str:
    return orjson.dumps(event_dict, default=str).decode()


def get_processors(*, colors: bool = True) -> list[Processor]:
    """Formatter chain for stdlib handlers, ending in the environment's renderer."""
    renderer: Processor = (
        ConsoleRenderer(colors=colors, pad_level=False)
        if settings.ENVIRONMENT == "development"
        else JSONRenderer(serializer=_json_dumps)
    )
    return [
        ProcessorFormatter.remove_processors_meta,
        merge_contextvars,
        add_timestamp,
        sanitize_event_dict,
        renderer,
    ]


def _formatter(*, colors: bool) -> ProcessorFormatter:
    return ProcessorFormatter(
        processors=get_processors(colors=colors),
        foreign_pre_chain=[add_log_level, add_timestamp],
    )


def _file_handler() -> Handler | None:
    if not settings.LOG_TO_FILE:
        return None
    log_file = Path(settings.LOG_FILE)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_file,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
        encoding="utf-8",
    )
    handler.setLevel(INFO)
    handler.setFormatter(_formatter(colors=False))
    return handler


def configure_logging() -> None:
    """
    Route structlog through the root logger and install the handlers.

    Safe to call repeatedly; the root handlers are replaced, not added to.
    """
    root.handlers.clear()
    root.setLevel(settings.LOG_LEVEL.upper())

    configure(
        processors=[
            filter_by_level,
            merge_contextvars,
            add_logger_name,
            add_log_level,
            PositionalArgumentsFormatter(),
            StackInfoRenderer(),
            format_exc_info,
            UnicodeDecoder(),
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=True,
    )

    console = StreamHandler()
    console.setFormatter(_formatter(colors=True))
    root.addHandler(console)
    if file_handler := _file_handler():
        root.addHandler(file_handler)


def get_logger(name: str) -> BoundLogger:
    """Logger bound to ``name``, usually the calling module's ``__name__``."""
    return struct_logger(name)


def bind_request_id(request_id: str) -> None:
    bind_contextvars(request_id=request_id)


def get_request_id() -> str:
    """Request ID bound to the current context, or ``"N/A"`` outside a request."""
    return get_contextvars().get("request_id", "N/A")


def clear_context() -> None:
    clear_contextvars()
