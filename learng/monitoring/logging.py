"""
Structured logging for learng.

structlog renders through the standard library root logger: a rich console
in development, JSON lines everywhere else, plus an optional rotating file.

Every event is scrubbed before it is rendered. The service handles three
kinds of secret (bearer tokens, Argon2 password hashes, plaintext passwords
in request bodies) and one kind of personal data (email addresses):

- values under a sensitive key (``password``, ``token``, ``authorization`` ...)
  are replaced wholesale, at any depth of nested dicts and lists;
- JWTs, ``Bearer`` credentials, Argon2 hashes and emails are redacted inside
  free text;
- control characters are escaped so a user-supplied title cannot forge a
  log line.

Examples
--------
>>> from learng.monitoring import get_logger
>>> logger = get_logger(__name__)
>>> logger.info("Journey created", journey_id="123")
"""

from logging import INFO, Handler, StreamHandler, root
from logging.handlers import RotatingFileHandler
from pathlib import Path as SyncPath
from re import Pattern
from re import compile as re_compile
from typing import Any

from opentelemetry.trace import get_current_span
from structlog import configure
from structlog import get_logger as struct_logger
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars
from structlog.dev import ConsoleRenderer, RichTracebackFormatter
from structlog.processors import (
    JSONRenderer,
    StackInfoRenderer,
    UnicodeDecoder,
    add_log_level,
    format_exc_info,
)
from structlog.stdlib import (
    BoundLogger,
    ExtraAdder,
    LoggerFactory,
    PositionalArgumentsFormatter,
    ProcessorFormatter,
    add_logger_name,
    filter_by_level,
)
from structlog.types import EventDict, Processor, WrappedLogger

from learng.configs.settings import settings
from learng.utils.helpers import today_str

REDACTED = "[REDACTED]"

SENSITIVE_KEYS: frozenset[str] = frozenset(
    {
        "authorization",
        "cookie",
        "jwt_secret",
        "password",
        "password_hash",
        "passwordhash",
        "proxy-authorization",
        "secret",
        "token",
    },
)

# Bearer and JWT first: a token would otherwise be half-matched as an email
TEXT_PATTERNS: list[tuple[Pattern[str], str]] = [
    (re_compile(r"(?i)bearer\s+\S+"), "Bearer [REDACTED_TOKEN]"),
    (re_compile(r"eyJ[a-zA-Z0-9_-]*\.eyJ[a-zA-Z0-9_-]*\.[a-zA-Z0-9_-]*"), "[REDACTED_JWT]"),
    (re_compile(r"\$argon2(?:id|i|d)\$\S+"), "[REDACTED_HASH]"),
    (re_compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"), "[REDACTED_EMAIL]"),
]

CONTROL_CHARS = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": ""})

LOG_FILE_MAX_BYTES = 5 * 1024 * 1024
LOG_FILE_BACKUPS = 5


def sanitize_log_message(message: str) -> str:
    r"""
    Escape control characters.

    >>> sanitize_log_message("Hello\nWorld")
    'Hello\\nWorld'
    """
    return message.translate(CONTROL_CHARS)


def redact_pii(message: str) -> str:
    """
    Redact credentials and email addresses inside free text.

    >>> redact_pii("login failed for user@example.com")
    'login failed for [REDACTED_EMAIL]'
    """
    for pattern, replacement in TEXT_PATTERNS:
        message = pattern.sub(replacement, message)
    return message


def scrub(value: Any, key: str = "") -> Any:
    """Return ``value`` with secrets removed, recursing into containers."""
    if key.lower() in SENSITIVE_KEYS:
        return REDACTED
    if isinstance(value, str):
        return redact_pii(sanitize_log_message(value))
    if isinstance(value, dict):
        return {k: scrub(v, str(k)) for k, v in value.items()}
    if isinstance(value, list | tuple):
        return type(value)(scrub(item) for item in value)
    return value


def sanitize_headers(headers: dict[str, Any]) -> dict[str, Any]:
    """
    Hide credential headers and leave the rest untouched.

    >>> sanitize_headers({"Authorization": "Bearer abc", "Accept": "json"})
    {'Authorization': '[REDACTED]', 'Accept': 'json'}
    """
    return {k: REDACTED if k.lower() in SENSITIVE_KEYS else v for k, v in headers.items()}


def scrub_event(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Processor applying :func:`scrub` to every entry of the event."""
    return {key: scrub(value, key) for key, value in event_dict.items()}


def add_timestamp(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    event_dict["timestamp"] = today_str()
    return event_dict


def add_trace_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add OpenTelemetry trace ids when a span is active."""
    context = get_current_span().get_span_context()
    if context.is_valid:
        event_dict["trace_id"] = format(context.trace_id, "032x")
        event_dict["span_id"] = format(context.span_id, "016x")
    return event_dict


def _formatter(*, colors: bool) -> ProcessorFormatter:
    development = settings.ENVIRONMENT == "development"
    renderer: Processor = (
        ConsoleRenderer(
            colors=colors,
            pad_level=False,
            exception_formatter=RichTracebackFormatter(),
        )
        if development
        else JSONRenderer()
    )
    # The console renderer draws tracebacks itself; JSON needs them as text
    exc_processors: list[Processor] = [] if development else [format_exc_info]
    return ProcessorFormatter(
        processors=[
            ProcessorFormatter.remove_processors_meta,
            *exc_processors,
            scrub_event,
            renderer,
        ],
        foreign_pre_chain=[add_log_level, add_timestamp, add_trace_context, ExtraAdder()],
    )


def _handlers() -> list[Handler]:
    console = StreamHandler()
    console.setFormatter(_formatter(colors=True))
    if not settings.LOG_TO_FILE:
        return [console]

    log_file = SyncPath(settings.LOG_FILE)
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
    )
    file_handler.setLevel(INFO)
    file_handler.setFormatter(_formatter(colors=False))
    return [console, file_handler]


def configure_logging() -> None:
    """Configure structlog and the root handlers from settings."""
    # Hot reload re-runs this, so start from a clean root
    root.handlers.clear()
    root.setLevel(settings.LOG_LEVEL.upper())

    configure(
        processors=[
            filter_by_level,
            merge_contextvars,
            add_logger_name,
            add_log_level,
            add_timestamp,
            add_trace_context,
            PositionalArgumentsFormatter(),
            StackInfoRenderer(),
            UnicodeDecoder(),
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=LoggerFactory(),
        wrapper_class=BoundLogger,
        cache_logger_on_first_use=True,
    )

    for handler in _handlers():
        root.addHandler(handler)


def get_logger(name: str) -> BoundLogger:
    return struct_logger(name)


def bind_request_id(request_id: str) -> None:
    bind_contextvars(request_id=request_id)


def bind_user_id(user_id: str) -> None:
    bind_contextvars(user_id=user_id)


def clear_context() -> None:
    clear_contextvars()
