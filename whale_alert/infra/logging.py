"""
Whale Alert Client Logging
--------------------------
Namespaced logging with request_id propagation for request traceability.

Design:
- Every API request gets a unique request_id
- request_id is attached to every record emitted while the request runs
- Console (Rich) and file (JSON) output, both opt-in via configure_logging()
- configure_logging() raises the httpx logger to WARNING so request URLs, which
  carry the API key, stay out of the logs
- Severity discipline: DEBUG=request flow, WARNING=failed request

Usage:
    from whale_alert.infra.logging import get_logger, RequestContext

    logger = get_logger("api.client")

    with RequestContext() as request_id:
        logger.debug("Requesting /status")
"""

import contextvars
import json
import logging
import logging.handlers
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "whale_alert"
# httpx logs full request URLs at INFO, and the API key travels in the query string
HTTPX_LOGGER_NAME = "httpx"

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_FILE_BACKUP_COUNT = 3

# Context variable for request_id - thread-safe and async-safe
_request_id_var: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar(
    "request_id", default=None
)


def generate_request_id() -> str:
    """Generate a unique request ID."""
    return f"req_{uuid.uuid4().hex[:12]}"


def get_request_id() -> Optional[str]:
    """Get the current request ID from context."""
    return _request_id_var.get()


class RequestContext:
    """
    Context manager for request scoping.

    Usage:
        with RequestContext() as request_id:
            # All logs within this block carry request_id
            logger.info("Processing...")
    """

    def __init__(self, request_id: Optional[str] = None):
        self._request_id = request_id or generate_request_id()
        self._token: Optional[contextvars.Token] = None

    def __enter__(self) -> str:
        self._token = _request_id_var.set(self._request_id)
        return self._request_id

    def __exit__(self, *args) -> None:
        if self._token is not None:
            _request_id_var.reset(self._token)
            self._token = None


class RequestIdFilter(logging.Filter):
    """Logging filter that adds request_id to every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        if getattr(record, "request_id", None) is None:
            record.request_id = get_request_id() or "-"
        return True


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured file logging."""

    EXTRA_FIELDS = ("endpoint", "status_code", "elapsed_ms")

    def format(self, record: logging.LogRecord) -> str:
        log_entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", "-"),
        }

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        for key in self.EXTRA_FIELDS:
            if hasattr(record, key):
                log_entry[key] = getattr(record, key)

        return json.dumps(log_entry)


_logging_initialized = False
_httpx_previous_level: Optional[int] = None


def configure_logging(
    level: int = logging.INFO,
    log_dir: Optional[str] = None,
    console: bool = True,
    file: bool = False,
) -> logging.Logger:
    """
    Configure the whale_alert logger hierarchy.

    Library code never calls this; applications opt in.

    Args:
        level: Logging level (default INFO)
        log_dir: Directory for the JSON log file (default: ./logs)
        console: Enable Rich console output
        file: Enable JSON file output
    """
    global _logging_initialized, _httpx_previous_level

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if _logging_initialized:
        return root_logger

    httpx_logger = logging.getLogger(HTTPX_LOGGER_NAME)
    _httpx_previous_level = httpx_logger.level
    httpx_logger.setLevel(max(logging.WARNING, level))

    root_logger.setLevel(level)
    root_logger.handlers.clear()

    request_filter = RequestIdFilter()

    if console:
        console_handler = RichHandler(
            console=Console(stderr=True),
            rich_tracebacks=True,
            show_path=False,
        )
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter("[%(request_id)s] %(name)s: %(message)s"))
        console_handler.addFilter(request_filter)
        root_logger.addHandler(console_handler)

    if file:
        log_path = Path(log_dir) if log_dir else Path("logs")
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            str(log_path / "whale_alert.log"),
            maxBytes=LOG_FILE_MAX_BYTES,
            backupCount=LOG_FILE_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)  # File gets everything
        file_handler.setFormatter(JSONFormatter())
        file_handler.addFilter(request_filter)
        root_logger.addHandler(file_handler)

    _logging_initialized = True
    return root_logger


def reset_logging() -> None:
    """Remove handlers installed by configure_logging()."""
    global _logging_initialized, _httpx_previous_level

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    if _httpx_previous_level is not None:
        logging.getLogger(HTTPX_LOGGER_NAME).setLevel(_httpx_previous_level)
        _httpx_previous_level = None
    _logging_initialized = False


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger in the whale_alert namespace.

    Args:
        name: Logger name (prefixed with 'whale_alert.' if not already)
    """
    if not name.startswith(ROOT_LOGGER_NAME):
        name = f"{ROOT_LOGGER_NAME}.{name}"

    return logging.getLogger(name)
