# 📄 File: app/shared/utils/logging.py

# 🧭 Purpose (Layman Explanation):
# Sets up the logging system that records what happens in the pack service in a structured way,
# so a failing database connection or a slow request is easy to spot in the logs.

# 🧪 Purpose (Technical Summary):
# Structured logging with JSON formatting (python-json-logger), request-id context propagation
# via contextvars, a StructuredLogger wrapper accepting extra fields, and a request timing helper.

# 🔗 Dependencies:
# - python-json-logger: JSON log formatting
# - logging: Python standard logging
# - contextvars: Request context tracking

# 🔄 Connected Modules / Calls From:
# Used by: app.main (setup), request logging middleware, database connection manager,
# case-pack repository and handlers

import logging
import os
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional
from uuid import uuid4

from pythonjsonlogger.json import JsonFormatter

from app.shared.config.settings import get_settings

SERVICE_NAME = "freshshare-pack-service"

# Context variables for request tracking
request_id_var: ContextVar[str] = ContextVar('request_id', default='')

# Global logging configuration
_logging_configured = False
_loggers_cache: Dict[str, "StructuredLogger"] = {}


class RequestContextFilter(logging.Filter):
    """Stamp every record with the current request id and service identity."""

    def __init__(self):
        super().__init__()
        self.hostname = os.uname().nodename if hasattr(os, 'uname') else 'unknown'

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get('')
        record.service = SERVICE_NAME
        record.hostname = self.hostname
        return True


class ContextualFormatter(logging.Formatter):
    """
    Plain-text formatter that adds the request id when one is set.
    """

    def format(self, record):
        record.timestamp = datetime.now(timezone.utc).isoformat()
        message = super().format(record)
        request_id = getattr(record, 'request_id', '')
        if request_id:
            message = f"{message} [request_id={request_id}]"
        extra_fields = getattr(record, 'extra_fields', None)
        if extra_fields:
            rendered = " ".join(f"{k}={v}" for k, v in extra_fields.items())
            message = f"{message} {rendered}"
        return message


class JSONFormatter(JsonFormatter):
    """
    JSON formatter for structured logging.

    Outputs one JSON object per line with a stable set of keys for
    log aggregation tools.
    """

    def add_fields(self, log_data: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_data, record, message_dict)
        log_data['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_data['level'] = record.levelname
        log_data['logger'] = record.name
        log_data['module'] = record.module
        log_data['function'] = record.funcName
        log_data['line'] = record.lineno
        log_data['service'] = getattr(record, 'service', SERVICE_NAME)

        request_id = getattr(record, 'request_id', '')
        if request_id:
            log_data['request_id'] = request_id
        else:
            log_data.pop('request_id', None)

        # extra_fields arrive nested; flatten them under "extra"
        extra_fields = log_data.pop('extra_fields', None)
        if extra_fields:
            log_data['extra'] = extra_fields
        log_data.pop('hostname', None)


class PerformanceLogger:
    """
    Logger for tracking performance metrics and timing information.
    """

    def __init__(self, logger: logging.Logger):
        self.logger = logger

    def log_request(
        self,
        method: str,
        path: str,
        status_code: int,
        duration_ms: float,
        slow: bool = False,
        extra: Optional[Dict] = None
    ):
        """Log HTTP request performance."""
        extra_fields = {
            'event_type': 'http_request',
            'method': method,
            'path': path,
            'status_code': status_code,
            'duration_ms': round(duration_ms, 2),
            **(extra or {})
        }

        level = logging.WARNING if slow or status_code >= 500 else logging.INFO
        self.logger.log(
            level,
            f"HTTP {method} {path} - {status_code} - {duration_ms:.2f}ms",
            extra={'extra_fields': extra_fields}
        )


class StructuredLogger:
    """
    Enhanced logger with structured logging capabilities.

    Keyword arguments that are not logging options become extra fields
    on the record, so callers can write ``logger.info("msg", gtin=...)``.
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)
        self.performance = PerformanceLogger(self.logger)

    def debug(self, message: str, extra: Optional[Dict] = None, **kwargs):
        self._log(logging.DEBUG, message, extra, **kwargs)

    def info(self, message: str, extra: Optional[Dict] = None, **kwargs):
        self._log(logging.INFO, message, extra, **kwargs)

    def warning(self, message: str, extra: Optional[Dict] = None, **kwargs):
        self._log(logging.WARNING, message, extra, **kwargs)

    def error(self, message: str, extra: Optional[Dict] = None, exc_info: bool = False, **kwargs):
        self._log(logging.ERROR, message, extra, exc_info=exc_info, **kwargs)

    def critical(self, message: str, extra: Optional[Dict] = None, exc_info: bool = False, **kwargs):
        self._log(logging.CRITICAL, message, extra, exc_info=exc_info, **kwargs)

    def _log(self, level: int, message: str, extra: Optional[Dict] = None, **kwargs):
        """Internal log method with extra fields handling."""
        extra_fields = dict(extra or {})

        for key, value in kwargs.items():
            if key not in ['exc_info', 'stack_info', 'stacklevel']:
                extra_fields[key] = value

        clean_kwargs = {k: v for k, v in kwargs.items()
                        if k in ['exc_info', 'stack_info', 'stacklevel']}
        # Report the caller, not this wrapper
        clean_kwargs.setdefault('stacklevel', 3)

        if extra_fields:
            clean_kwargs['extra'] = {'extra_fields': extra_fields}

        self.logger.log(level, message, **clean_kwargs)


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    log_file: Optional[str] = None,
    enable_console: bool = True,
    force: bool = False,
) -> logging.Logger:
    """
    Setup application logging configuration.

    Args:
        log_level: Override for settings.LOG_LEVEL
        log_format: 'json' or 'text', override for settings.LOG_FORMAT
        log_file: Optional file to log to in addition to stdout
        enable_console: Attach a stdout handler
        force: Reconfigure even if logging was already set up

    Returns:
        The "startup" logger
    """
    global _logging_configured

    if _logging_configured and not force:
        return logging.getLogger("startup")

    settings = get_settings()
    log_level = log_level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT
    log_file = log_file or settings.LOG_FILE

    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    if log_format.lower() == 'json':
        formatter: logging.Formatter = JSONFormatter('%(message)s')
    else:
        formatter = ContextualFormatter('%(timestamp)s - %(name)s - %(levelname)s - %(message)s')

    context_filter = RequestContextFilter()

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(numeric_level)
        console_handler.setFormatter(formatter)
        console_handler.addFilter(context_filter)
        root_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        file_handler.addFilter(context_filter)
        root_logger.addHandler(file_handler)

    logging.getLogger('asyncio').setLevel(logging.WARNING)
    logging.getLogger('sqlalchemy.engine').setLevel(
        logging.INFO if settings.DEBUG else logging.WARNING
    )

    _logging_configured = True
    return logging.getLogger("startup")


def get_logger(name: str) -> StructuredLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        StructuredLogger instance
    """
    if name in _loggers_cache:
        return _loggers_cache[name]

    logger = StructuredLogger(name)
    _loggers_cache[name] = logger

    return logger


@contextmanager
def log_context(request_id: Optional[str] = None):
    """
    Context manager binding a request id to every log record emitted inside it.

    Args:
        request_id: Request identifier, generated when omitted
    """
    if request_id is None:
        request_id = str(uuid4())

    token = request_id_var.set(request_id)
    try:
        yield request_id
    finally:
        request_id_var.reset(token)


def log_startup_event(service_name: str, version: str, extra: Optional[Dict] = None):
    """Log application startup event."""
    logger = get_logger('startup')
    logger.info(
        f"Service {service_name} starting up",
        extra={
            'event_type': 'service_startup',
            'service_name': service_name,
            'version': version,
            **(extra or {})
        }
    )


def log_shutdown_event(service_name: str, extra: Optional[Dict] = None):
    """Log application shutdown event."""
    logger = get_logger('shutdown')
    logger.info(
        f"Service {service_name} shutting down",
        extra={
            'event_type': 'service_shutdown',
            'service_name': service_name,
            **(extra or {})
        }
    )


def log_health_check(component: str, status: str, extra: Optional[Dict] = None):
    """Log health check results."""
    logger = get_logger('health')
    message = f"Health check for {component}: {status}"
    fields = {
        'event_type': 'health_check',
        'component': component,
        'status': status,
        **(extra or {})
    }
    if status == 'healthy':
        logger.debug(message, extra=fields)
    else:
        logger.warning(message, extra=fields)
