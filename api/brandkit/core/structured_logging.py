"""Structured JSON logging with secret redaction.

Log records are emitted as single-line JSON documents carrying the service
identity and, when available, the current request id. In production, values
that look like credentials are redacted before they reach the log stream.
"""

import logging
import re
import sys
import traceback
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pythonjsonlogger import jsonlogger

from .config import settings

# Set by RequestResponseMiddleware for the lifetime of a request
request_id_var: ContextVar[Optional[str]] = ContextVar('request_id', default=None)

# LogRecord attributes that are not user supplied extras
_RESERVED_ATTRS = frozenset([
    'name', 'msg', 'args', 'created', 'filename', 'funcName', 'levelname',
    'levelno', 'lineno', 'module', 'msecs', 'message', 'pathname', 'process',
    'processName', 'relativeCreated', 'thread', 'threadName', 'exc_info',
    'exc_text', 'stack_info', 'taskName',
])


class SecuritySanitizer:
    """Redact credentials from log payloads."""

    SENSITIVE_PATTERNS = {
        'api_key': re.compile(r'(api[_-]?key["\s:=]+["\']?)([a-zA-Z0-9_-]{20,})', re.IGNORECASE),
        'bearer_token': re.compile(r'(bearer\s+)([a-zA-Z0-9_.-]{20,})', re.IGNORECASE),
        'openai_key': re.compile(r'()(sk-[a-zA-Z0-9_-]{20,})'),
        'authorization': re.compile(r'(authorization["\s:=]+["\']?)([a-zA-Z0-9_.-]{20,})', re.IGNORECASE),
    }

    SENSITIVE_KEYS = ('password', 'secret', 'token', 'api_key', 'authorization')

    @classmethod
    def sanitize_string(cls, text: str) -> str:
        if not isinstance(text, str):
            return str(text)

        sanitized = text
        for pattern in cls.SENSITIVE_PATTERNS.values():
            sanitized = pattern.sub(r'\1***REDACTED***', sanitized)
        return sanitized

    @classmethod
    def sanitize_dict(cls, data: Dict[str, Any], max_depth: int = 3) -> Dict[str, Any]:
        if max_depth <= 0:
            return {"...": "max_depth_reached"}

        sanitized = {}
        for key, value in data.items():
            if any(sensitive in key.lower() for sensitive in cls.SENSITIVE_KEYS):
                sanitized[key] = "***REDACTED***"
            elif isinstance(value, dict):
                sanitized[key] = cls.sanitize_dict(value, max_depth - 1)
            elif isinstance(value, list):
                sanitized[key] = cls.sanitize_list(value, max_depth - 1)
            elif isinstance(value, str):
                sanitized[key] = cls.sanitize_string(value)
            else:
                sanitized[key] = value
        return sanitized

    @classmethod
    def sanitize_list(cls, data: List[Any], max_depth: int = 3) -> List[Any]:
        if max_depth <= 0:
            return ["...max_depth_reached"]

        sanitized = []
        for item in data[:10]:
            if isinstance(item, dict):
                sanitized.append(cls.sanitize_dict(item, max_depth - 1))
            elif isinstance(item, list):
                sanitized.append(cls.sanitize_list(item, max_depth - 1))
            elif isinstance(item, str):
                sanitized.append(cls.sanitize_string(item))
            else:
                sanitized.append(item)

        if len(data) > 10:
            sanitized.append(f"...and {len(data) - 10} more items")
        return sanitized


class StructuredFormatter(jsonlogger.JsonFormatter):
    """JSON formatter adding service and request context."""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]):
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.now(timezone.utc).isoformat()
        log_record['level'] = record.levelname
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno
        log_record['service'] = settings.service_name
        log_record['environment'] = settings.service_env

        if request_id := request_id_var.get():
            log_record.setdefault('request_id', request_id)

        if record.exc_info and record.exc_info[0] is not None:
            exception_info = {
                'type': record.exc_info[0].__name__,
                'message': SecuritySanitizer.sanitize_string(str(record.exc_info[1])),
            }
            if not settings.is_production:
                exception_info['traceback'] = traceback.format_exception(*record.exc_info)
            log_record['exception'] = exception_info
            log_record.pop('exc_info', None)

        if settings.is_production:
            for key, value in list(log_record.items()):
                if key in ('timestamp', 'level', 'service', 'environment'):
                    continue
                if isinstance(value, dict):
                    log_record[key] = SecuritySanitizer.sanitize_dict(value)
                elif isinstance(value, list):
                    log_record[key] = SecuritySanitizer.sanitize_list(value)
                elif isinstance(value, str):
                    log_record[key] = SecuritySanitizer.sanitize_string(value)


def _build_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter(
        '%(timestamp)s %(level)s %(name)s %(message)s',
        datefmt='%Y-%m-%dT%H:%M:%S'
    ))
    return handler


def setup_logging(level: str = "INFO") -> None:
    """Install the JSON handler on the root logger."""
    root = logging.getLogger()
    root.handlers = [_build_handler()]
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # httpx logs every request line at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


class StructuredLogger:
    """Logger accepting structured fields as keyword arguments."""

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _log(self, level: int, message: str, exc_info: bool = False, **kwargs):
        fields = {k: v for k, v in kwargs.items() if k not in _RESERVED_ATTRS}
        self.logger.log(level, message, exc_info=exc_info, extra=fields)

    def info(self, message: str, **kwargs):
        self._log(logging.INFO, message, **kwargs)

    def error(self, message: str, **kwargs):
        self._log(logging.ERROR, message, **kwargs)

    def warning(self, message: str, **kwargs):
        self._log(logging.WARNING, message, **kwargs)

    def debug(self, message: str, **kwargs):
        self._log(logging.DEBUG, message, **kwargs)

    def exception(self, message: str, **kwargs):
        self._log(logging.ERROR, message, exc_info=True, **kwargs)


class LoggerFactory:
    """Factory for creating structured loggers."""

    _loggers: Dict[str, StructuredLogger] = {}

    @classmethod
    def get_logger(cls, name: str) -> StructuredLogger:
        if name not in cls._loggers:
            cls._loggers[name] = StructuredLogger(name)
        return cls._loggers[name]


def log_external_call(logger: StructuredLogger, service: str, operation: str, **kwargs):
    """Log an outbound call to a third-party service."""
    logger.info(
        f"External call to {service}: {operation}",
        external_service=service,
        operation=operation,
        event_type="external_call",
        **kwargs
    )
