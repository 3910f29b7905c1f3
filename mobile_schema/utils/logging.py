"""
Structured logging for the schema compiler.

Features:
- JSON formatted log lines
- Correlation ID tracking across a request
- Performance events for traced calls
- Level filtering from settings
"""
import sys
import json
import traceback
from typing import Any, Dict, Optional
from datetime import datetime, timezone
from contextvars import ContextVar
from functools import wraps
import socket
import os

from mobile_schema.config import settings

# Context variables for correlation tracking
correlation_id_var: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)
request_path_var: ContextVar[Optional[str]] = ContextVar('request_path', default=None)

LEVELS = {
    "DEBUG": 10,
    "INFO": 20,
    "WARNING": 30,
    "ERROR": 40,
    "CRITICAL": 50,
}


class StructuredLogger:
    """
    Structured logger with correlation tracking.

    Every entry is a single JSON line carrying:
    - Timestamp (ISO 8601)
    - Correlation ID and request path (when inside log_context)
    - Service metadata
    - Event name, message and optional data
    """

    def __init__(self, name: str):
        self.name = name
        self.hostname = socket.gethostname()
        self.service_name = settings.app_name
        self.service_version = settings.app_version
        self.environment = settings.environment
        self.instance_id = os.getenv("INSTANCE_ID", self.hostname)

    def _enabled(self, level: str) -> bool:
        return LEVELS[level] >= LEVELS.get(settings.log_level, 20)

    def _get_base_context(self) -> Dict[str, Any]:
        """Get base logging context"""
        return {
            "@timestamp": datetime.now(timezone.utc).isoformat(),
            "service": {
                "name": self.service_name,
                "version": self.service_version,
                "environment": self.environment,
                "instance_id": self.instance_id,
            },
            "logger": {
                "name": self.name
            },
            "correlation": {
                "correlation_id": correlation_id_var.get(),
                "path": request_path_var.get(),
            }
        }

    def _format_log(
        self,
        level: str,
        event: str,
        message: Optional[str] = None,
        extra: Optional[Dict[str, Any]] = None,
        exc_info: Optional[BaseException] = None
    ) -> Dict[str, Any]:
        """Format log entry as JSON"""

        log_entry = self._get_base_context()

        log_entry.update({
            "level": level,
            "event": event,
            "message": message or event
        })

        if extra:
            log_entry["data"] = extra

        if exc_info:
            log_entry["error"] = {
                "type": type(exc_info).__name__,
                "message": str(exc_info),
                "stacktrace": "".join(
                    traceback.format_exception(type(exc_info), exc_info, exc_info.__traceback__)
                )
            }

        return log_entry

    def _emit(self, level: str, event: str, message: str = None, extra: Dict = None,
              exc_info: BaseException = None, stream=None):
        if not self._enabled(level):
            return
        log_entry = self._format_log(level, event, message, extra, exc_info)
        print(json.dumps(log_entry, default=str), file=stream or sys.stdout)

    def debug(self, event: str, message: str = None, extra: Dict = None, **kwargs):
        """Log debug message"""
        self._emit("DEBUG", event, message, extra)

    def info(self, event: str, message: str = None, extra: Dict = None, **kwargs):
        """Log info message"""
        self._emit("INFO", event, message, extra)

    def warning(self, event: str, message: str = None, extra: Dict = None, **kwargs):
        """Log warning message"""
        self._emit("WARNING", event, message, extra, stream=sys.stderr)

    def error(
        self,
        event: str,
        message: str = None,
        extra: Dict = None,
        exc_info: BaseException = None,
        **kwargs
    ):
        """Log error message"""
        self._emit("ERROR", event, message, extra, exc_info, stream=sys.stderr)

    def critical(
        self,
        event: str,
        message: str = None,
        extra: Dict = None,
        exc_info: BaseException = None,
        **kwargs
    ):
        """Log critical message"""
        self._emit("CRITICAL", event, message, extra, exc_info, stream=sys.stderr)

    def performance(
        self,
        event: str,
        duration_ms: float,
        extra: Dict = None
    ):
        """Log performance metric"""
        perf_data = {
            "performance": {
                "duration_ms": duration_ms,
                "duration_seconds": duration_ms / 1000
            }
        }

        if extra:
            perf_data.update(extra)

        self._emit("INFO", event, f"Performance: {duration_ms:.2f}ms", perf_data)


def get_logger(name: str) -> StructuredLogger:
    """
    Get structured logger for module.

    Usage:
        logger = get_logger(__name__)
        logger.info("compiler.app.assembled", extra={"pages": 3})
    """
    return StructuredLogger(name)


class log_context:
    """
    Context manager for correlation tracking.

    Usage:
        with log_context(correlation_id="abc", path="/api/v1/mobile-schema/export"):
            logger.info("export.started")
    """

    def __init__(self, correlation_id: str = None, path: str = None):
        self.correlation_id = correlation_id
        self.path = path
        self.prev_correlation = None
        self.prev_path = None

    def __enter__(self):
        self.prev_correlation = correlation_id_var.get()
        self.prev_path = request_path_var.get()

        if self.correlation_id:
            correlation_id_var.set(self.correlation_id)
        if self.path:
            request_path_var.set(self.path)

        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        correlation_id_var.set(self.prev_correlation)
        request_path_var.set(self.prev_path)


def _traced(event_prefix: str, func, is_async: bool):
    def _started(logger, args, kwargs):
        logger.debug(
            f"{event_prefix}.started",
            extra={
                "function": func.__name__,
                "args_count": len(args),
                "kwargs_count": len(kwargs)
            }
        )

    def _completed(logger, start_time):
        duration_ms = (datetime.now(timezone.utc) - start_time).total_seconds() * 1000
        logger.performance(
            f"{event_prefix}.completed",
            duration_ms=duration_ms,
            extra={"function": func.__name__, "success": True}
        )

    def _failed(logger, start_time, e):
        duration_ms = (datetime.now(timezone.utc) - start_time).total_seconds() * 1000
        logger.error(
            f"{event_prefix}.failed",
            extra={
                "function": func.__name__,
                "duration_ms": duration_ms,
                "error_type": type(e).__name__
            },
            exc_info=e
        )

    if is_async:
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            logger = get_logger(func.__module__)
            start_time = datetime.now(timezone.utc)
            _started(logger, args, kwargs)
            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                _failed(logger, start_time, e)
                raise
            _completed(logger, start_time)
            return result
        return async_wrapper

    @wraps(func)
    def wrapper(*args, **kwargs):
        logger = get_logger(func.__module__)
        start_time = datetime.now(timezone.utc)
        _started(logger, args, kwargs)
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            _failed(logger, start_time, e)
            raise
        _completed(logger, start_time)
        return result
    return wrapper


def trace_sync(event_prefix: str):
    """
    Decorator for tracing sync functions.

    Usage:
        @trace_sync("compiler.assemble")
        def assemble_app(...):
            ...
    """
    def decorator(func):
        return _traced(event_prefix, func, is_async=False)
    return decorator


def trace_async(event_prefix: str):
    """
    Decorator for tracing async functions.

    Usage:
        @trace_async("api.export")
        async def export_endpoint(...):
            ...
    """
    def decorator(func):
        return _traced(event_prefix, func, is_async=True)
    return decorator


"""
LOG EVENT NAMING CONVENTIONS:

Use dot notation: <domain>.<action>.<result>

Examples:
- http.request.received
- http.request.completed
- compiler.page.converted
- compiler.app.assembled
- exporter.completed
- exporter.failed
"""
