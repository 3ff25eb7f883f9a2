"""
Centralized logging configuration for the Product Details Service.

Provides a single structured logger with:
- Correlation IDs pulled from the request context
- JSON output for production and log files, colored output for development
- A `metadata=` keyword for structured fields
- Performance logging with an optional slow-operation threshold
"""

import json
import logging
import os
import sys
from datetime import datetime, UTC
from typing import Any, Dict, Optional, Union

from src.core.config import config
from src.utils.correlation_id import get_correlation_id

# Attributes every LogRecord carries; anything else arrived through `extra`
_RESERVED_RECORD_KEYS = {
    "name", "msg", "args", "created", "filename", "funcName", "levelname",
    "levelno", "lineno", "module", "msecs", "message", "pathname", "process",
    "processName", "relativeCreated", "thread", "threadName", "exc_info",
    "exc_text", "stack_info", "taskName",
}


class StructuredLogger:
    """
    Logger that emits one structured entry per call.

    Entries carry service name, environment and correlation ID so that
    snapshot assembly can be traced across a request.
    """

    def __init__(self, name: Optional[str] = None):
        self.service_name = config.service_name
        self.environment = config.environment
        self.log_format = config.resolved_log_format
        self._logger = logging.getLogger(name or self.service_name)
        self._setup_logging()

    def _setup_logging(self):
        """Attach console/file handlers to the service logger"""
        level = getattr(logging, config.resolved_log_level, logging.INFO)
        self._logger.handlers.clear()
        self._logger.setLevel(level)
        self._logger.propagate = False

        if config.log_to_console:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            if self.log_format == "json":
                console_handler.setFormatter(JSONFormatter())
            else:
                console_handler.setFormatter(ConsoleFormatter())
            self._logger.addHandler(console_handler)

        if config.log_to_file:
            log_file_path = config.resolved_log_file_path
            os.makedirs(os.path.dirname(log_file_path) or ".", exist_ok=True)

            file_handler = logging.FileHandler(log_file_path)
            file_handler.setLevel(level)
            file_handler.setFormatter(JSONFormatter())  # Always JSON for files
            self._logger.addHandler(file_handler)

    def _build_log_entry(
        self,
        level: str,
        message: str,
        correlation_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        **kwargs
    ) -> Dict[str, Any]:
        entry = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": level.upper(),
            "service": self.service_name,
            "environment": self.environment,
            "message": message,
            "correlationId": correlation_id or get_correlation_id(),
        }

        if metadata:
            entry["metadata"] = metadata

        entry.update(kwargs)
        return entry

    def _log(
        self,
        level: str,
        message: str,
        correlation_id: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        log_entry = self._build_log_entry(level, message, correlation_id, metadata, **kwargs)
        log_method = getattr(self._logger, level.lower())

        # 'message' clashes with LogRecord.message
        extra_data = {k: v for k, v in log_entry.items() if k != "message"}
        log_method(message, extra=extra_data)

    def debug(self, message: str, correlation_id: Optional[str] = None,
              metadata: Optional[Dict[str, Any]] = None, **kwargs):
        self._log("DEBUG", message, correlation_id, metadata, **kwargs)

    def info(self, message: str, correlation_id: Optional[str] = None,
             metadata: Optional[Dict[str, Any]] = None, **kwargs):
        self._log("INFO", message, correlation_id, metadata, **kwargs)

    def warning(self, message: str, correlation_id: Optional[str] = None,
                metadata: Optional[Dict[str, Any]] = None, **kwargs):
        self._log("WARNING", message, correlation_id, metadata, **kwargs)

    def error(
        self,
        message: str,
        correlation_id: Optional[str] = None,
        error: Optional[Union[str, Exception]] = None,
        metadata: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        """Error level logging, folding `error` into the metadata"""
        metadata = dict(metadata or {})
        if error:
            if isinstance(error, Exception):
                metadata["error"] = {
                    "type": type(error).__name__,
                    "message": str(error),
                }
            else:
                metadata["error"] = {"message": str(error)}

        self._log("ERROR", message, correlation_id, metadata, **kwargs)

    def performance(
        self,
        operation: str,
        duration_ms: float,
        threshold_ms: Optional[int] = None,
        metadata: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        """Log how long an operation took; WARNING when over threshold"""
        metadata = dict(metadata or {})
        metadata.update({
            "operation": operation,
            "durationMs": round(duration_ms, 3),
            "thresholdMs": threshold_ms,
        })

        level = "WARNING" if threshold_ms and duration_ms > threshold_ms else "INFO"
        self._log(level, f"Operation completed: {operation}", metadata=metadata, **kwargs)


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record):
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "service": config.service_name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_KEYS and key not in log_data:
                log_data[key] = value

        return json.dumps(log_data, default=str)


class ConsoleFormatter(logging.Formatter):
    """Colored console formatter for development"""

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
        'RESET': '\033[0m'
    }

    def format(self, record):
        color = self.COLORS.get(record.levelname, self.COLORS['RESET'])
        reset = self.COLORS['RESET']

        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S')
        correlation_id = getattr(record, "correlationId", None) or "no-correlation"
        line = f"{color}[{timestamp}] {record.levelname}{reset} [{correlation_id}] - {record.getMessage()}"

        metadata = getattr(record, "metadata", None)
        if metadata:
            line += f" | {json.dumps(metadata, default=str)}"
        return line


# Create and export the logger instance
logger = StructuredLogger()
