"""
Enhanced Logging Utilities

Provides structured logging with request context for dashboard debugging.
Implements hybrid approach: human-readable console + structured JSON files.
"""
import contextvars
import json
import logging
import time
import uuid
from datetime import datetime
from typing import Dict, Any, Optional, Union

# Context variable for request tracking across async calls
log_context: contextvars.ContextVar[Dict[str, Any]] = contextvars.ContextVar('log_context', default={})

logger = logging.getLogger(f'{__name__}.logging_utils')

JSONValue = Union[
    str,
    int,
    float,
    bool,
    None,
    dict[str, Any],   # nested object
    list[Any]         # arrays
]

# LogRecord attributes that are not user-supplied extras
_RESERVED_ATTRS = {
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
    'filename', 'module', 'lineno', 'funcName', 'created',
    'msecs', 'relativeCreated', 'thread', 'threadName',
    'processName', 'process', 'getMessage', 'exc_info',
    'exc_text', 'stack_info', 'taskName', 'message', 'asctime'
}


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured file logging."""

    def format(self, record) -> str:
        """Format log record as JSON with context information."""
        log_obj: dict[str, JSONValue] = {
            'timestamp': datetime.now().isoformat() + 'Z',
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage()
        }

        if record.funcName:
            log_obj['function'] = record.funcName
        if record.lineno:
            log_obj['line'] = record.lineno

        if record.exc_info:
            log_obj['exception'] = {
                'type': record.exc_info[0].__name__ if record.exc_info[0] else 'Unknown',
                'message': str(record.exc_info[1]) if record.exc_info[1] else 'No message',
                'traceback': self.formatException(record.exc_info)
            }

        context = log_context.get({})
        if context:
            log_obj['context'] = context.copy()

            # Promote trace_id to standard key if available in context
            if 'trace_id' in context:
                log_obj['trace_id'] = context['trace_id']

        extra_data = {}
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                # Ensure JSON serializable
                try:
                    json.dumps(value)
                    extra_data[key] = value
                except (TypeError, ValueError):
                    extra_data[key] = str(value)

        if extra_data:
            log_obj['extra'] = extra_data

        return json.dumps(log_obj, ensure_ascii=False)


class ContextualLogger:
    """
    Logger wrapper that provides contextual information and structured logging.

    Request context (method, path, division) set via set_request_context is
    attached to every JSON log line.
    """

    def __init__(self, logger_name: str):
        self.logger = logging.getLogger(logger_name)
        self._start_time: Optional[float] = None

    def start_operation(self, operation_name: Optional[str] = None) -> str:
        """
        Start timing an operation and generate a trace ID.

        Args:
            operation_name: Optional name for the operation being tracked

        Returns:
            Generated trace ID for this operation
        """
        self._start_time = time.time()
        trace_id = str(uuid.uuid4())[:8]

        current_context = log_context.get({}).copy()
        current_context['trace_id'] = trace_id
        if operation_name:
            current_context['operation'] = operation_name
        log_context.set(current_context)

        return trace_id

    def end_operation(self, trace_id: str, operation_result: str = "completed") -> None:
        """
        End an operation and log the final duration.

        Args:
            trace_id: The trace ID returned by start_operation
            operation_result: Result status (e.g., "completed", "failed")
        """
        if self._start_time is None:
            self.warning("end_operation called without corresponding start_operation")
            return

        duration_ms = int((time.time() - self._start_time) * 1000)

        self.info(f"Operation {operation_result}",
                  trace_id=trace_id,
                  final_duration_ms=duration_ms,
                  operation_result=operation_result)

        current_context = log_context.get({}).copy()
        current_context.pop('operation', None)
        if current_context.get('trace_id') == trace_id:
            current_context.pop('trace_id', None)
        log_context.set(current_context)

        self._start_time = None

    def _get_duration_ms(self) -> Optional[int]:
        """Get operation duration in milliseconds if start_operation was called."""
        if self._start_time:
            return int((time.time() - self._start_time) * 1000)
        return None

    def _with_duration(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        duration = self._get_duration_ms()
        if duration is not None:
            kwargs['duration_ms'] = duration
        return kwargs

    def debug(self, message: str, **kwargs):
        """Log debug message with context."""
        self.logger.debug(message, extra=self._with_duration(kwargs))

    def info(self, message: str, **kwargs):
        """Log info message with context."""
        self.logger.info(message, extra=self._with_duration(kwargs))

    def warning(self, message: str, **kwargs):
        """Log warning message with context."""
        self.logger.warning(message, extra=self._with_duration(kwargs))

    def error(self, message: str, error: Optional[Exception] = None, **kwargs):
        """
        Log error message with context and exception information.

        Args:
            message: Error message
            error: Optional exception object
            **kwargs: Additional context
        """
        kwargs = self._with_duration(kwargs)
        if error:
            kwargs['error'] = {
                'type': type(error).__name__,
                'message': str(error)
            }
            self.logger.error(message, exc_info=error, extra=kwargs)
        else:
            self.logger.error(message, extra=kwargs)

    def exception(self, message: str, **kwargs):
        """Log exception with full traceback and context."""
        self.logger.exception(message, extra=self._with_duration(kwargs))


def set_request_context(
    request: Optional[Any] = None,
    method: Optional[str] = None,
    path: Optional[str] = None,
    division: Optional[str] = None,
    **additional_context
):
    """
    Set HTTP request context for logging.

    Args:
        request: aiohttp request (method, path and match info are extracted)
        method: HTTP method
        path: Request path
        division: Division token from the route
        **additional_context: Any additional context to include
    """
    context = log_context.get({}).copy()

    if request is not None:
        context['method'] = request.method
        context['path'] = request.path
        match_info = getattr(request, 'match_info', None) or {}
        if 'division' in match_info:
            context['division'] = match_info['division']

    if method:
        context['method'] = method
    if path:
        context['path'] = path
    if division:
        context['division'] = division

    context.update(additional_context)

    log_context.set(context)


def clear_context():
    """Clear the current logging context."""
    log_context.set({})


def get_contextual_logger(logger_name: str) -> ContextualLogger:
    """
    Get a contextual logger instance.

    Args:
        logger_name: Name for the logger (typically __name__)

    Returns:
        ContextualLogger instance
    """
    return ContextualLogger(logger_name)
