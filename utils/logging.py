"""
Enhanced Logging Utilities

Provides structured logging with contextual information for roll debugging.
Console output stays human-readable while the file handler writes JSON lines.
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

JSONValue = Union[str, int, float, bool, None, dict[str, Any], list[Any]]

# LogRecord attributes that are not user supplied extras
_RECORD_KEYS = {
    'name', 'msg', 'args', 'levelname', 'levelno', 'pathname',
    'filename', 'module', 'lineno', 'funcName', 'created',
    'msecs', 'relativeCreated', 'thread', 'threadName', 'taskName',
    'processName', 'process', 'getMessage', 'exc_info',
    'exc_text', 'stack_info', 'message', 'asctime'
}


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured file logging."""

    def format(self, record) -> str:
        log_obj: dict[str, JSONValue] = {
            'timestamp': datetime.now().isoformat() + 'Z',
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'function': record.funcName,
            'line': record.lineno,
        }

        if record.exc_info:
            log_obj['exception'] = {
                'type': record.exc_info[0].__name__ if record.exc_info[0] else 'Unknown',
                'message': str(record.exc_info[1]) if record.exc_info[1] else 'No message',
                'traceback': self.formatException(record.exc_info)
            }

        context = log_context.get({})
        if context:
            log_obj['context'] = context.copy()
            if 'trace_id' in context:
                log_obj['trace_id'] = context['trace_id']

        extra_data = {}
        for key, value in record.__dict__.items():
            if key in _RECORD_KEYS:
                continue
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
    Logger wrapper that adds structured keyword context to every message.

    Keyword arguments are passed to the underlying logger as `extra`, and an
    operation started with `start_operation` adds its running duration.
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
        """End an operation and log its final duration."""
        if self._start_time is None:
            self.warning("end_operation called without corresponding start_operation")
            return

        duration_ms = int((time.time() - self._start_time) * 1000)
        self._start_time = None

        self.info(f"Operation {operation_result}",
                  trace_id=trace_id,
                  final_duration_ms=duration_ms,
                  operation_result=operation_result)

        current_context = log_context.get({}).copy()
        current_context.pop('operation', None)
        if current_context.get('trace_id') == trace_id:
            current_context.pop('trace_id', None)
        log_context.set(current_context)

    def _with_duration(self, kwargs: Dict[str, Any]) -> Dict[str, Any]:
        if self._start_time is not None:
            kwargs['duration_ms'] = int((time.time() - self._start_time) * 1000)
        return kwargs

    def debug(self, message: str, **kwargs):
        self.logger.debug(message, extra=self._with_duration(kwargs))

    def info(self, message: str, **kwargs):
        self.logger.info(message, extra=self._with_duration(kwargs))

    def warning(self, message: str, **kwargs):
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
            self.logger.error(message, exc_info=True, extra=kwargs)
        else:
            self.logger.error(message, extra=kwargs)


def set_discord_context(
    message: Optional[Any] = None,
    user_id: Optional[Union[str, int]] = None,
    guild_id: Optional[Union[str, int]] = None,
    channel_id: Optional[Union[str, int]] = None,
    command: Optional[str] = None,
    **additional_context
):
    """
    Set Discord-specific context for logging.

    Args:
        message: Discord message or interaction (user/guild/channel are extracted)
        user_id: Discord user ID
        guild_id: Discord guild ID
        channel_id: Discord channel ID
        command: Command name (e.g. '!gd')
        **additional_context: Any additional context to include
    """
    context = log_context.get({}).copy()

    if message is not None:
        author = getattr(message, 'author', None) or getattr(message, 'user', None)
        if author is not None:
            context['user_id'] = str(author.id)
        if getattr(message, 'guild', None):
            context['guild_id'] = str(message.guild.id)
        if getattr(message, 'channel', None):
            context['channel_id'] = str(message.channel.id)

    if user_id:
        context['user_id'] = str(user_id)
    if guild_id:
        context['guild_id'] = str(guild_id)
    if channel_id:
        context['channel_id'] = str(channel_id)
    if command:
        context['command'] = command

    context.update(additional_context)
    log_context.set(context)


def clear_context():
    """Clear the current logging context."""
    log_context.set({})


def get_contextual_logger(logger_name: str) -> ContextualLogger:
    return ContextualLogger(logger_name)
