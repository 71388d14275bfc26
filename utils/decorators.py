"""
Decorators for Gemini Dice command handlers

Moves logging boilerplate out of the cog so handlers hold only roll logic.
"""

import inspect
from functools import wraps
from typing import List, Optional

from utils.logging import set_discord_context, get_contextual_logger


def logged_command(
    command_name: Optional[str] = None,
    log_params: bool = True,
    exclude_params: Optional[List[str]] = None
):
    """
    Decorator for command handlers that adds operation logging.

    The handler must be an async method with a (self, message, ...) signature,
    where `message` is a Discord message or interaction.

    Args:
        command_name: Override command name (defaults to function name with slashes)
        log_params: Whether to log command parameters (default: True)
        exclude_params: List of parameter names to exclude from logging

    Example:
        @logged_command("!gd")
        async def handle_roll(self, message, parsed):
            ...

    Side Effects:
        - Sets Discord context for all subsequent log entries
        - Creates a trace_id for request correlation
        - Re-raises all exceptions after logging them
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(self, message, *args, **kwargs):
            cmd_name = command_name or f"/{func.__name__.replace('_', '-')}"

            context = {"command": cmd_name}
            if log_params:
                param_names = list(inspect.signature(func).parameters.keys())[2:]  # Skip self, message
                exclude_set = set(exclude_params or [])
                for name, value in zip(param_names, args):
                    if name not in exclude_set:
                        context[f"param_{name}"] = str(value)

            set_discord_context(message=message, **context)

            logger = getattr(self, 'logger', None) or get_contextual_logger(
                f'{self.__class__.__module__}.{self.__class__.__name__}'
            )
            trace_id = logger.start_operation(f"{func.__name__}_command")

            try:
                logger.info(f"{cmd_name} command started")
                result = await func(self, message, *args, **kwargs)
                logger.info(f"{cmd_name} command completed successfully")
                logger.end_operation(trace_id, "completed")
                return result

            except Exception as e:
                logger.error(f"{cmd_name} command failed", error=e)
                logger.end_operation(trace_id, "failed")
                raise

        # Preserve signature for discord.py command registration
        wrapper.__signature__ = inspect.signature(func)  # type: ignore
        return wrapper
    return decorator
