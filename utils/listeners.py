"""
Message Listener Utilities

Reusable message filters for on_message listeners.
"""
import logging
from typing import Callable
import discord
from config import get_config

logger = logging.getLogger(f'{__name__}.message_filters')


def should_ignore_bot_messages(message: discord.Message) -> bool:
    """Ignore messages written by bots, including this one."""
    return message.author.bot


def should_ignore_empty_messages(message: discord.Message) -> bool:
    """Ignore messages without text content."""
    return not message.content


def should_ignore_wrong_guild(message: discord.Message) -> bool:
    """
    Ignore guild messages from guilds other than the configured one.

    Direct messages and unconfigured deployments are always accepted.
    """
    guild_id = get_config().guild_id
    if guild_id is None or message.guild is None:
        return False
    return message.guild.id != guild_id


def should_process_message(
    message: discord.Message,
    *filters: Callable[[discord.Message], bool]
) -> bool:
    """
    Check if a message should be processed based on provided filters.

    Args:
        message: Discord message object
        *filters: Filter functions that return True if the message should be ignored

    Returns:
        bool: True if every filter returned False
    """
    for filter_func in filters:
        if filter_func(message):
            logger.debug(f"Message {message.id} ignored by {filter_func.__name__}")
            return False

    return True


ROLL_FILTERS = (
    should_ignore_bot_messages,
    should_ignore_empty_messages,
    should_ignore_wrong_guild,
)
"""Filters applied before routing a message to the dice commands."""
