"""
Discord Helper Utilities

Identity lookup and private delivery helpers for the dice commands.
"""
from typing import Optional, Union

import discord
from discord.ext import commands

from config import get_config
from constants import DEFAULT_SPEAKER_NAME
from utils.logging import get_contextual_logger

logger = get_contextual_logger(__name__)

Messageable = Union[discord.abc.Messageable, discord.Member, discord.User]


def resolve_display_name(guild: Optional[discord.Guild], user_id: Optional[int]) -> str:
    """
    Translate a user ID into a display name.

    Returns DEFAULT_SPEAKER_NAME when the guild or member cannot be found.
    """
    if guild is None or user_id is None:
        return DEFAULT_SPEAKER_NAME

    member = guild.get_member(user_id)
    if member is None:
        logger.debug("Could not resolve member", user_id=user_id)
        return DEFAULT_SPEAKER_NAME

    return member.display_name


async def get_gm_recipient(
    bot: commands.Bot,
    message: discord.Message
) -> Messageable:
    """
    Find where a whispered roll should go.

    Order: the configured GM channel, the guild owner, the issuer.
    """
    gm_channel_id = get_config().gm_channel_id
    if gm_channel_id is not None:
        channel = bot.get_channel(gm_channel_id)
        if channel is not None:
            return channel
        logger.warning(f"GM channel {gm_channel_id} not found")

    if message.guild is not None and message.guild.owner is not None:
        return message.guild.owner

    logger.warning("No GM recipient available, whispering to the issuer")
    return message.author
