"""
Embed Templates for Gemini Dice

Provides consistent embed styling for roll results and notices.
"""
from typing import Optional, Union
from dataclasses import dataclass

import discord


@dataclass(frozen=True)
class EmbedColors:
    """Standard color palette for embeds."""
    PRIMARY: int = 0x2a2d2a      # Die black
    ROLL: int = 0x25c21d         # Total badge green
    ZERO_OUT: int = 0xf09f1f     # Total badge orange after a zero-out
    ERROR: int = 0xdc3545        # Red
    INFO: int = 0x17a2b8         # Blue


class EmbedTemplate:
    """Base embed template with consistent styling."""

    @staticmethod
    def create_base_embed(
        title: Optional[str] = None,
        description: Optional[str] = None,
        color: Union[int, discord.Color] = EmbedColors.PRIMARY,
        timestamp: bool = True
    ) -> discord.Embed:
        """Create a base embed with standard formatting."""
        embed = discord.Embed(
            title=title,
            description=description,
            color=color
        )

        if timestamp:
            embed.timestamp = discord.utils.utcnow()

        return embed

    @staticmethod
    def error(
        title: str = "Error",
        description: Optional[str] = None,
        **kwargs
    ) -> discord.Embed:
        """Create an error embed."""
        return EmbedTemplate.create_base_embed(
            title=f"❌ {title}",
            description=description,
            color=EmbedColors.ERROR,
            **kwargs
        )

    @staticmethod
    def info(
        title: str = "Information",
        description: Optional[str] = None,
        **kwargs
    ) -> discord.Embed:
        """Create an info embed."""
        return EmbedTemplate.create_base_embed(
            title=f"ℹ️ {title}",
            description=description,
            color=EmbedColors.INFO,
            **kwargs
        )
