"""
Dice Commands Package

This package contains the Gemini System dice commands.
"""
import logging
from discord.ext import commands

from services.rules_engine import RulesEngine
from .rolls import GeminiDiceCommands

logger = logging.getLogger(__name__)


async def setup_dice(bot: commands.Bot, engine: RulesEngine):
    """
    Setup all dice command modules.

    Returns:
        tuple: (successful_count, failed_count, failed_modules)
    """
    dice_cogs = [
        ("GeminiDiceCommands", GeminiDiceCommands),
    ]

    successful = 0
    failed = 0
    failed_modules = []

    for cog_name, cog_class in dice_cogs:
        try:
            await bot.add_cog(cog_class(bot, engine))
            logger.info(f"✅ Loaded {cog_name}")
            successful += 1
        except Exception as e:
            logger.error(f"❌ Failed to load {cog_name}: {e}", exc_info=True)
            failed += 1
            failed_modules.append(cog_name)

    if failed == 0:
        logger.info(f"🎉 All {successful} dice command modules loaded successfully")
    else:
        logger.warning(f"⚠️  Dice commands loaded with issues: {successful} successful, {failed} failed")

    return successful, failed, failed_modules


__all__ = ['setup_dice', 'GeminiDiceCommands']
