"""
Gemini Dice - Main Entry Point

discord.py bot running the Gemini System dice rules.
"""
import asyncio
import logging
import os
from logging.handlers import RotatingFileHandler

import discord
from discord.ext import commands

from config import get_config
from constants import VERSION
from exceptions import BotException, ConfigurationException
from services.random_source import SystemRandomSource
from services.rules_engine import RulesEngine


def setup_logging():
    """Configure hybrid logging: human-readable console + structured JSON files."""
    from utils.logging import JSONFormatter

    config = get_config()
    log_dir = os.path.dirname(config.log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    level = getattr(logging, config.log_level.upper())

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s'
    ))

    json_handler = RotatingFileHandler(
        config.log_file,
        maxBytes=5 * 1024 * 1024,  # 5MB
        backupCount=5
    )
    json_handler.setFormatter(JSONFormatter())

    # Bot modules and third-party libraries (discord.py) all log through the root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if not root_logger.handlers:
        root_logger.addHandler(console_handler)
        root_logger.addHandler(json_handler)

    return logging.getLogger('gemini_dice')


class GeminiDiceBot(commands.Bot):
    """Bot hosting the Gemini dice commands."""

    def __init__(self, rules_engine: RulesEngine):
        intents = discord.Intents.default()
        intents.message_content = True  # Dice commands are read from chat messages
        intents.members = True  # Display name lookups

        super().__init__(
            command_prefix=get_config().command_prefix,
            intents=intents,
            description=f"GeminiDice v{VERSION}"
        )

        self.rules_engine = rules_engine
        self.logger = logging.getLogger('gemini_dice')

    async def setup_hook(self):
        """Called when the bot is starting up."""
        from commands.dice import setup_dice

        self.logger.info("Setting up bot...")
        successful, failed, failed_modules = await setup_dice(self, self.rules_engine)
        if failed:
            self.logger.warning(f"⚠️  Dice commands partially loaded, failed: {', '.join(failed_modules)}")

        config = get_config()
        if config.is_development:
            await self._sync_commands()
        else:
            self.logger.info("Production mode: commands loaded but not auto-synced")

    async def _sync_commands(self):
        config = get_config()
        if config.guild_id:
            guild = discord.Object(id=config.guild_id)
            self.tree.copy_global_to(guild=guild)
            synced = await self.tree.sync(guild=guild)
            self.logger.info(f"Synced {len(synced)} commands to guild {config.guild_id}")
        else:
            synced = await self.tree.sync()
            self.logger.info(f"Synced {len(synced)} commands globally")

    async def on_ready(self):
        """Called when the bot is ready (the engine is already built)."""
        self.logger.info(f"GeminiDice v{VERSION} ready! Logged in as {self.user}")
        self.logger.info(f"Connected to {len(self.guilds)} guilds")

    async def on_error(self, event_method: str, /, *args, **kwargs):
        """Global error handler for events."""
        self.logger.error(f"Error in event {event_method}", exc_info=True)


def create_bot() -> GeminiDiceBot:
    """Build the bot and its rules engine once per process."""
    bot = GeminiDiceBot(RulesEngine(SystemRandomSource()))

    @bot.tree.error
    async def on_app_command_error(interaction: discord.Interaction, error: discord.app_commands.AppCommandError):
        """Global error handler for application commands."""
        original = getattr(error, 'original', error)
        if isinstance(original, BotException):
            message = f"❌ {str(original)}"
        else:
            bot.logger.error(f"Unhandled command error: {error}", exc_info=True)
            message = "❌ An unexpected error occurred. Please try again."
            if get_config().is_development:
                message += f"\n\nDevelopment error: {str(error)}"

        if interaction.response.is_done():
            await interaction.followup.send(message, ephemeral=True)
        else:
            await interaction.response.send_message(message, ephemeral=True)

    return bot


async def main():
    """Main entry point."""
    logger = setup_logging()

    config = get_config()
    if not config.bot_token:
        raise ConfigurationException("BOT_TOKEN is not configured")

    logger.info(f"Starting GeminiDice v{VERSION}")
    logger.info(f"Environment: {config.environment}")

    bot = create_bot()
    try:
        await bot.start(config.bot_token)
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt, shutting down...")
    finally:
        await bot.close()


def run():
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
