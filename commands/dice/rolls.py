"""
Gemini Dice Commands

Listens for `!gd`-style chat commands and offers the `/gemini` slash command.
Both run the roll through the rules engine and post the rendered result.
"""
from typing import Optional

import discord
from discord.ext import commands

from config import get_config
from constants import VERSION
from models.command import ParsedCommand, RollCommand
from services.command_router import parse_command
from services.rules_engine import RulesEngine
from utils.decorators import logged_command
from utils.discord_helpers import get_gm_recipient, resolve_display_name
from utils.dice_utils import roll_dice_expression
from utils.listeners import should_process_message, ROLL_FILTERS
from utils.logging import get_contextual_logger
from views.embeds import EmbedTemplate
from views.roll_display import build_roll_display
from views.roll_embeds import create_help_embed, create_roll_embed
from exceptions import BotException


class GeminiDiceCommands(commands.Cog):
    """Gemini System dice command handlers."""

    def __init__(self, bot: commands.Bot, engine: RulesEngine):
        self.bot = bot
        self.engine = engine
        self.logger = get_contextual_logger(f'{__name__}.GeminiDiceCommands')

    @commands.Cog.listener(name='on_message')
    async def on_message_listener(self, message: discord.Message):
        """Route chat messages that start with a dice command."""
        if not should_process_message(message, *ROLL_FILTERS):
            return

        parsed = parse_command(message.content, prefix=get_config().command_prefix)
        if parsed is None:
            return

        await self.handle_command(message, parsed)

    @logged_command("!gd")
    async def handle_command(self, message: discord.Message, parsed: ParsedCommand):
        """Run a routed chat command and deliver the result."""
        if parsed.is_help:
            await self._send_help(message)
            return

        try:
            embed = self._roll_embed(parsed, resolve_display_name(message.guild, message.author.id))
        except (ValueError, BotException) as e:
            self.logger.warning("Invalid dice expression", expression=parsed.expression, reason=str(e))
            await message.channel.send(embed=EmbedTemplate.error("Invalid dice expression", str(e)))
            return

        if parsed.whisper:
            await self._whisper(message, embed)
        else:
            await message.channel.send(embed=embed)

    @discord.app_commands.command(
        name="gemini",
        description="Roll Gemini System dice (e.g. 5d6+2); the last die is the wild die"
    )
    @discord.app_commands.describe(
        dice="Dice expression such as 5d6, 5d6+2 or 5d6+(2+1)",
        mode="How the roll is scored",
        whisper="Send the result privately to the GM",
        template="Message text with %%ROLL%% where the roll should appear"
    )
    @discord.app_commands.choices(mode=[
        discord.app_commands.Choice(name="Standard", value=RollCommand.ROLL.value),
        discord.app_commands.Choice(name="Rollup", value=RollCommand.ROLLUP.value),
        discord.app_commands.Choice(name="Success", value=RollCommand.SUCCESS.value),
        discord.app_commands.Choice(name="Luck", value=RollCommand.LUCK.value),
        discord.app_commands.Choice(name="Unluck", value=RollCommand.UNLUCK.value),
    ])
    @logged_command("/gemini")
    async def gemini_roll(
        self,
        interaction: discord.Interaction,
        dice: str,
        mode: Optional[discord.app_commands.Choice[str]] = None,
        whisper: bool = False,
        template: Optional[str] = None
    ):
        """Roll Gemini dice from a slash command."""
        command = RollCommand(mode.value) if mode is not None else RollCommand.ROLL
        parsed = ParsedCommand(command=command, whisper=whisper, expression=dice, template=template, raw=dice)

        try:
            embed = self._roll_embed(parsed, resolve_display_name(interaction.guild, interaction.user.id))
        except (ValueError, BotException) as e:
            await interaction.response.send_message(
                embed=EmbedTemplate.error("Invalid dice expression", str(e)),
                ephemeral=True
            )
            return

        if whisper:
            await interaction.response.send_message(embed=embed, ephemeral=True)
            gm_channel_id = get_config().gm_channel_id
            channel = self.bot.get_channel(gm_channel_id) if gm_channel_id is not None else None
            if channel is not None:
                await channel.send(embed=embed)
        else:
            await interaction.response.send_message(embed=embed)

    def _roll_embed(self, parsed: ParsedCommand, speaker: str) -> discord.Embed:
        """Roll, resolve and render a parsed command."""
        record = roll_dice_expression(parsed.expression or '', self.engine.random_source)
        result = self.engine.evaluate(parsed.command, record)
        display, _ = build_roll_display(result)

        self.logger.info(
            "Dice rolled successfully",
            roll_command=parsed.command.value,
            total=display.total,
            fail_total=display.fail_total
        )
        return create_roll_embed(display, speaker, template=parsed.template)

    async def _whisper(self, message: discord.Message, embed: discord.Embed):
        """Deliver a roll to the GM, with a copy to the issuer."""
        recipient = await get_gm_recipient(self.bot, message)
        await recipient.send(embed=embed)

        if recipient != message.author:
            try:
                await message.author.send(embed=embed)
            except discord.Forbidden:
                self.logger.warning("Could not DM whisper copy to issuer", user_id=message.author.id)

    async def _send_help(self, message: discord.Message):
        """Send the help menu to the issuer, in the channel if DMs are closed."""
        embed = create_help_embed(VERSION, prefix=get_config().command_prefix)
        try:
            await message.author.send(embed=embed)
        except discord.Forbidden:
            await message.channel.send(embed=embed)
