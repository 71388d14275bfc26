"""
Roll embeds for Gemini Dice
"""
from typing import Optional

import discord

from constants import FAILURE_BADGE, TEMPLATE_PLACEHOLDER
from views.embeds import EmbedTemplate
from views.roll_display import RollDisplay, render_dice_line, render_roll_text, wrap_in_template


def create_roll_embed(
    display: RollDisplay,
    speaker: str,
    template: Optional[str] = None
) -> discord.Embed:
    """Create an embed for a resolved roll, optionally wrapped in a message template."""
    embed = EmbedTemplate.create_base_embed(
        title=f"🎲 {display.roll_type.label} roll for {speaker}",
        color=display.badge_color
    )

    if template:
        embed.description = wrap_in_template(render_roll_text(display), template)
        return embed

    if display.zero_out:
        embed.add_field(name=f"{FAILURE_BADGE} Failure", value=f"# {display.fail_total}", inline=True)
    embed.add_field(name="Total", value=f"# {display.total}", inline=True)
    embed.add_field(name="Dice", value=render_dice_line(display), inline=False)

    return embed


def create_help_embed(version: str, prefix: str = '!') -> discord.Embed:
    """Create the help embed listing every dice command."""
    embed = EmbedTemplate.info(
        title=f"GeminiDice v{version}",
        description=(
            "GeminiDice implements the rolling mechanics for all of the Gemini System roll styles.\n\n"
            f"Prepend a `w` to any command to whisper the result to the GM, e.g. `{prefix}wgd 5d6`.\n"
            "A dice expression looks like `5d6`, `5d6+2` or `5d6+(2+1)`; the last die rolled is the wild die.\n"
            "Add `--help` to any command to show this menu."
        )
    )

    commands_help = [
        ("gd", "Rolls the expression and adds up the dice and pips."),
        ("gdr", "Rolls the expression, converting every 3 pips into another die."),
        ("gds", "Rolls the expression counting successes (3 or higher)."),
        ("gdl", "Rolls the expression counting Luck (every 6)."),
        ("gdu", "Rolls the expression counting Unluck (every 1)."),
    ]
    for name, description in commands_help:
        embed.add_field(name=f"{prefix}{name} <dice expression>", value=description, inline=False)

    embed.add_field(
        name="Templates",
        value=f"`{prefix}gd 5d6 --template Sword swing: {TEMPLATE_PLACEHOLDER}` places the roll inside your text.",
        inline=False
    )
    embed.set_footer(text="Wild die: 6 explodes, 1 zeroes out the highest die")
    return embed
