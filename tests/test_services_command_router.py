"""
Tests for chat command routing
"""
import pytest

from models.command import RollCommand
from services.command_router import parse_command


class TestParseCommand:
    """Test routing raw messages to dice commands."""

    @pytest.mark.parametrize("text,command", [
        ("!gd 5d6", RollCommand.ROLL),
        ("!gdr 5d6+7", RollCommand.ROLLUP),
        ("!gds 4d6", RollCommand.SUCCESS),
        ("!gdl 4d6", RollCommand.LUCK),
        ("!gdu 4d6", RollCommand.UNLUCK),
    ])
    def test_roll_commands(self, text, command):
        parsed = parse_command(text)

        assert parsed.command is command
        assert parsed.whisper is False
        assert parsed.expression == text.split(' ', 1)[1]

    def test_whisper_prefix(self):
        parsed = parse_command("!wgds 3d6+1")

        assert parsed.command is RollCommand.SUCCESS
        assert parsed.whisper is True
        assert parsed.expression == "3d6+1"

    @pytest.mark.parametrize("text", ["hello there", "!roll 2d6", "gd 5d6", "", "!w"])
    def test_non_dice_messages_are_ignored(self, text):
        assert parse_command(text) is None

    @pytest.mark.parametrize("text", [
        "!gdx 5d6",
        "!gd",
        "!gd --help",
        "!wgdr --help",
        "!gds 4d6 --help",
        "!gdzz",
    ])
    def test_help_fallback(self, text):
        parsed = parse_command(text)

        assert parsed.command is RollCommand.HELP
        assert parsed.is_help
        assert parsed.expression is None

    def test_template_option(self):
        parsed = parse_command("!gd 5d6+2 --template Sword swing: %%ROLL%% damage")

        assert parsed.command is RollCommand.ROLL
        assert parsed.expression == "5d6+2"
        assert parsed.template == "Sword swing: %%ROLL%% damage"

    def test_template_requires_text(self):
        assert parse_command("!gd 5d6 --template").template is None

    def test_unknown_option_is_ignored(self):
        parsed = parse_command("!gd 5d6 --loud")
        assert parsed.command is RollCommand.ROLL
        assert parsed.template is None

    def test_custom_prefix(self):
        assert parse_command("?gd 2d6", prefix='?').command is RollCommand.ROLL
        assert parse_command("!gd 2d6", prefix='?') is None

    def test_raw_text_is_kept(self):
        assert parse_command("!gd 2d6").raw == "!gd 2d6"

    def test_command_word_is_case_insensitive(self):
        assert parse_command("!GDS 2d6").command is RollCommand.SUCCESS
