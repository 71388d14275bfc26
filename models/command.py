"""
Chat command models

Represents an inbound chat command after routing.
"""
from enum import Enum
from typing import Optional

from pydantic import Field

from models.base import GeminiBaseModel
from models.roll import RollType


class RollCommand(Enum):
    """Commands understood by the dice router."""
    ROLL = "gd"
    ROLLUP = "gdr"
    SUCCESS = "gds"
    LUCK = "gdl"
    UNLUCK = "gdu"
    HELP = "help"

    @property
    def roll_type(self) -> Optional[RollType]:
        """Scoring mode used by this command, None for help."""
        return {
            RollCommand.ROLL: RollType.STANDARD,
            RollCommand.ROLLUP: RollType.STANDARD,
            RollCommand.SUCCESS: RollType.SUCCESS,
            RollCommand.LUCK: RollType.LUCK,
            RollCommand.UNLUCK: RollType.UNLUCK,
        }.get(self)


class ParsedCommand(GeminiBaseModel):
    """A routed chat command."""

    command: RollCommand = Field(..., description="Command to run")
    whisper: bool = Field(False, description="Deliver the result privately to the GM")
    expression: Optional[str] = Field(None, description="Dice expression (e.g. '5d6+2')")
    template: Optional[str] = Field(None, description="Message template containing the roll placeholder")
    raw: str = Field("", description="Original message text")

    @property
    def is_help(self) -> bool:
        return self.command is RollCommand.HELP
