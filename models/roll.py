"""
Roll models for the Gemini System

Represents raw roll records handed over by the dice-parsing facility and the
roll result threaded through the rules pipeline.
"""
from enum import Enum
from typing import Optional, Tuple

from pydantic import Field, field_validator

from constants import DIE_MIN_FACE, DIE_MAX_FACE
from models.base import GeminiBaseModel


class RollType(Enum):
    """Scoring modes of the Gemini System."""
    STANDARD = "standard"
    SUCCESS = "success"
    LUCK = "luck"
    UNLUCK = "unluck"

    @property
    def label(self) -> str:
        return self.value.capitalize()


def _check_faces(values: Tuple[int, ...]) -> Tuple[int, ...]:
    for value in values:
        if not DIE_MIN_FACE <= value <= DIE_MAX_FACE:
            raise ValueError(f"Die face {value} is outside {DIE_MIN_FACE}-{DIE_MAX_FACE}")
    return values


class DieGroup(GeminiBaseModel):
    """One group of a roll record: rolled values and/or a modifier expression."""

    values: Tuple[int, ...] = Field(default=(), description="Rolled die values in roll order")
    expression: Optional[str] = Field(None, description="Expression text (e.g. '5d6', '+(2+1)')")


class RollRecord(GeminiBaseModel):
    """Raw roll record as produced by the dice-parsing facility."""

    groups: Tuple[DieGroup, ...] = Field(default=(), description="Die groups in expression order")

    @property
    def first_group(self) -> Optional[DieGroup]:
        return self.groups[0] if self.groups else None

    @property
    def modifier_group(self) -> Optional[DieGroup]:
        return self.groups[1] if len(self.groups) >= 2 else None


class RollResult(GeminiBaseModel):
    """
    A single Gemini roll moving through the rules pipeline.

    Instances are immutable. Every pipeline stage returns a new copy, so the
    draft, resolved and rendered states of a roll can be inspected separately.
    """

    type: RollType = Field(RollType.STANDARD, description="Scoring rule for this roll")
    dice: Tuple[int, ...] = Field(default=(), description="Ordinary dice, wild die excluded")
    pips: int = Field(0, description="Signed flat modifier")
    wild_die: int = Field(..., description="Value of the designated wild die")
    bonus_dice: Tuple[int, ...] = Field(default=(), description="Dice added by wild die explosions")
    sum_fail: int = Field(0, ge=0, description="Failure magnitude after a zero-out")
    mark_first_max: bool = Field(False, description="Negate the first highest die on the next render")

    @field_validator('dice', 'bonus_dice')
    @classmethod
    def validate_faces(cls, v: Tuple[int, ...]) -> Tuple[int, ...]:
        return _check_faces(v)

    @field_validator('wild_die')
    @classmethod
    def validate_wild_die(cls, v: int) -> int:
        _check_faces((v,))
        return v

    @property
    def all_dice(self) -> Tuple[int, ...]:
        """Ordinary dice, bonus dice and the wild die."""
        return self.dice + self.bonus_dice + (self.wild_die,)
