"""
Dice Expression Utilities

Evaluates chat dice expressions into raw roll records for the rules engine.
Only six-sided dice are supported.
"""
import re

from constants import DIE_MAX_FACE, MAX_DICE_PER_ROLL
from models.roll import DieGroup, RollRecord
from services.random_source import RandomSource

# Pattern: Nd6 followed by an optional modifier such as +2, -1 or +(2+1)
DICE_PATTERN = re.compile(r'^(\d+)d(\d*)(.*)$')
MODIFIER_PATTERN = re.compile(r'^(?:[+-]\d+|\+\(\d+\+\d+\))$')


def roll_dice_expression(dice_notation: str, random_source: RandomSource) -> RollRecord:
    """Parse a Gemini dice expression and roll it.

    Args:
        dice_notation: Dice expression (e.g. "5d6", "5d6+2", "4d6+(2+1)")
        random_source: Source of die results

    Returns:
        RollRecord with the rolled dice as the first group and the modifier,
        if any, as the second group

    Raises:
        ValueError: If the expression is invalid or values are out of reasonable limits
    """
    # Clean the input
    dice_notation = dice_notation.strip().lower().replace(' ', '')

    match = DICE_PATTERN.match(dice_notation)
    if not match:
        raise ValueError(f'Cannot parse dice string **{dice_notation}**')

    num_dice = int(match.group(1))
    die_sides = int(match.group(2) or DIE_MAX_FACE)
    modifier = match.group(3)

    if die_sides != DIE_MAX_FACE:
        raise ValueError(f'Gemini rolls use six-sided dice, not d{die_sides}')

    if num_dice < 1 or num_dice > MAX_DICE_PER_ROLL:
        raise ValueError('I don\'t know, bud, that just doesn\'t seem doable.')

    if modifier and not MODIFIER_PATTERN.match(modifier):
        raise ValueError(f'Cannot parse modifier **{modifier}**')

    rolls = tuple(random_source.roll_die() for _ in range(num_dice))
    groups = [DieGroup(values=rolls, expression=f'{num_dice}d{DIE_MAX_FACE}')]
    if modifier:
        groups.append(DieGroup(expression=modifier))

    return RollRecord(groups=tuple(groups))
