"""
Wild die resolution

The wild die selects one of three outcomes for a roll:

- a 1 zeroes out: the highest ordinary die is discarded and a separate
  failure sum is computed (Standard and Success rolls),
- a 6 explodes: extra dice are drawn until a non-6 comes up,
- anything else leaves the roll untouched.
"""
from collections import Counter
from enum import Enum

from constants import ROLL_CRIT_FAILURE, ROLL_CRIT_SUCCESS, SUCCESS_THRESHOLD
from models.roll import RollResult, RollType
from services.random_source import RandomSource
from utils.logging import get_contextual_logger

logger = get_contextual_logger(__name__)


class WildDieState(Enum):
    NO_SPECIAL_EVENT = "none"
    ZERO_OUT = "zero_out"
    EXPLODE = "explode"


def wild_die_state(result: RollResult) -> WildDieState:
    """Select the wild die outcome for a roll."""
    if result.wild_die == ROLL_CRIT_FAILURE:
        return WildDieState.ZERO_OUT
    if result.wild_die == ROLL_CRIT_SUCCESS:
        return WildDieState.EXPLODE
    return WildDieState.NO_SPECIAL_EVENT


def count_successes(result: RollResult) -> int:
    """Ordinary and bonus dice at or above the success threshold."""
    return sum(1 for die in result.dice + result.bonus_dice if die >= SUCCESS_THRESHOLD)


def zero_out_sum(result: RollResult) -> int:
    """Failure sum once a zero-out has discarded one highest die."""
    if result.type is RollType.STANDARD:
        counts = Counter(result.dice)
        if counts:
            counts[max(counts)] -= 1
        return max(0, sum(value * count for value, count in counts.items()) + result.pips)

    if result.type is RollType.SUCCESS:
        successes = count_successes(result)
        return successes - 1 if successes > 0 else 0

    # Luck and Unluck rolls have no failure sum
    return 0


def zero_out(result: RollResult) -> RollResult:
    return result.model_copy(update={
        'sum_fail': zero_out_sum(result),
        'mark_first_max': True,
    })


def explode(result: RollResult, random_source: RandomSource) -> RollResult:
    """Draw bonus dice until one is not the maximum face; every draw is kept."""
    bonus = list(result.bonus_dice)
    draw = ROLL_CRIT_SUCCESS
    while draw == ROLL_CRIT_SUCCESS:
        draw = random_source.roll_die()
        bonus.append(draw)
    return result.model_copy(update={'bonus_dice': tuple(bonus)})


def resolve_wild_die(result: RollResult, random_source: RandomSource) -> RollResult:
    """Apply the wild die outcome and return the resolved copy."""
    state = wild_die_state(result)

    if state is WildDieState.ZERO_OUT:
        resolved = zero_out(result)
    elif state is WildDieState.EXPLODE:
        resolved = explode(result, random_source)
    else:
        resolved = result

    logger.debug(
        "Resolved wild die",
        state=state.value,
        wild_die=result.wild_die,
        bonus_dice=list(resolved.bonus_dice),
        sum_fail=resolved.sum_fail,
    )
    return resolved
