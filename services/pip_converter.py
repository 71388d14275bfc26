"""
Rollup pip conversion

Converts a numeric modifier into whole dice (three pips per die) plus a small
residual bonus of one or two pips.
"""
from constants import PIPS_PER_DIE, PIP_ROUND_UP_FRACTION
from models.roll import RollResult
from services.random_source import RandomSource
from utils.logging import get_contextual_logger

logger = get_contextual_logger(__name__)


def residual_pips(remainder: int) -> int:
    """Flat bonus for a remainder of less than one die."""
    if remainder == 0:
        return 0
    return 2 if remainder / PIPS_PER_DIE > PIP_ROUND_UP_FRACTION else 1


def convert_pips(result: RollResult, random_source: RandomSource) -> RollResult:
    """
    Return a copy of `result` with its pips rolled up into extra dice.

    Negative pips stay a flat penalty, since dice cannot be removed, unless they
    are a whole number of dice, which clears them.
    """
    if result.pips == 0:
        return result
    if result.pips < 0:
        if result.pips % PIPS_PER_DIE:
            return result
        return result.model_copy(update={'pips': 0})

    whole, remainder = divmod(result.pips, PIPS_PER_DIE)
    added = tuple(random_source.roll_die() for _ in range(whole))
    pips = residual_pips(remainder)

    logger.debug("Converted pips to dice", pips=result.pips, added_dice=list(added), residual_pips=pips)

    return result.model_copy(update={'dice': result.dice + added, 'pips': pips})
