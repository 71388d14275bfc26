"""
Roll scoring

Computes the final total of a resolved roll according to its RollType.
"""
from dataclasses import dataclass

from constants import ROLL_CRIT_FAILURE, SUCCESS_THRESHOLD, LUCK_FACE, UNLUCK_FACE
from models.roll import RollResult, RollType


@dataclass(frozen=True)
class RollScore:
    """Total of a roll plus the separately reported failure sum."""
    total: int
    sum_fail: int
    zero_out: bool


def score_total(result: RollResult) -> int:
    """Primary total of a resolved roll, never below zero."""
    if result.type is RollType.STANDARD:
        total = sum(result.all_dice) + result.pips
    elif result.type is RollType.SUCCESS:
        total = sum(1 for die in result.dice + result.bonus_dice if die >= SUCCESS_THRESHOLD)
        total += 1 if result.wild_die >= SUCCESS_THRESHOLD else 0
    elif result.type is RollType.LUCK:
        total = result.all_dice.count(LUCK_FACE)
    elif result.type is RollType.UNLUCK:
        total = result.all_dice.count(UNLUCK_FACE)
    else:
        raise ValueError(f"Unknown roll type: {result.type}")

    return max(0, total)


def score(result: RollResult) -> RollScore:
    return RollScore(
        total=score_total(result),
        sum_fail=result.sum_fail,
        zero_out=result.wild_die == ROLL_CRIT_FAILURE,
    )
