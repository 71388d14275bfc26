"""
Gemini rules engine

Entry points for the five Gemini roll commands. The engine is built once at
bot startup around a RandomSource and holds no per-roll state.
"""
from models.command import RollCommand
from models.roll import RollRecord, RollResult, RollType
from services.pip_converter import convert_pips
from services.random_source import RandomSource
from services.roll_parser import parse_roll_record
from services.wild_die import resolve_wild_die
from utils.logging import get_contextual_logger


class RulesEngine:
    """Runs roll records through parse, rollup and wild die resolution."""

    def __init__(self, random_source: RandomSource):
        self.random_source = random_source
        self.logger = get_contextual_logger(f'{__name__}.RulesEngine')

    def roll(self, record: RollRecord) -> RollResult:
        """Standard roll; the modifier is added as pips."""
        return self._resolve(parse_roll_record(record, RollType.STANDARD))

    def rollup_roll(self, record: RollRecord) -> RollResult:
        """Standard roll with the modifier converted into dice first."""
        draft = parse_roll_record(record, RollType.STANDARD)
        return self._resolve(convert_pips(draft, self.random_source))

    def success_roll(self, record: RollRecord) -> RollResult:
        """Counts dice of 3 or more as successes."""
        return self._resolve(parse_roll_record(record, RollType.SUCCESS))

    def luck_roll(self, record: RollRecord, roll_type: RollType) -> RollResult:
        """Counts sixes (Luck) or ones (Unluck)."""
        if roll_type not in (RollType.LUCK, RollType.UNLUCK):
            raise ValueError(f"Luck rolls must be LUCK or UNLUCK, got {roll_type.value}")
        return self._resolve(parse_roll_record(record, roll_type))

    def evaluate(self, command: RollCommand, record: RollRecord) -> RollResult:
        """Dispatch a routed command to its roll entry point."""
        if command is RollCommand.ROLL:
            return self.roll(record)
        elif command is RollCommand.ROLLUP:
            return self.rollup_roll(record)
        elif command is RollCommand.SUCCESS:
            return self.success_roll(record)
        elif command in (RollCommand.LUCK, RollCommand.UNLUCK):
            return self.luck_roll(record, command.roll_type)

        raise ValueError(f"Command {command.value} does not roll dice")

    def _resolve(self, draft: RollResult) -> RollResult:
        result = resolve_wild_die(draft, self.random_source)
        self.logger.debug(
            "Roll resolved",
            roll_type=result.type.value,
            dice=list(result.dice),
            wild_die=result.wild_die,
            bonus_dice=list(result.bonus_dice),
            pips=result.pips,
            sum_fail=result.sum_fail,
        )
        return result
