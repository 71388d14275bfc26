"""
Tests for wild die resolution

Covers the zero-out and explode transitions for every roll type.
"""
import pytest

from models.roll import RollType
from services.wild_die import WildDieState, resolve_wild_die, wild_die_state, zero_out_sum
from tests.factories import RollResultFactory, SequenceRandomSource


class TestWildDieState:

    @pytest.mark.parametrize("wild_die,state", [
        (1, WildDieState.ZERO_OUT),
        (2, WildDieState.NO_SPECIAL_EVENT),
        (3, WildDieState.NO_SPECIAL_EVENT),
        (4, WildDieState.NO_SPECIAL_EVENT),
        (5, WildDieState.NO_SPECIAL_EVENT),
        (6, WildDieState.EXPLODE),
    ])
    def test_state_selection(self, wild_die, state):
        assert wild_die_state(RollResultFactory.create(wild_die=wild_die)) is state


class TestNoSpecialEvent:

    @pytest.mark.parametrize("roll_type", list(RollType))
    def test_result_passes_through(self, roll_type):
        original = RollResultFactory.create(dice=[2, 6, 1], wild_die=4, type=roll_type)
        source = SequenceRandomSource([])

        assert resolve_wild_die(original, source) == original
        assert source.draws == 0


class TestZeroOut:
    """Test the wild die showing a 1."""

    def test_standard_removes_one_highest_die(self):
        """dice [2,4,4]: one 4 is discarded, leaving 2 + 4."""
        result = resolve_wild_die(
            RollResultFactory.create(dice=[2, 4, 4], wild_die=1),
            SequenceRandomSource([])
        )

        assert result.sum_fail == 6
        assert result.mark_first_max is True
        assert result.bonus_dice == ()

    def test_standard_includes_pips(self):
        result = resolve_wild_die(
            RollResultFactory.create(dice=[2, 4, 4], wild_die=1, pips=3),
            SequenceRandomSource([])
        )
        assert result.sum_fail == 9

    def test_standard_without_ordinary_dice(self):
        result = resolve_wild_die(RollResultFactory.create(dice=[], wild_die=1, pips=2), SequenceRandomSource([]))
        assert result.sum_fail == 2

    def test_standard_failure_sum_is_never_negative(self):
        result = resolve_wild_die(
            RollResultFactory.create(dice=[3], wild_die=1, pips=-5),
            SequenceRandomSource([])
        )
        assert result.sum_fail == 0

    def test_success_discards_one_success(self):
        """dice [3,5,1] hold two successes; one is lost."""
        result = resolve_wild_die(
            RollResultFactory.create(dice=[3, 5, 1], wild_die=1, type=RollType.SUCCESS),
            SequenceRandomSource([])
        )
        assert result.sum_fail == 1
        assert result.mark_first_max is True

    def test_success_without_successes(self):
        result = resolve_wild_die(
            RollResultFactory.create(dice=[1, 2], wild_die=1, type=RollType.SUCCESS),
            SequenceRandomSource([])
        )
        assert result.sum_fail == 0

    @pytest.mark.parametrize("roll_type", [RollType.LUCK, RollType.UNLUCK])
    def test_luck_types_only_mark_for_rendering(self, roll_type):
        result = resolve_wild_die(
            RollResultFactory.create(dice=[6, 1, 4], wild_die=1, type=roll_type),
            SequenceRandomSource([])
        )
        assert result.sum_fail == 0
        assert result.mark_first_max is True

    def test_zero_out_sum_keeps_other_copies_of_the_maximum(self):
        assert zero_out_sum(RollResultFactory.create(dice=[5, 5, 5], wild_die=1)) == 10


class TestExplode:
    """Test the wild die showing a 6."""

    def test_single_non_max_draw(self):
        source = SequenceRandomSource([3])
        result = resolve_wild_die(RollResultFactory.create(wild_die=6), source)

        assert result.bonus_dice == (3,)
        assert source.draws == 1

    def test_chain_of_sixes(self):
        """Every draw is kept; all but the last are sixes."""
        source = SequenceRandomSource([6, 6, 2, 5])
        result = resolve_wild_die(RollResultFactory.create(wild_die=6), source)

        assert result.bonus_dice == (6, 6, 2)
        assert source.remaining == 1

    @pytest.mark.parametrize("roll_type", list(RollType))
    def test_explosion_is_identical_for_every_type(self, roll_type):
        result = resolve_wild_die(
            RollResultFactory.create(wild_die=6, type=roll_type),
            SequenceRandomSource([6, 4])
        )
        assert result.bonus_dice == (6, 4)
        assert result.sum_fail == 0
        assert result.mark_first_max is False

    def test_input_is_not_mutated(self):
        original = RollResultFactory.create(wild_die=6)
        resolve_wild_die(original, SequenceRandomSource([1]))
        assert original.bonus_dice == ()
