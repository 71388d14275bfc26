"""
Tests for roll record parsing

Validates the modifier grammar and the split into ordinary dice and wild die.
"""
import pytest

from exceptions import RollRecordError
from models.roll import DieGroup, RollRecord, RollType
from services.roll_parser import TokenKind, parse_modifier, parse_roll_record, tokenize_modifier
from tests.factories import RollRecordFactory


class TestTokenizeModifier:
    """Test modifier tokenization."""

    def test_tokenize_sum_expression(self):
        """Test that a parenthesized sum yields typed tokens."""
        kinds = [token.kind for token in tokenize_modifier("+(12+3)")]
        assert kinds == [
            TokenKind.PLUS, TokenKind.LPAREN, TokenKind.INT,
            TokenKind.PLUS, TokenKind.INT, TokenKind.RPAREN,
        ]

    def test_multi_digit_numbers_are_one_token(self):
        tokens = tokenize_modifier("-123")
        assert len(tokens) == 2
        assert tokens[1].value == 123

    def test_whitespace_is_ignored(self):
        assert [t.text for t in tokenize_modifier(" + ( 2 + 1 ) ")] == ['+', '(', '2', '+', '1', ')']

    def test_unknown_characters_become_other_tokens(self):
        assert tokenize_modifier("+x")[1].kind is TokenKind.OTHER


class TestParseModifier:
    """Test the two-alternative modifier grammar."""

    @pytest.mark.parametrize("text,expected", [
        ("+(2+1)", 3),
        ("+(10+5)", 15),
        ("+4", 4),
        ("-2", -2),
        ("+0", 0),
    ])
    def test_valid_modifiers(self, text, expected):
        assert parse_modifier(text) == expected

    @pytest.mark.parametrize("text", [None, "", "4", "+", "(2+1)", "*3", "+(2-1)", "+(2+)"])
    def test_unmatched_modifiers_yield_zero(self, text):
        """Test that anything outside the grammar contributes no pips."""
        assert parse_modifier(text) == 0

    def test_malformed_sum_does_not_fall_back_to_signed_form(self):
        """'+(' is not a signed integer, so a broken sum is worth nothing."""
        assert parse_modifier("+(3)") == 0


class TestParseRollRecord:
    """Test building draft results from roll records."""

    def test_last_die_becomes_wild_die(self):
        result = parse_roll_record(RollRecordFactory.create([2, 5, 3, 6]))

        assert result.dice == (2, 5, 3)
        assert result.wild_die == 6
        assert result.pips == 0

    def test_draft_defaults(self):
        result = parse_roll_record(RollRecordFactory.create([4, 4]))

        assert result.type is RollType.STANDARD
        assert result.bonus_dice == ()
        assert result.sum_fail == 0
        assert result.mark_first_max is False

    def test_single_die_is_only_the_wild_die(self):
        result = parse_roll_record(RollRecordFactory.create([3]))

        assert result.dice == ()
        assert result.wild_die == 3

    def test_modifier_group_sets_pips(self):
        assert parse_roll_record(RollRecordFactory.create([1, 2, 3], "+(2+1)")).pips == 3
        assert parse_roll_record(RollRecordFactory.create([1, 2, 3], "-1")).pips == -1

    def test_modifier_group_without_expression(self):
        record = RollRecord(groups=(DieGroup(values=(2, 3)), DieGroup(values=(4,))))
        assert parse_roll_record(record).pips == 0

    def test_roll_type_is_carried(self):
        result = parse_roll_record(RollRecordFactory.create([3, 4]), RollType.LUCK)
        assert result.type is RollType.LUCK

    def test_empty_first_group_raises(self):
        with pytest.raises(RollRecordError):
            parse_roll_record(RollRecord(groups=(DieGroup(values=()),)))

    def test_missing_groups_raise(self):
        with pytest.raises(RollRecordError):
            parse_roll_record(RollRecord())

    def test_out_of_range_faces_raise(self):
        with pytest.raises(RollRecordError):
            parse_roll_record(RollRecordFactory.create([2, 9]))
