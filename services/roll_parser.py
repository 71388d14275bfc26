"""
Roll record parsing

Turns a raw roll record into a draft RollResult. The modifier expression of the
second die group is read with a small token grammar:

    modifier := '+' '(' INT '+' INT ')'
              | SIGN INT

Anything else contributes no pips.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from exceptions import RollRecordError
from models.roll import RollRecord, RollResult, RollType
from utils.logging import get_contextual_logger

logger = get_contextual_logger(__name__)


class TokenKind(Enum):
    PLUS = "+"
    MINUS = "-"
    LPAREN = "("
    RPAREN = ")"
    INT = "int"
    OTHER = "other"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str

    @property
    def value(self) -> int:
        return int(self.text)


_SYMBOLS = {
    '+': TokenKind.PLUS,
    '-': TokenKind.MINUS,
    '(': TokenKind.LPAREN,
    ')': TokenKind.RPAREN,
}

SUM_PATTERN = (
    TokenKind.PLUS, TokenKind.LPAREN, TokenKind.INT,
    TokenKind.PLUS, TokenKind.INT, TokenKind.RPAREN,
)


def tokenize_modifier(text: str) -> List[Token]:
    """Split a modifier expression into tokens, ignoring whitespace."""
    tokens: List[Token] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char.isspace():
            i += 1
        elif char in _SYMBOLS:
            tokens.append(Token(_SYMBOLS[char], char))
            i += 1
        elif char.isdigit():
            start = i
            while i < len(text) and text[i].isdigit():
                i += 1
            tokens.append(Token(TokenKind.INT, text[start:i]))
        else:
            tokens.append(Token(TokenKind.OTHER, char))
            i += 1
    return tokens


def parse_modifier(text: Optional[str]) -> int:
    """
    Read the pip modifier from an expression such as '+(2+1)', '+3' or '-2'.

    Trailing tokens after a matched form are ignored. Unmatched input yields 0.
    """
    if not text:
        return 0

    tokens = tokenize_modifier(text)
    kinds = tuple(token.kind for token in tokens)

    if kinds[:len(SUM_PATTERN)] == SUM_PATTERN:
        return tokens[2].value + tokens[4].value

    if len(kinds) >= 2 and kinds[0] in (TokenKind.PLUS, TokenKind.MINUS) and kinds[1] is TokenKind.INT:
        value = tokens[1].value
        return -value if kinds[0] is TokenKind.MINUS else value

    return 0


def parse_roll_record(record: RollRecord, roll_type: RollType = RollType.STANDARD) -> RollResult:
    """
    Build a draft RollResult from a raw roll record.

    The last value of the first group is the wild die; the rest are ordinary
    dice. The second group, when present, supplies the pips.

    Raises:
        RollRecordError: If the first group holds no dice
    """
    first = record.first_group
    if first is None or not first.values:
        raise RollRecordError("Roll record has no dice; the wild die is required")

    *dice, wild_die = first.values
    modifier = record.modifier_group
    pips = parse_modifier(modifier.expression) if modifier is not None else 0

    logger.debug("Parsed roll record", roll_type=roll_type.value, dice=dice, wild_die=wild_die, pips=pips)

    try:
        return RollResult(type=roll_type, dice=tuple(dice), wild_die=wild_die, pips=pips)
    except ValueError as e:
        raise RollRecordError(str(e)) from e
