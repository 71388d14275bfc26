"""
Gemini System rules services

Parsing, rollup conversion, wild die resolution, scoring and command routing.
"""

from .random_source import RandomSource, SystemRandomSource
from .rules_engine import RulesEngine
from .scoring import RollScore, score
from .command_router import parse_command

__all__ = [
    'RandomSource', 'SystemRandomSource',
    'RulesEngine',
    'RollScore', 'score',
    'parse_command',
]
