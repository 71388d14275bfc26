"""
Data models for Gemini Dice

Immutable Pydantic models with validation.
"""

from models.base import GeminiBaseModel
from models.roll import RollType, DieGroup, RollRecord, RollResult
from models.command import RollCommand, ParsedCommand

__all__ = [
    'GeminiBaseModel',
    'RollType',
    'DieGroup',
    'RollRecord',
    'RollResult',
    'RollCommand',
    'ParsedCommand',
]
