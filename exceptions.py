"""
Custom exceptions for Gemini Dice

Command handlers rely on the cog's error replies and explicit try/except blocks.
"""


class BotException(Exception):
    """Base exception for all bot-related errors."""
    pass


class ValidationException(BotException):
    """Exception for data validation errors."""
    pass


class RollRecordError(ValidationException):
    """Raised when a roll record cannot be turned into a roll result."""
    pass


class ConfigurationException(BotException):
    """Exception for configuration-related errors."""
    pass
