"""
Base model for all Gemini Dice values

Provides common functionality for validation and serialization.
"""
from typing import Dict, Any

from pydantic import BaseModel


class GeminiBaseModel(BaseModel):
    """Base model for immutable rules-engine values."""

    model_config = {
        "frozen": True,
        "arbitrary_types_allowed": True,
    }

    def __repr__(self):
        fields = ', '.join(f'{k}={v}' for k, v in self.model_dump(exclude_none=True).items())
        return f"{self.__class__.__name__}({fields})"

    def to_dict(self, exclude_none: bool = True) -> Dict[str, Any]:
        """Convert model to dictionary, optionally excluding None values."""
        return self.model_dump(exclude_none=exclude_none)
