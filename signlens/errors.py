"""
Error types raised by the gesture core.
"""
from typing import Optional


class SignLensError(Exception):
    """Base class for all gesture core errors."""


class InvalidInputError(SignLensError, ValueError):
    """A frame's hand data cannot be classified."""

    def __init__(self, message: str, hand_index: Optional[int] = None, field: Optional[str] = None):
        self.hand_index = hand_index
        self.field = field
        if hand_index is not None:
            message = f"hand {hand_index}: {field}: {message}"
        elif field is not None:
            message = f"{field}: {message}"
        super().__init__(message)


class ConfigError(SignLensError):
    """Configuration file is missing required keys or has invalid values."""
