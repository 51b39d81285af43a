"""Errors raised by grid generation."""

from typing import Any, Optional


class InvalidConfig(ValueError):
    """Raised when a diamond-square configuration cannot produce a grid."""

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value
