"""
Exceptions raised by terrain generation.
"""

from typing import Any, Optional


class InvalidParameterError(ValueError):
    """A terrain parameter violates the generation contract."""

    def __init__(self, field: str, value: Any, reason: Optional[str] = None):
        self.field = field
        self.value = value
        self.reason = reason or "invalid value"
        super().__init__(f"{field}={value!r}: {self.reason}")
