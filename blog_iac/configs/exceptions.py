"""
Exceptions raised while loading infrastructure configuration.
"""

from typing import Any


class ConfigValidationError(ValueError):
    """Raised when a stack configuration value is out of range or malformed."""

    def __init__(self, message: str, field: str | None = None, value: Any = None) -> None:
        self.message = message
        self.field = field
        self.value = value
        super().__init__(message)

    def __str__(self) -> str:
        if self.field:
            return f"{self.message} | Field: {self.field}={self.value!r}"
        return self.message
