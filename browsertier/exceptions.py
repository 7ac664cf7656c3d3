"""Exception types for pybrowsertier."""

from __future__ import annotations

from typing import Any


class BrowserTierError(Exception):
    """Base exception for expected application errors."""


class SchemaValidationError(BrowserTierError):
    """Raised when raw configuration or user-agent data violates the schema."""

    def __init__(self, field: str, constraint: str, value: Any) -> None:
        self.field = field
        self.constraint = constraint
        self.value = value
        super().__init__(f"Invalid value for {field!r}: {constraint} (got {value!r})")
