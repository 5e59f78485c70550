"""
Request body schemas using Pydantic.

These only shape the payload. Name and amount rules are enforced by the entry
store so that the exact user-facing message reaches the caller.
"""
from typing import Any

from pydantic import BaseModel, field_validator


class _NameInput(BaseModel):
    name: str = ""

    @field_validator('name', mode='before')
    @classmethod
    def coerce_name(cls, v):
        """Treat a missing/null name as empty text."""
        return "" if v is None else str(v)


class ChecklistItemInput(_NameInput):
    """Schema for a new checklist item."""


class DeliveryEntryInput(_NameInput):
    """Schema for a new delivery entry."""
    # Passed through untouched; the store rejects non-numeric and non-positive amounts
    amount: Any = 0


class DineInEntryInput(_NameInput):
    """Schema for a new dine-in entry."""


class SavedNameInput(BaseModel):
    """Schema for remembering a name in the suggestion list."""
    value: str = ""

    @field_validator('value', mode='before')
    @classmethod
    def coerce_value(cls, v):
        return "" if v is None else str(v)
