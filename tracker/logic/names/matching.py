"""Name normalization shared by every list.

Names are stored as typed (trimmed) and compared through a normalized key.
The key is never persisted or displayed.
"""
from __future__ import annotations
from typing import Iterable, Optional, TypeVar

from tracker.utilities.constants import MULTI_ENTRY_NAMES

__all__ = ["clean_name", "normalize_name", "names_match", "allows_multiple", "find_by_name"]

T = TypeVar('T')


def clean_name(name: Optional[str]) -> str:
    """Display/storage form: surrounding whitespace removed."""
    return (name or '').strip()


def normalize_name(name: Optional[str]) -> str:
    """Lookup key: trimmed and lower-cased."""
    return clean_name(name).lower()


def names_match(a: Optional[str], b: Optional[str]) -> bool:
    return normalize_name(a) == normalize_name(b)


def allows_multiple(name: Optional[str]) -> bool:
    """Delivery names exempt from the uniqueness rule."""
    return normalize_name(name) in MULTI_ENTRY_NAMES


def find_by_name(records: Iterable[T], name: str, attr: str = 'name') -> Optional[T]:
    key = normalize_name(name)
    for rec in records:
        if normalize_name(getattr(rec, attr, '')) == key:
            return rec
    return None
