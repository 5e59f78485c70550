"""Suggestion helpers for the name pickers of the Add dialogs."""
from __future__ import annotations
from typing import List, Optional, Sequence

from tracker.domain.SavedName import SavedName
from tracker.logic.names.matching import clean_name, find_by_name

__all__ = ["filter_suggestions", "can_offer_save"]


def filter_suggestions(query: Optional[str], saved_names: Sequence[SavedName]) -> List[SavedName]:
    """Saved names containing ``query`` (case-insensitive), keeping the given order.

    An empty query returns every saved name.
    """
    if not query:
        return list(saved_names)
    needle = query.casefold()
    return [n for n in saved_names if needle in n.value.casefold()]


def can_offer_save(query: Optional[str], saved_names: Sequence[SavedName]) -> bool:
    """Whether the "remember this name" action should be enabled for ``query``."""
    if not clean_name(query):
        return False
    return find_by_name(saved_names, query, attr='value') is None
