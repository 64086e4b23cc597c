"""Autocomplete suggestions drawn from item fields."""

from __future__ import annotations

from typing import Dict, List

from models.outfit_item import OutfitItem


def _candidate_values(item: OutfitItem) -> List[str]:
    return [item.name, item.brand, item.category, item.primary_color, item.style, *item.tags]


def get_suggestions(items: List[OutfitItem], partial_query: str, limit: int = 5) -> List[str]:
    """Field values containing ``partial_query`` (case-insensitive), first seen first."""

    query = partial_query.lower()
    suggestions: Dict[str, None] = {}
    for item in items:
        for value in _candidate_values(item):
            if value and query in value.lower():
                suggestions.setdefault(value, None)
    return list(suggestions)[: max(limit, 0)]


__all__ = ["get_suggestions"]
