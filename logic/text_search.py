"""Token-based free-text matching across item fields."""

from __future__ import annotations

from typing import List

from models.outfit_item import OutfitItem


def searchable_text(item: OutfitItem) -> str:
    """Lower-cased concatenation of every text field a query can hit."""

    parts = [
        item.name,
        item.category,
        item.brand,
        item.style,
        item.primary_color,
        *item.secondary_colors,
        *item.season,
        *item.occasion,
        *item.tags,
        *item.weather_tags,
        *item.material_tags,
    ]
    return " ".join(parts).lower()


def search_by_text(items: List[OutfitItem], query: str) -> List[OutfitItem]:
    """Keep items containing every whitespace-separated token of ``query``.

    Matching is substring based, so ``"blu"`` hits ``"Blue"``. A blank query
    keeps every item. Input order is preserved.
    """

    terms = query.lower().split()
    if not terms:
        return list(items)
    return [item for item in items if all(term in searchable_text(item) for term in terms)]


__all__ = ["search_by_text", "searchable_text"]
