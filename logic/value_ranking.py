"""Cost-per-wear ranking and result ordering."""

from __future__ import annotations

from typing import Callable, Dict, List, Tuple

from models.outfit_item import OutfitItem

SortSpec = Tuple[Callable[[OutfitItem], float], bool]

SORT_OPTIONS: Dict[str, SortSpec] = {
    "newest": (lambda item: item.date_added.timestamp(), True),
    "most_worn": (lambda item: item.times_worn, True),
    "least_worn": (lambda item: item.times_worn, False),
    "value_score": (lambda item: item.value_score, True),
    "price_high": (lambda item: item.price, True),
    "price_low": (lambda item: item.price, False),
}


def cost_per_wear(item: OutfitItem) -> float:
    """Price divided by wears; an unworn item costs its full price per wear."""

    return item.price / max(item.times_worn, 1)


def rank_by_value(items: List[OutfitItem], sort_order: str = "best") -> List[OutfitItem]:
    """Order by cost-per-wear, lowest first for ``best`` and highest first otherwise."""

    return sorted(items, key=cost_per_wear, reverse=sort_order != "best")


def sort_items(items: List[OutfitItem], sort_by: str | None = None) -> List[OutfitItem]:
    """Apply one of the search screen orderings.

    ``relevance``, ``None`` or an unknown key keeps the incoming order.
    """

    spec = SORT_OPTIONS.get(sort_by or "relevance")
    if spec is None:
        return list(items)
    key, descending = spec
    return sorted(items, key=key, reverse=descending)


__all__ = ["SORT_OPTIONS", "cost_per_wear", "rank_by_value", "sort_items"]
