"""AND-combination of structured search constraints."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Optional, Sequence, Tuple

from logic.validation import SearchFilters
from logic.wear_frequency import matches_wear_frequency
from models.outfit_item import OutfitItem
from models.taxonomy import color_key

logger = logging.getLogger(__name__)

Predicate = Callable[[OutfitItem], bool]


def _within(value: float, bounds: Tuple[float, float]) -> bool:
    low, high = bounds
    return low <= value <= high


def _intersects(values: Sequence[str], wanted: Sequence[str]) -> bool:
    return any(value in values for value in wanted)


def build_predicates(filters: SearchFilters, now: Optional[datetime] = None) -> List[Tuple[str, Predicate]]:
    """Translate the active constraints of ``filters`` into named predicates."""

    predicates: List[Tuple[str, Predicate]] = []
    if filters.categories:
        predicates.append(("categories", lambda item: item.category in filters.categories))
    if filters.colors:
        wanted_colors = {color_key(color) for color in filters.colors}
        predicates.append(("colors", lambda item: any(color_key(c) in wanted_colors for c in item.colors)))
    if filters.styles:
        predicates.append(("styles", lambda item: item.style in filters.styles))
    if filters.seasons:
        predicates.append(("seasons", lambda item: _intersects(item.season, filters.seasons)))
    if filters.occasions:
        predicates.append(("occasions", lambda item: _intersects(item.occasion, filters.occasions)))
    if filters.brands:
        predicates.append(("brands", lambda item: item.brand in filters.brands))
    if filters.price_range:
        predicates.append(("price_range", lambda item: _within(item.price, filters.price_range)))
    if filters.times_worn:
        predicates.append(
            ("times_worn", lambda item: matches_wear_frequency(item, filters.times_worn, now))
        )
    if filters.times_worn_range:
        predicates.append(
            ("times_worn_range", lambda item: _within(item.times_worn, filters.times_worn_range))
        )
    if filters.date_range:
        start, end = filters.date_range.start, filters.date_range.end
        predicates.append(("date_range", lambda item: start <= item.date_added <= end))
    if filters.tags:
        predicates.append(("tags", lambda item: _intersects(item.tags, filters.tags)))
    if filters.value_score:
        predicates.append(("value_score", lambda item: _within(item.value_score, filters.value_score)))
    if filters.weather_compatibility:
        predicates.append(
            ("weather_compatibility", lambda item: _intersects(item.weather_tags, filters.weather_compatibility))
        )
    if filters.fit:
        predicates.append(("fit", lambda item: (item.fit or "") in filters.fit))
    if filters.condition:
        predicates.append(("condition", lambda item: (item.condition or "") in filters.condition))
    return predicates


def apply_filters(
    items: List[OutfitItem], filters: SearchFilters, now: Optional[datetime] = None
) -> List[OutfitItem]:
    """Keep the items that satisfy every active constraint, in input order."""

    predicates = build_predicates(filters, now)
    if not predicates:
        return list(items)
    kept = [item for item in items if all(check(item) for _, check in predicates)]
    logger.debug(
        "Applied filters %s -> %s of %s items", [name for name, _ in predicates], len(kept), len(items)
    )
    return kept


__all__ = ["apply_filters", "build_predicates"]
