"""Named filter presets offered on the search screen."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional

from logic.validation import SearchFilters
from models.outfit_item import as_utc, utc_now

RECENTLY_ADDED_WINDOW = timedelta(days=30)

SAVED_SEARCHES: Dict[str, Dict[str, Any]] = {
    "Work Week Outfits": {"occasions": ["Work"], "styles": ["Business Casual", "Business Formal"]},
    "Summer Vacation": {"seasons": ["Summer"], "occasions": ["Vacation", "Beach"]},
    "Unused Items": {"times_worn": "never"},
    "High Value Pieces": {"price_range": (100, 500)},
    "Recently Added": {},
    "Weekend Casual": {"occasions": ["Weekend"], "styles": ["Casual"]},
}


def saved_search_names() -> List[str]:
    return list(SAVED_SEARCHES)


def saved_search_filters(name: str, now: Optional[datetime] = None) -> SearchFilters:
    """Return the filters for a preset; raises ``KeyError`` for unknown names."""

    if name not in SAVED_SEARCHES:
        raise KeyError(f"Unknown saved search '{name}'. Available: {saved_search_names()}")
    payload = dict(SAVED_SEARCHES[name])
    if name == "Recently Added":
        end = as_utc(now) if now is not None else utc_now()
        payload["date_range"] = {"start": end - RECENTLY_ADDED_WINDOW, "end": end}
    return SearchFilters.model_validate(payload)


__all__ = ["SAVED_SEARCHES", "RECENTLY_ADDED_WINDOW", "saved_search_names", "saved_search_filters"]
