"""Usage buckets derived from wear counts and the last-worn timestamp."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Optional

from models.outfit_item import OutfitItem, as_utc, utc_now
from models.taxonomy import WEAR_FREQUENCIES

RECENT_WEAR_WINDOW = timedelta(days=7)


def classify_wear(item: OutfitItem) -> str:
    """Return the count-based bucket: never, low, medium or high."""

    if item.times_worn == 0:
        return "never"
    if item.times_worn <= 3:
        return "low"
    if item.times_worn <= 10:
        return "medium"
    return "high"


def worn_recently(item: OutfitItem, now: Optional[datetime] = None) -> bool:
    if item.date_last_worn is None:
        return False
    reference = as_utc(now) if now is not None else utc_now()
    return reference - item.date_last_worn <= RECENT_WEAR_WINDOW


def matches_wear_frequency(item: OutfitItem, bucket: str, now: Optional[datetime] = None) -> bool:
    """Return True when ``item`` falls in ``bucket``.

    ``recent`` is independent of the count buckets. Unrecognised bucket names
    match every item.
    """

    key = (bucket or "").strip().lower()
    if key == "recent":
        return worn_recently(item, now)
    if key in WEAR_FREQUENCIES:
        return classify_wear(item) == key
    return True


def filter_by_frequency(items: List[OutfitItem], bucket: str, now: Optional[datetime] = None) -> List[OutfitItem]:
    return [item for item in items if matches_wear_frequency(item, bucket, now)]


__all__ = ["RECENT_WEAR_WINDOW", "classify_wear", "worn_recently", "matches_wear_frequency", "filter_by_frequency"]
