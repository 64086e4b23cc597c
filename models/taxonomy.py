"""Canonical vocabularies for closet items.

This module centralises the curated labels for categories, styles and seasons.
Helper functions keep normalisation consistent between the data model, the
query schemas and the engine.
"""

from typing import Dict, Iterable, List, Optional

# "tops", "bottoms" and "footwear" double as the outfit partitions.
CATEGORIES: Dict[str, List[str]] = {
    "tops": ["T-Shirts", "Blouses", "Sweaters", "Tank Tops", "Hoodies"],
    "outerwear": ["Jackets", "Coats", "Blazers"],
    "bottoms": ["Jeans", "Trousers", "Shorts", "Skirts", "Leggings"],
    "full_body": ["Dresses", "Jumpsuits", "Rompers", "Suits"],
    "footwear": ["Sneakers", "Heels", "Boots", "Sandals", "Flats"],
    "accessories": ["Bags", "Belts", "Hats", "Jewelry", "Scarves"],
}

STYLES: Dict[str, List[str]] = {
    "everyday": ["Casual", "Smart Casual", "Athleisure", "Streetwear"],
    "professional": ["Business Formal", "Business Casual", "Interview", "Conference"],
    "special": ["Date Night", "Party", "Wedding Guest", "Vacation", "Festival"],
    "activity": ["Gym", "Hiking", "Beach", "Lounge", "Travel"],
}

SEASONS = ["Spring", "Summer", "Fall", "Winter"]
WEAR_FREQUENCIES = ["never", "low", "medium", "high", "recent"]

_SEASON_ALIASES = {
    "spring": "Spring",
    "summer": "Summer",
    "fall": "Fall",
    "autumn": "Fall",
    "winter": "Winter",
}


def all_categories() -> List[str]:
    """Flatten the grouped category vocabulary."""

    return [category for group in CATEGORIES.values() for category in group]


def all_styles() -> List[str]:
    return [style for group in STYLES.values() for style in group]


def color_key(color: Optional[str]) -> str:
    """Comparison key for a color name: stripped and case-folded.

    Colors are compared by name only; ``"Tan"`` and ``"Beige"`` stay distinct.
    """

    if color is None:
        return ""
    return str(color).strip().casefold()


def normalize_season(raw_string: str) -> str:
    stripped = str(raw_string).strip()
    return _SEASON_ALIASES.get(stripped.lower(), stripped)


def normalize_enum(value: Optional[str]) -> Optional[str]:
    """Lower-case an optional enum value such as ``fit`` or ``condition``."""

    if value is None:
        return None
    key = str(value).strip().lower()
    return key or None


def dedupe(values: Iterable[str], key=None) -> List[str]:
    """Drop blanks and duplicates while keeping first-seen order."""

    kept: List[str] = []
    seen = set()
    for value in values:
        if value is None:
            continue
        text = str(value).strip()
        marker = key(text) if key else text
        if text and marker not in seen:
            kept.append(text)
            seen.add(marker)
    return kept


__all__ = [
    "CATEGORIES",
    "STYLES",
    "SEASONS",
    "WEAR_FREQUENCIES",
    "all_categories",
    "all_styles",
    "color_key",
    "normalize_season",
    "normalize_enum",
    "dedupe",
]
