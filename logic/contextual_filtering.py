"""Deterministic filtering functions for weather and occasion context."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from logic.validation import WeatherConditions
from models.outfit_item import OutfitItem
from models.style_rules import DEFAULT_STYLE_RULES, StyleRules


@dataclass(frozen=True)
class FilteringResult:
    """Captures the outcome of a single filtering step."""

    items: List[OutfitItem]
    removed: Dict[str, str]
    debug: Dict[str, object]


def is_temperature_compatible(item: OutfitItem, temperature: float, rules: StyleRules = DEFAULT_STYLE_RULES) -> bool:
    if not item.weather_tags:
        return True
    accepted = rules.temperature_tags(temperature)
    return any(tag in accepted for tag in item.weather_tags)


def is_condition_compatible(item: OutfitItem, conditions: str, rules: StyleRules = DEFAULT_STYLE_RULES) -> bool:
    """Rain, wind and snow need a matching tag; other conditions add no requirement."""

    if not item.weather_tags:
        return True
    required = rules.condition_requirements.get(conditions)
    if required is None:
        return True
    return any(tag in required for tag in item.weather_tags)


def _removal_reason(item: OutfitItem, weather: WeatherConditions, rules: StyleRules) -> Optional[str]:
    if not item.weather_tags:
        return None
    if not is_temperature_compatible(item, weather.temperature, rules):
        return f"no weather tag for {weather.temperature:g}F"
    if not is_condition_compatible(item, weather.conditions, rules):
        return f"not suitable for {weather.conditions} weather"
    if weather.season not in item.season:
        return f"not worn in {weather.season}"
    return None


def is_weather_compatible(
    item: OutfitItem, weather: WeatherConditions, rules: StyleRules = DEFAULT_STYLE_RULES
) -> bool:
    """Items without weather tags are compatible with any weather."""

    return _removal_reason(item, weather, rules) is None


def filter_by_weather(
    items: List[OutfitItem], weather: WeatherConditions, rules: StyleRules = DEFAULT_STYLE_RULES
) -> FilteringResult:
    """Filter items by temperature band, precipitation/wind condition and season."""

    removed: Dict[str, str] = {}
    kept: List[OutfitItem] = []
    for item in items:
        reason = _removal_reason(item, weather, rules)
        if reason:
            removed[item.item_id] = reason
        else:
            kept.append(item)

    debug = {
        "input_count": len(items),
        "kept_count": len(kept),
        "removed_count": len(removed),
        "temperature": weather.temperature,
        "conditions": weather.conditions,
        "season": weather.season,
        "untagged_count": sum(1 for item in kept if not item.weather_tags),
    }
    return FilteringResult(items=kept, removed=removed, debug=debug)


def filter_by_occasion(items: List[OutfitItem], occasion: Optional[str]) -> FilteringResult:
    """Keep items tagged with ``occasion``; no occasion keeps everything."""

    if not occasion:
        return FilteringResult(items=list(items), removed={}, debug={"input_count": len(items), "occasion": None})
    removed: Dict[str, str] = {}
    kept: List[OutfitItem] = []
    for item in items:
        if occasion in item.occasion:
            kept.append(item)
        else:
            removed[item.item_id] = f"not tagged for {occasion}"
    debug = {
        "input_count": len(items),
        "kept_count": len(kept),
        "removed_count": len(removed),
        "occasion": occasion,
    }
    return FilteringResult(items=kept, removed=removed, debug=debug)


__all__ = [
    "FilteringResult",
    "is_temperature_compatible",
    "is_condition_compatible",
    "is_weather_compatible",
    "filter_by_weather",
    "filter_by_occasion",
]
