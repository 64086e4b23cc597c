"""Collection-level analysis: under-used purchases and missing essentials."""

from __future__ import annotations

import logging
from typing import List

from logic.validation import SeasonalGap, WardrobeGapReport
from logic.value_ranking import cost_per_wear
from models.outfit_item import OutfitItem
from models.style_rules import DEFAULT_STYLE_RULES, StyleRules
from models.taxonomy import SEASONS, color_key

logger = logging.getLogger(__name__)

UNDERUTILIZED_MAX_WEARS = 3
UNDERUTILIZED_MIN_PRICE = 50.0


def find_underutilized_items(items: List[OutfitItem], limit: int = 10) -> List[OutfitItem]:
    """Expensive pieces worn fewer than three times, worst cost-per-wear first."""

    candidates = [
        item for item in items if item.times_worn < UNDERUTILIZED_MAX_WEARS and item.price > UNDERUTILIZED_MIN_PRICE
    ]
    ranked = sorted(candidates, key=cost_per_wear, reverse=True)
    return ranked[: max(limit, 0)]


def analyze_wardrobe_gaps(items: List[OutfitItem], rules: StyleRules = DEFAULT_STYLE_RULES) -> WardrobeGapReport:
    """Compare owned categories, colors and styles against the essentials lists.

    Seasonal gaps only consider items tagged for that season, and a season
    appears in the report only when at least one essential category is missing.
    """

    categories = {item.category for item in items}
    colors = {color_key(item.primary_color) for item in items}
    styles = {item.style for item in items}

    seasonal_gaps: List[SeasonalGap] = []
    for season in SEASONS:
        season_categories = {item.category for item in items if season in item.season}
        gaps = [category for category in rules.essential_categories if category not in season_categories]
        if gaps:
            seasonal_gaps.append(SeasonalGap(season=season, gaps=gaps))

    report = WardrobeGapReport(
        missing_categories=[category for category in rules.essential_categories if category not in categories],
        color_gaps=[color for color in rules.essential_colors if color_key(color) not in colors],
        style_gaps=[style for style in rules.essential_styles if style not in styles],
        seasonal_gaps=seasonal_gaps,
    )
    logger.info(
        "Gap analysis: %s missing categories, %s color gaps, %s style gaps, %s seasons with gaps",
        len(report.missing_categories),
        len(report.color_gaps),
        len(report.style_gaps),
        len(report.seasonal_gaps),
    )
    return report


__all__ = [
    "UNDERUTILIZED_MAX_WEARS",
    "UNDERUTILIZED_MIN_PRICE",
    "find_underutilized_items",
    "analyze_wardrobe_gaps",
]
