"""Deterministic compatibility scoring for item pairs and whole outfits."""

from __future__ import annotations

from itertools import combinations
from typing import Dict, List, Sequence

from models.color_theory import colors_complement
from models.outfit_item import OutfitItem
from models.style_rules import DEFAULT_STYLE_RULES, StyleRules

WEIGHTS = {
    "color": 3.0,
    "style": 2.0,
    "occasion_overlap": 1.0,
    "season_overlap": 1.0,
    "brand": 1.0,
    "value_divisor": 20.0,
    "completeness_per_item": 2.0,
}


def _overlap(first: Sequence[str], second: Sequence[str]) -> int:
    return sum(1 for value in first if value in second)


def score_breakdown(
    item1: OutfitItem, item2: OutfitItem, rules: StyleRules = DEFAULT_STYLE_RULES
) -> Dict[str, float]:
    """Per-signal contributions to :func:`compatibility_score`."""

    return {
        "color": WEIGHTS["color"] if colors_complement(item1.primary_color, item2.primary_color, rules) else 0.0,
        "style": WEIGHTS["style"] if rules.styles_compatible(item1.style, item2.style) else 0.0,
        "occasion": WEIGHTS["occasion_overlap"] * _overlap(item1.occasion, item2.occasion),
        "season": WEIGHTS["season_overlap"] * _overlap(item1.season, item2.season),
        "brand": WEIGHTS["brand"] if item1.brand == item2.brand else 0.0,
        "value": (item1.value_score + item2.value_score) / WEIGHTS["value_divisor"],
    }


def compatibility_score(item1: OutfitItem, item2: OutfitItem, rules: StyleRules = DEFAULT_STYLE_RULES) -> float:
    """Additive pairwise heuristic; larger is better and there is no upper bound."""

    return sum(score_breakdown(item1, item2, rules).values())


def score_outfit(outfit: List[OutfitItem], rules: StyleRules = DEFAULT_STYLE_RULES) -> float:
    """Mean pairwise compatibility plus completeness and mean value score bonuses."""

    if len(outfit) < 2:
        return 0.0
    pair_scores = [compatibility_score(a, b, rules) for a, b in combinations(outfit, 2)]
    completeness_bonus = WEIGHTS["completeness_per_item"] * len(outfit)
    value_bonus = sum(item.value_score for item in outfit) / len(outfit)
    return sum(pair_scores) / len(pair_scores) + completeness_bonus + value_bonus


__all__ = ["WEIGHTS", "score_breakdown", "compatibility_score", "score_outfit"]
