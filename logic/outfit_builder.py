"""Deterministic outfit assembly helpers with transparent diagnostics."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from logic.contextual_filtering import filter_by_occasion, filter_by_weather
from logic.outfit_scoring import score_outfit
from logic.validation import RecommendationContext
from models.color_theory import colors_complement
from models.outfit_item import OutfitItem
from models.style_rules import DEFAULT_STYLE_RULES, StyleRules

logger = logging.getLogger(__name__)

# Greedy search bounds. Only the first MAX_TOPS tops and MAX_BOTTOMS bottoms
# (collection order) are paired, and each pair takes its first matching shoe.
MAX_TOPS = 5
MAX_BOTTOMS = 3
MAX_OUTFITS = 10

OUTFIT_GROUPS = ("top", "bottom", "shoes")


@dataclass(frozen=True)
class CandidateSelectionResult:
    items: List[OutfitItem]
    diagnostics: Dict[str, object]


@dataclass(frozen=True)
class ScoredOutfit:
    items: List[OutfitItem]
    score: float

    @property
    def item_ids(self) -> List[str]:
        return [item.item_id for item in self.items]


@dataclass(frozen=True)
class OutfitBuildResult:
    outfits: List[ScoredOutfit]
    diagnostics: Dict[str, object]


def select_candidates(
    items: List[OutfitItem], context: RecommendationContext, rules: StyleRules = DEFAULT_STYLE_RULES
) -> CandidateSelectionResult:
    """Narrow the collection by occasion, then by weather, with diagnostics."""

    diagnostics: Dict[str, object] = {"initial_count": len(items), "applied_filters": []}
    candidates = list(items)
    if context.occasion:
        result = filter_by_occasion(candidates, context.occasion)
        candidates = result.items
        diagnostics["applied_filters"].append({"type": "occasion", "debug": result.debug})
    if context.weather is not None:
        result = filter_by_weather(candidates, context.weather, rules)
        candidates = result.items
        diagnostics["applied_filters"].append({"type": "weather", "debug": result.debug})
    diagnostics["final_count"] = len(candidates)
    logger.info("Selected %s of %s items for outfit generation", len(candidates), len(items))
    return CandidateSelectionResult(items=candidates, diagnostics=diagnostics)


def partition_candidates(items: List[OutfitItem], rules: StyleRules = DEFAULT_STYLE_RULES) -> Dict[str, List[OutfitItem]]:
    """Group items into tops, bottoms and shoes; other categories are dropped."""

    grouped: Dict[str, List[OutfitItem]] = {group: [] for group in OUTFIT_GROUPS}
    for item in items:
        if item.category in rules.top_categories:
            grouped["top"].append(item)
        elif item.category in rules.bottom_categories:
            grouped["bottom"].append(item)
        elif item.category in rules.shoe_categories:
            grouped["shoes"].append(item)
    return grouped


def _first_matching_shoe(
    top: OutfitItem, bottom: OutfitItem, shoes: List[OutfitItem], rules: StyleRules
) -> Optional[OutfitItem]:
    for shoe in shoes:
        if not rules.styles_compatible(top.style, shoe.style):
            continue
        if colors_complement(top.primary_color, shoe.primary_color, rules) or colors_complement(
            bottom.primary_color, shoe.primary_color, rules
        ):
            return shoe
    return None


def build_outfits(candidate_items: List[OutfitItem], rules: StyleRules = DEFAULT_STYLE_RULES) -> OutfitBuildResult:
    """Enumerate capped top/bottom/shoe combinations and rank them by outfit score."""

    grouped = partition_candidates(candidate_items, rules)
    diagnostics: Dict[str, object] = {
        "group_counts": {group: len(values) for group, values in grouped.items()},
        "pairs_examined": 0,
        "pairs_rejected": 0,
        "pairs_without_shoes": 0,
    }

    outfits: List[ScoredOutfit] = []
    for top in grouped["top"][:MAX_TOPS]:
        for bottom in grouped["bottom"][:MAX_BOTTOMS]:
            diagnostics["pairs_examined"] += 1
            if not (
                colors_complement(top.primary_color, bottom.primary_color, rules)
                and rules.styles_compatible(top.style, bottom.style)
            ):
                diagnostics["pairs_rejected"] += 1
                continue
            shoe = _first_matching_shoe(top, bottom, grouped["shoes"], rules)
            if shoe is None:
                diagnostics["pairs_without_shoes"] += 1
                continue
            combination = [top, bottom, shoe]
            outfits.append(ScoredOutfit(items=combination, score=score_outfit(combination, rules)))

    ranked = sorted(outfits, key=lambda outfit: outfit.score, reverse=True)[:MAX_OUTFITS]
    diagnostics["outfits_emitted"] = len(outfits)
    diagnostics["best_score"] = ranked[0].score if ranked else None
    diagnostics["chosen_ids"] = [outfit.item_ids for outfit in ranked]
    logger.info("Built %s outfits, returning %s", len(outfits), len(ranked))
    return OutfitBuildResult(outfits=ranked, diagnostics=diagnostics)


def generate_recommendations(
    items: List[OutfitItem], context: RecommendationContext, rules: StyleRules = DEFAULT_STYLE_RULES
) -> OutfitBuildResult:
    """Filter by context then build and rank outfits."""

    selection = select_candidates(items, context, rules)
    result = build_outfits(selection.items, rules)
    result.diagnostics["selection"] = selection.diagnostics
    return result


__all__ = [
    "MAX_TOPS",
    "MAX_BOTTOMS",
    "MAX_OUTFITS",
    "OUTFIT_GROUPS",
    "CandidateSelectionResult",
    "ScoredOutfit",
    "OutfitBuildResult",
    "select_candidates",
    "partition_candidates",
    "build_outfits",
    "generate_recommendations",
]
