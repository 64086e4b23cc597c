"""Mix-and-match lookup: pieces that pair with one selected item."""

from __future__ import annotations

import logging
from typing import List

from logic.outfit_scoring import compatibility_score
from models.color_theory import colors_complement
from models.outfit_item import OutfitItem
from models.style_rules import DEFAULT_STYLE_RULES, StyleRules

logger = logging.getLogger(__name__)


def is_matching_piece(selected: OutfitItem, candidate: OutfitItem, rules: StyleRules = DEFAULT_STYLE_RULES) -> bool:
    """Every hard requirement for ``candidate`` to be offered alongside ``selected``."""

    if candidate.item_id == selected.item_id or candidate.category == selected.category:
        return False
    return (
        colors_complement(selected.primary_color, candidate.primary_color, rules)
        and rules.styles_compatible(selected.style, candidate.style)
        and any(occasion in candidate.occasion for occasion in selected.occasion)
        and any(season in candidate.season for season in selected.season)
    )


def find_matching_pieces(
    items: List[OutfitItem],
    selected: OutfitItem,
    max_results: int = 10,
    rules: StyleRules = DEFAULT_STYLE_RULES,
) -> List[OutfitItem]:
    """Rank compatible pieces for ``selected``, best first, at most ``max_results``."""

    candidates = [item for item in items if is_matching_piece(selected, item, rules)]
    ranked = sorted(candidates, key=lambda item: compatibility_score(selected, item, rules), reverse=True)
    logger.info(
        "Found %s matching pieces for %s, returning %s", len(ranked), selected.item_id, min(len(ranked), max_results)
    )
    return ranked[: max(max_results, 0)]


__all__ = ["is_matching_piece", "find_matching_pieces"]
