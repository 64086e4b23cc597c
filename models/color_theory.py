"""Color pairing helpers for deterministic matching."""
from __future__ import annotations

import logging

from models.style_rules import DEFAULT_STYLE_RULES, StyleRules
from models.taxonomy import color_key

logger = logging.getLogger(__name__)


def is_neutral(color: str, rules: StyleRules = DEFAULT_STYLE_RULES) -> bool:
    return color_key(color) in {color_key(neutral) for neutral in rules.neutral_colors}


def colors_complement(color1: str, color2: str, rules: StyleRules = DEFAULT_STYLE_RULES) -> bool:
    """Return True when the colors can be worn together.

    Names compare case-insensitively. Neutrals pair with everything; otherwise
    both colors must belong to the same curated complementary pair. A color
    listed in any pair therefore also matches itself.
    """

    if is_neutral(color1, rules) or is_neutral(color2, rules):
        return True
    c1, c2 = color_key(color1), color_key(color2)
    result = any(
        c1 in {color_key(a), color_key(b)} and c2 in {color_key(a), color_key(b)}
        for a, b in rules.complementary_pairs
    )
    logger.debug("complementary check (%s, %s) -> %s", color1, color2, result)
    return result


__all__ = ["is_neutral", "colors_complement"]
