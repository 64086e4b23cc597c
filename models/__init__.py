"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.outfit_item import OutfitItem, from_raw_metadata, to_record
from models.style_rules import DEFAULT_STYLE_RULES, StyleRules

__all__ = ["OutfitItem", "from_raw_metadata", "to_record", "StyleRules", "DEFAULT_STYLE_RULES"]
