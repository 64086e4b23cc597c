"""Curated lookup tables that drive matching, outfit assembly and gap analysis.

The tables are plain data held in an immutable :class:`StyleRules` value so an
engine can be built with a localised or experimental rule set without touching
the scoring code. ``DEFAULT_STYLE_RULES`` carries the stock tables.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from models.taxonomy import CATEGORIES

logger = logging.getLogger(__name__)

TemperatureBand = Tuple[Optional[float], FrozenSet[str]]


def _freeze_mapping(raw: Mapping[str, Iterable[str]]) -> Mapping[str, Tuple[str, ...]]:
    return MappingProxyType({str(key): tuple(str(v) for v in values) for key, values in raw.items()})


def _tag(value: Any) -> str:
    return str(value).strip().lower()


def _freeze_tag_mapping(raw: Mapping[str, Iterable[str]]) -> Mapping[str, FrozenSet[str]]:
    return MappingProxyType(
        {str(key).strip().lower(): frozenset(_tag(v) for v in values) for key, values in raw.items()}
    )


_DEFAULT_STYLE_ADJACENCY = {
    "Casual": ["Smart Casual", "Athleisure", "Streetwear"],
    "Smart Casual": ["Casual", "Business Casual"],
    "Business Casual": ["Smart Casual", "Business Formal"],
    "Business Formal": ["Business Casual"],
    "Athleisure": ["Casual", "Streetwear"],
    "Streetwear": ["Casual", "Athleisure"],
    "Date Night": ["Smart Casual", "Party"],
    "Party": ["Date Night", "Festival"],
    "Festival": ["Party", "Casual"],
}

_DEFAULT_CONDITION_REQUIREMENTS = {
    "rainy": ["waterproof", "water-resistant", "rain"],
    "windy": ["wind-resistant", "fitted", "secure"],
    "snowy": ["snow", "waterproof", "warm", "insulated"],
}


@dataclass(frozen=True)
class StyleRules:
    """Immutable bundle of the curated tables used by the engine."""

    neutral_colors: FrozenSet[str] = frozenset({"Black", "White", "Gray", "Beige", "Brown", "Navy", "Cream"})
    complementary_pairs: Tuple[Tuple[str, str], ...] = (
        ("Black", "White"),
        ("Navy", "White"),
        ("Gray", "White"),
        ("Beige", "Navy"),
        ("Brown", "Cream"),
        ("Red", "Black"),
        ("Blue", "White"),
        ("Green", "Beige"),
    )
    style_adjacency: Mapping[str, Tuple[str, ...]] = field(
        default_factory=lambda: _freeze_mapping(_DEFAULT_STYLE_ADJACENCY)
    )
    essential_categories: Tuple[str, ...] = ("T-Shirts", "Jeans", "Sneakers", "Blouses", "Trousers")
    essential_colors: Tuple[str, ...] = ("Black", "White", "Navy", "Gray")
    essential_styles: Tuple[str, ...] = ("Casual", "Business Casual", "Smart Casual")
    top_categories: Tuple[str, ...] = tuple(CATEGORIES["tops"])
    bottom_categories: Tuple[str, ...] = tuple(CATEGORIES["bottoms"])
    shoe_categories: Tuple[str, ...] = tuple(CATEGORIES["footwear"])
    # Upper bounds are exclusive; the final band has no upper bound.
    temperature_bands: Tuple[TemperatureBand, ...] = (
        (40.0, frozenset({"cold", "winter", "warm", "insulated"})),
        (60.0, frozenset({"cool", "layering", "transitional"})),
        (80.0, frozenset({"mild", "comfortable", "versatile"})),
        (None, frozenset({"hot", "summer", "breathable", "lightweight"})),
    )
    condition_requirements: Mapping[str, FrozenSet[str]] = field(
        default_factory=lambda: _freeze_tag_mapping(_DEFAULT_CONDITION_REQUIREMENTS)
    )

    def styles_compatible(self, style1: str, style2: str) -> bool:
        """Return True for equal styles or an adjacency listed in either direction."""

        if style1 == style2:
            return True
        return style2 in self.style_adjacency.get(style1, ()) or style1 in self.style_adjacency.get(style2, ())

    def temperature_tags(self, temperature: float) -> FrozenSet[str]:
        """Return the weather tags accepted for the band containing ``temperature``."""

        for upper_bound, tags in self.temperature_bands:
            if upper_bound is None or temperature < upper_bound:
                return tags
        return frozenset()

    def asymmetric_style_pairs(self) -> List[Tuple[str, str]]:
        """List adjacency entries whose reverse entry is missing from the table.

        Lookups already check both directions, so these pairs still match; the
        list exists so a curator can make the stored table symmetric.
        """

        missing = []
        for style, neighbours in self.style_adjacency.items():
            for neighbour in neighbours:
                if style not in self.style_adjacency.get(neighbour, ()):
                    missing.append((style, neighbour))
        return missing

    @classmethod
    def from_mapping(cls, overrides: Mapping[str, Any]) -> "StyleRules":
        """Build rules from the defaults with any subset of tables replaced."""

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"Unknown style rule tables: {unknown}. Allowed: {sorted(known)}")

        kwargs: Dict[str, Any] = {}
        for key, raw in overrides.items():
            if key == "neutral_colors":
                kwargs[key] = frozenset(str(v) for v in raw)
            elif key == "complementary_pairs":
                pairs = []
                for pair in raw:
                    if len(pair) != 2:
                        raise ValueError(f"Complementary pair must have two colors, got {pair!r}")
                    pairs.append((str(pair[0]), str(pair[1])))
                kwargs[key] = tuple(pairs)
            elif key == "style_adjacency":
                kwargs[key] = _freeze_mapping(raw)
            elif key == "condition_requirements":
                kwargs[key] = _freeze_tag_mapping(raw)
            elif key == "temperature_bands":
                bands = []
                for upper_bound, tags in raw:
                    bound = None if upper_bound is None else float(upper_bound)
                    bands.append((bound, frozenset(_tag(tag) for tag in tags)))
                if not bands or bands[-1][0] is not None:
                    raise ValueError("The last temperature band must have no upper bound")
                kwargs[key] = tuple(bands)
            else:
                kwargs[key] = tuple(str(v) for v in raw)
        logger.info("Loaded style rule overrides for %s", sorted(kwargs))
        return cls(**kwargs)

    @classmethod
    def from_json_file(cls, path: str | Path) -> "StyleRules":
        """Load rule overrides from a JSON object keyed by table name."""

        payload = json.loads(Path(path).read_text())
        if not isinstance(payload, dict):
            raise ValueError(f"Style rules file {path} must contain a JSON object")
        return cls.from_mapping(payload)


DEFAULT_STYLE_RULES = StyleRules()


__all__ = ["StyleRules", "DEFAULT_STYLE_RULES", "TemperatureBand"]
