"""Engine facade exposing closet search, matching and recommendation operations."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional

from closet_app.config import EngineSettings
from closet_app.logging_config import configure_logging
from logic.attribute_filter import apply_filters
from logic.contextual_filtering import filter_by_weather
from logic.matching import find_matching_pieces
from logic.outfit_builder import generate_recommendations
from logic.saved_searches import saved_search_filters
from logic.suggestions import get_suggestions
from logic.text_search import search_by_text
from logic.validation import (
    RecommendationContext,
    SearchFilters,
    WardrobeGapReport,
    WeatherConditions,
    coerce_context,
    coerce_filters,
    coerce_weather,
)
from logic.value_ranking import rank_by_value, sort_items
from logic.wardrobe_analysis import analyze_wardrobe_gaps, find_underutilized_items
from logic.wear_frequency import filter_by_frequency
from models.outfit_item import OutfitItem, from_raw_metadata
from models.style_rules import DEFAULT_STYLE_RULES, StyleRules
from tools.item_store import ItemStore
from tools.observability import instrument_operation

LOGGER = logging.getLogger(__name__)


def _coerce_item(item: OutfitItem | Mapping[str, Any]) -> OutfitItem:
    if isinstance(item, OutfitItem):
        return item
    return from_raw_metadata(dict(item))


class OutfitSearchEngine:
    """Owns one closet snapshot and answers queries against it.

    All queries are synchronous and side-effect free. Mutations only touch the
    in-memory collection; callers mirror them to durable storage. The engine
    does no locking, so concurrent writers must serialise access or build a
    separate engine per snapshot with :meth:`with_items`.
    """

    def __init__(
        self,
        items: Iterable[OutfitItem | Mapping[str, Any]] = (),
        rules: Optional[StyleRules] = None,
        settings: Optional[EngineSettings] = None,
    ) -> None:
        self.rules = rules or DEFAULT_STYLE_RULES
        self.settings = settings or EngineSettings()
        self.store = ItemStore(_coerce_item(item) for item in items)

    @classmethod
    def from_settings(
        cls, items: Iterable[OutfitItem | Mapping[str, Any]] = (), settings: Optional[EngineSettings] = None
    ) -> "OutfitSearchEngine":
        """Build an engine whose rules come from ``settings.rules_path`` when set."""

        settings = settings or EngineSettings.from_env()
        configure_logging(settings.log_level)
        rules = StyleRules.from_json_file(settings.rules_path) if settings.rules_path else DEFAULT_STYLE_RULES
        LOGGER.info("Engine configured with rules from %s", settings.rules_path or "defaults")
        return cls(items, rules=rules, settings=settings)

    def with_items(self, items: Iterable[OutfitItem | Mapping[str, Any]]) -> "OutfitSearchEngine":
        """Independent engine over ``items`` sharing this engine's rules and settings."""

        return type(self)(items, rules=self.rules, settings=self.settings)

    @property
    def items(self) -> List[OutfitItem]:
        return self.store.list_items()

    def get_item(self, item_id: str) -> Optional[OutfitItem]:
        return self.store.get(item_id)

    # Queries

    @instrument_operation("search")
    def search(
        self,
        query: str = "",
        filters: SearchFilters | Mapping[str, Any] | None = None,
        sort_by: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> List[OutfitItem]:
        """Free-text search narrowed by structured filters."""

        results = search_by_text(self.items, query or "")
        results = apply_filters(results, coerce_filters(filters), now)
        return sort_items(results, sort_by)

    @instrument_operation("apply_saved_search")
    def apply_saved_search(self, name: str, query: str = "", now: Optional[datetime] = None) -> List[OutfitItem]:
        filters = saved_search_filters(name, now)
        results = search_by_text(self.items, query)
        return apply_filters(results, filters, now)

    @instrument_operation("search_by_frequency")
    def search_by_frequency(self, bucket: str, now: Optional[datetime] = None) -> List[OutfitItem]:
        return filter_by_frequency(self.items, bucket, now)

    @instrument_operation("search_by_value")
    def search_by_value(self, sort_order: str = "best") -> List[OutfitItem]:
        return rank_by_value(self.items, sort_order)

    @instrument_operation("search_by_weather")
    def search_by_weather(self, weather: WeatherConditions | Mapping[str, Any]) -> List[OutfitItem]:
        result = filter_by_weather(self.items, coerce_weather(weather), self.rules)
        LOGGER.debug("Weather filter removed %s", result.removed)
        return result.items

    @instrument_operation("find_matching_pieces")
    def find_matching_pieces(self, selected: OutfitItem | str, max_results: Optional[int] = None) -> List[OutfitItem]:
        """Pieces that pair with ``selected`` (an item or the id of an owned item)."""

        if isinstance(selected, str):
            item = self.store.get(selected)
            if item is None:
                LOGGER.info("No item %s to match against", selected)
                return []
            selected = item
        limit = self.settings.match_limit if max_results is None else max_results
        return find_matching_pieces(self.items, selected, limit, self.rules)

    @instrument_operation("generate_recommendations")
    def generate_recommendations(
        self, context: RecommendationContext | Mapping[str, Any] | None = None
    ) -> List[List[OutfitItem]]:
        """Ranked top/bottom/shoe outfits for an optional occasion and weather."""

        result = generate_recommendations(self.items, coerce_context(context), self.rules)
        LOGGER.debug("Outfit diagnostics %s", result.diagnostics)
        return [outfit.items for outfit in result.outfits]

    @instrument_operation("find_underutilized_items")
    def find_underutilized_items(self, limit: Optional[int] = None) -> List[OutfitItem]:
        return find_underutilized_items(
            self.items, self.settings.underutilized_limit if limit is None else limit
        )

    @instrument_operation("analyze_wardrobe_gaps")
    def analyze_wardrobe_gaps(self) -> WardrobeGapReport:
        return analyze_wardrobe_gaps(self.items, self.rules)

    @instrument_operation("get_suggestions")
    def get_suggestions(self, partial_query: str, limit: Optional[int] = None) -> List[str]:
        return get_suggestions(
            self.items, partial_query, self.settings.suggestion_limit if limit is None else limit
        )

    # Mutations

    @instrument_operation("add_item")
    def add_item(self, item: OutfitItem | Mapping[str, Any]) -> OutfitItem:
        return self.store.add(_coerce_item(item))

    @instrument_operation("update_item")
    def update_item(self, item_id: str, updates: Dict[str, Any]) -> Optional[OutfitItem]:
        return self.store.update(item_id, updates)

    @instrument_operation("remove_item")
    def remove_item(self, item_id: str) -> bool:
        return self.store.remove(item_id)


__all__ = ["OutfitSearchEngine"]
