"""Pydantic schemas and helpers for validating engine queries and reports."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from models.outfit_item import as_utc
from models.taxonomy import normalize_enum, normalize_season


class _QueryModel(BaseModel):
    """Accept both snake_case names and the camelCase keys sent by the UI."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class DateRange(_QueryModel):
    """Inclusive ``date_added`` bounds; naive values are read as UTC like item timestamps."""

    start: datetime
    end: datetime

    @field_validator("start", "end")
    @classmethod
    def _to_utc(cls, value: datetime) -> datetime:
        return as_utc(value)


class SearchFilters(_QueryModel):
    """Structured search constraints; ``None`` or an empty list means unrestricted."""

    categories: Optional[List[str]] = None
    colors: Optional[List[str]] = None
    styles: Optional[List[str]] = None
    seasons: Optional[List[str]] = None
    occasions: Optional[List[str]] = None
    brands: Optional[List[str]] = None
    price_range: Optional[Tuple[float, float]] = Field(None, alias="priceRange")
    times_worn: Optional[str] = Field(None, alias="timesWorn")
    times_worn_range: Optional[Tuple[int, int]] = Field(None, alias="timesWornRange")
    date_range: Optional[DateRange] = Field(None, alias="dateRange")
    tags: Optional[List[str]] = None
    value_score: Optional[Tuple[float, float]] = Field(None, alias="valueScore")
    weather_compatibility: Optional[List[str]] = Field(None, alias="weatherCompatibility")
    fit: Optional[List[str]] = None
    condition: Optional[List[str]] = None

    @field_validator("seasons")
    @classmethod
    def _normalise_seasons(cls, seasons: Optional[List[str]]) -> Optional[List[str]]:
        if seasons is None:
            return None
        return [normalize_season(season) for season in seasons]

    # Item weather tags, fit and condition are stored lower-cased.
    @field_validator("weather_compatibility", "fit", "condition")
    @classmethod
    def _lower_case(cls, values: Optional[List[str]]) -> Optional[List[str]]:
        if values is None:
            return None
        return [value for value in (normalize_enum(v) for v in values) if value]

    def active_constraints(self) -> List[str]:
        """Names of the constraints that will restrict results."""

        active = []
        for name in type(self).model_fields:
            value = getattr(self, name)
            if value is None or (isinstance(value, list) and not value):
                continue
            active.append(name)
        return active


class WeatherConditions(_QueryModel):
    """Ambient weather used for compatibility filtering (temperature in Fahrenheit)."""

    temperature: float
    conditions: str = "sunny"
    season: str
    humidity: Optional[float] = None

    @field_validator("conditions")
    @classmethod
    def _normalise_conditions(cls, conditions: str) -> str:
        return conditions.strip().lower()

    @field_validator("season")
    @classmethod
    def _normalise_season(cls, season: str) -> str:
        return normalize_season(season)


class RecommendationContext(_QueryModel):
    """Constraints applied before outfit enumeration."""

    occasion: Optional[str] = None
    weather: Optional[WeatherConditions] = None


class SeasonalGap(BaseModel):
    season: str
    gaps: List[str]


class WardrobeGapReport(BaseModel):
    """Essentials absent from the collection, overall and per season."""

    missing_categories: List[str] = []
    color_gaps: List[str] = []
    style_gaps: List[str] = []
    seasonal_gaps: List[SeasonalGap] = []


def coerce_filters(filters: SearchFilters | Mapping[str, Any] | None) -> SearchFilters:
    if filters is None:
        return SearchFilters()
    if isinstance(filters, SearchFilters):
        return filters
    return SearchFilters.model_validate(dict(filters))


def coerce_weather(weather: WeatherConditions | Mapping[str, Any]) -> WeatherConditions:
    if isinstance(weather, WeatherConditions):
        return weather
    return WeatherConditions.model_validate(dict(weather))


def coerce_context(context: RecommendationContext | Mapping[str, Any] | None) -> RecommendationContext:
    if context is None:
        return RecommendationContext()
    if isinstance(context, RecommendationContext):
        return context
    return RecommendationContext.model_validate(dict(context))


__all__ = [
    "DateRange",
    "SearchFilters",
    "WeatherConditions",
    "RecommendationContext",
    "SeasonalGap",
    "WardrobeGapReport",
    "coerce_filters",
    "coerce_weather",
    "coerce_context",
]
