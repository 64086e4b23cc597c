"""Weather and occasion filtering tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.contextual_filtering import (
    filter_by_occasion,
    filter_by_weather,
    is_condition_compatible,
    is_temperature_compatible,
    is_weather_compatible,
)
from logic.validation import WeatherConditions
from models.outfit_item import OutfitItem


def _item(item_id: str, weather_tags, season=("Winter",), occasion=()) -> OutfitItem:
    return OutfitItem(
        item_id=item_id,
        name=item_id,
        category="Sweaters",
        weather_tags=list(weather_tags),
        season=list(season),
        occasion=list(occasion),
    )


@pytest.mark.parametrize(
    "temperature, tag",
    [
        (-5, "insulated"),
        (39.9, "cold"),
        (40, "layering"),
        (59, "transitional"),
        (60, "mild"),
        (79.5, "versatile"),
        (80, "breathable"),
        (101, "lightweight"),
    ],
)
def test_temperature_bands(temperature, tag) -> None:
    assert is_temperature_compatible(_item("x", [tag]), temperature)


def test_band_boundaries_are_exclusive_upper_bounds() -> None:
    assert not is_temperature_compatible(_item("x", ["cold"]), 40)
    assert not is_temperature_compatible(_item("x", ["cool"]), 60)
    assert not is_temperature_compatible(_item("x", ["mild"]), 80)


def test_condition_requirements() -> None:
    raincoat = _item("coat", ["waterproof"])
    tee = _item("tee", ["breathable"])
    assert is_condition_compatible(raincoat, "rainy")
    assert is_condition_compatible(raincoat, "snowy")
    assert not is_condition_compatible(raincoat, "windy")
    assert not is_condition_compatible(tee, "rainy")
    assert is_condition_compatible(tee, "sunny")
    assert is_condition_compatible(tee, "cloudy")


def test_untagged_items_pass_every_check() -> None:
    plain = _item("plain", [], season=["Summer"])
    weather = WeatherConditions(temperature=10, conditions="snowy", season="Winter")
    assert is_weather_compatible(plain, weather)


def test_snowy_winter_excludes_summer_tagged_item() -> None:
    summer_top = _item("summer-top", ["summer", "breathable"], season=["Summer", "Winter"])
    parka = _item("parka", ["insulated", "snow"], season=["Winter"])
    weather = WeatherConditions(temperature=30, conditions="snowy", season="Winter")

    result = filter_by_weather([summer_top, parka], weather)

    assert [item.item_id for item in result.items] == ["parka"]
    assert "summer-top" in result.removed
    assert result.debug["removed_count"] == 1


def test_season_must_match_for_tagged_items() -> None:
    parka = _item("parka", ["insulated", "snow"], season=["Fall"])
    weather = WeatherConditions(temperature=30, conditions="snowy", season="winter")
    result = filter_by_weather([parka], weather)
    assert result.items == []
    assert result.removed["parka"] == "not worn in Winter"


def test_weather_conditions_normalise_inputs() -> None:
    weather = WeatherConditions.model_validate({"temperature": "72", "conditions": "Rainy", "season": "autumn"})
    assert weather.temperature == 72.0
    assert weather.conditions == "rainy"
    assert weather.season == "Fall"


def test_filter_by_occasion() -> None:
    items = [_item("a", [], occasion=["Work"]), _item("b", [], occasion=["Gym"])]
    assert [i.item_id for i in filter_by_occasion(items, "Work").items] == ["a"]
    assert filter_by_occasion(items, None).items == items
