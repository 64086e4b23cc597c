"""Closet item model, taxonomy and storage record tests."""

from __future__ import annotations

import sys
from datetime import date, datetime, timedelta, timezone
from pathlib import Path
from typing import Dict

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from models import taxonomy
from models.outfit_item import OutfitItem, apply_updates, from_raw_metadata, parse_datetime, to_record
from models.style_rules import DEFAULT_STYLE_RULES


@pytest.fixture()
def sample_record() -> Dict[str, object]:
    return {
        "id": "item-1",
        "name": "Navy Oxford Shirt",
        "category": "Blouses",
        "primaryColor": "navy blue",
        "secondaryColors": ["white", "White"],
        "style": "Business Casual",
        "season": ["spring", "Autumn"],
        "occasion": ["Work", "Work"],
        "brand": "Everlane",
        "price": 68,
        "timesWorn": 4,
        "dateAdded": "2024-03-01T09:30:00Z",
        "dateLastWorn": "2024-05-02",
        "imageUrl": "https://example.com/shirt.jpg",
        "tags": ["oxford", "cotton"],
        "valueScore": 7,
        "weatherTags": ["Mild", "versatile"],
        "materialTags": ["cotton"],
        "fit": "Regular",
        "condition": "good",
    }


def test_taxonomy_contains_expected_vocabularies() -> None:
    assert "T-Shirts" in taxonomy.CATEGORIES["tops"]
    assert "Sneakers" in taxonomy.all_categories()
    assert "Business Formal" in taxonomy.all_styles()
    assert taxonomy.SEASONS == ["Spring", "Summer", "Fall", "Winter"]


def test_normalisers_map_variants() -> None:
    assert taxonomy.color_key(" Navy ") == "navy"
    assert taxonomy.color_key(None) == ""
    assert taxonomy.normalize_season("autumn") == "Fall"
    assert taxonomy.normalize_season("WINTER") == "Winter"
    assert taxonomy.normalize_enum(" Loose ") == "loose"
    assert taxonomy.normalize_enum(None) is None


def test_outfit_partitions_follow_category_groups() -> None:
    assert DEFAULT_STYLE_RULES.top_categories == tuple(taxonomy.CATEGORIES["tops"])
    assert DEFAULT_STYLE_RULES.bottom_categories == tuple(taxonomy.CATEGORIES["bottoms"])
    assert DEFAULT_STYLE_RULES.shoe_categories == tuple(taxonomy.CATEGORIES["footwear"])
    assert "Jackets" in taxonomy.CATEGORIES["outerwear"]


def test_from_raw_metadata_accepts_camel_case(sample_record: Dict[str, object]) -> None:
    item = from_raw_metadata(sample_record)

    assert item.item_id == "item-1"
    assert item.primary_color == "navy blue"
    assert item.secondary_colors == ["white"]
    assert item.colors == ["navy blue", "white"]
    assert item.season == ["Spring", "Fall"]
    assert item.occasion == ["Work"]
    assert item.times_worn == 4
    assert item.weather_tags == ["mild", "versatile"]
    assert item.fit == "regular"
    assert item.date_added == datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)
    assert item.date_last_worn == datetime(2024, 5, 2, tzinfo=timezone.utc)
    assert item.image_url == "https://example.com/shirt.jpg"


def test_from_raw_metadata_requires_only_id() -> None:
    with pytest.raises(ValueError):
        from_raw_metadata({"name": "No id", "category": "Jeans"})
    with pytest.raises(ValueError):
        from_raw_metadata({"id": "", "name": "Blank id"})

    unnamed = from_raw_metadata({"id": "x", "name": "", "category": "Jeans"})
    assert unnamed.name == ""
    assert from_raw_metadata({"id": "y"}).category == ""


def test_from_raw_metadata_ignores_unknown_fields(sample_record: Dict[str, object]) -> None:
    item = from_raw_metadata({**sample_record, "userId": "someone"})
    assert item.item_id == "item-1"


def test_negative_price_or_wears_rejected() -> None:
    with pytest.raises(ValueError):
        OutfitItem(item_id="a", name="A", category="Jeans", price=-1)
    with pytest.raises(ValueError):
        OutfitItem(item_id="a", name="A", category="Jeans", times_worn=-2)


def test_bad_timestamp_rejected() -> None:
    with pytest.raises(ValueError):
        parse_datetime("last tuesday")


def test_defaults_for_optional_fields() -> None:
    item = OutfitItem(item_id="a", name="Plain Tee", category="T-Shirts")
    assert item.secondary_colors == []
    assert item.weather_tags == []
    assert item.date_last_worn is None
    assert item.fit is None
    assert isinstance(item.date_added, datetime)
    assert item.date_added.tzinfo is not None


def test_timestamps_are_stored_as_utc() -> None:
    naive = OutfitItem(item_id="a", name="A", category="Jeans", date_added=datetime(2024, 5, 1, 10))
    zulu = from_raw_metadata({"id": "b", "dateAdded": "2024-05-01T10:00:00.000Z"})
    offset = from_raw_metadata({"id": "c", "dateAdded": "2024-05-01T12:00:00+02:00"})

    assert naive.date_added == zulu.date_added == offset.date_added
    assert offset.date_added.utcoffset() == timedelta(0)
    assert parse_datetime(date(2024, 5, 1)) == datetime(2024, 5, 1, tzinfo=timezone.utc)


def test_color_names_are_kept_as_given() -> None:
    item = OutfitItem(item_id="a", name="A", category="Jeans", primary_color=" Tan ", secondary_colors=["ivory", "Ivory"])
    assert item.primary_color == "Tan"
    assert item.secondary_colors == ["ivory"]


def test_apply_updates_keeps_identity(sample_record: Dict[str, object]) -> None:
    item = from_raw_metadata(sample_record)
    updated = apply_updates(item, {"id": "other", "timesWorn": 5, "primaryColor": "grey", "unknown": 1})

    assert updated.item_id == "item-1"
    assert updated.times_worn == 5
    assert updated.primary_color == "grey"
    assert item.times_worn == 4


def test_to_record_uses_storage_keys(sample_record: Dict[str, object]) -> None:
    record = to_record(from_raw_metadata(sample_record))

    assert record["id"] == "item-1"
    assert record["primaryColor"] == "navy blue"
    assert record["timesWorn"] == 4
    assert record["dateAdded"] == "2024-03-01T09:30:00+00:00"
    assert "item_id" not in record
    assert from_raw_metadata(record).season == ["Spring", "Fall"]
