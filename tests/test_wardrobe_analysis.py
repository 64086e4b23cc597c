"""Underutilization, gap analysis and autocomplete tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import List

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.suggestions import get_suggestions
from logic.wardrobe_analysis import analyze_wardrobe_gaps, find_underutilized_items
from models.outfit_item import OutfitItem
from models.style_rules import StyleRules


def _item(item_id: str, category: str = "Jeans", **extra) -> OutfitItem:
    return OutfitItem(item_id=item_id, name=extra.pop("name", item_id), category=category, **extra)


def _ids(items: List[OutfitItem]) -> List[str]:
    return [item.item_id for item in items]


def test_underutilized_items_rank_by_cost_per_wear() -> None:
    items = [
        _item("coat", price=400, times_worn=1),
        _item("boots", price=200, times_worn=0),
        _item("dress", price=400, times_worn=2),
        _item("cheap", price=50, times_worn=0),
        _item("loved", price=500, times_worn=3),
    ]
    assert _ids(find_underutilized_items(items)) == ["coat", "boots", "dress"]
    assert _ids(find_underutilized_items(items, limit=1)) == ["coat"]
    assert find_underutilized_items(items, limit=0) == []


def test_gap_analysis_reports_absent_essentials() -> None:
    items = [
        _item("tee", "T-Shirts", primary_color="Black", style="Casual", season=["Summer"]),
        _item("jeans", "Jeans", primary_color="Navy", style="Smart Casual", season=["Summer", "Fall"]),
    ]
    report = analyze_wardrobe_gaps(items)

    assert report.missing_categories == ["Sneakers", "Blouses", "Trousers"]
    assert report.color_gaps == ["White", "Gray"]
    assert report.style_gaps == ["Business Casual"]

    by_season = {gap.season: gap.gaps for gap in report.seasonal_gaps}
    assert by_season["Summer"] == ["Sneakers", "Blouses", "Trousers"]
    assert by_season["Fall"] == ["T-Shirts", "Sneakers", "Blouses", "Trousers"]
    assert by_season["Winter"] == ["T-Shirts", "Jeans", "Sneakers", "Blouses", "Trousers"]


def test_single_item_clears_category_gap() -> None:
    items = [_item(category, category, season=["Spring", "Summer", "Fall", "Winter"]) for category in
             ["T-Shirts", "Jeans", "Sneakers", "Blouses", "Trousers"]]
    report = analyze_wardrobe_gaps(items)
    assert report.missing_categories == []
    assert report.seasonal_gaps == []


def test_gap_analysis_uses_supplied_essentials() -> None:
    rules = StyleRules.from_mapping({"essential_categories": ["Coats"], "essential_colors": ["Red"]})
    report = analyze_wardrobe_gaps([_item("coat", "Coats", primary_color="Red", season=["Winter"])], rules)
    assert report.missing_categories == []
    assert report.color_gaps == []
    assert [gap.season for gap in report.seasonal_gaps] == ["Spring", "Summer", "Fall"]


def test_suggestions_match_fields_case_insensitively() -> None:
    items = [
        _item("a", "Blazers", name="Navy Blazer", brand="Banana Republic", primary_color="Navy", tags=["tailored"]),
        _item("b", "Jeans", name="Slim Jeans", brand="Levi's", primary_color="Blue", tags=["navy-stitch"]),
        _item("c", "Blazers", name="Navy Blazer", brand="Zara", primary_color="Navy"),
    ]
    assert get_suggestions(items, "NAV") == ["Navy Blazer", "Navy", "navy-stitch"]
    assert get_suggestions(items, "bla", limit=1) == ["Navy Blazer"]
    assert get_suggestions(items, "zzz") == []


def test_color_gaps_match_names_case_insensitively() -> None:
    items = [
        _item("a", primary_color="black"),
        _item("b", primary_color="Off White"),
        _item("c", primary_color="Grey"),
        _item("d", primary_color="NAVY"),
    ]
    assert analyze_wardrobe_gaps(items).color_gaps == ["White", "Gray"]
