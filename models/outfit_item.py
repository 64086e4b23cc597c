"""Closet item data model and helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from datetime import date, datetime, timezone
from typing import Any, Dict, List, Optional

from models.taxonomy import color_key, dedupe, normalize_enum, normalize_season

logger = logging.getLogger(__name__)

# Storage records use camelCase keys.
_FIELD_ALIASES = {
    "id": "item_id",
    "itemId": "item_id",
    "primaryColor": "primary_color",
    "secondaryColors": "secondary_colors",
    "timesWorn": "times_worn",
    "dateAdded": "date_added",
    "dateLastWorn": "date_last_worn",
    "imageUrl": "image_url",
    "valueScore": "value_score",
    "weatherTags": "weather_tags",
    "materialTags": "material_tags",
    "careInstructions": "care_instructions",
}
_RECORD_KEYS = {value: key for key, value in _FIELD_ALIASES.items() if key != "itemId"}


def canonical_field_name(key: str) -> str:
    """Translate a camelCase storage key to the dataclass attribute name."""

    return _FIELD_ALIASES.get(key, key)


def _ensure_list(value: Any) -> List[Any]:
    """Coerce a scalar or iterable into a list."""

    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to a naive datetime or convert an aware one to UTC."""

    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_datetime(value: Any) -> Optional[datetime]:
    """Accept datetimes, dates or ISO-8601 strings and return an aware UTC datetime.

    Naive values are read as UTC so records with and without offsets compare.
    """

    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return as_utc(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return as_utc(datetime.fromisoformat(text))
    except ValueError:
        raise ValueError(f"Unsupported timestamp {value!r}; expected ISO-8601") from None


@dataclass
class OutfitItem:
    """Represents one owned piece of clothing."""

    item_id: str
    name: str
    category: str
    brand: str = ""
    primary_color: str = ""
    secondary_colors: List[str] = field(default_factory=list)
    style: str = ""
    season: List[str] = field(default_factory=list)
    occasion: List[str] = field(default_factory=list)
    price: float = 0.0
    times_worn: int = 0
    date_added: datetime = field(default_factory=utc_now)
    date_last_worn: Optional[datetime] = None
    tags: List[str] = field(default_factory=list)
    value_score: float = 0.0
    weather_tags: List[str] = field(default_factory=list)
    material_tags: List[str] = field(default_factory=list)
    fit: Optional[str] = None
    condition: Optional[str] = None
    image_url: Optional[str] = None
    care_instructions: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.item_id = str(self.item_id)
        self.name = str(self.name or "")
        self.category = str(self.category or "").strip()
        self.brand = str(self.brand or "").strip()
        self.style = str(self.style or "").strip()
        self.primary_color = str(self.primary_color or "").strip()
        self.secondary_colors = dedupe(_ensure_list(self.secondary_colors), key=color_key)
        self.season = dedupe(normalize_season(s) for s in _ensure_list(self.season))
        self.occasion = dedupe(_ensure_list(self.occasion))
        self.tags = dedupe(_ensure_list(self.tags))
        self.weather_tags = dedupe(str(tag).lower() for tag in _ensure_list(self.weather_tags))
        self.material_tags = dedupe(_ensure_list(self.material_tags))
        self.care_instructions = dedupe(_ensure_list(self.care_instructions))
        self.fit = normalize_enum(self.fit)
        self.condition = normalize_enum(self.condition)

        self.price = float(self.price or 0)
        if self.price < 0:
            raise ValueError(f"Item {self.item_id} has negative price {self.price}")
        self.times_worn = int(self.times_worn or 0)
        if self.times_worn < 0:
            raise ValueError(f"Item {self.item_id} has negative wear count {self.times_worn}")
        self.value_score = float(self.value_score or 0)

        self.date_added = parse_datetime(self.date_added) or utc_now()
        self.date_last_worn = parse_datetime(self.date_last_worn)

    @property
    def colors(self) -> List[str]:
        """Primary color followed by secondary colors."""

        return [self.primary_color, *self.secondary_colors] if self.primary_color else list(self.secondary_colors)


def from_raw_metadata(metadata: Dict[str, Any]) -> OutfitItem:
    """Factory to build an :class:`OutfitItem` from a loose storage record."""

    payload = {canonical_field_name(key): value for key, value in metadata.items()}
    if payload.get("item_id") in (None, ""):
        raise ValueError("Missing required field for OutfitItem: id")
    payload.setdefault("name", "")
    payload.setdefault("category", "")

    known = {f.name for f in fields(OutfitItem)}
    ignored = sorted(set(payload) - known)
    if ignored:
        logger.debug("Ignoring unknown item fields %s for %s", ignored, payload["item_id"])
    return OutfitItem(**{key: value for key, value in payload.items() if key in known})


def apply_updates(item: OutfitItem, updates: Dict[str, Any]) -> OutfitItem:
    """Return a copy of ``item`` with ``updates`` merged in.

    The identity field is never changed and unknown keys are ignored.
    """

    known = {f.name for f in fields(OutfitItem)}
    changes: Dict[str, Any] = {}
    for key, value in updates.items():
        name = canonical_field_name(key)
        if name == "item_id" or name not in known:
            continue
        changes[name] = value
    return replace(item, **changes)


def to_record(item: OutfitItem) -> Dict[str, Any]:
    """Serialise an item to the camelCase record shape used by storage."""

    record: Dict[str, Any] = {}
    for f in fields(OutfitItem):
        value = getattr(item, f.name)
        if isinstance(value, datetime):
            value = value.isoformat()
        elif isinstance(value, list):
            value = list(value)
        record[_RECORD_KEYS.get(f.name, f.name)] = value
    return record


__all__ = [
    "OutfitItem",
    "from_raw_metadata",
    "apply_updates",
    "to_record",
    "canonical_field_name",
    "parse_datetime",
    "as_utc",
    "utc_now",
]
