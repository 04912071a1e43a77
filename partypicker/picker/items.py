"""
Picker item normalization.

Turns raw domain records (track names with attributes) into wheel items
with stable ids and deterministic colors.
"""
import re
from typing import Any, Iterable, List, Mapping, Optional, Union

from .colors import generate_color_from_index
from .models import PickerItem

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]")


def slugify_label(label: str) -> str:
    """Lowercase the label and turn every character outside [a-z0-9] into a hyphen."""
    return _NON_SLUG_CHARS.sub("-", label.lower())


def _record_label(record: Union[Mapping[str, Any], Any]) -> str:
    if isinstance(record, Mapping):
        label = record.get("name") or record.get("label")
    else:
        label = getattr(record, "name", None) or getattr(record, "label", None)
    if not label:
        raise ValueError(f"Record has no name: {record!r}")
    return str(label)


def _record_weight(record: Union[Mapping[str, Any], Any]) -> Optional[float]:
    if isinstance(record, Mapping):
        return record.get("weight")
    return getattr(record, "weight", None)


def normalize_items(
    records: Iterable[Union[Mapping[str, Any], Any]],
    saturation: int = 70,
    lightness: int = 60,
) -> List[PickerItem]:
    """
    Build wheel items from raw records.

    Args:
        records: Mappings or objects exposing `name` (or `label`) and
            optionally `weight`
        saturation: HSL saturation for generated colors
        lightness: HSL lightness for generated colors

    Returns:
        PickerItems in input order, colored by position
    """
    items = []
    for index, record in enumerate(records):
        label = _record_label(record)
        items.append(PickerItem(
            id=slugify_label(label),
            label=label,
            color=generate_color_from_index(index, saturation, lightness),
            weight=_record_weight(record),
        ))
    return items


def get_default_items() -> List[PickerItem]:
    """Default kart characters for an empty wheel."""
    return [
        PickerItem(id="mario", label="Mario", color="#FF0000"),
        PickerItem(id="luigi", label="Luigi", color="#00FF00"),
        PickerItem(id="peach", label="Princess Peach", color="#FFB6C1"),
        PickerItem(id="bowser", label="Bowser", color="#8B4513"),
        PickerItem(id="yoshi", label="Yoshi", color="#32CD32"),
        PickerItem(id="toad", label="Toad", color="#FF69B4"),
        PickerItem(id="koopa", label="Koopa Troopa", color="#90EE90"),
        PickerItem(id="shy-guy", label="Shy Guy", color="#FF6347"),
    ]
