"""
Spinner wheel picker - random and weighted selection with wheel rotation.
"""
from .models import PickerItem, SpinnerState
from .engine import (
    select_random_item,
    select_weighted_random_item,
    calculate_spin_rotation,
    spin,
)
from .colors import generate_color_from_index
from .items import slugify_label, normalize_items, get_default_items
from .rng import build_rng

__all__ = [
    "PickerItem",
    "SpinnerState",
    "select_random_item",
    "select_weighted_random_item",
    "calculate_spin_rotation",
    "spin",
    "generate_color_from_index",
    "slugify_label",
    "normalize_items",
    "get_default_items",
    "build_rng",
]
