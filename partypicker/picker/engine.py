"""
Picker/Spinner Engine.

Random and weighted selection over wheel items, and the rotation needed
to bring the selected slice under the pointer at the top of the wheel.
All randomness comes from an injected source so picks can be replayed.
"""
import math
import random
from typing import Optional, Sequence, TypeVar

from partypicker.core.protocols import RandomSource
from partypicker.utils.observability import Logger, get_metrics
from .models import PickerItem, SpinnerState

logger = Logger(__name__)
metrics = get_metrics()

T = TypeVar("T")

DEFAULT_SPINS = 3
FULL_TURN = 360.0


def _uniform_index(length: int, rng: RandomSource) -> int:
    # min() guards against a source that returns exactly 1.0
    return min(math.floor(rng.random() * length), length - 1)


def _weighted_index(items: Sequence[PickerItem], rng: RandomSource) -> int:
    weights = [item.effective_weight for item in items]
    total_weight = sum(weights)
    if total_weight <= 0:
        return _uniform_index(len(items), rng)

    remaining = rng.random() * total_weight
    last_positive = 0
    for index, weight in enumerate(weights):
        if weight <= 0:
            continue
        last_positive = index
        remaining -= weight
        if remaining <= 0:
            return index

    # Float accumulation can leave a sliver above zero
    return last_positive


def select_random_item(items: Sequence[T], rng: Optional[RandomSource] = None) -> Optional[T]:
    """Pick one element with uniform probability, or None for an empty list."""
    if not items:
        return None
    rng = rng or random.Random()
    return items[_uniform_index(len(items), rng)]


def select_weighted_random_item(
    items: Sequence[PickerItem],
    rng: Optional[RandomSource] = None,
) -> Optional[PickerItem]:
    """
    Pick one item with probability proportional to its weight.

    Items without a weight count as 1; items with weight 0 are never
    picked unless every item has weight 0, in which case the pick is
    uniform.

    Args:
        items: Wheel items in display order
        rng: Source of uniform draws (defaults to an unseeded generator)

    Returns:
        The selected item, or None for an empty list
    """
    if not items:
        return None
    rng = rng or random.Random()
    return items[_weighted_index(items, rng)]


def calculate_spin_rotation(
    selected_index: int,
    total_items: int,
    spins: int = DEFAULT_SPINS,
) -> float:
    """
    Rotation in degrees that lands the selected slice under the pointer.

    The pointer is fixed at the top (0 degrees); the slice center is
    at index * width + width / 2, so the wheel turns the remainder of a
    full turn on top of `spins` full revolutions.

    Raises:
        ValueError if total_items is not positive
    """
    if total_items <= 0:
        raise ValueError(f"total_items must be positive (got {total_items})")
    angle_per_item = FULL_TURN / total_items
    target_angle = FULL_TURN - (selected_index * angle_per_item + angle_per_item / 2)
    return spins * FULL_TURN + target_angle


def spin(
    items: Sequence[PickerItem],
    rng: Optional[RandomSource] = None,
    spins: int = DEFAULT_SPINS,
    weighted: bool = False,
) -> SpinnerState:
    """
    Select an item and compute the wheel rotation for it.

    Returns:
        SpinnerState with the selected item and final rotation; an empty
        list yields a state with no selection and zero rotation
    """
    if not items:
        logger.log_event("spin_skipped_empty_wheel")
        return SpinnerState(is_spinning=False, selected_item=None, rotation=0.0)

    rng = rng or random.Random()
    if weighted:
        index = _weighted_index(items, rng)
    else:
        index = _uniform_index(len(items), rng)

    rotation = calculate_spin_rotation(index, len(items), spins)
    mode = "weighted" if weighted else "uniform"
    metrics.spins.labels(mode=mode).inc()
    logger.log_event(
        "wheel_spun",
        mode=mode,
        item=items[index].id,
        index=index,
        total_items=len(items),
        rotation=rotation,
    )
    return SpinnerState(is_spinning=False, selected_item=items[index], rotation=rotation)
