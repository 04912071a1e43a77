"""
Picker data structures.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class PickerItem:
    """A labeled slice of the wheel."""
    id: str
    label: str
    color: Optional[str] = None
    weight: Optional[float] = None      # None counts as 1 in weighted selection

    @property
    def effective_weight(self) -> float:
        if self.weight is None:
            return 1.0
        return max(float(self.weight), 0.0)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "color": self.color,
            "weight": self.weight,
        }


@dataclass(frozen=True)
class SpinnerState:
    """Outcome of a spin, ready for the animation layer."""
    is_spinning: bool = False
    selected_item: Optional[PickerItem] = None
    rotation: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_spinning": self.is_spinning,
            "selected_item": self.selected_item.to_dict() if self.selected_item else None,
            "rotation": self.rotation,
        }
