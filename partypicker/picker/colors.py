"""
Deterministic wheel colors.
"""

# Golden ratio conjugate spreads consecutive hues far apart
GOLDEN_RATIO_CONJUGATE = 0.618033988749895


def generate_color_from_index(index: int, saturation: int = 70, lightness: int = 60) -> str:
    """
    Generate a consistent HSL color for the item at `index`.

    Args:
        index: Position of the item in its list
        saturation: HSL saturation percentage
        lightness: HSL lightness percentage

    Returns:
        CSS color string, e.g. "hsl(222, 70%, 60%)"
    """
    hue = (index * GOLDEN_RATIO_CONJUGATE * 360) % 360
    return f"hsl({int(hue)}, {saturation}%, {lightness}%)"
