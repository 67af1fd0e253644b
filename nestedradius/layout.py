"""Layout helpers for the outer/inner rectangle pair."""
from typing import Tuple


def max_radius(width: float, height: float) -> float:
    """Largest corner radius a width x height rectangle can carry."""
    return min(width, height) / 2


# Padding shares the radius ceiling: beyond it the inner rectangle vanishes
max_padding = max_radius


def inner_size(width: float, height: float, distance: float) -> Tuple[float, float]:
    """Return (inner_width, inner_height) after insetting every side by distance."""
    return (max(0.0, width - 2 * distance), max(0.0, height - 2 * distance))


def inner_rect(x: float, y: float, width: float, height: float, distance: float) -> Tuple[float, float, float, float]:
    """Return the inner rectangle inset by distance on all sides.

    Args:
        x, y: Origin of the outer rectangle
        width, height: Dimensions of the outer rectangle
        distance: Uniform inset applied to each side
    Returns:
        (inner_x, inner_y, inner_width, inner_height)
    """
    inner_w, inner_h = inner_size(width, height, distance)
    return (x + min(distance, width / 2), y + min(distance, height / 2), inner_w, inner_h)
