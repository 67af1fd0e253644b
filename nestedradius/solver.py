"""Inner corner radius derivation for concentric rounded rectangles."""
from __future__ import annotations

import math


def _check_non_negative(name: str, value: float) -> float:
    value = float(value)
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{name} must be a finite number >= 0, got {value!r}")
    return value


def solve(outer_radius: float, distance: float) -> float:
    """Return the corner radius of a rectangle inset by ``distance``.

    The naive answer ``outer_radius - distance`` is floored at
    ``outer_radius / pi`` so the inner corner never collapses to a sharp
    edge while the outer one is still rounded.

    Raises ValueError for negative or non-finite inputs.
    """
    outer_radius = _check_non_negative("outer_radius", outer_radius)
    distance = _check_non_negative("distance", distance)
    min_radius = outer_radius / math.pi
    return max(min_radius, outer_radius - distance)


def format_radius(value: float) -> str:
    """Render whole numbers without decimals, anything else with two."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}"
