"""Inner radius for an inner rectangle of arbitrary size and position.

Unlike the uniform inset solver, the inner rectangle here has its own width,
height and offset (x from the left, y from the top). The radius is scaled by
the size ratio on each axis and capped by the closest gap to the outer edge.
"""
from __future__ import annotations

from typing import Tuple


def edge_distances(
    outer_width: float,
    outer_height: float,
    inner_width: float,
    inner_height: float,
    x: float,
    y: float,
) -> Tuple[float, float, float, float]:
    """Return the (left, top, right, bottom) gaps between the two rectangles."""
    dist_right = outer_width - (x + inner_width)
    dist_bottom = outer_height - (y + inner_height)
    return (x, y, dist_right, dist_bottom)


def positioned_inner_radius(
    outer_width: float,
    outer_height: float,
    outer_radius: float,
    inner_width: float,
    inner_height: float,
    x: float,
    y: float,
) -> float:
    if outer_width == 0 or outer_height == 0:
        raise ValueError("Outer width and height must be non-zero")

    r_width = outer_radius * (inner_width / outer_width)
    r_height = outer_radius * (inner_height / outer_height)
    min_dist = max(0.0, min(edge_distances(outer_width, outer_height, inner_width, inner_height, x, y)))
    return max(0.0, min(r_width, r_height, min_dist))
