"""Single calculation entry point used by the command line script."""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from .positioned import positioned_inner_radius
from .solver import format_radius, solve
from .state import NestedRectangle
from .validation import validate_value

logger = logging.getLogger(__name__)


def main(
    outer_radius: float,
    distance: float,
    width: Optional[float] = None,
    height: Optional[float] = None,
    min_size: Optional[float] = None,
    max_size: Optional[float] = None,
) -> Dict[str, Any]:
    """Solve one input tuple and log the settled values.

    Without a size the radius and distance go straight to the solver after
    range validation. With a size they are clamped against it first.
    """
    outer_radius = validate_value(outer_radius)
    distance = validate_value(distance)

    if width is None or height is None:
        rect = None
        result = {
            "outer_radius": outer_radius,
            "distance": distance,
            "inner_radius": solve(outer_radius, distance),
        }
    else:
        rect = NestedRectangle(width, height, outer_radius, distance, min_size=min_size, max_size=max_size)
        result = rect.snapshot()

    result["display"] = format_radius(result["inner_radius"])

    if rect is not None:
        logger.info(
            "Outer: %s x %s, radius %s\nInner: %s x %s (distance %s)",
            format_radius(rect.width),
            format_radius(rect.height),
            format_radius(rect.outer_radius),
            format_radius(rect.inner_width),
            format_radius(rect.inner_height),
            format_radius(rect.distance),
        )
        if rect.outer_radius != outer_radius or rect.distance != distance:
            logger.info("Note: radius/distance were clamped to fit a %s x %s rectangle.", format_radius(rect.width), format_radius(rect.height))
    logger.info("Inner radius: %s", result["display"])
    return result


def main_positioned(
    outer_width: float,
    outer_height: float,
    outer_radius: float,
    inner_width: float,
    inner_height: float,
    x: float,
    y: float,
) -> str:
    radius = positioned_inner_radius(outer_width, outer_height, outer_radius, inner_width, inner_height, x, y)
    display = f"{radius:.2f}"
    logger.info("Calculated inner radius: %s", display)
    return display
