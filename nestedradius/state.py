"""Session state for an outer/inner rounded rectangle pair.

Width, height, outer radius and distance are stored; everything else is
derived on access. Every setter re-runs the clamp procedure so the stored
tuple is always settled:

  1. width/height are clamped into the optional size range
  2. outer radius is clamped down to min(width, height) / 2
  3. distance is clamped down to the same ceiling

Size clamps run first because the rectangle's size decides the radius and
padding ceilings, not the other way round.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from . import constants
from .layout import inner_size, max_padding, max_radius
from .solver import solve

logger = logging.getLogger(__name__)


def _clamp_size(value: float, min_size: Optional[float], max_size: Optional[float]) -> float:
    if min_size is not None and value < min_size:
        return min_size
    if max_size is not None and value > max_size:
        return max_size
    return value


def clamp_values(
    width: float,
    height: float,
    outer_radius: float,
    distance: float,
    min_size: Optional[float] = None,
    max_size: Optional[float] = None,
) -> Tuple[float, float, float, float]:
    """Settle (width, height, outer_radius, distance) against each other.

    Returns the clamped tuple in the same order. Negative radius or distance
    are raised to 0; the sliders never go below it.
    """
    if min_size is not None and max_size is not None and min_size > max_size:
        raise ValueError(f"min_size {min_size} is larger than max_size {max_size}")

    new_width = _clamp_size(float(width), min_size, max_size)
    new_height = _clamp_size(float(height), min_size, max_size)
    if new_width < 0 or new_height < 0:
        raise ValueError(f"Rectangle size must not be negative: {width} x {height}")

    radius_ceiling = max_radius(new_width, new_height)
    padding_ceiling = max_padding(new_width, new_height)
    new_radius = min(max(0.0, float(outer_radius)), radius_ceiling)
    new_distance = min(max(0.0, float(distance)), padding_ceiling)

    if (new_width, new_height) != (width, height):
        logger.debug("Clamped size %sx%s -> %sx%s", width, height, new_width, new_height)
    if new_radius != outer_radius:
        logger.debug("Clamped outer radius %s -> %s", outer_radius, new_radius)
    if new_distance != distance:
        logger.debug("Clamped distance %s -> %s", distance, new_distance)

    return new_width, new_height, new_radius, new_distance


class NestedRectangle:
    """Interactive state of the outer rectangle and its inset."""

    def __init__(
        self,
        width: float = constants.DEFAULT_WIDTH,
        height: float = constants.DEFAULT_HEIGHT,
        outer_radius: float = constants.DEFAULT_OUTER_RADIUS,
        distance: float = constants.DEFAULT_DISTANCE,
        min_size: Optional[float] = None,
        max_size: Optional[float] = None,
    ):
        self.min_size = min_size
        self.max_size = max_size
        self._defaults = (width, height, outer_radius, distance)
        self._width = width
        self._height = height
        self._outer_radius = outer_radius
        self._distance = distance
        self.settle()

    @classmethod
    def resizable(
        cls,
        width: float = constants.DEFAULT_WIDTH,
        height: float = constants.DEFAULT_HEIGHT,
        outer_radius: float = constants.DEFAULT_OUTER_RADIUS,
        distance: float = constants.DEFAULT_DISTANCE,
        min_size: float = constants.MIN_SIZE,
        max_size: float = constants.MAX_SIZE,
    ) -> "NestedRectangle":
        """Box the user can drag between min_size and max_size on both axes."""
        return cls(width, height, outer_radius, distance, min_size=min_size, max_size=max_size)

    def settle(self) -> None:
        self._width, self._height, self._outer_radius, self._distance = clamp_values(
            self._width,
            self._height,
            self._outer_radius,
            self._distance,
            min_size=self.min_size,
            max_size=self.max_size,
        )

    @property
    def width(self) -> float:
        return self._width

    @width.setter
    def width(self, value: float) -> None:
        self._width = value
        self.settle()

    @property
    def height(self) -> float:
        return self._height

    @height.setter
    def height(self, value: float) -> None:
        self._height = value
        self.settle()

    @property
    def outer_radius(self) -> float:
        return self._outer_radius

    @outer_radius.setter
    def outer_radius(self, value: float) -> None:
        self._outer_radius = value
        self.settle()

    @property
    def distance(self) -> float:
        return self._distance

    @distance.setter
    def distance(self, value: float) -> None:
        self._distance = value
        self.settle()

    @property
    def max_radius(self) -> float:
        return max_radius(self._width, self._height)

    @property
    def max_padding(self) -> float:
        return max_padding(self._width, self._height)

    @property
    def inner_width(self) -> float:
        return inner_size(self._width, self._height, self._distance)[0]

    @property
    def inner_height(self) -> float:
        return inner_size(self._width, self._height, self._distance)[1]

    @property
    def inner_radius(self) -> float:
        return solve(self._outer_radius, self._distance)

    def resize(self, width: float, height: float) -> None:
        """Apply a new outer size (one drag step) and settle once."""
        self._width = width
        self._height = height
        self.settle()

    def reset(self) -> None:
        self._width, self._height, self._outer_radius, self._distance = self._defaults
        self.settle()

    def snapshot(self) -> Dict[str, Any]:
        return {
            "width": self._width,
            "height": self._height,
            "outer_radius": self._outer_radius,
            "distance": self._distance,
            "inner_width": self.inner_width,
            "inner_height": self.inner_height,
            "inner_radius": self.inner_radius,
        }

    def __repr__(self) -> str:
        return (
            f"NestedRectangle(width={self._width}, height={self._height}, "
            f"outer_radius={self._outer_radius}, distance={self._distance})"
        )
