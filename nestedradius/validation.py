"""Input handling for the radius and distance fields.

Fields accept digits only. An empty field means "no value yet" and leaves the
result blank; anything above the field maximum is capped to it.
"""
from __future__ import annotations

import math
import re
from typing import Optional

from .constants import INPUT_ERROR_MESSAGE, INPUT_MAX
from .solver import format_radius, solve


class InputError(ValueError):
    """A field value outside the accepted range."""


def sanitize_input(text: str) -> str:
    """Drop every character that is not a digit."""
    return re.sub(r"[^0-9]", "", str(text))


def parse_field(text: Optional[str], maximum: float = INPUT_MAX) -> Optional[float]:
    """Turn raw field text into a number, or None when the field is blank."""
    if text is None or text == "":
        return None
    digits = sanitize_input(text)
    if digits == "":
        return None
    return min(float(digits), maximum)


def validate_value(value, maximum: float = INPUT_MAX) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise InputError(INPUT_ERROR_MESSAGE) from None
    if math.isnan(number) or number < 0 or number > maximum:
        raise InputError(INPUT_ERROR_MESSAGE)
    return number


def calculate_field_result(outer_radius_text: Optional[str], distance_text: Optional[str]) -> Optional[str]:
    """Compute the displayed inner radius from the two raw field values."""
    outer_radius = parse_field(outer_radius_text)
    distance = parse_field(distance_text)
    if outer_radius is None or distance is None:
        return None
    return format_radius(solve(outer_radius, distance))
