"""Shared defaults and bounds for the nested radius calculator."""

# Defaults restored by a reset of the form
DEFAULT_OUTER_RADIUS: float = 10.0
DEFAULT_DISTANCE: float = 4.0

# Defaults for the resizable outer box
DEFAULT_WIDTH: float = 512.0
DEFAULT_HEIGHT: float = 512.0

# Resize range of the interactive box (both dimensions)
MIN_SIZE: float = 256.0
MAX_SIZE: float = 512.0

# Largest value accepted by a radius/distance field
INPUT_MAX: float = 1024.0
INPUT_ERROR_MESSAGE: str = "Must be a number between 0 and 1024"

# Defaults of the positioned variant (inner box with its own size and offset)
POSITIONED_OUTER_WIDTH: float = 240.0
POSITIONED_OUTER_HEIGHT: float = 180.0
POSITIONED_OUTER_RADIUS: float = 12.0
POSITIONED_INNER_WIDTH: float = 80.0
POSITIONED_INNER_HEIGHT: float = 60.0
POSITIONED_X: float = 10.0
POSITIONED_Y: float = 20.0
