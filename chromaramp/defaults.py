"""Central place for chromaramp default settings."""

# Stops
DEFAULT_STOP_WEIGHT: float = 0.5
DEFAULT_START_RGBA: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)  # opaque black at 0.0
DEFAULT_END_RGBA: tuple[float, float, float, float] = (1.0, 1.0, 1.0, 1.0)  # opaque white at 1.0

# Interpolation
DEFAULT_INTERPOLATION_FUNCTION: str = "linear"
DEFAULT_BLEND_SPACE: str = "rgb"

# Out of range positions
DEFAULT_SPREAD: str = "pad"

# Stop list replacement
DEFAULT_NORMALIZE_MODE: str = "normalize"

# Exact stop matching in Gradient.at
FUZZY_COMPARE_SCALE: float = 1e12
