"""
Resistor Code - Configuration
"""

import logging
import os

# Band layout defaults
DEFAULT_BAND_COUNT = 5
DEFAULT_TOLERANCE = 1.0    # percent (Brown)

# Largest gap between target/multiplier and an integer that still counts as
# a whole significand in the inverse search.
DIGIT_EPSILON = 1e-9


def _log_level(name: str | None) -> str:
    """Upper-cased level name, or "INFO" if *name* is not a logging level."""
    level = (name or "").strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return "INFO"


# Logging (RESISTOR_LOG_LEVEL overrides)
LOG_LEVEL = _log_level(os.environ.get("RESISTOR_LOG_LEVEL"))
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Example resistors shown by `resistor-code example`
EXAMPLE_BANDS = {
    4: ["Brown", "Black", "Orange", "Gold"],                 # 10 kΩ ±5%
    5: ["Brown", "Black", "Black", "Red", "Brown"],          # 10 kΩ ±1%
    6: ["Brown", "Black", "Black", "Red", "Brown", "Red"],   # 10 kΩ ±1%, 50 ppm/K
}
