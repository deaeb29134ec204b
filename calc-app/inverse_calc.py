"""
Resistor Code - Resistance to Color Bands

Finds the 4- or 5-band color sequence for a resistance and tolerance.  Unlike
an E-series snap, the value is encoded exactly or not at all: the search
tries each multiplier in canonical order (Black, Brown, ... White, Gold,
Silver) and keeps the first one that leaves a whole significand of the right
digit count.

Exports:
    encode               – ohms, tolerance, band count → list of BandColor
    tolerance_color      – tolerance percent → its band color
    standard_tolerances  – tolerances a form should offer, with their colors
    parse_resistance     – '4.7', 'kΩ' / '4.7k' → ohms
"""

from __future__ import annotations

import logging
import math
import re

import config
from color_table import (
    COLOR_TABLE,
    BandColor,
    BandRole,
    colors_for_role,
    lookup,
)
from errors import InvalidValue, NonStandardTolerance, UnrepresentableValue

log = logging.getLogger(__name__)

# Unit spelling → scale.  Keys are lower-cased before lookup.
_UNIT_SCALE: dict[str, float] = {
    "": 1.0,
    "ω": 1.0,
    "ohm": 1.0,
    "ohms": 1.0,
    "r": 1.0,
    "k": 1_000.0,
    "kω": 1_000.0,
    "kohm": 1_000.0,
    "m": 1_000_000.0,
    "mω": 1_000_000.0,
    "mohm": 1_000_000.0,
}

_BY_DIGIT: dict[int, BandColor] = {
    e.digit_value: c for c, e in COLOR_TABLE.items() if e.digit_value is not None
}

_VALUE_RE = re.compile(
    r"^\s*((?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?)\s*(.*?)\s*$"
)


# ---------------------------------------------------------------------------
# Tolerance
# ---------------------------------------------------------------------------

def tolerance_color(percent: float) -> BandColor:
    """Return the color whose tolerance is exactly *percent*.

    Raises:
        NonStandardTolerance: no color carries that tolerance.
    """
    for color, entry in COLOR_TABLE.items():
        if entry.tolerance is not None and entry.tolerance == percent:
            return color
    raise NonStandardTolerance(f"tolerance of {percent}% is not a standard band")


def standard_tolerances() -> list[tuple[float, BandColor]]:
    """(percent, color) pairs in the order a tolerance selector lists them."""
    return [
        (lookup(color).tolerance, color)
        for color in colors_for_role(BandRole.TOLERANCE)
    ]


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def _digit_colors(digits: str) -> list[BandColor] | None:
    colors = [_BY_DIGIT.get(int(ch)) for ch in digits]
    if any(c is None for c in colors):
        return None
    return colors


def encode(target_ohms: float, tolerance_percent: float, band_count: int = 4) -> list[BandColor]:
    """Return the band colors encoding *target_ohms* at *tolerance_percent*.

    Band layout:
        4-band: digit, digit, multiplier, tolerance
        5-band: digit, digit, digit, multiplier, tolerance

    Decoding the result gives back *target_ohms* (up to the rounding of the
    multiplier division) and exactly *tolerance_percent*.

    Raises:
        InvalidValue: *target_ohms* <= 0 or not finite, or *band_count* is
            not 4 or 5.
        NonStandardTolerance: no band color has that exact tolerance.
        UnrepresentableValue: no multiplier yields a whole significand with
            the right number of digits, or *target_ohms* is too large
            to convert to a float.
    """
    try:
        target = float(target_ohms)
    except OverflowError:
        raise UnrepresentableValue(
            f"{target_ohms!r} Ω is too large to encode"
        ) from None
    if not math.isfinite(target) or target <= 0:
        raise InvalidValue(f"resistance must be greater than zero, got {target_ohms!r}")
    if band_count not in (4, 5):
        raise InvalidValue(f"can only encode 4- or 5-band resistors, got {band_count!r}")

    tol_color = tolerance_color(tolerance_percent)
    num_digits = 2 if band_count == 4 else 3

    for mult_color in colors_for_role(BandRole.MULTIPLIER):
        mult = lookup(mult_color).multiplier
        if not mult:
            continue

        significand = target / mult
        if not math.isfinite(significand):
            continue
        rounded = round(significand)
        if abs(significand - rounded) > config.DIGIT_EPSILON:
            continue

        digits = str(rounded)
        if len(digits) != num_digits:
            continue

        digit_colors = _digit_colors(digits)
        if digit_colors is None or digit_colors[0] is BandColor.BLACK:
            continue

        bands = [*digit_colors, mult_color, tol_color]
        log.debug(
            "encode %r Ω ±%s%% → %s", target_ohms, tolerance_percent,
            "-".join(c.value for c in bands),
        )
        return bands

    raise UnrepresentableValue(
        f"{target!r} Ω cannot be encoded with {band_count} standard bands"
    )


# ---------------------------------------------------------------------------
# Input parsing
# ---------------------------------------------------------------------------

def parse_resistance(text: str, unit: str = "Ω") -> float:
    """Convert a user-entered value to ohms.

    The unit may be given separately (*unit*) or attached to the number
    ('4.7k', '2.2 MΩ', '4.7 k Ω'); an attached unit wins and spaces inside
    it are ignored.  Recognised units: Ω / ohm, k / kΩ, M / MΩ
    (case-insensitive, so 'm' is also mega).  A trailing decimal point
    ('4.') is accepted; signs, thousands separators and a bare '.' are not.

    Raises:
        InvalidValue: not a positive number, or an unknown unit.
    """
    match = _VALUE_RE.match(text or "")
    if match is None:
        raise InvalidValue(f"not a number: {text!r}")

    number, attached = match.groups()
    unit_key = "".join((attached or unit or "").split()).lower()
    try:
        scale = _UNIT_SCALE[unit_key]
    except KeyError:
        raise InvalidValue(f"unknown resistance unit {attached or unit!r}") from None

    ohms = float(number) * scale
    if not math.isfinite(ohms) or ohms <= 0:
        raise InvalidValue("resistance must be a positive number")
    return ohms
