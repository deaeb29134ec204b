from __future__ import annotations

"""
Resistor Code - Color Bands to Resistance

Decodes a 4-, 5- or 6-band color sequence into its resistance, tolerance and
(6-band only) temperature coefficient, plus the display string shown to the
user, e.g. '10.0 kΩ ±1% (50 ppm/K)'.

Exports:
    decode        – band list → ResistorReading
    format_value  – ohms → '4.70 kΩ' (3 significant figures)
    describe      – band list → 'Yellow-Violet-Red-Gold (4.70 kΩ ±5%)'
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from color_table import (
    BandColor,
    BandRole,
    band_roles,
    digit_value,
    lookup,
    multiplier,
    parse_color,
    tcr,
    tolerance,
)
from errors import InvalidColorForRole, InvalidFirstBand

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResistorReading:
    """Result of decoding one band sequence."""

    bands: tuple[BandColor, ...]
    ohms: float
    tolerance: float | None     # percent
    tcr: int | None             # ppm/K, 6-band only
    display: str


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _significant(value: float, figures: int = 3) -> str:
    """Render *value* with *figures* significant figures, keeping trailing
    zeros: 10 → '10.0', 1 → '1.00', 470 → '470', 999500 → '1.00e+6'."""
    if value == 0:
        return f"{0:.{figures - 1}f}"

    mantissa, exp_str = f"{value:.{figures - 1}e}".split("e")
    exponent = int(exp_str)
    if -6 <= exponent < figures:
        return f"{value:.{max(0, figures - 1 - exponent)}f}"

    sign = "+" if exponent >= 0 else "-"
    return f"{mantissa}e{sign}{abs(exponent)}"


def _plain_number(value: float) -> str:
    """5.0 → '5', 0.25 → '0.25'."""
    return f"{value:g}"


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def format_value(ohms: float) -> str:
    """Format *ohms* with an SI unit and 3 significant figures.

    Rules:
        >= 1_000_000 → MΩ  (e.g. '2.20 MΩ')
        >=     1_000 → kΩ  (e.g. '10.0 kΩ')
        <      1_000 → Ω   (e.g. '470 Ω', '4.70 Ω')
    """
    if ohms >= 1_000_000:
        scaled, unit = ohms / 1_000_000, "MΩ"
    elif ohms >= 1_000:
        scaled, unit = ohms / 1_000, "kΩ"
    else:
        scaled, unit = ohms, "Ω"
    return f"{_significant(scaled)} {unit}"


def decode(bands: Sequence[BandColor | str], band_count: int) -> ResistorReading:
    """Decode *bands* (colors or color names, left to right) of a
    *band_count*-band resistor.

    Band layout:
        4-band: digit, digit, multiplier, tolerance
        5-band: digit, digit, digit, multiplier, tolerance
        6-band: digit, digit, digit, multiplier, tolerance, TCR

    Raises:
        InvalidColorForRole: band count not 4/5/6, sequence length differs
            from *band_count*, or a band's color has no meaning in its role.
        InvalidFirstBand: a 4- or 5-band resistor starts with Black.
        UnknownColor: a band name is not a table color.
    """
    roles = band_roles(band_count)
    colors = tuple(parse_color(b) for b in bands)

    if len(colors) != band_count:
        raise InvalidColorForRole(
            f"expected {band_count} bands, got {len(colors)}"
        )

    # 6-band resistors may start with Black; 4- and 5-band may not.
    if band_count != 6 and lookup(colors[0]).digit_value == 0:
        raise InvalidFirstBand("first band cannot be Black")

    num_digits = sum(1 for r in roles if r in (BandRole.FIRST_DIGIT, BandRole.DIGIT))

    digits = 0
    for color in colors[:num_digits]:
        digits = digits * 10 + digit_value(color)

    ohms = digits * multiplier(colors[num_digits])
    tol = tolerance(colors[num_digits + 1])
    coeff = tcr(colors[-1]) if roles[-1] is BandRole.TCR else None

    display = f"{format_value(ohms)} ±{_plain_number(tol)}%"
    if coeff is not None:
        display += f" ({coeff} ppm/K)"

    log.debug("decode %s → %s", "-".join(c.value for c in colors), display)
    return ResistorReading(
        bands=colors,
        ohms=ohms,
        tolerance=tol,
        tcr=coeff,
        display=display,
    )


def describe(bands: Sequence[BandColor | str], band_count: int | None = None) -> str:
    """Return a human-readable description of *bands*, e.g.
    'Brown-Black-Orange-Gold (10.0 kΩ ±5%)'.

    *band_count* defaults to ``len(bands)``.
    """
    if band_count is None:
        band_count = len(bands)
    reading = decode(bands, band_count)
    name_str = "-".join(c.value for c in reading.bands)
    return f"{name_str} ({reading.display})"
