from __future__ import annotations

"""
Resistor Code - Color Table

The 13 band colors and what each one means in every band role.  The table
is built once at import and never written afterwards, so it is safe to share
between any number of callers.

Exports:
    BandColor         – closed enumeration of band colors (canonical order)
    BandRole          – what a band position encodes
    ColorEntry        – immutable per-color attributes
    COLOR_TABLE       – read-only BandColor → ColorEntry mapping
    lookup            – color (enum member or name) → ColorEntry
    parse_color       – case-insensitive name → BandColor
    digit_value / multiplier / tolerance / tcr – per-role accessors
    band_roles        – band count → role of each position
    legal_colors      – colors allowed at one position of a band layout
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from errors import InvalidColorForRole, UnknownColor


class BandColor(str, Enum):
    """Band color identifiers, in canonical table order."""

    BLACK = "Black"
    BROWN = "Brown"
    RED = "Red"
    ORANGE = "Orange"
    YELLOW = "Yellow"
    GREEN = "Green"
    BLUE = "Blue"
    VIOLET = "Violet"
    GREY = "Grey"
    WHITE = "White"
    GOLD = "Gold"
    SILVER = "Silver"
    NONE = "None"

    def __str__(self) -> str:
        return self.value


class BandRole(str, Enum):
    FIRST_DIGIT = "first_digit"
    DIGIT = "digit"
    MULTIPLIER = "multiplier"
    TOLERANCE = "tolerance"
    TCR = "tcr"


@dataclass(frozen=True)
class ColorEntry:
    """Attributes of one band color.  ``None`` means the color has no use in
    that role (e.g. Gold carries no digit value)."""

    color: BandColor
    hex: str
    digit_value: int | None
    multiplier: float | None
    tolerance: float | None     # percent
    tcr: int | None             # ppm/K

    @property
    def name(self) -> str:
        return self.color.value

    @property
    def rgb(self) -> tuple[int, int, int]:
        return hex_to_rgb(self.hex)


# ---------------------------------------------------------------------------
# The table
# ---------------------------------------------------------------------------

_C = BandColor

_ENTRIES = [
    #          color      hex        digit  multiplier     tol    tcr
    ColorEntry(_C.BLACK,  "#000000", 0,     1.0,           None,  None),
    ColorEntry(_C.BROWN,  "#A52A2A", 1,     10.0,          1.0,   100),
    ColorEntry(_C.RED,    "#FF0000", 2,     100.0,         2.0,   50),
    ColorEntry(_C.ORANGE, "#FFA500", 3,     1_000.0,       None,  15),
    ColorEntry(_C.YELLOW, "#FFFF00", 4,     10_000.0,      None,  25),
    ColorEntry(_C.GREEN,  "#008000", 5,     100_000.0,     0.5,   20),
    ColorEntry(_C.BLUE,   "#0000FF", 6,     1_000_000.0,   0.25,  10),
    ColorEntry(_C.VIOLET, "#EE82EE", 7,     10_000_000.0,  0.1,   5),
    ColorEntry(_C.GREY,   "#808080", 8,     100_000_000.0, 0.05,  1),
    ColorEntry(_C.WHITE,  "#FFFFFF", 9,     1e9,           None,  None),
    ColorEntry(_C.GOLD,   "#FFD700", None,  0.1,           5.0,   None),
    ColorEntry(_C.SILVER, "#C0C0C0", None,  0.01,          10.0,  None),
    ColorEntry(_C.NONE,   "#F0F0F0", None,  None,          20.0,  None),
]

COLOR_TABLE: MappingProxyType = MappingProxyType({e.color: e for e in _ENTRIES})

# Lower-case spelling → color.  "gray" is the US spelling of Grey.
_BY_NAME: dict[str, BandColor] = {c.value.lower(): c for c in BandColor}
_BY_NAME["gray"] = BandColor.GREY

# Colors offered for each role, in the order a selector lists them.
ROLE_OPTIONS: MappingProxyType = MappingProxyType({
    BandRole.FIRST_DIGIT: (
        _C.BROWN, _C.RED, _C.ORANGE, _C.YELLOW, _C.GREEN,
        _C.BLUE, _C.VIOLET, _C.GREY, _C.WHITE,
    ),
    BandRole.DIGIT: (
        _C.BLACK, _C.BROWN, _C.RED, _C.ORANGE, _C.YELLOW,
        _C.GREEN, _C.BLUE, _C.VIOLET, _C.GREY, _C.WHITE,
    ),
    # Canonical multiplier order; the inverse search depends on it.
    BandRole.MULTIPLIER: (
        _C.BLACK, _C.BROWN, _C.RED, _C.ORANGE, _C.YELLOW, _C.GREEN,
        _C.BLUE, _C.VIOLET, _C.GREY, _C.WHITE, _C.GOLD, _C.SILVER,
    ),
    BandRole.TOLERANCE: (
        _C.BROWN, _C.RED, _C.GREEN, _C.BLUE, _C.VIOLET,
        _C.GREY, _C.GOLD, _C.SILVER, _C.NONE,
    ),
    BandRole.TCR: (
        _C.BROWN, _C.RED, _C.ORANGE, _C.YELLOW, _C.BLUE, _C.VIOLET, _C.GREY,
    ),
})

# Role of each band position.  A 6-band resistor's first band is a plain
# digit, so Black is allowed there (unlike 4- and 5-band).
_LAYOUTS: dict[int, tuple[BandRole, ...]] = {
    4: (BandRole.FIRST_DIGIT, BandRole.DIGIT,
        BandRole.MULTIPLIER, BandRole.TOLERANCE),
    5: (BandRole.FIRST_DIGIT, BandRole.DIGIT, BandRole.DIGIT,
        BandRole.MULTIPLIER, BandRole.TOLERANCE),
    6: (BandRole.DIGIT, BandRole.DIGIT, BandRole.DIGIT,
        BandRole.MULTIPLIER, BandRole.TOLERANCE, BandRole.TCR),
}

BAND_COUNTS: tuple[int, ...] = tuple(_LAYOUTS)


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

def parse_color(name: BandColor | str) -> BandColor:
    """Resolve *name* to a BandColor, ignoring case and surrounding spaces.

    Raises:
        UnknownColor: *name* is not one of the 13 table colors.
    """
    if isinstance(name, BandColor):
        return name
    if isinstance(name, str):
        color = _BY_NAME.get(name.strip().lower())
        if color is not None:
            return color
    raise UnknownColor(f"unknown band color {name!r}")


def lookup(color: BandColor | str) -> ColorEntry:
    """Return the table entry for *color* (a BandColor or a color name)."""
    return COLOR_TABLE[parse_color(color)]


# ---------------------------------------------------------------------------
# Per-role accessors
# ---------------------------------------------------------------------------

def _missing(entry: ColorEntry, role: str) -> InvalidColorForRole:
    return InvalidColorForRole(f"{entry.name} cannot be used as a {role} band")


def digit_value(color: BandColor | str) -> int:
    entry = lookup(color)
    if entry.digit_value is None:
        raise _missing(entry, "digit")
    return entry.digit_value


def multiplier(color: BandColor | str) -> float:
    entry = lookup(color)
    if entry.multiplier is None:
        raise _missing(entry, "multiplier")
    return entry.multiplier


def tolerance(color: BandColor | str) -> float:
    entry = lookup(color)
    if entry.tolerance is None:
        raise _missing(entry, "tolerance")
    return entry.tolerance


def tcr(color: BandColor | str) -> int:
    entry = lookup(color)
    if entry.tcr is None:
        raise _missing(entry, "TCR")
    return entry.tcr


# ---------------------------------------------------------------------------
# Band layouts
# ---------------------------------------------------------------------------

def band_roles(band_count: int) -> tuple[BandRole, ...]:
    """Return the role of each position for a *band_count*-band resistor."""
    try:
        return _LAYOUTS[band_count]
    except KeyError:
        raise InvalidColorForRole(
            f"unsupported band count {band_count!r} (expected 4, 5 or 6)"
        ) from None


def colors_for_role(role: BandRole) -> tuple[BandColor, ...]:
    return ROLE_OPTIONS[role]


def legal_colors(band_count: int, position: int) -> tuple[BandColor, ...]:
    """Colors a selector should offer at *position* (0-based) of a
    *band_count*-band resistor."""
    roles = band_roles(band_count)
    if not 0 <= position < len(roles):
        raise InvalidColorForRole(
            f"position {position} out of range for a {band_count}-band resistor"
        )
    return ROLE_OPTIONS[roles[position]]


# ---------------------------------------------------------------------------
# Presentation helpers
# ---------------------------------------------------------------------------

def hex_to_rgb(hex_str: str) -> tuple[int, int, int]:
    """'#A52A2A' → (165, 42, 42).  Accepts 3- or 6-digit forms, '#' optional."""
    h = hex_str.lstrip("#")
    if len(h) == 3:
        h = "".join(ch * 2 for ch in h)
    if len(h) != 6:
        raise ValueError(f"not a hex color: {hex_str!r}")
    return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))


def format_multiplier(value: float) -> str:
    """Format a multiplier for a tooltip: 100 → 'x100', 1e3 → 'x1k', 0.1 → 'x0.1'."""
    if value >= 1_000_000_000:
        scaled, suffix = value / 1_000_000_000, "G"
    elif value >= 1_000_000:
        scaled, suffix = value / 1_000_000, "M"
    elif value >= 1_000:
        scaled, suffix = value / 1_000, "k"
    else:
        scaled, suffix = value, ""
    return f"x{scaled:g}{suffix}"
