"""
Resistor Code - Vision Service Input

The camera path hands a photo to an external vision model, which answers
with JSON like {"colors": ["Brown", "Black", "Orange", "Gold"]}.  Nothing
about that answer is trusted: it may be wrapped in a Markdown code fence,
contain names that are not band colors, or have any number of entries.
This module cleans it up before anything reaches color_code.decode().
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable

from color_code import ResistorReading, decode
from color_table import BAND_COUNTS, BandColor, parse_color
from errors import InvalidValue, UnknownColor

log = logging.getLogger(__name__)


def _strip_code_fence(text: str) -> str:
    text = text.strip()
    if text.startswith("```json"):
        text = text[len("```json"):]
    elif text.startswith("```"):
        text = text[3:]
    else:
        return text
    if text.rstrip().endswith("```"):
        text = text.rstrip()[:-3]
    return text.strip()


def parse_detection_response(text: str) -> list:
    """Extract the raw "colors" entries from a vision-model reply.  Entries
    are returned as-is (they may not even be strings); filter_color_names()
    drops the ones that are not band colors.

    Raises:
        InvalidValue: the reply is not JSON or has no "colors" list.
    """
    try:
        payload = json.loads(_strip_code_fence(text))
    except json.JSONDecodeError as exc:
        raise InvalidValue(f"vision response is not valid JSON: {exc}") from exc

    colors = payload.get("colors") if isinstance(payload, dict) else None
    if not isinstance(colors, list):
        raise InvalidValue("vision response has no 'colors' list")
    return list(colors)


def filter_color_names(names: Iterable) -> list[BandColor]:
    """Keep the names that are band colors, in order; drop the rest,
    including entries that are not strings (JSON null, numbers)."""
    raw = list(names)
    kept: list[BandColor] = []
    for name in raw:
        try:
            kept.append(parse_color(name))
        except UnknownColor:
            continue
    if len(kept) != len(raw):
        log.warning("Vision service returned invalid color names, filtering them out: %r", raw)
    return kept


def bands_from_detection(names: Iterable) -> tuple[int, list[BandColor]]:
    """Filter *names* and check they form a 4-, 5- or 6-band resistor.

    Returns:
        (band_count, bands)

    Raises:
        InvalidValue: the filtered sequence has an unusual number of bands.
    """
    bands = filter_color_names(names)
    if len(bands) not in BAND_COUNTS:
        raise InvalidValue(
            f"detected {len(bands)} bands; expected 4, 5 or 6"
        )
    return len(bands), bands


def decode_detection(names: Iterable) -> ResistorReading:
    band_count, bands = bands_from_detection(names)
    return decode(bands, band_count)
