"""Map pH values to display colors on a piecewise red-to-blue scale.

Bands (pH is clamped to 0-14 first):

    [0, 3)    strong acid         #d70000
    [3, 6)    weak acid           orange (215, 100, 0) → yellow (255, 255, 0)
    [6, 7)    near neutral        #e0f57c
    7         neutral             #7ceb7c
    (7, 9)    slightly basic      #7cd6f5
    [9, 12)   moderately basic    #0088cc
    [12, 14]  strong base         #0000cc

Fixed bands are returned as hex strings; the interpolated band is returned as
a CSS ``rgb(r, g, b)`` string. Both forms are accepted by
``parse_css_color``.
"""

from __future__ import annotations

import math
import re
from typing import Tuple

from matplotlib.colors import to_rgb

from phcalc.chemistry.conversions import clamp_ph
from phcalc.units import is_neutral

STRONG_ACID_COLOR = "#d70000"
NEAR_NEUTRAL_COLOR = "#e0f57c"
NEUTRAL_COLOR = "#7ceb7c"
SLIGHTLY_BASIC_COLOR = "#7cd6f5"
MODERATELY_BASIC_COLOR = "#0088cc"
STRONG_BASE_COLOR = "#0000cc"

WEAK_ACID_START: Tuple[int, int, int] = (215, 100, 0)
WEAK_ACID_END: Tuple[int, int, int] = (255, 255, 0)

_RGB_PATTERN = re.compile(r"^rgb\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*\)$")


def _interpolate_weak_acid(ph: float) -> str:
    t = (ph - 3.0) / 3.0
    channels = [
        int(math.floor(start + t * (end - start)))
        for start, end in zip(WEAK_ACID_START, WEAK_ACID_END)
    ]
    return "rgb({}, {}, {})".format(*channels)


def color_for_ph(ph: float) -> str:
    """Return the display color for a pH value.

    Args:
        ph (float): pH value (dimensionless). Values outside 0-14 are clamped
            before the lookup, so ``color_for_ph(-5) == color_for_ph(0)``.

    Returns:
        str: Hex color for fixed bands or ``rgb(r, g, b)`` for the weak-acid
        gradient. Interpolated channels are floored to integers, giving
        ``rgb(235, 177, 0)`` at pH 4.5.

    Note:
        The neutral color is selected within ``NEUTRAL_TOLERANCE`` of 7
        rather than by exact float equality.
    """
    v = clamp_ph(ph)
    if v < 3:
        return STRONG_ACID_COLOR
    if v < 6:
        return _interpolate_weak_acid(v)
    if is_neutral(v):
        return NEUTRAL_COLOR
    if v < 7:
        return NEAR_NEUTRAL_COLOR
    if v < 9:
        return SLIGHTLY_BASIC_COLOR
    if v < 12:
        return MODERATELY_BASIC_COLOR
    return STRONG_BASE_COLOR


def text_color_for_ph(ph: float) -> str:
    """Return a readable foreground color for text drawn on the pH swatch."""
    v = clamp_ph(ph)
    return "white" if v < 3 or v > 11 else "black"


def parse_css_color(color: str) -> Tuple[float, float, float]:
    """Convert a matplotlib color or a CSS ``rgb(r, g, b)`` string to RGB.

    Args:
        color (str): Color string as produced by ``color_for_ph``. Hex
            strings and other matplotlib color specs go through
            ``matplotlib.colors.to_rgb``; the CSS functional form is parsed
            here because matplotlib does not accept it.

    Returns:
        tuple[float, float, float]: Channels scaled to ``[0, 1]``, the form
        matplotlib accepts for face colors.

    Raises:
        ValueError: If the string is not a valid color or a channel exceeds 255.
    """
    text = color.strip()
    if not text.startswith("rgb("):
        return to_rgb(text)
    match = _RGB_PATTERN.match(text)
    if not match:
        raise ValueError(f"Unrecognized color string: {color!r}")
    channels = [int(g) for g in match.groups()]
    if any(c > 255 for c in channels):
        raise ValueError(f"RGB channel out of range in {color!r}")
    r, g, b = (c / 255.0 for c in channels)
    return (r, g, b)
