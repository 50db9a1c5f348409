"""Centralized constants for the aqueous pH scale at 25 °C."""

from __future__ import annotations

PH_MIN: float = 0.0
PH_MAX: float = 14.0

# pKw = -log10(Kw) for water at 25 °C.
PKW: float = 14.0
ION_PRODUCT: float = 1.0e-14

NEUTRAL_PH: float = 7.0
NEUTRAL_TOLERANCE: float = 1.0e-9

DEFAULT_HYDROGEN_TEXT = "0.0000001"
DEFAULT_HYDROXIDE_TEXT = "0.0000001"
DEFAULT_POH_TEXT = "7"


def is_neutral(ph: float) -> bool:
    """Return whether a pH value sits on the neutral point.

    Args:
        ph (float): pH value (dimensionless), already clamped to the scale.

    Returns:
        bool: ``True`` when ``ph`` is within ``NEUTRAL_TOLERANCE`` of 7.

    Note:
        Values derived through ``-log10`` (for example from ``1e-7``) can land
        a few ulps away from 7, so the comparison is tolerance-based.
    """
    return abs(float(ph) - NEUTRAL_PH) <= NEUTRAL_TOLERANCE
