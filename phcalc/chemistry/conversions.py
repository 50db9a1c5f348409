"""Convert between pH, pOH, and hydrogen/hydroxide ion concentrations.

All conversions assume dilute aqueous solution at 25 °C, where the ion
product of water fixes the relationships:

    pH = -log₁₀[H⁺]
    pOH = -log₁₀[OH⁻]
    pH + pOH = pKw = 14
    [H⁺][OH⁻] = Kw = 10⁻¹⁴

Clamping policy:
    Concentration-to-pH conversions clamp their result to the 0-14 scale.
    Real solutions can leave that range (concentrated acids, strong bases),
    but the calculator reports on the standard scale. Conversions that take
    pH or pOH as input reject out-of-range values instead of clamping them.

Every function here is pure and performs no I/O.
"""

from __future__ import annotations

import math

import numpy as np

from phcalc.units import PH_MAX, PH_MIN, PKW, is_neutral


class InvalidInput(ValueError):
    """Raised when a concentration, pH, or pOH cannot be converted."""


def _as_float(value: float, name: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float, np.number)):
        raise TypeError(f"{name} must be numeric, got {type(value)}")
    v = float(value)
    if not math.isfinite(v):
        raise InvalidInput(f"{name} must be finite, got {v}")
    return v


def _require_positive(value: float, name: str) -> float:
    c = _as_float(value, name)
    if c <= 0:
        raise InvalidInput(f"{name} must be greater than 0, got {c}")
    return c


def _require_on_scale(value: float, name: str) -> float:
    v = _as_float(value, name)
    if v < PH_MIN or v > PH_MAX:
        raise InvalidInput(f"{name} must be between 0 and 14, got {v}")
    return v


def validate_ph(ph: float) -> float:
    """Return ``ph`` as a float after checking it lies on the 0-14 scale.

    Raises:
        TypeError: If ``ph`` is not numeric.
        InvalidInput: If ``ph`` is outside ``[0, 14]`` or non-finite.
    """
    return _require_on_scale(ph, "pH")


def clamp_ph(ph: float) -> float:
    """Clamp a pH value to the standard 0-14 scale.

    Args:
        ph (float): pH value (dimensionless); may lie outside the scale.

    Returns:
        float: ``ph`` limited to ``[0, 14]``.
    """
    return float(min(PH_MAX, max(PH_MIN, float(ph))))


def ph_from_hydrogen(hydrogen_concentration: float) -> float:
    """Calculate pH from hydrogen ion concentration.

    Args:
        hydrogen_concentration (float): [H⁺] in mol dm^-3.

    Returns:
        float: ``-log10([H⁺])`` clamped to ``[0, 14]``.

    Raises:
        TypeError: If the concentration is not numeric.
        InvalidInput: If the concentration is non-finite or not > 0.

    Note:
        Concentrations above 1 mol dm^-3 clamp to pH 0 and below
        1e-14 mol dm^-3 clamp to pH 14.
    """
    c = _require_positive(hydrogen_concentration, "Hydrogen ion concentration")
    return clamp_ph(-np.log10(c))


def ph_from_hydroxide(hydroxide_concentration: float) -> float:
    """Calculate pH from hydroxide ion concentration.

    Computes ``pOH = -log10([OH⁻])`` and then ``pH = 14 - pOH``.

    Args:
        hydroxide_concentration (float): [OH⁻] in mol dm^-3.

    Returns:
        float: pH clamped to ``[0, 14]``.

    Raises:
        TypeError: If the concentration is not numeric.
        InvalidInput: If the concentration is non-finite or not > 0.
    """
    c = _require_positive(hydroxide_concentration, "Hydroxide ion concentration")
    poh = -np.log10(c)
    return clamp_ph(PKW - poh)


def ph_from_poh(poh: float) -> float:
    """Calculate pH from pOH using ``pH = 14 - pOH``.

    The input is already bounded to the scale, so no clamping is applied.

    Raises:
        InvalidInput: If ``poh`` is outside ``[0, 14]``.
    """
    return PKW - _require_on_scale(poh, "pOH")


def poh_from_ph(ph: float) -> float:
    """Calculate pOH from pH using ``pOH = 14 - pH``.

    Raises:
        InvalidInput: If ``ph`` is outside ``[0, 14]``.
    """
    return PKW - _require_on_scale(ph, "pH")


def hydrogen_from_ph(ph: float) -> float:
    """Calculate hydrogen ion concentration from pH.

    Args:
        ph (float): pH value within ``[0, 14]``.

    Returns:
        float: [H⁺] = ``10**(-pH)`` in mol dm^-3.

    Raises:
        TypeError: If ``ph`` is not numeric.
        InvalidInput: If ``ph`` is outside ``[0, 14]`` or non-finite.
    """
    v = _require_on_scale(ph, "pH")
    return float(10.0 ** (-v))


def hydroxide_from_ph(ph: float) -> float:
    """Calculate hydroxide ion concentration from pH.

    Args:
        ph (float): pH value within ``[0, 14]``.

    Returns:
        float: [OH⁻] = ``10**(pH - 14)`` in mol dm^-3.

    Raises:
        TypeError: If ``ph`` is not numeric.
        InvalidInput: If ``ph`` is outside ``[0, 14]`` or non-finite.
    """
    v = _require_on_scale(ph, "pH")
    return float(10.0 ** (v - PKW))


def classify_ph(ph: float) -> str:
    """Return ``"Acidic"``, ``"Neutral"`` or ``"Basic (Alkaline)"`` for a pH."""
    v = clamp_ph(ph)
    if is_neutral(v):
        return "Neutral"
    return "Acidic" if v < 7 else "Basic (Alkaline)"


def ion_relation(ph: float) -> str:
    """Describe which ion dominates at a given pH."""
    v = clamp_ph(ph)
    if is_neutral(v):
        return "[H⁺] = [OH⁻]"
    return "[H⁺] > [OH⁻]" if v < 7 else "[OH⁻] > [H⁺]"
