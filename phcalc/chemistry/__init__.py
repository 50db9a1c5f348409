"""
Acid-base chemistry for the pH calculator.

Modules:
    conversions:
        Closed-form conversions between pH, pOH, [H⁺] and [OH⁻] at 25 °C.
        Concentration inputs must be strictly positive; pH and pOH inputs
        must lie on the 0-14 scale. Violations raise ``InvalidInput``.

    solutions:
        Fixed, ordered catalog of common acids and bases with their
        typical pH values.

Design Principle:
    This subpackage has no dependencies on plotting/ or matplotlib.
    It provides pure chemistry functions that can be independently tested.
"""

from .conversions import (
    InvalidInput,
    clamp_ph,
    classify_ph,
    hydrogen_from_ph,
    hydroxide_from_ph,
    ion_relation,
    ph_from_hydrogen,
    ph_from_hydroxide,
    ph_from_poh,
    poh_from_ph,
    validate_ph,
)
from .solutions import ReferenceSolution, get_reference_solution, list_reference_solutions

__all__ = [
    "InvalidInput",
    "clamp_ph",
    "classify_ph",
    "hydrogen_from_ph",
    "hydroxide_from_ph",
    "ion_relation",
    "ph_from_hydrogen",
    "ph_from_hydroxide",
    "ph_from_poh",
    "poh_from_ph",
    "validate_ph",
    "ReferenceSolution",
    "get_reference_solution",
    "list_reference_solutions",
]
