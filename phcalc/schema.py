"""Define standardized column names for pH result DataFrames."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TableColumns:
    """Container for standardized column labels.

    These column names are shared by the conversion table, the reference
    solutions table, and the CSV exports so every tabular output reads the
    same way.

    Attributes:
        ph: pH on the 0-14 scale.
        poh: pOH, equal to ``14 - pH`` at 25 °C.
        hydrogen: Hydrogen ion concentration [H⁺] in mol dm^-3.
        hydroxide: Hydroxide ion concentration [OH⁻] in mol dm^-3.
        color: Display color from ``color_for_ph``.
        classification: ``Acidic``, ``Neutral`` or ``Basic (Alkaline)``.
        name, kind, formula, description: Reference catalog fields.
    """

    ph: str = "pH"
    poh: str = "pOH"
    hydrogen: str = "[H⁺] (mol/L)"
    hydroxide: str = "[OH⁻] (mol/L)"
    color: str = "Color"
    classification: str = "Classification"
    name: str = "Solution"
    kind: str = "Type"
    formula: str = "Formula"
    description: str = "Description"
