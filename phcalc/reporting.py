"""Format pH results for display and assemble them into tables.

This module sits between the pure conversions and the presentation layers
(calculator session, CLI, CSV export). It only formats and tabulates; all
chemistry lives in ``phcalc.chemistry``.
"""

from __future__ import annotations

from typing import Iterable

import numpy as np
import pandas as pd

from .chemistry.conversions import (
    classify_ph,
    hydrogen_from_ph,
    hydroxide_from_ph,
    poh_from_ph,
)
from .chemistry.solutions import list_reference_solutions
from .color_scale import color_for_ph
from .schema import TableColumns

COLUMNS = TableColumns()

CONCENTRATION_DIGITS = 7
POH_DIGITS = 7
PH_DIGITS = 2


def format_concentration(concentration: float) -> str:
    """Format an ion concentration in exponential notation.

    Args:
        concentration (float): Concentration in mol dm^-3.

    Returns:
        str: Seven fractional digits in scientific notation, e.g.
        ``"1.0000000e-07"``.
    """
    return f"{float(concentration):.{CONCENTRATION_DIGITS}e}"


def format_poh(poh: float) -> str:
    """Format a pOH value with seven decimal places."""
    return f"{float(poh):.{POH_DIGITS}f}"


def format_ph(ph: float) -> str:
    """Format a pH value with two decimal places."""
    return f"{float(ph):.{PH_DIGITS}f}"


def _row_for_ph(ph: float) -> dict:
    return {
        COLUMNS.ph: float(ph),
        COLUMNS.poh: poh_from_ph(ph),
        COLUMNS.hydrogen: hydrogen_from_ph(ph),
        COLUMNS.hydroxide: hydroxide_from_ph(ph),
        COLUMNS.color: color_for_ph(ph),
        COLUMNS.classification: classify_ph(ph),
    }


def conversion_table(ph_values: Iterable[float] | None = None) -> pd.DataFrame:
    """Tabulate pOH, ion concentrations, and color for a set of pH values.

    Args:
        ph_values (Iterable[float] | None): pH values on the 0-14 scale.
            Defaults to 0-14 in steps of 0.5.

    Returns:
        pandas.DataFrame: One row per pH value with the ``TableColumns``
        labels for pH, pOH, [H⁺], [OH⁻], color and classification.

    Raises:
        InvalidInput: If any pH value lies outside 0-14.
    """
    if ph_values is None:
        ph_values = np.arange(0.0, 14.5, 0.5)
    rows = [_row_for_ph(float(ph)) for ph in ph_values]
    return pd.DataFrame(
        rows,
        columns=[
            COLUMNS.ph,
            COLUMNS.poh,
            COLUMNS.hydrogen,
            COLUMNS.hydroxide,
            COLUMNS.color,
            COLUMNS.classification,
        ],
    )


def reference_solutions_table() -> pd.DataFrame:
    """Tabulate the reference catalog together with its derived quantities.

    Returns:
        pandas.DataFrame: Catalog order preserved; one row per solution with
        name, type, formula, description and the conversion columns.
    """
    rows = []
    for solution in list_reference_solutions():
        row = {
            COLUMNS.name: solution.name,
            COLUMNS.kind: solution.kind,
            COLUMNS.formula: solution.formula or "",
            COLUMNS.description: solution.description or "",
        }
        row.update(_row_for_ph(solution.typical_ph))
        rows.append(row)
    return pd.DataFrame(rows)


def summary_lines(ph: float) -> list[str]:
    """Return human-readable lines describing one pH value."""
    return [
        f"pH: {format_ph(ph)}",
        f"pOH: {format_ph(poh_from_ph(ph))}",
        f"[H⁺]: {format_concentration(hydrogen_from_ph(ph))} mol/L",
        f"[OH⁻]: {format_concentration(hydroxide_from_ph(ph))} mol/L",
        f"Color: {color_for_ph(ph)}",
        f"Classification: {classify_ph(ph)}",
    ]
